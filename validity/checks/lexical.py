"""
Lexical checks on raw equation text.

These run before parsing and need nothing but the string itself.
"""

from typing import Any, Dict


def check_not_empty(source: Any) -> Dict[str, Any]:
    """
    Check that an equation has non-whitespace content.

    Returns
    -------
    dict
        Check result with keys:
        - passed: bool
        - message: str
        - details: dict
    """
    passed = isinstance(source, str) and source.strip() != ""
    return {
        "passed": passed,
        "message": "Equation is present" if passed else "equation cannot be empty",
        "details": {"type": type(source).__name__},
    }


def check_balanced_parentheses(source: str) -> Dict[str, Any]:
    """
    Check that parentheses in ``source`` balance.

    A running count of open parentheses must never drop below zero and must
    end at zero.

    Returns
    -------
    dict
        Check result with keys:
        - passed: bool
        - message: str
        - details: dict with depth reached and the first offending offset
    """
    depth = 0
    max_depth = 0
    offending = None

    for i, ch in enumerate(source):
        if ch == "(":
            depth += 1
            max_depth = max(max_depth, depth)
        elif ch == ")":
            depth -= 1
            if depth < 0:
                offending = i
                break

    passed = offending is None and depth == 0

    return {
        "passed": passed,
        "message": "Parentheses balanced" if passed else "equation has unbalanced parentheses",
        "details": {
            "max_depth": max_depth,
            "unclosed": max(depth, 0),
            "first_unmatched_close": offending,
        },
    }


__all__ = ["check_not_empty", "check_balanced_parentheses"]

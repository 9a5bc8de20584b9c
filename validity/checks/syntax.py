"""
Syntax check: parse an equation against the closed expression grammar.
"""

from typing import Any, Dict

from curvespec.expression import ExpressionSyntaxError, parse


def check_syntax(source: str) -> Dict[str, Any]:
    """
    Parse ``source`` and report the outcome.

    Returns
    -------
    dict
        Check result with keys:
        - passed: bool
        - message: str
        - expression: Expression or None
        - details: dict with the parser's reason and position on failure
    """
    try:
        expression = parse(source)
    except ExpressionSyntaxError as e:
        return {
            "passed": False,
            "message": f"equation has invalid syntax: {e}",
            "expression": None,
            "details": {
                "reason": e.reason,
                "position": e.position,
                "fragment": e.fragment,
            },
        }

    return {
        "passed": True,
        "message": "Equation parsed",
        "expression": expression,
        "details": {"functions": expression.functions()},
    }


__all__ = ["check_syntax"]

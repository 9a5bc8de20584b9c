"""
Per-axis numeric checks: finite values at sample points, and periodicity.
"""

from typing import Any, Dict, Sequence
import math

from curvespec.expression import Expression, evaluate, is_finite


def check_sample_values(expression: Expression, sample_points: Sequence[float]) -> Dict[str, Any]:
    """
    Evaluate ``expression`` at each sample point and require finite results.

    Returns
    -------
    dict
        Check result with keys:
        - passed: bool
        - message: str
        - details: dict with the sampled values and the first bad parameter
    """
    values = []
    first_bad = None
    for t in sample_points:
        value = evaluate(expression, t)
        values.append(value)
        if first_bad is None and not is_finite(value):
            first_bad = t

    passed = first_bad is None
    return {
        "passed": passed,
        "message": "Sample values finite" if passed else "equation produces invalid values",
        "details": {
            "sample_points": list(sample_points),
            "values": values,
            "first_invalid_t": first_bad,
        },
    }


def check_periodicity(
    expression: Expression,
    period: float = 2 * math.pi,
    tolerance: float = 0.01,
) -> Dict[str, Any]:
    """
    Compare the value at t=0 with the value one period later.

    A nan difference does not fail this check; non-finite values are the
    sample-value check's concern. An infinite difference does fail.

    Returns
    -------
    dict
        Check result with keys:
        - passed: bool
        - message: str
        - details: dict with both endpoint values and their difference
    """
    start = evaluate(expression, 0.0)
    end = evaluate(expression, period)
    difference = abs(start - end)

    passed = not difference > tolerance
    return {
        "passed": passed,
        "message": (
            "Equation is periodic" if passed
            else "equation may not be periodic (curve might not close)"
        ),
        "details": {
            "value_at_0": start,
            "value_at_period": end,
            "difference": difference,
            "tolerance": tolerance,
        },
    }


__all__ = ["check_sample_values", "check_periodicity"]

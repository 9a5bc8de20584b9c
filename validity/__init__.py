"""
Curve Validity Checking Library

This module decides whether three parametric equations describe a curve
that is safe to evaluate and suitable for rendering as a knot:

1. Input checks: emptiness, parenthesis balance, syntax against the closed
   expression grammar
2. Numeric checks: finite values at the canonical sample points
3. Geometric checks: periodicity (the curve closes), degeneracy (the curve
   is not a single point), magnitude (coordinates stay renderable)

Main Entry Points:
    - validate_curve(): Run every stage on three equation strings
    - check_curve_geometry(): Run only the joint geometric checks

Example:
    >>> from validity import validate_curve
    >>> verdict = validate_curve("sin(t) + 2*sin(2*t)", "cos(t) - 2*cos(2*t)", "-sin(3*t)")
    >>> verdict.is_valid
    True
    >>> validate_curve("t", "cos(t)", "sin(t)").errors
    ['X equation may not be periodic (curve might not close)']
"""

from .runner import (
    validate_curve,
    validate,
    check_curve_geometry,
)
from .verdict import (
    Diagnostic,
    ValidationVerdict,
    SYNTAX,
    EVALUATION,
    GEOMETRY,
)

__all__ = [
    # Runner
    "validate_curve",
    "validate",
    "check_curve_geometry",
    # Verdict
    "Diagnostic",
    "ValidationVerdict",
    "SYNTAX",
    "EVALUATION",
    "GEOMETRY",
]

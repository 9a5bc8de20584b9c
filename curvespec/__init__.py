"""
Knot Curve Spec - safe parametric equations for knot curves.

Parses user-supplied equations such as ``sin(t) + 2*sin(2*t)`` with a
closed grammar, evaluates them with IEEE-754 double semantics, and builds
three-axis curve definitions from them.

Usage:
    from curvespec import parse, evaluate, CurveDefinition
    from curvespec.catalog import load_curve
"""

__version__ = "0.1.0"

from .ast import (
    ALLOWED_FUNCTIONS,
    CONSTANTS,
    VARIABLE,
    ExpressionSyntaxError,
    ExpressionEvaluationError,
)
from .expression import Expression, parse, evaluate, evaluate_many
from .curve import AXES, CurveDefinition, CurveDefinitionError

__all__ = [
    "__version__",
    # Lexicon
    "ALLOWED_FUNCTIONS",
    "CONSTANTS",
    "VARIABLE",
    # Expressions
    "Expression",
    "parse",
    "evaluate",
    "evaluate_many",
    "ExpressionSyntaxError",
    "ExpressionEvaluationError",
    # Curves
    "AXES",
    "CurveDefinition",
    "CurveDefinitionError",
]

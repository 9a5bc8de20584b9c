"""
Individual validity checks for curve equations.

Each check returns a dict with at least ``passed`` and ``message`` keys,
plus check-specific ``details``. The runner turns failures into
diagnostics.
"""

from .lexical import check_not_empty, check_balanced_parentheses
from .syntax import check_syntax
from .sampling import check_sample_values, check_periodicity
from .geometry import check_not_degenerate, check_magnitude

__all__ = [
    "check_not_empty",
    "check_balanced_parentheses",
    "check_syntax",
    "check_sample_values",
    "check_periodicity",
    "check_not_degenerate",
    "check_magnitude",
]

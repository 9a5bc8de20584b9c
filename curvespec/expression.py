"""
Public expression API.

An :class:`Expression` is the only thing :func:`evaluate` accepts, and the
only way to obtain one is :func:`parse`. Parsing enforces the closed
lexicon; evaluation walks the compiled tree and nothing else.

Example:
    >>> from curvespec.expression import parse, evaluate
    >>> expr = parse("sin(t) + 2*sin(2*t)")
    >>> evaluate(expr, 0.0)
    0.0
    >>> import math
    >>> math.isnan(evaluate(parse("sqrt(t)"), -1.0))
    True
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List
import logging
import numpy as np

from .ast import (
    ASTNode,
    CallNode,
    ExpressionSyntaxError,
    ExpressionEvaluationError,
    compile_node,
    parse_source,
    walk,
    ast_to_dict,
)
from .ast.compile import CompiledFn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Expression:
    """
    An immutable parsed equation over ``t``.

    Attributes
    ----------
    source : str
        The original equation text
    root : ASTNode
        Root of the parsed tree
    """
    source: str
    root: ASTNode
    _fn: CompiledFn = field(repr=False, compare=False)

    def __call__(self, t: float) -> float:
        return evaluate(self, t)

    def to_dict(self) -> Dict[str, Any]:
        return ast_to_dict(self.root)

    def functions(self) -> List[str]:
        """Return the function names this expression calls, in first-use order."""
        seen: List[str] = []
        for node in walk(self.root):
            if isinstance(node, CallNode) and node.name not in seen:
                seen.append(node.name)
        return seen


def parse(source: str) -> Expression:
    """
    Parse ``source`` into an :class:`Expression`.

    Raises
    ------
    ExpressionSyntaxError
        If ``source`` is empty, longer than the length cap, references a
        symbol outside the lexicon, or is otherwise malformed
    """
    try:
        root = parse_source(source)
    except ExpressionSyntaxError as exc:
        logger.debug("Rejected expression %r: %s", source, exc)
        raise
    return Expression(source=source, root=root, _fn=compile_node(root))


def _check_expression(expr: Any) -> None:
    if not isinstance(expr, Expression):
        raise ExpressionEvaluationError(
            f"evaluate() requires a parsed Expression, got {type(expr).__name__}"
        )


def evaluate(expr: Expression, t: float) -> float:
    """
    Evaluate ``expr`` at parameter value ``t``.

    Domain violations (division by zero, log of a non-positive number,
    asin/acos outside [-1, 1], overflow) return nan or +/-inf. They are
    never raised; callers that need finite values must check.

    Raises
    ------
    ExpressionEvaluationError
        If ``expr`` did not come from :func:`parse` or ``t`` is not a real number
    """
    _check_expression(expr)
    if isinstance(t, bool) or not isinstance(t, Real):
        raise ExpressionEvaluationError(
            f"parameter t must be a real number, got {type(t).__name__}"
        )
    try:
        value = np.float64(float(t))
    except OverflowError as e:
        raise ExpressionEvaluationError(f"parameter t is out of float range: {e}") from e
    with np.errstate(all="ignore"):
        return float(expr._fn(value))


def evaluate_many(expr: Expression, ts: Any) -> np.ndarray:
    """
    Evaluate ``expr`` at every value in ``ts``.

    Returns
    -------
    np.ndarray
        float64 array shaped like ``ts``; non-finite entries mark domain
        violations exactly as in :func:`evaluate`
    """
    _check_expression(expr)
    ts = np.asarray(ts, dtype=np.float64)
    with np.errstate(all="ignore"):
        values = np.asarray(expr._fn(ts), dtype=np.float64)
    return np.broadcast_to(values, ts.shape).copy()


def is_finite(value: float) -> bool:
    return bool(np.isfinite(value))


__all__ = [
    "Expression",
    "parse",
    "evaluate",
    "evaluate_many",
    "is_finite",
    "ExpressionSyntaxError",
    "ExpressionEvaluationError",
]

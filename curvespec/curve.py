"""
Parametric space curves built from three parsed equations.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple
import logging
import numpy as np

from knot_policies import SamplingPolicy

from .expression import Expression, ExpressionSyntaxError, parse, evaluate, evaluate_many

logger = logging.getLogger(__name__)

AXES: Tuple[str, str, str] = ("x", "y", "z")


def parameter_values(
    segments: int,
    period: float = 2 * np.pi,
    endpoint: bool = False,
) -> np.ndarray:
    """Evenly spaced parameter values starting at t=0."""
    return np.linspace(0.0, period, segments, endpoint=endpoint)


class CurveDefinitionError(ValueError):
    """Raised when one of the three equations of a curve fails to parse."""

    def __init__(self, axis: str, error: ExpressionSyntaxError):
        self.axis = axis
        self.error = error
        super().__init__(f"{axis.upper()} equation: {error}")


@dataclass(frozen=True)
class CurveDefinition:
    """A triple of parsed equations, one per spatial axis."""
    x: Expression
    y: Expression
    z: Expression

    @classmethod
    def from_sources(cls, x: str, y: str, z: str) -> "CurveDefinition":
        """
        Parse three equation strings.

        Raises
        ------
        CurveDefinitionError
            For the first axis (in x, y, z order) that fails to parse
        """
        parsed = {}
        for axis, source in zip(AXES, (x, y, z)):
            try:
                parsed[axis] = parse(source)
            except ExpressionSyntaxError as e:
                raise CurveDefinitionError(axis, e) from e
        return cls(**parsed)

    @property
    def sources(self) -> Tuple[str, str, str]:
        return (self.x.source, self.y.source, self.z.source)

    def expressions(self) -> Iterator[Tuple[str, Expression]]:
        yield "x", self.x
        yield "y", self.y
        yield "z", self.z

    def point_at(self, t: float) -> Tuple[float, float, float]:
        return (evaluate(self.x, t), evaluate(self.y, t), evaluate(self.z, t))

    def sample(
        self,
        segments: Optional[int] = None,
        policy: Optional[SamplingPolicy] = None,
    ) -> np.ndarray:
        """
        Sample the curve over one period.

        Parameters
        ----------
        segments : int, optional
            Number of points; overrides ``policy.segments``
        policy : SamplingPolicy, optional
            Sampling defaults (400 points over [0, 2*pi))

        Returns
        -------
        np.ndarray
            Array of shape (segments, 3). Non-finite samples are kept as-is.
        """
        if policy is None:
            policy = SamplingPolicy()
        n = policy.segments if segments is None else segments
        if n < 1:
            raise ValueError(f"segments must be positive, got {n}")

        ts = parameter_values(n, policy.period, policy.endpoint)
        points = np.column_stack([evaluate_many(expr, ts) for _, expr in self.expressions()])

        bad = int(np.count_nonzero(~np.isfinite(points).all(axis=1)))
        if bad:
            logger.debug("Curve %s has %d non-finite sample(s) of %d", self.sources, bad, n)
        return points

    def to_dict(self) -> Dict[str, str]:
        return {axis: expr.source for axis, expr in self.expressions()}


__all__ = [
    "AXES",
    "CurveDefinition",
    "CurveDefinitionError",
    "parameter_values",
]

"""
Validity policies for curve equations.

This module contains the policy dataclasses used by the validity package.
All policies are JSON-serializable.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union
import math

from .base import (
    PolicyError,
    alias_fields,
    coerce_float,
    coerce_int,
    known_fields,
    read_policy_file,
    validate_policy,
)


DEFAULT_SAMPLE_POINTS: Tuple[float, ...] = (
    0.0,
    math.pi / 2,
    math.pi,
    3 * math.pi / 2,
)

_ALIASES = {
    "tolerance": "periodicity_tolerance",
    "max_value": "max_magnitude",
    "strict": "strict_geometry",
}


@dataclass
class CurveValidationPolicy:
    """
    Policy for curve equation validation.

    Controls which optional checks run and their thresholds. The lexical,
    syntax and sample-evaluation checks always run.

    JSON Schema:
    {
        "sample_points": [float, ...],
        "period": float,
        "check_periodicity": bool,
        "periodicity_tolerance": float,
        "check_geometry": bool,
        "geometry_samples": int,
        "degeneracy_tolerance": float,
        "max_magnitude": float,
        "strict_geometry": bool
    }

    With strict_geometry=False, periodicity/degeneracy/magnitude findings
    are reported as warnings and do not make the verdict invalid.
    """
    sample_points: Tuple[float, ...] = DEFAULT_SAMPLE_POINTS
    period: float = 2 * math.pi
    check_periodicity: bool = True
    periodicity_tolerance: float = 0.01
    check_geometry: bool = True
    geometry_samples: int = 10
    degeneracy_tolerance: float = 0.001
    max_magnitude: float = 1000.0
    strict_geometry: bool = True

    def validate(self) -> List[str]:
        errors = validate_policy(
            self,
            positive_fields=[
                "period",
                "periodicity_tolerance",
                "geometry_samples",
                "degeneracy_tolerance",
                "max_magnitude",
            ],
        )
        if not self.sample_points:
            errors.append("sample_points must not be empty")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["sample_points"] = list(self.sample_points)
        return d

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "CurveValidationPolicy":
        d = known_fields(CurveValidationPolicy, alias_fields(d, _ALIASES))
        defaults = CurveValidationPolicy()
        if "sample_points" in d:
            d["sample_points"] = tuple(coerce_float(v) for v in d["sample_points"])
        for name in ("period", "periodicity_tolerance", "degeneracy_tolerance", "max_magnitude"):
            if name in d:
                d[name] = coerce_float(d[name], getattr(defaults, name))
        if "geometry_samples" in d:
            d["geometry_samples"] = coerce_int(d["geometry_samples"], defaults.geometry_samples)
        policy = CurveValidationPolicy(**d)
        errors = policy.validate()
        if errors:
            raise PolicyError("Invalid validation policy: " + "; ".join(errors))
        return policy

    @staticmethod
    def lenient() -> "CurveValidationPolicy":
        """Policy that reports geometric findings as warnings only."""
        return CurveValidationPolicy(strict_geometry=False)


@dataclass
class SamplingPolicy:
    """
    Policy for sampling a curve into points.

    JSON Schema:
    {
        "segments": int,
        "period": float,
        "endpoint": bool
    }
    """
    segments: int = 400
    period: float = 2 * math.pi
    endpoint: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "SamplingPolicy":
        d = known_fields(SamplingPolicy, d)
        if "segments" in d:
            d["segments"] = coerce_int(d["segments"], 400)
        if "period" in d:
            d["period"] = coerce_float(d["period"], 2 * math.pi)
        policy = SamplingPolicy(**d)
        errors = validate_policy(policy, positive_fields=["segments", "period"])
        if errors:
            raise PolicyError("Invalid sampling policy: " + "; ".join(errors))
        return policy


def load_policy(path: Union[str, Path]) -> CurveValidationPolicy:
    """Load a :class:`CurveValidationPolicy` from a JSON file."""
    return CurveValidationPolicy.from_dict(read_policy_file(Path(path)))


__all__ = [
    "CurveValidationPolicy",
    "SamplingPolicy",
    "DEFAULT_SAMPLE_POINTS",
    "load_policy",
]

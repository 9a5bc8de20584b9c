"""
Knot Policies - Centralized policy definitions for curve validation and sampling.

All policies are JSON-serializable dataclasses with ``to_dict``/``from_dict``.

Usage:
    from knot_policies import CurveValidationPolicy, SamplingPolicy
    from knot_policies import load_policy
"""

from .base import (
    PolicyError,
    validate_policy,
    coerce_float,
    coerce_int,
    alias_fields,
)

from .validity import (
    CurveValidationPolicy,
    SamplingPolicy,
    DEFAULT_SAMPLE_POINTS,
    load_policy,
)

__all__ = [
    # Base
    "PolicyError",
    "validate_policy",
    "coerce_float",
    "coerce_int",
    "alias_fields",
    # Validity
    "CurveValidationPolicy",
    "SamplingPolicy",
    "DEFAULT_SAMPLE_POINTS",
    "load_policy",
]

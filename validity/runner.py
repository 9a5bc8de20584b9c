"""
Canonical curve validity runner.

Single entry point for deciding whether three equation strings describe a
safe, well-behaved closed space curve. The runner never raises on user
input; every problem becomes a :class:`Diagnostic` on the verdict.

STAGES
------
Diagnostics are emitted in stage order, and within a stage in axis order
x, y, z:

1. empty          - blank equations (axis skipped afterwards)
2. parentheses    - lexical balance (axis skipped afterwards)
3. syntax         - parse against the closed grammar
4. sample_values  - finite values at t = 0, pi/2, pi, 3pi/2
5. periodicity    - f(0) close to f(2pi)
6. degenerate / magnitude - joint checks on ten sampled 3D points, run
   only when every axis parsed and passed stage 4
"""

from typing import Dict, List, Optional
import logging

from curvespec.curve import AXES, CurveDefinition
from curvespec.expression import Expression
from knot_policies import CurveValidationPolicy, SamplingPolicy

from .checks import (
    check_not_empty,
    check_balanced_parentheses,
    check_syntax,
    check_sample_values,
    check_periodicity,
    check_not_degenerate,
    check_magnitude,
)
from .verdict import Diagnostic, ValidationVerdict, SYNTAX, EVALUATION, GEOMETRY

logger = logging.getLogger(__name__)


class _DiagnosticSink:
    """Collects diagnostics, routing demoted geometry findings to warnings."""

    def __init__(self, policy: CurveValidationPolicy):
        self.policy = policy
        self.diagnostics: List[Diagnostic] = []
        self.warnings: List[Diagnostic] = []

    def add(self, check: str, kind: str, message: str, axis: Optional[str] = None) -> None:
        if axis is not None:
            message = f"{axis.upper()} {message}"
        diagnostic = Diagnostic(message=message, axis=axis, kind=kind, check=check)
        if kind == GEOMETRY and not self.policy.strict_geometry:
            self.warnings.append(diagnostic)
        else:
            self.diagnostics.append(diagnostic)
        logger.debug("%s check failed: %s", check, message)


def _geometry_findings(
    curve: CurveDefinition,
    policy: CurveValidationPolicy,
    sink: _DiagnosticSink,
) -> None:
    points = curve.sample(
        policy=SamplingPolicy(segments=policy.geometry_samples, period=policy.period),
    )

    result = check_not_degenerate(points, policy.degeneracy_tolerance)
    if not result["passed"]:
        sink.add("degenerate", GEOMETRY, result["message"])

    result = check_magnitude(points, policy.max_magnitude)
    if not result["passed"]:
        sink.add("magnitude", GEOMETRY, result["message"])


def validate_curve(
    x: str,
    y: str,
    z: str,
    policy: Optional[CurveValidationPolicy] = None,
) -> ValidationVerdict:
    """
    Validate three axis equations as a renderable closed curve.

    Parameters
    ----------
    x, y, z : str
        Equation text for each axis, over the parameter ``t``
    policy : CurveValidationPolicy, optional
        Thresholds and toggles; defaults reproduce the strict behaviour in
        which periodicity and geometry findings invalidate the curve

    Returns
    -------
    ValidationVerdict
        Valid if and only if no diagnostics were emitted
    """
    if policy is None:
        policy = CurveValidationPolicy()

    sources = dict(zip(AXES, (x, y, z)))
    sink = _DiagnosticSink(policy)

    active = []
    for axis in AXES:
        result = check_not_empty(sources[axis])
        if result["passed"]:
            active.append(axis)
        else:
            sink.add("empty", SYNTAX, result["message"], axis)

    balanced = []
    for axis in active:
        result = check_balanced_parentheses(sources[axis])
        if result["passed"]:
            balanced.append(axis)
        else:
            sink.add("parentheses", SYNTAX, result["message"], axis)

    parsed: Dict[str, Expression] = {}
    for axis in balanced:
        result = check_syntax(sources[axis])
        if result["passed"]:
            parsed[axis] = result["expression"]
        else:
            sink.add("syntax", SYNTAX, result["message"], axis)

    evaluable = []
    for axis, expression in parsed.items():
        result = check_sample_values(expression, policy.sample_points)
        if result["passed"]:
            evaluable.append(axis)
        else:
            sink.add("sample_values", EVALUATION, result["message"], axis)

    if policy.check_periodicity:
        for axis, expression in parsed.items():
            result = check_periodicity(expression, policy.period, policy.periodicity_tolerance)
            if not result["passed"]:
                sink.add("periodicity", GEOMETRY, result["message"], axis)

    geometry_ran = False
    if policy.check_geometry and len(evaluable) == len(AXES):
        _geometry_findings(CurveDefinition(**parsed), policy, sink)
        geometry_ran = True

    verdict = ValidationVerdict(
        diagnostics=tuple(sink.diagnostics),
        warnings=tuple(sink.warnings),
        metadata={
            "parsed_axes": list(parsed),
            "geometry_checked": geometry_ran,
            "strict_geometry": policy.strict_geometry,
        },
    )
    logger.info(
        "Validated curve (%s): %d diagnostic(s), %d warning(s)",
        verdict.status, len(verdict.diagnostics), len(verdict.warnings),
    )
    return verdict


def check_curve_geometry(
    curve: CurveDefinition,
    policy: Optional[CurveValidationPolicy] = None,
) -> ValidationVerdict:
    """
    Run only the joint degeneracy and magnitude checks on a parsed curve.

    Parameters
    ----------
    curve : CurveDefinition
        Parsed equations
    policy : CurveValidationPolicy, optional
        Thresholds; ``strict_geometry`` decides whether findings are
        diagnostics or warnings

    Returns
    -------
    ValidationVerdict
    """
    if policy is None:
        policy = CurveValidationPolicy()
    sink = _DiagnosticSink(policy)
    _geometry_findings(curve, policy, sink)
    return ValidationVerdict(
        diagnostics=tuple(sink.diagnostics),
        warnings=tuple(sink.warnings),
        metadata={"geometry_checked": True, "strict_geometry": policy.strict_geometry},
    )


validate = validate_curve


__all__ = [
    "validate_curve",
    "validate",
    "check_curve_geometry",
]

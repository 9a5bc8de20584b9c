"""
Diagnostics and verdicts produced by curve validation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import json


SYNTAX = "syntax"
EVALUATION = "evaluation"
GEOMETRY = "geometry"

DIAGNOSTIC_KINDS = (SYNTAX, EVALUATION, GEOMETRY)


@dataclass(frozen=True)
class Diagnostic:
    """
    A single finding from a validation check.

    Attributes
    ----------
    message : str
        Human-readable message, prefixed with the axis name when axis-specific
    axis : str or None
        "x", "y" or "z", or None for findings about the whole curve
    kind : str
        "syntax", "evaluation" or "geometry". Geometry findings describe an
        unsuitable curve rather than unsafe input.
    check : str
        Name of the check that produced the finding
    """
    message: str
    axis: Optional[str] = None
    kind: str = SYNTAX
    check: str = ""

    def __post_init__(self):
        if self.kind not in DIAGNOSTIC_KINDS:
            raise ValueError(f"Unknown diagnostic kind: {self.kind}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "axis": self.axis,
            "kind": self.kind,
            "check": self.check,
        }


@dataclass(frozen=True)
class ValidationVerdict:
    """
    Outcome of validating a curve definition.

    ``is_valid`` is derived from ``diagnostics`` so the two cannot disagree.
    ``warnings`` holds geometry findings that a lenient policy demoted; they
    never affect validity.
    """
    diagnostics: Tuple[Diagnostic, ...] = ()
    warnings: Tuple[Diagnostic, ...] = ()
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def is_valid(self) -> bool:
        return len(self.diagnostics) == 0

    @property
    def errors(self) -> List[str]:
        return [d.message for d in self.diagnostics]

    @property
    def status(self) -> str:
        if self.diagnostics:
            return "fail"
        if self.warnings:
            return "warnings"
        return "ok"

    def messages_for(self, axis: Optional[str]) -> List[str]:
        return [d.message for d in self.diagnostics if d.axis == axis]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "status": self.status,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "warnings": [d.to_dict() for d in self.warnings],
            "metadata": self.metadata,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


__all__ = [
    "SYNTAX",
    "EVALUATION",
    "GEOMETRY",
    "DIAGNOSTIC_KINDS",
    "Diagnostic",
    "ValidationVerdict",
]

"""
Preset curve catalog.

Read-only mapping from knot identifiers to their parametric equations,
plus the presets offered by the custom equation editor. The custom
presets are not all closed curves: ``spiral`` and ``helix`` fail the
periodicity check under the default policy.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Union

from .curve import CurveDefinition


class KnotType(str, Enum):
    """Closed set of predefined knots."""
    TREFOIL = "trefoil"
    FIGURE_EIGHT = "figure-eight"
    CINQUEFOIL = "cinquefoil"
    HOPF_LINK = "hopf-link"
    TORUS_KNOT = "torus-knot"


@dataclass(frozen=True)
class CurveEquations:
    """Source text of the three axis equations."""
    x: str
    y: str
    z: str

    def to_dict(self) -> Dict[str, str]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class KnotPreset:
    """Catalog entry for a named curve."""
    name: str
    display_name: str
    equations: CurveEquations
    closed: bool = True

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "equations": self.equations.to_dict(),
            "closed": self.closed,
        }


KNOT_PRESETS: Mapping[KnotType, KnotPreset] = MappingProxyType({
    KnotType.TREFOIL: KnotPreset(
        name=KnotType.TREFOIL.value,
        display_name="Trefoil Knot",
        equations=CurveEquations(
            x="sin(t) + 2*sin(2*t)",
            y="cos(t) - 2*cos(2*t)",
            z="-sin(3*t)",
        ),
    ),
    KnotType.FIGURE_EIGHT: KnotPreset(
        name=KnotType.FIGURE_EIGHT.value,
        display_name="Figure-Eight Knot",
        equations=CurveEquations(
            x="(2 + cos(2*t)) * cos(3*t)",
            y="(2 + cos(2*t)) * sin(3*t)",
            z="sin(4*t)",
        ),
    ),
    KnotType.CINQUEFOIL: KnotPreset(
        name=KnotType.CINQUEFOIL.value,
        display_name="Cinquefoil Knot",
        equations=CurveEquations(
            x="cos(2*t) * (3 + cos(5*t))",
            y="sin(2*t) * (3 + cos(5*t))",
            z="sin(5*t)",
        ),
    ),
    KnotType.HOPF_LINK: KnotPreset(
        name=KnotType.HOPF_LINK.value,
        display_name="Hopf Link",
        equations=CurveEquations(
            x="cos(t) * (2 + cos(2*t))",
            y="sin(t) * (2 + cos(2*t))",
            z="sin(2*t)",
        ),
    ),
    KnotType.TORUS_KNOT: KnotPreset(
        name=KnotType.TORUS_KNOT.value,
        display_name="Torus Knot (2,7)",
        equations=CurveEquations(
            x="cos(2*t) * (3 + cos(7*t))",
            y="sin(2*t) * (3 + cos(7*t))",
            z="sin(7*t)",
        ),
    ),
})

CUSTOM_PRESETS: Mapping[str, KnotPreset] = MappingProxyType({
    "spiral": KnotPreset(
        name="spiral",
        display_name="Spiral",
        equations=CurveEquations(x="t * cos(t)", y="t * sin(t)", z="t"),
        closed=False,
    ),
    "helix": KnotPreset(
        name="helix",
        display_name="Helix",
        equations=CurveEquations(x="cos(t)", y="sin(t)", z="t / 3"),
        closed=False,
    ),
    "lissajous": KnotPreset(
        name="lissajous",
        display_name="Lissajous",
        equations=CurveEquations(x="sin(3*t)", y="sin(2*t)", z="sin(5*t)"),
    ),
})


def preset_names() -> List[str]:
    return [k.value for k in KnotType] + list(CUSTOM_PRESETS)


def get_preset(name: Union[str, KnotType]) -> KnotPreset:
    """
    Look up a knot or custom preset by name.

    Raises
    ------
    KeyError
        If ``name`` is not in either catalog
    """
    key = name.value if isinstance(name, KnotType) else name
    try:
        return KNOT_PRESETS[KnotType(key)]
    except ValueError:
        pass
    if key in CUSTOM_PRESETS:
        return CUSTOM_PRESETS[key]
    raise KeyError(f"Unknown preset '{key}', choose from: {', '.join(preset_names())}")


def load_curve(name: Union[str, KnotType]) -> CurveDefinition:
    """Parse the equations of a preset into a :class:`CurveDefinition`."""
    eq = get_preset(name).equations
    return CurveDefinition.from_sources(eq.x, eq.y, eq.z)


__all__ = [
    "KnotType",
    "CurveEquations",
    "KnotPreset",
    "KNOT_PRESETS",
    "CUSTOM_PRESETS",
    "preset_names",
    "get_preset",
    "load_curve",
]

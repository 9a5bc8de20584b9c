"""
Joint geometry checks on sampled curve points.

Both checks take an (n, 3) array of points sampled from all three axes.
"""

from typing import Any, Dict
import numpy as np


def check_not_degenerate(points: np.ndarray, tolerance: float = 0.001) -> Dict[str, Any]:
    """
    Fail when every sampled point lies within ``tolerance`` of the first one,
    componentwise.

    Returns
    -------
    dict
        Check result with keys:
        - passed: bool
        - message: str
        - details: dict with the largest componentwise spread
    """
    with np.errstate(invalid="ignore"):
        offsets = np.abs(points - points[0])
        all_same = bool(np.all(offsets < tolerance))
    spread = float(np.nanmax(offsets)) if np.any(~np.isnan(offsets)) else float("nan")

    passed = not all_same
    return {
        "passed": passed,
        "message": (
            "Curve is not degenerate" if passed
            else "Equations produce a degenerate curve (all points are the same)"
        ),
        "details": {
            "max_offset": spread,
            "tolerance": tolerance,
            "num_points": int(points.shape[0]),
        },
    }


def check_magnitude(points: np.ndarray, max_magnitude: float = 1000.0) -> Dict[str, Any]:
    """
    Fail when any coordinate of any sampled point exceeds ``max_magnitude``
    in absolute value.

    Returns
    -------
    dict
        Check result with keys:
        - passed: bool
        - message: str
        - details: dict with the offending point count
    """
    with np.errstate(invalid="ignore"):
        too_large = np.any(np.abs(points) > max_magnitude, axis=1)
    count = int(np.count_nonzero(too_large))

    passed = count == 0
    return {
        "passed": passed,
        "message": (
            "Coordinates within bounds" if passed
            else "Equations produce extremely large values that may cause rendering issues"
        ),
        "details": {
            "points_out_of_bounds": count,
            "max_magnitude": max_magnitude,
        },
    }


__all__ = ["check_not_degenerate", "check_magnitude"]

"""
Base utilities for knot policies.

This module provides shared helpers used by every policy dataclass:
coercion of loosely-typed JSON values, legacy field aliases, and
threshold validation.
"""

from dataclasses import fields
from typing import Any, Dict, List, Optional, Type, TypeVar
import json
from pathlib import Path


P = TypeVar("P")


class PolicyError(ValueError):
    """Raised when a policy cannot be loaded or holds out-of-range values."""
    pass


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a value to float, with fallback to default.

    Parameters
    ----------
    value : Any
        Value to coerce
    default : float
        Default value if coercion fails

    Returns
    -------
    float
        Coerced float value
    """
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def coerce_int(value: Any, default: int = 0) -> int:
    """Coerce a value to int, with fallback to default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def alias_fields(d: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """
    Apply field aliases to a dictionary.

    This allows legacy field names to be mapped to canonical names.

    Parameters
    ----------
    d : dict
        Input dictionary
    aliases : dict
        Mapping of legacy_name -> canonical_name

    Returns
    -------
    dict
        Dictionary with aliases applied
    """
    result = d.copy()
    for legacy_name, canonical_name in aliases.items():
        if legacy_name in result and canonical_name not in result:
            result[canonical_name] = result.pop(legacy_name)
    return result


def known_fields(cls: Type[P], d: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys that are not dataclass fields of ``cls``."""
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in d.items() if k in names}


def validate_policy(policy: Any, positive_fields: Optional[List[str]] = None) -> List[str]:
    """
    Validate a policy object.

    Parameters
    ----------
    policy : Any
        Policy dataclass instance to validate
    positive_fields : List[str], optional
        Numeric fields that must be strictly positive

    Returns
    -------
    List[str]
        List of validation error messages (empty if valid)
    """
    errors = []

    for field_name in positive_fields or []:
        if not hasattr(policy, field_name):
            errors.append(f"Missing required field: {field_name}")
            continue
        value = getattr(policy, field_name)
        if value is None:
            errors.append(f"Required field is None: {field_name}")
        elif not value > 0:
            errors.append(f"{field_name} must be positive, got {value}")

    return errors


def read_policy_file(path: Path) -> Dict[str, Any]:
    """Read a JSON policy file into a dict."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise PolicyError(f"Could not read policy file {path}: {e}") from e
    if not isinstance(data, dict):
        raise PolicyError(f"Policy file {path} must contain a JSON object")
    return data


__all__ = [
    "PolicyError",
    "coerce_float",
    "coerce_int",
    "alias_fields",
    "known_fields",
    "validate_policy",
    "read_policy_file",
]

from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the merged configuration (defaults, persisted file and CLI
overrides) has the expected types before the run starts. Hand-edited
config files are coerced where the intent is clear and reported as
warnings otherwise.
"""

import logging
from typing import Any, Dict, List, Tuple

from bloat.domain.config import get_default_config
from bloat.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    unknown = sorted(k for k in merged if k not in defaults)
    for key in unknown:
        warnings.append(f"Unknown field '{key}' ignored.")
        del merged[key]

    for field in ("echo_progress", "json_output"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in ("log_file",):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["top"] = _as_non_negative_int(merged.get("top"), defaults["top"], "top", warnings, strict)
    merged["log_level"] = _normalize_level(merged.get("log_level"), defaults["log_level"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept ints (and numeric strings when lenient) that are >= 0."""
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        try:
            converted = int(value.strip())
        except ValueError:
            converted = None
        if converted is not None:
            warnings.append(f"Field '{field}' converted from '{value}' to {converted}.")
            value = converted

    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return value
        msg = f"Invalid field '{field}': must be >= 0, received {value}."
    else:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."

    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_level(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Upper-case the level name and reject names logging does not know."""
    level = _as_str(value, fallback, "log_level", warnings, strict).upper()
    if level in _LEVEL_MAP:
        return level

    msg = f"Invalid field 'log_level': unknown level '{value}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback

from __future__ import annotations

"""
Configuration Validation Service.

Normalises the raw configuration dictionary (usually built from CLI
overrides) into strictly typed values. In lenient mode bad values are
replaced by defaults and reported as warnings; in strict mode they raise.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from patternlab.domain.config import DEMO_CHOICES, TREE_STYLES, get_default_config

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalise the provided configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise TypeError/ValueError instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalised configuration and the
                                          list of warnings produced.
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
    merged.update({k: v for k, v in config.items() if k in defaults})

    unknown = sorted(k for k in config if k not in defaults)
    if unknown:
        warnings.append(f"Ignored unknown config keys: {', '.join(unknown)}.")

    merged["demo"] = _as_choice(
        merged.get("demo"), defaults["demo"], DEMO_CHOICES, "demo", warnings, strict
    )
    merged["tree_style"] = _as_choice(
        merged.get("tree_style"), defaults["tree_style"], TREE_STYLES, "tree_style",
        warnings, strict
    )
    merged["show_total_weight"] = _as_bool(
        merged.get("show_total_weight"), defaults["show_total_weight"],
        "show_total_weight", warnings, strict
    )
    merged["log_level"] = _as_choice(
        _upper(merged.get("log_level")), defaults["log_level"], _LOG_LEVELS, "log_level",
        warnings, strict
    )

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _upper(value: Any) -> Any:
    return value.strip().upper() if isinstance(value, str) else value


def _as_choice(
        value: Any,
        fallback: str,
        choices: Sequence[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Accept only one of the allowed string values."""
    if value is None:
        return fallback
    if not isinstance(value, str):
        msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    v = value.strip()
    if v in choices:
        return v

    msg = f"Invalid field '{field}': '{value}' is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce common boolean spellings into native booleans."""
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

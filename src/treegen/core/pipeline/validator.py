from __future__ import annotations

"""
Configuration Validation Service.

Turns the untrusted configuration dictionary (CLI overrides merged over
defaults) into a strictly typed one. Lenient mode coerces and collects
warnings; strict mode raises on the first mismatch.
"""

import logging
from typing import Any, Dict, List, Tuple

from treegen.domain.config import get_default_config
from treegen.domain.errors import ConfigError
from treegen.infra.fs import DEFAULT_FILE_MODE_STR, format_file_mode, parse_file_mode

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("out_dir", "log_file")
_BOOL_FIELDS = ("dry_run", "verbose", "clean")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a field of the wrong type.
        ValueError: In strict mode, on an invalid permission string.
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

    for key in config:
        if key not in defaults:
            warnings.append(f"Unknown field '{key}' ignored.")

    for name in _STRING_FIELDS:
        merged[name] = _as_str(merged.get(name), defaults[name], name, warnings, strict)

    for name in _BOOL_FIELDS:
        merged[name] = _as_bool(merged.get(name), defaults[name], name, warnings, strict)

    merged["inputs"] = _as_list_str(merged.get("inputs"), [], "inputs", warnings, strict)
    merged["mode"] = _normalize_mode(merged.get("mode"), warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce 0/1 and yes/no style values into booleans."""
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


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure a list of non-empty strings, accepting CSV strings leniently."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_mode(value: Any, warnings: List[str], strict: bool) -> str:
    """
    Canonicalize the permission string to the '0o...' spelling.

    A malformed octal string is passed through untouched so the pipeline
    rejects it with ConfigError instead of silently using the default.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = format_file_mode(value)
    if not isinstance(value, str) or not value.strip():
        if strict:
            raise TypeError(f"Invalid field 'mode': expected octal str, received {value!r}.")
        if value is not None:
            warnings.append(f"Invalid field 'mode': {value!r}. Using {DEFAULT_FILE_MODE_STR}.")
        return DEFAULT_FILE_MODE_STR

    try:
        return format_file_mode(parse_file_mode(value))
    except ConfigError as e:
        if strict:
            raise ValueError(str(e)) from e
        warnings.append(str(e))
        return value.strip()

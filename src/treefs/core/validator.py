from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (JSON file, CLI overrides) into the
typed values the shell expects. Invalid values are replaced by defaults
and reported as warnings, or raised in strict mode.
"""

import codecs
import logging
from typing import Any, Dict, List, Optional, Tuple

from treefs.domain.config import get_default_config
from treefs.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("prompt", "encoding", "log_level", "log_file")
_BOOL_FIELDS = ("show_sizes", "stop_on_error")
_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off")


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise instead of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The clean configuration and the
        warnings produced while normalizing it.

    Raises:
        TypeError: In strict mode, for a non-dict config or mistyped field.
        ValueError: In strict mode, for an unknown encoding or log level.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    clean: Dict[str, Any] = dict(defaults)

    for key in config:
        if key not in defaults:
            warnings.append(f"Unknown config key ignored: '{key}'.")

    for key in _STRING_FIELDS:
        value = config.get(key, defaults[key])
        if value is None:
            value = ""
        if not isinstance(value, str):
            _reject(f"'{key}' must be a string, got {type(value).__name__}.", TypeError, strict, warnings)
            continue
        clean[key] = value

    for key in _BOOL_FIELDS:
        value = config.get(key, defaults[key])
        coerced = _as_bool(value)
        if coerced is None:
            _reject(f"'{key}' must be a boolean, got {value!r}.", TypeError, strict, warnings)
            continue
        clean[key] = coerced

    clean["log_level"] = clean["log_level"].strip().upper()
    if clean["log_level"] not in _LEVEL_MAP:
        _reject(f"Unknown log level '{clean['log_level']}'.", ValueError, strict, warnings)
        clean["log_level"] = defaults["log_level"]

    try:
        codecs.lookup(clean["encoding"])
    except LookupError:
        _reject(f"Unknown encoding '{clean['encoding']}'.", ValueError, strict, warnings)
        clean["encoding"] = defaults["encoding"]

    for w in warnings:
        logger.debug(f"Config warning: {w}")

    return clean, warnings


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def _reject(msg: str, exc_type: type, strict: bool, warnings: List[str]) -> None:
    if strict:
        raise exc_type(msg)
    warnings.append(f"{msg} Using default.")

from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies:
1. Default injection for missing keys.
2. Type coercion of boolean-like strings.
3. Fallback (lenient) and exceptions (strict) for invalid values.
"""

import pytest

from treefs.core.validator import validate_config
from treefs.domain.config import get_default_config


def test_empty_config_yields_defaults():
    clean, warnings = validate_config({})
    assert clean == get_default_config()
    assert warnings == []


def test_non_dict_config_falls_back_to_defaults():
    clean, warnings = validate_config(["not", "a", "dict"])
    assert clean == get_default_config()
    assert len(warnings) == 1


def test_non_dict_config_raises_in_strict_mode():
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


@pytest.mark.parametrize("raw, expected", [
    ("yes", True),
    ("off", False),
    (1, True),
    (0, False),
    (True, True),
])
def test_boolean_coercion(raw, expected):
    clean, warnings = validate_config({"show_sizes": raw})
    assert clean["show_sizes"] is expected
    assert warnings == []


def test_invalid_boolean_is_replaced_by_default():
    clean, warnings = validate_config({"stop_on_error": "maybe"})
    assert clean["stop_on_error"] is False
    assert any("stop_on_error" in w for w in warnings)


def test_log_level_is_normalized():
    clean, _ = validate_config({"log_level": " debug "})
    assert clean["log_level"] == "DEBUG"


def test_unknown_log_level_and_encoding():
    clean, warnings = validate_config({"log_level": "LOUD", "encoding": "no-such-codec"})
    assert clean["log_level"] == "WARNING"
    assert clean["encoding"] == "utf-8"
    assert len(warnings) == 2


def test_unknown_encoding_raises_in_strict_mode():
    with pytest.raises(ValueError):
        validate_config({"encoding": "no-such-codec"}, strict=True)


def test_mistyped_string_field_raises_in_strict_mode():
    with pytest.raises(TypeError):
        validate_config({"prompt": 42}, strict=True)


def test_unknown_keys_are_reported_and_dropped():
    clean, warnings = validate_config({"colour": "blue"})
    assert "colour" not in clean
    assert warnings == ["Unknown config key ignored: 'colour'."]


def test_none_log_file_becomes_empty_string():
    clean, _ = validate_config({"log_file": None})
    assert clean["log_file"] == ""

from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies lenient coercion with warnings and strict failures.
"""

import pytest

from patternlab.core.validator import validate_config
from patternlab.domain.config import get_default_config


def test_defaults_pass_cleanly():
    conf, warnings = validate_config(get_default_config())
    assert conf == get_default_config()
    assert warnings == []


def test_non_dict_falls_back_to_defaults():
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf == get_default_config()
    assert len(warnings) == 1


def test_non_dict_strict_raises():
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_bool_coercion_from_strings():
    conf, warnings = validate_config({"show_total_weight": "yes"})
    assert conf["show_total_weight"] is True
    assert any("converted" in w for w in warnings)


def test_invalid_choice_uses_fallback():
    conf, warnings = validate_config({"demo": "facade", "tree_style": "  flat "})
    assert conf["demo"] == "all"
    assert conf["tree_style"] == "flat"
    assert len(warnings) == 1


def test_invalid_choice_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"demo": "facade"}, strict=True)


def test_log_level_is_normalised():
    conf, _ = validate_config({"log_level": "debug"})
    assert conf["log_level"] == "DEBUG"


def test_unknown_keys_are_dropped_with_warning():
    conf, warnings = validate_config({"colour": "blue"})
    assert "colour" not in conf
    assert any("colour" in w for w in warnings)

from __future__ import annotations

"""
Unit tests for configuration validation.

Verifies default injection, struct name handling and strict-mode failures.
"""

import pytest

from yaml2go.core.validation import validate_config
from yaml2go.domain.config import DEFAULT_STRUCT_NAME
from yaml2go.domain.errors import ConfigError


def test_valid_config_passes_without_warnings(mock_config_dict):
    clean, warnings = validate_config(mock_config_dict)
    assert warnings == []
    assert clean == mock_config_dict


def test_missing_keys_filled_with_defaults():
    clean, _ = validate_config({"input_path": "in.yaml"})
    assert clean["struct_name"] == DEFAULT_STRUCT_NAME
    assert clean["with_json_tag"] is False
    assert clean["output_path"] == ""


def test_none_values_use_defaults():
    clean, warnings = validate_config({"output_path": None, "struct_name": None})
    assert clean["output_path"] == ""
    assert clean["struct_name"] == DEFAULT_STRUCT_NAME
    assert warnings == []


def test_paths_are_trimmed():
    clean, _ = validate_config({"input_path": "  in.yaml  "})
    assert clean["input_path"] == "in.yaml"


@pytest.mark.parametrize("name", ["config", "_cfg", "appConfig", "Config2"])
def test_valid_struct_name_is_kept_verbatim(name):
    clean, warnings = validate_config({"struct_name": name})
    assert clean["struct_name"] == name
    assert warnings == []


def test_invalid_struct_name_is_sanitized():
    clean, warnings = validate_config({"struct_name": "my-config"})
    assert clean["struct_name"] == "MyConfig"
    assert any("corrected to 'MyConfig'" in w for w in warnings)


def test_unusable_struct_name_reverts_to_default():
    clean, _ = validate_config({"struct_name": "---"})
    assert clean["struct_name"] == DEFAULT_STRUCT_NAME


def test_blank_string_uses_fallback():
    clean, warnings = validate_config({"struct_name": "   "})
    assert clean["struct_name"] == DEFAULT_STRUCT_NAME
    assert warnings == []


@pytest.mark.parametrize("name", ["bad name", "1st", "my-config"])
def test_strict_mode_rejects_invalid_struct_name(name):
    with pytest.raises(ConfigError):
        validate_config({"struct_name": name}, strict=True)


def test_strict_mode_accepts_lowercase_name():
    clean, _ = validate_config({"struct_name": "config"}, strict=True)
    assert clean["struct_name"] == "config"

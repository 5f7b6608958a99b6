from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary handed to the generator conforms
to the expected schema. Fills defaults, trims path and name values and
checks that the root struct name is a usable Go identifier.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from yaml2go.core.analysis.naming import is_go_identifier, to_camel
from yaml2go.domain.config import DEFAULT_STRUCT_NAME, get_default_config
from yaml2go.domain.errors import ConfigError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Dict[str, Any],
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Missing or blank values fall back to the domain defaults. A struct name
    that is not a Go identifier is corrected with a warning, or rejected
    in strict mode.

    Args:
        config: Raw configuration data (usually CLI overrides merged over
                the defaults).
        strict: If True, raises ConfigError instead of correcting.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.

    Raises:
        ConfigError: In strict mode, if the struct name is not usable.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 1. Field Processing
    for field in ("input_path", "output_path", "struct_name"):
        merged[field] = _as_str(merged.get(field), defaults[field])

    merged["with_json_tag"] = bool(merged.get("with_json_tag"))

    # 2. Domain-Specific Normalization
    merged["struct_name"] = _normalize_struct_name(merged["struct_name"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_str(value: Optional[str], fallback: str) -> str:
    """Trim a string input, falling back when it is missing or blank."""
    v = (value or "").strip()
    return v if v else fallback


def _normalize_struct_name(name: str, warnings: List[str], strict: bool) -> str:
    """Ensure the root struct name is a valid Go identifier, kept as given."""
    if is_go_identifier(name):
        return name

    if strict:
        raise ConfigError(f"Invalid struct name '{name}': not a valid Go identifier.")

    fixed = to_camel(name) or DEFAULT_STRUCT_NAME
    warnings.append(f"Struct name '{name}' corrected to '{fixed}'.")
    return fixed

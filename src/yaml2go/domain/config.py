from __future__ import annotations

"""
Configuration Domain Defaults.

Holds the default runtime configuration used by the CLI before command-line
overrides are merged and validated.
"""

from typing import Any, Dict

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_STRUCT_NAME = "YAMLToGoStruct"

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "output_path": "",

        # Generation
        "struct_name": DEFAULT_STRUCT_NAME,
        "with_json_tag": False,
    }

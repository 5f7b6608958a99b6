from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation so the 'src' directory and the test helpers are importable.
2. Shared YAML documents and configuration dictionaries.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

# Shared helper modules (node_factories) live next to this file
_TESTS_PATH = os.path.dirname(os.path.abspath(__file__))
if _TESTS_PATH not in sys.path:
    sys.path.insert(0, _TESTS_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'yaml2go.domain.config'.
    """
    return {
        "input_path": "/tmp/test_input.yaml",
        "output_path": "",
        "struct_name": "Config",
        "with_json_tag": False,
    }


@pytest.fixture
def service_yaml() -> str:
    """A realistic service configuration exercising every node kind."""
    return (
        "name: billing  # service name\n"
        "replicas: 3\n"
        "ratio: 0.75\n"
        "enabled: true\n"
        "server:\n"
        "  host: localhost\n"
        "  port: 8080\n"
        "endpoints:\n"
        "  - path: /health\n"
        "    method: GET\n"
        "  - path: /pay\n"
        "tags: [a, b]\n"
        "empty_list: []\n"
    )

from __future__ import annotations

"""
Go Type Inference.

Decides the Go type expression of a single YAML node. Mapping nodes only
get a placeholder here; the emitter substitutes the generated struct name.
"""

from typing import Dict, Final

from yaml2go.domain.go_models import (
    GO_ANY,
    GO_BOOL,
    GO_FLOAT,
    GO_INT,
    GO_STRING,
    GO_STRUCT_PLACEHOLDER,
    slice_of,
)
from yaml2go.domain.yaml_models import NodeKind, ScalarType, YamlNode

# Exhaustive scalar dispatch table
SCALAR_GO_TYPES: Final[Dict[ScalarType, str]] = {
    ScalarType.INT: GO_INT,
    ScalarType.FLOAT: GO_FLOAT,
    ScalarType.BOOL: GO_BOOL,
    ScalarType.STRING: GO_STRING,
    ScalarType.NULL: GO_STRING,
    ScalarType.TIMESTAMP: GO_STRING,
    ScalarType.UNKNOWN: GO_STRING,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def determine_go_type(node: YamlNode) -> str:
    """
    Map a YAML node to its Go type expression.

    Sequences are typed from their first element only; an empty sequence
    becomes a slice of interface{}.

    Args:
        node: The node to type.

    Returns:
        str: Go type, or the 'struct' placeholder for mappings.
    """
    if node.kind is NodeKind.SCALAR:
        return SCALAR_GO_TYPES[node.scalar_type]

    if node.kind is NodeKind.SEQUENCE:
        if node.content:
            return slice_of(determine_go_type(node.content[0]))
        return slice_of(GO_ANY)

    if node.kind is NodeKind.MAPPING:
        return GO_STRUCT_PLACEHOLDER

    return GO_ANY

from __future__ import annotations

"""
YAML Document Data Models.

Provides the closed node representation consumed by the generation engine.
Nodes are built once by the parser adapter, so the analysis and emission
logic never depend on the parser library's internal tag representation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

# -----------------------------------------------------------------------------
# NODE CLASSIFICATION
# -----------------------------------------------------------------------------

class NodeKind(Enum):
    """Structural category of a document node."""
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    DOCUMENT = "document"
    OTHER = "other"


class ScalarType(Enum):
    """Resolved YAML core-schema type of a scalar node."""
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "str"
    NULL = "null"
    TIMESTAMP = "timestamp"
    UNKNOWN = "unknown"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class YamlNode:
    """
    Immutable view of one parsed unit of the document tree.

    Attributes:
        kind: Structural category of the node.
        scalar_type: Resolved type for scalars, UNKNOWN for collections.
        value: Raw scalar text. Empty for collections.
        content: Children. Mappings hold a flat alternating key/value
            sequence, sequences hold their elements and a document holds
            its single root node.
        comment: Trailing line comment as written, '#' marker included.
    """
    kind: NodeKind
    scalar_type: ScalarType = ScalarType.UNKNOWN
    value: str = ""
    content: Tuple["YamlNode", ...] = field(default_factory=tuple)
    comment: str = ""

    @property
    def is_mapping(self) -> bool:
        return self.kind is NodeKind.MAPPING

    @property
    def is_sequence(self) -> bool:
        return self.kind is NodeKind.SEQUENCE


@dataclass(frozen=True)
class YamlEntry:
    """
    One key/value/comment triple extracted from a mapping node.

    Attributes:
        key: Mapping key as written in the document.
        value: Raw scalar value, meaningful only for scalar entries.
        comment: Trimmed trailing comment, possibly empty.
        kind: Kind of the value node.
        node: The value node itself, kept for recursive processing.
    """
    key: str
    value: str
    comment: str
    kind: NodeKind
    node: YamlNode


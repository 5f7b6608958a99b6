from __future__ import annotations

"""
YAML Parser Adapter.

Composes raw YAML text with ruamel.yaml into its representation graph and
converts it into the closed YamlNode model. Scalars keep the text they were
written with and their type comes from the resolved tag, so nothing is
re-rendered from loaded Python values. Nothing past this module touches
ruamel.yaml objects.
"""

import logging
import re
from typing import Any, Dict, List, Set

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.nodes import MappingNode, ScalarNode, SequenceNode

from yaml2go.domain.errors import ParseError
from yaml2go.domain.yaml_models import NodeKind, ScalarType, YamlNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

_TAG_PREFIX = "tag:yaml.org,2002:"

_SCALAR_TYPES_BY_TAG: Dict[str, ScalarType] = {
    _TAG_PREFIX + "int": ScalarType.INT,
    _TAG_PREFIX + "float": ScalarType.FLOAT,
    _TAG_PREFIX + "bool": ScalarType.BOOL,
    _TAG_PREFIX + "str": ScalarType.STRING,
    _TAG_PREFIX + "null": ScalarType.NULL,
    _TAG_PREFIX + "timestamp": ScalarType.TIMESTAMP,
}

# Line breaks as counted by the ruamel.yaml reader when it builds marks
_LINE_BREAK_RX = re.compile(r"\r\n|[\n\r]")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_document(text: str) -> YamlNode:
    """
    Parse YAML text into a YamlNode tree.

    Only the first document of a multi-document stream is used. An empty
    stream yields a bare OTHER node, which callers reject as non-mapping.

    Args:
        text: Raw YAML source.

    Returns:
        YamlNode: A DOCUMENT node wrapping the root, or an OTHER node.

    Raises:
        ParseError: If the text is not well-formed YAML.
    """
    yaml = YAML(typ="rt")
    docs = yaml.compose_all(text)
    try:
        root = next(docs, None)
    except YAMLError as e:
        raise ParseError(str(e)) from e
    finally:
        docs.close()

    if root is None:
        logger.debug("Empty YAML stream: no document found.")
        return YamlNode(kind=NodeKind.OTHER)

    lines = _split_lines(text)
    return YamlNode(kind=NodeKind.DOCUMENT, content=(_build_node(root, "", lines, set()),))


# -----------------------------------------------------------------------------
# INTERNAL HELPERS (TREE CONVERSION)
# -----------------------------------------------------------------------------

def _build_node(node: Any, comment: str, lines: List[str], ancestors: Set[int]) -> YamlNode:
    """
    Recursively convert a composed node into a YamlNode.

    An alias is the anchored node itself, so it expands like its anchor.
    A collection that contains itself through an alias becomes an OTHER node
    where the cycle closes.
    """
    if isinstance(node, (MappingNode, SequenceNode)):
        if id(node) in ancestors:
            return YamlNode(kind=NodeKind.OTHER, comment=comment)
        ancestors = ancestors | {id(node)}

    if isinstance(node, MappingNode):
        content: List[YamlNode] = []
        for key_node, value_node in node.value:
            content.append(_build_node(key_node, "", lines, ancestors))
            content.append(
                _build_node(value_node, _line_comment(value_node, lines), lines, ancestors)
            )
        return YamlNode(kind=NodeKind.MAPPING, content=tuple(content), comment=comment)

    if isinstance(node, SequenceNode):
        items = tuple(
            _build_node(item, _line_comment(item, lines), lines, ancestors)
            for item in node.value
        )
        return YamlNode(kind=NodeKind.SEQUENCE, content=items, comment=comment)

    if isinstance(node, ScalarNode):
        return YamlNode(
            kind=NodeKind.SCALAR,
            scalar_type=_SCALAR_TYPES_BY_TAG.get(node.tag or "", ScalarType.UNKNOWN),
            value=node.value,
            comment=comment,
        )

    return YamlNode(kind=NodeKind.OTHER, comment=comment)


# -----------------------------------------------------------------------------
# INTERNAL HELPERS (COMMENTS)
# -----------------------------------------------------------------------------

def _split_lines(text: str) -> List[str]:
    lines = _LINE_BREAK_RX.split(text)
    if lines and lines[0].startswith("\ufeff"):
        lines[0] = lines[0][1:]
    return lines


def _line_comment(node: Any, lines: List[str]) -> str:
    """
    Return the comment written on the same line right after a node.

    Only nodes that start and end on one line carry such a comment; block
    collections and multi-line scalars never do. The '#' marker is kept.
    """
    start, end = node.start_mark, node.end_mark
    if start is None or end is None or start.line != end.line:
        return ""
    if end.line >= len(lines):
        return ""

    rest = lines[end.line][end.column:].lstrip()
    if not rest.startswith("#"):
        return ""
    return rest.rstrip()

from __future__ import annotations

"""
Go Struct Generation Service.

Top-level entry points of the engine: parse YAML text, locate the root
mapping and emit the struct declarations for it.
"""

import logging
from collections import Counter
from typing import List

from yaml2go.core.generation.emitter import build_structs
from yaml2go.core.generation.renderer import render_structs
from yaml2go.core.parsing.yaml_adapter import parse_document
from yaml2go.domain.errors import FormatError
from yaml2go.domain.go_models import GoStruct
from yaml2go.domain.yaml_models import NodeKind, YamlNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_structs(
        yaml_content: str,
        struct_name: str,
        with_json_tag: bool = False,
) -> List[GoStruct]:
    """
    Build every struct declaration for a YAML document.

    Args:
        yaml_content: Raw YAML text.
        struct_name: Name of the root struct.
        with_json_tag: Whether fields also carry a json tag.

    Returns:
        List[GoStruct]: The root struct followed by its nested structs,
                        depth-first in field order.

    Raises:
        ParseError: If the text is not valid YAML.
        FormatError: If the document is not a mapping.
    """
    root_node = find_root_mapping(parse_document(yaml_content))

    root, nested = build_structs(root_node, struct_name, with_json_tag)
    structs = [root] + nested

    _warn_on_struct_collisions(structs)
    logger.debug(f"Generated {len(structs)} struct(s) for {struct_name}")
    return structs


def generate_go_struct(
        yaml_content: str,
        struct_name: str,
        with_json_tag: bool = False,
) -> str:
    """
    Generate Go struct source code from YAML content.

    Fields are sorted by key and every nested mapping becomes its own
    struct named after its parent and field.

    Args:
        yaml_content: Raw YAML text.
        struct_name: Name of the root struct.
        with_json_tag: Whether fields also carry a json tag.

    Returns:
        str: Go source with all declarations.

    Raises:
        ParseError: If the text is not valid YAML.
        FormatError: If the document is not a mapping.
    """
    return render_structs(generate_structs(yaml_content, struct_name, with_json_tag))


def find_root_mapping(node: YamlNode) -> YamlNode:
    """
    Locate the mapping node that becomes the root struct.

    A document wrapper is unwrapped to its first child.

    Raises:
        FormatError: If no mapping is found at the top of the document.
    """
    if node.kind is NodeKind.DOCUMENT and node.content:
        node = node.content[0]

    if not node.is_mapping:
        raise FormatError("invalid YAML format: expected mapping node")
    return node

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _warn_on_struct_collisions(structs: List[GoStruct]) -> None:
    """Log struct names generated more than once."""
    counts = Counter(s.name for s in structs)
    for name, count in counts.items():
        if count > 1:
            logger.warning(f"Struct name {name} was generated {count} times")

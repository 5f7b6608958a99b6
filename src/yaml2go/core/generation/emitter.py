from __future__ import annotations

"""
Recursive Struct Emitter.

Walks a mapping node and builds one GoStruct for it plus one for every
nested mapping (or sequence of mappings) found below it. build_structs
returns the declarations; process_node renders them as Go source.
"""

import logging
from typing import Dict, List, Optional, Tuple

from yaml2go.core.analysis.entries import extract_sorted_entries
from yaml2go.core.analysis.naming import to_camel
from yaml2go.core.analysis.type_inference import determine_go_type
from yaml2go.core.generation.renderer import render_structs
from yaml2go.domain.go_models import GoField, GoStruct, slice_of
from yaml2go.domain.yaml_models import NodeKind, YamlEntry, YamlNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_structs(
        node: YamlNode,
        struct_name: str,
        with_json_tag: bool = False,
) -> Tuple[GoStruct, List[GoStruct]]:
    """
    Build the declaration of a mapping node and of all its nested structs.

    Nested struct names are the parent name followed by the camel-cased
    field name. Nested declarations are returned depth-first, in field order.
    For a sequence of mappings only the first element is used as the shape
    of the element struct.

    Args:
        node: Mapping node to convert.
        struct_name: Name of the struct to generate.
        with_json_tag: Whether fields also carry a json tag.

    Returns:
        Tuple[GoStruct, List[GoStruct]]: The struct and its nested structs.

    Raises:
        FormatError: If the node (or a nested one) is not a mapping.
    """
    entries = extract_sorted_entries(node, struct_name)
    logger.debug(f"Emitting struct {struct_name} with {len(entries)} field(s)")

    fields: List[GoField] = []
    nested: List[GoStruct] = []

    for entry in entries:
        field_name = to_camel(entry.key)
        field_type = determine_go_type(entry.node)

        element = _struct_shape(entry)
        if element is not None:
            sub_name = struct_name + field_name
            sub_struct, sub_nested = build_structs(element, sub_name, with_json_tag)
            nested.append(sub_struct)
            nested.extend(sub_nested)
            field_type = sub_name if entry.kind is NodeKind.MAPPING else slice_of(sub_name)

        fields.append(GoField(
            name=field_name,
            go_type=field_type,
            yaml_key=entry.key,
            json_key=entry.key if with_json_tag else None,
            comment=entry.comment,
        ))

    _warn_on_field_collisions(struct_name, fields)
    return GoStruct(name=struct_name, fields=tuple(fields)), nested


def process_node(
        node: YamlNode,
        struct_name: str,
        indent: str = "",
        with_json_tag: bool = False,
) -> str:
    """
    Render a mapping node as Go source.

    Returns the struct declaration followed by every nested declaration.

    Raises:
        FormatError: If the node (or a nested one) is not a mapping.
    """
    root, nested = build_structs(node, struct_name, with_json_tag)
    return render_structs([root] + nested, indent)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _struct_shape(entry: YamlEntry) -> Optional[YamlNode]:
    """
    Return the node that defines a nested struct for this entry, if any.

    A mapping defines its own shape; a non-empty sequence whose first
    element is a mapping is shaped by that first element.
    """
    if entry.kind is NodeKind.MAPPING:
        return entry.node

    content = entry.node.content
    if entry.kind is NodeKind.SEQUENCE and content and content[0].is_mapping:
        return content[0]

    return None


def _warn_on_field_collisions(struct_name: str, fields: List[GoField]) -> None:
    """Log keys whose Go field name is empty or shared with a sibling."""
    seen: Dict[str, str] = {}
    for f in fields:
        if not f.name:
            logger.warning(f"Key '{f.yaml_key}' in {struct_name} does not yield a Go identifier")
            continue
        if f.name in seen:
            logger.warning(
                f"Keys '{seen[f.name]}' and '{f.yaml_key}' in {struct_name} "
                f"both map to field {f.name}"
            )
        else:
            seen[f.name] = f.yaml_key

from __future__ import annotations

"""
Mapping Entry Extraction.

Flattens a mapping node into its key/value/comment entries, sorted by key.
The sort order drives the field order of every generated struct.
"""

import logging
from typing import List

from yaml2go.domain.errors import FormatError
from yaml2go.domain.yaml_models import YamlEntry, YamlNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_sorted_entries(node: YamlNode, struct_name: str) -> List[YamlEntry]:
    """
    Extract the entries of a mapping node sorted by key.

    Content is read as key/value pairs. A trailing key without a value is
    dropped. Sorting is by code point (case-sensitive) and stable, so
    duplicate keys keep their document order.

    Args:
        node: Mapping node to read.
        struct_name: Struct being generated, for error context.

    Returns:
        List[YamlEntry]: Entries in ascending key order.

    Raises:
        FormatError: If the node is not a mapping.
    """
    if not node.is_mapping:
        raise FormatError(f"expected mapping node for struct {struct_name}", struct_name)

    content = node.content
    if len(content) % 2:
        logger.debug(f"Dropping unmatched trailing key '{content[-1].value}' in {struct_name}")

    entries: List[YamlEntry] = []
    for key_node, val_node in zip(content[0::2], content[1::2]):
        entries.append(YamlEntry(
            key=key_node.value,
            value=val_node.value,
            comment=val_node.comment.strip(),
            kind=val_node.kind,
            node=val_node,
        ))

    entries.sort(key=lambda e: e.key)
    return entries

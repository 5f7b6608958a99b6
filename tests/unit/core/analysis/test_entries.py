from __future__ import annotations

"""
Unit tests for mapping entry extraction.

Verifies key sorting, comment trimming, odd-length content handling and
the error raised for non-mapping nodes.
"""

import pytest

from yaml2go.core.analysis.entries import extract_sorted_entries
from yaml2go.domain.errors import FormatError
from node_factories import mapping, scalar, sequence
from yaml2go.domain.yaml_models import NodeKind, ScalarType


def test_entries_sorted_by_key():
    node = mapping(
        scalar("b"), scalar("2", ScalarType.INT),
        scalar("a"), scalar("1", ScalarType.INT),
        scalar("C"), scalar("3", ScalarType.INT),
    )
    entries = extract_sorted_entries(node, "Root")
    assert [e.key for e in entries] == ["C", "a", "b"]
    assert [e.value for e in entries] == ["3", "1", "2"]


def test_entry_captures_kind_node_and_trimmed_comment():
    child = sequence(scalar("x"))
    node = mapping(
        scalar("name"), scalar("app", comment="  # the name  "),
        scalar("list"), child,
    )
    entries = extract_sorted_entries(node, "Root")

    by_key = {e.key: e for e in entries}
    assert by_key["name"].comment == "# the name"
    assert by_key["name"].kind is NodeKind.SCALAR
    assert by_key["list"].kind is NodeKind.SEQUENCE
    assert by_key["list"].node is child
    assert by_key["list"].comment == ""


def test_trailing_unmatched_key_is_dropped():
    node = mapping(scalar("a"), scalar("1"), scalar("dangling"))
    entries = extract_sorted_entries(node, "Root")
    assert [e.key for e in entries] == ["a"]


def test_empty_mapping_has_no_entries():
    assert extract_sorted_entries(mapping(), "Root") == []


def test_duplicate_keys_are_kept_in_document_order():
    node = mapping(scalar("k"), scalar("first"), scalar("k"), scalar("second"))
    entries = extract_sorted_entries(node, "Root")
    assert [e.value for e in entries] == ["first", "second"]


def test_non_mapping_raises_format_error():
    with pytest.raises(FormatError) as exc:
        extract_sorted_entries(sequence(scalar("x")), "RootItems")
    assert exc.value.struct_name == "RootItems"
    assert "expected mapping node for struct RootItems" in str(exc.value)

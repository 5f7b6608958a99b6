from __future__ import annotations

"""
Go Declaration Data Models.

Defines the generated struct declarations and the result object handed from
the generation service to the interface layer.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# GO TYPE TOKENS
# -----------------------------------------------------------------------------

GO_INT = "int"
GO_FLOAT = "float64"
GO_BOOL = "bool"
GO_STRING = "string"
GO_ANY = "interface{}"
GO_STRUCT_PLACEHOLDER = "struct"
GO_SLICE_PREFIX = "[]"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GoField:
    """
    A single field line of a generated struct.

    Attributes:
        name: Exported Go field name.
        go_type: Go type expression of the field.
        yaml_key: Original key, used for the ``yaml`` struct tag.
        json_key: Original key for the ``json`` struct tag, None when disabled.
        comment: Trailing comment carried over from the document.
    """
    name: str
    go_type: str
    yaml_key: str
    json_key: Optional[str] = None
    comment: str = ""


@dataclass(frozen=True)
class GoStruct:
    """
    A named struct declaration with its ordered fields.

    Attributes:
        name: Go type name.
        fields: Fields in emission order.
    """
    name: str
    fields: Tuple[GoField, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete generation run, as reported by the CLI.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        code: Generated Go source. Empty on failure.
        struct_names: Names of every generated struct, in emission order.
        output_path: File the code was written to, empty for stdout.
    """
    ok: bool
    error: str = ""
    code: str = ""
    struct_names: List[str] = field(default_factory=list)
    output_path: str = ""

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def slice_of(go_type: str) -> str:
    """Wrap a Go type into a slice type expression."""
    return GO_SLICE_PREFIX + go_type


def create_error_result(error: str, output_path: str = "") -> GenerationResult:
    """Build a failed GenerationResult."""
    return GenerationResult(ok=False, error=error, output_path=output_path)


def create_success_result(
        code: str,
        struct_names: List[str],
        output_path: str = "",
) -> GenerationResult:
    """Build a successful GenerationResult."""
    return GenerationResult(
        ok=True,
        code=code,
        struct_names=list(struct_names),
        output_path=output_path,
    )

from __future__ import annotations

"""
Go Struct Renderer.

Converts GoStruct declarations into Go source text. Each declaration ends
with a blank line so consecutive structs stay separated.
"""

from typing import Iterable, List

from yaml2go.domain.go_models import GoField, GoStruct

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_struct(struct: GoStruct, indent: str = "") -> str:
    """
    Render one struct declaration.

    Args:
        struct: Declaration to render.
        indent: Prefix applied to every line.

    Returns:
        str: The declaration, terminated by a blank line.
    """
    lines: List[str] = [f"{indent}type {struct.name} struct {{"]
    for f in struct.fields:
        lines.append(f"{indent}\t{render_field(f)}")
    lines.append(f"{indent}}}")
    return "\n".join(lines) + "\n\n"


def render_structs(structs: Iterable[GoStruct], indent: str = "") -> str:
    """Render several declarations back to back, in the given order."""
    return "".join(render_struct(s, indent) for s in structs)


def render_field(f: GoField) -> str:
    """
    Render the body of one field line (without indentation).

    Example:
        Port int `yaml:"port" json:"port"` // # listen port
    """
    tags = f'yaml:"{f.yaml_key}"'
    if f.json_key is not None:
        tags += f' json:"{f.json_key}"'

    comment = f" // {f.comment}" if f.comment else ""
    return f"{f.name} {f.go_type} `{tags}`{comment}"

from __future__ import annotations

"""
Go Identifier Naming.

Turns arbitrary YAML keys into exported Go identifiers (UpperCamelCase).
"""

import re
from typing import Final

_INVALID_CHARS_RX: Final[re.Pattern] = re.compile(r"[^a-zA-Z0-9_]")
_LEADING_DIGIT_RX: Final[re.Pattern] = re.compile(r"^[0-9]")
_GO_IDENTIFIER_RX: Final[re.Pattern] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def to_camel(s: str) -> str:
    """
    Convert a snake_case (or otherwise punctuated) key to UpperCamelCase.

    Characters outside [A-Za-z0-9_] act as separators and identifiers that
    would start with a digit get an 'N' prefix. Only the first character of
    each part is upper-cased; the rest is kept as written.

    Args:
        s: Raw key.

    Returns:
        str: The Go identifier, or an empty string for blank input.
    """
    s = s.strip()
    if not s:
        return s

    s = _INVALID_CHARS_RX.sub("_", s)

    parts = [p[0].upper() + p[1:] for p in s.split("_") if p]
    name = "".join(parts)

    # Checked after joining so "_1abc" is covered as well as "1abc"
    if _LEADING_DIGIT_RX.match(name):
        name = "N" + name
    return name


def is_go_identifier(name: str) -> bool:
    """Check whether a name can be used verbatim as a Go type name."""
    return bool(_GO_IDENTIFIER_RX.fullmatch(name))

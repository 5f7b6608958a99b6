from __future__ import annotations

"""
Domain Error Hierarchy.

Defines the failure kinds surfaced by the generation engine. Library code
raises these; only the interface layer translates them into exit codes.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# BASE
# -----------------------------------------------------------------------------

class Yaml2GoError(Exception):
    """Root of every error raised by the yaml2go package."""


# -----------------------------------------------------------------------------
# GENERATION ERRORS
# -----------------------------------------------------------------------------

class ParseError(Yaml2GoError):
    """
    Raised when the input text is not syntactically valid YAML.

    The parser's own diagnostic is preserved verbatim in the message and the
    original exception is chained as ``__cause__``.
    """


class FormatError(Yaml2GoError):
    """
    Raised when the YAML is well-formed but cannot be turned into a struct.

    Attributes:
        struct_name: Name of the struct being generated when the problem was
            detected. Empty for the top-level document check.
    """

    def __init__(self, message: str, struct_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.struct_name = struct_name or ""


class ConfigError(Yaml2GoError):
    """Raised by strict configuration validation on an invalid field."""

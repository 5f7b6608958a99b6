"""yaml2go: generate Go struct definitions from YAML documents."""

from __future__ import annotations

from .core.analysis.naming import to_camel
from .core.generation.emitter import build_structs, process_node
from .core.generation.generator import generate_go_struct, generate_structs
from .domain.errors import ConfigError, FormatError, ParseError, Yaml2GoError
from .domain.go_models import GoField, GoStruct

__version__ = "0.1.0"

__all__ = [
    "generate_go_struct",
    "generate_structs",
    "build_structs",
    "process_node",
    "to_camel",
    "GoField",
    "GoStruct",
    "Yaml2GoError",
    "ParseError",
    "FormatError",
    "ConfigError",
]

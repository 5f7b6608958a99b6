from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from yaml2go.domain.config import DEFAULT_STRUCT_NAME

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the yaml2go CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="yaml2go",
        description="Generate Go struct definitions from a YAML document.",
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Path to YAML input file.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Path to output Go file (optional, default to stdout).",
    )

    # --- Generation Options ---
    p.add_argument(
        "--struct",
        dest="struct_name",
        default=None,
        help=f"Name of the Go struct (default: {DEFAULT_STRUCT_NAME}).",
    )
    p.add_argument(
        "--json",
        dest="with_json_tag",
        action="store_true",
        help="Include json tags in the struct fields.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Reject an invalid --struct name instead of correcting it.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["struct_name"] = args.struct_name

    if args.with_json_tag:
        overrides["with_json_tag"] = True

    return overrides

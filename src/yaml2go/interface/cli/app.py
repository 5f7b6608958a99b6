from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults and
command-line overrides, validation, generation and output. Nothing is
written unless generation succeeds.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from yaml2go.core.generation.generator import generate_structs
from yaml2go.core.generation.renderer import render_structs
from yaml2go.core.validation import validate_config
from yaml2go.domain.config import get_default_config
from yaml2go.domain.errors import ConfigError, Yaml2GoError
from yaml2go.domain.go_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)
from yaml2go.infra.fs import normalize_path, read_text_file, write_text_file
from yaml2go.infra.logging import LoggingConfig, configure_logging, get_logger
from yaml2go.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge overrides over defaults, then validate
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    try:
        clean_conf, warnings = validate_config(raw_conf, strict=args.strict)
    except ConfigError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pre-flight input verification
    if not clean_conf["input_path"]:
        msg = "input file is required"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE

    # 5. Generation phase
    try:
        result = run_generation(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = f"unexpected failure: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output rendering phase
    return _print_result(result)

# -----------------------------------------------------------------------------
# GENERATION SERVICE
# -----------------------------------------------------------------------------

def run_generation(config: Dict[str, Any]) -> GenerationResult:
    """
    Read the input file, generate the structs and write them out.

    Expected failures (I/O, parse and format errors) are returned as a
    failed GenerationResult. When ``output_path`` is empty the code is only
    returned, for the caller to print.

    Args:
        config: Validated configuration.

    Returns:
        GenerationResult: Outcome of the run.
    """
    input_path = normalize_path(config["input_path"])
    output_path = normalize_path(config["output_path"])

    logger.info(f"Reading YAML from: {input_path}")
    try:
        data = read_text_file(input_path)
    except OSError as e:
        return _fail(f"failed to read file: {e}", output_path)

    try:
        structs = generate_structs(data, config["struct_name"], config["with_json_tag"])
    except Yaml2GoError as e:
        return _fail(f"failed to generate go struct: {e}", output_path)

    code = render_structs(structs)
    names = [s.name for s in structs]
    logger.info(f"Generated {len(names)} struct(s) rooted at {config['struct_name']}")

    if output_path:
        try:
            write_text_file(output_path, code)
        except OSError as e:
            return _fail(f"failed to write output file: {e}", output_path)

    return create_success_result(code, names, output_path)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys with non-None values are merged.
    """
    out = dict(base)
    for k in ("input_path", "output_path", "struct_name", "with_json_tag"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_result(result: GenerationResult) -> int:
    """Print the generated code or the status line, returning the exit code."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    if result.output_path:
        print(f"Generated struct written to {result.output_path}")
    else:
        sys.stdout.write(result.code)
    return EXIT_OK


def _fail(msg: str, output_path: str) -> GenerationResult:
    logger.error(msg)
    return create_error_result(msg, output_path)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())

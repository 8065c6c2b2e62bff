from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults
with command-line overrides, pipeline execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from mdtoc.core.pipeline.engine import run_pipeline
from mdtoc.core.pipeline.validator import validate_config
from mdtoc.domain.config import get_default_config
from mdtoc.domain.pipeline_models import PipelineResult
from mdtoc.infra.fs import normalize_path
from mdtoc.infra.logging import LoggingConfig, configure_logging, get_logger
from mdtoc.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ROOT = 2
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
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge command-line overrides over defaults and validate
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pre-flight root verification
    root_path = normalize_path(clean_conf["root_path"], os.getcwd())
    if not os.path.isdir(root_path):
        msg = f"Root directory does not exist: {root_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INVALID_ROOT
    clean_conf["root_path"] = root_path

    # 5. Pipeline execution phase
    logger.info(f"Indexing documentation root: {root_path}")
    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.critical(f"Filesystem failure while generating indices: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """Format and print the execution result to the standard output."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print("DRY RUN: no file was written.")
        print(f"Root: {result.root_path}")
        for path in result.documents:
            print(f"  - would write: {path}")
        return

    print(f"Indexed {result.root_path}")
    for path in result.written:
        print(f"  - {path}")

    labels = {
        "directories": "Directories indexed",
        "entries": "Navigation entries",
        "exclusions": "Exclusion patterns",
    }
    for key, label in labels.items():
        if key in result.summary:
            print(f"{label}: {result.summary[key]}")


if __name__ == "__main__":
    sys.exit(main())

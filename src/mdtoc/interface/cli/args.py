from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides. Every option is
optional: running with no arguments indexes the current directory.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mdtoc CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="mdtoc",
        description="Generate a README.md table of contents in every documentation folder.",
    )

    # --- Path Management ---
    p.add_argument(
        "-r", "--root",
        dest="root_path",
        default=None,
        help="Documentation root to index (default: current directory).",
    )

    # --- Discovery and Exclusions ---
    p.add_argument(
        "--include-suffix",
        dest="include_suffix",
        default=None,
        help="Substring identifying documents (default: .md).",
    )
    p.add_argument(
        "--exclude-file",
        dest="exclusion_file",
        default=None,
        help="Ignore file relative to the root (default: .gitignore).",
    )
    p.add_argument(
        "--no-exclude-file",
        action="store_true",
        help="Do not read the ignore file.",
    )
    p.add_argument(
        "--exclude",
        dest="extra_exclusions",
        default=None,
        help="Comma-separated root-relative paths to skip (exact match).",
    )

    # --- Rendering ---
    p.add_argument(
        "--header",
        dest="main_header",
        default=None,
        help="Title of the root index.",
    )

    # --- Runtime Constraints and Safety ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Render every index without writing any file.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Options left unset are mapped to None so that they do not override
    the defaults during merging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = args.root_path
    overrides["include_suffix"] = args.include_suffix
    overrides["exclusion_file"] = args.exclusion_file
    overrides["main_header"] = args.main_header

    if args.no_exclude_file:
        overrides["respect_exclusion_file"] = False
    if args.extra_exclusions:
        overrides["extra_exclusions"] = _split_csv(args.extra_exclusions)

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]

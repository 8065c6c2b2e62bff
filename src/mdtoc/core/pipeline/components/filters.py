from __future__ import annotations

"""
Exclusion Filtering.

Turns the raw lines of an ignore file into the set of exact path
fragments the tree scanner must skip, and loads those lines from the
configured exclusion source (by default the root .gitignore).
"""

import logging
from typing import Iterable, Set

from mdtoc.domain.constants import COMMENT_MARKER, DEFAULT_EXCLUSION_FILE
from mdtoc.infra.fs import FileSystem

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATTERN PARSING
# -----------------------------------------------------------------------------

def parse_exclusion_patterns(lines: Iterable[str]) -> Set[str]:
    """
    Translate raw ignore lines into exclusion fragments.

    Blank lines and any line containing a comment marker are dropped.
    A single leading "/" is stripped, so "/build" and "build" address
    the same root-relative path. No glob translation happens: fragments
    are compared verbatim by the scanner.

    Args:
        lines: Raw lines, one pattern each.

    Returns:
        Set[str]: Exclusion fragments.
    """
    fragments: Set[str] = set()
    for raw in lines:
        line = raw.strip()
        if not line or COMMENT_MARKER in line:
            continue
        if line.startswith("/"):
            line = line[1:]
        if line:
            fragments.add(line)
    return fragments


def is_excluded(rel_path: str, exclusions: Iterable[str]) -> bool:
    """
    Check a root-relative path against the exclusion fragments.

    Only an exact match excludes; a fragment that merely occurs inside
    the path does not.
    """
    return rel_path in exclusions

# -----------------------------------------------------------------------------
# CONFIGURATION SOURCE
# -----------------------------------------------------------------------------

def load_exclusions(fs: FileSystem, exclusion_file: str = DEFAULT_EXCLUSION_FILE) -> Set[str]:
    """
    Read the exclusion source at the scan root and parse it.

    Args:
        fs: Filesystem collaborator anchored at the scan root.
        exclusion_file: Root-relative path of the ignore file.

    Returns:
        Set[str]: Exclusion fragments, empty when the file does not exist.
    """
    if not exclusion_file or not fs.exists(exclusion_file):
        logger.debug(f"No exclusion source found at '{exclusion_file}'")
        return set()

    fragments = parse_exclusion_patterns(fs.read_text(exclusion_file).split("\n"))
    logger.debug(f"Loaded {len(fragments)} exclusion patterns from {exclusion_file}")
    return fragments

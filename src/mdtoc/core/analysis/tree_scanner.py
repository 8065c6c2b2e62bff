from __future__ import annotations

"""
Documentation Tree Scanner.

Walks the documentation hierarchy depth-first and builds the TreeNode
model consumed by the content mapper. Applies exact-match exclusions,
the include-suffix test and empty-branch pruning in a single pass.
"""

import logging
from typing import Dict, Iterable, List

from mdtoc.core.pipeline.components.filters import is_excluded
from mdtoc.domain.constants import DEFAULT_INCLUDE_SUFFIX, ROOT_DIR_KEY
from mdtoc.domain.toc_models import TreeNode
from mdtoc.infra.fs import FileSystem, join_relative

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan(
        fs: FileSystem,
        start_path: str = ROOT_DIR_KEY,
        include_suffix: str = DEFAULT_INCLUDE_SUFFIX,
        exclusions: Iterable[str] = (),
) -> TreeNode:
    """
    Build the TreeNode for a directory and all of its descendants.

    For every child, two independent checks run:
    - a directory is recursed into and kept only if its subtree is not
      empty;
    - a path containing ``include_suffix`` anywhere (substring, not a
      strict extension test) becomes a document, unless its name before
      the first dot equals the directory's own base name.

    Args:
        fs: Filesystem collaborator anchored at the scan root.
        start_path: Root-relative directory to scan.
        include_suffix: Substring identifying documents.
        exclusions: Root-relative paths to skip (exact match).

    Returns:
        TreeNode: The scanned directory. Empty if start_path does not exist.
    """
    if not fs.exists(start_path):
        logger.debug(f"Scan target does not exist, treating as empty: {start_path}")
        return TreeNode()

    excluded = exclusions if isinstance(exclusions, (set, frozenset)) else set(exclusions)
    dir_name = _base_name(start_path)

    files: List[str] = []
    folders: Dict[str, TreeNode] = {}

    for name in fs.list_children(start_path):
        child_path = join_relative(start_path, name)

        if is_excluded(child_path, excluded):
            logger.debug(f"Excluded: {child_path}")
            continue

        if fs.is_directory(child_path):
            child = scan(fs, child_path, include_suffix, excluded)
            if not child.is_empty():
                folders[name] = child

        if include_suffix in child_path:
            if name.split(".")[0] != dir_name:
                files.append(name)

    return TreeNode(files=files, folders=folders)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _base_name(path: str) -> str:
    """Return the last segment of a root-relative path ("." for the root)."""
    return path[path.rfind("/") + 1:]

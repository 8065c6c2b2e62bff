from __future__ import annotations

"""
Content Mapper.

Flattens a scanned TreeNode into a ContentMap: one ordered list of
navigation entries per directory. Each subdirectory contributes a folder
link to its parent followed by its own entries, one indent level deeper
and re-targeted relative to the parent.
"""

import logging
from typing import List, Optional

from mdtoc.domain.constants import ROOT_DIR_KEY, TITLE_SEPARATOR, TOC_FILE_NAME
from mdtoc.domain.naming import capitalize
from mdtoc.domain.toc_models import ContentMap, NavEntry, TreeNode
from mdtoc.infra.fs import FileSystem, join_relative

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_content_map(
        fs: FileSystem,
        node: TreeNode,
        dir_path: str = ROOT_DIR_KEY,
) -> ContentMap:
    """
    Build the navigation entries of a directory and of all its descendants.

    The returned map holds ``dir_path`` first, followed by every nested
    directory key in depth-first order. Entries of ``dir_path`` list its
    documents before its folders; each folder link is immediately followed
    by that folder's own entries.

    Args:
        fs: Filesystem collaborator used to read document titles.
        node: Scanned directory.
        dir_path: Root-relative path of ``node``.

    Returns:
        ContentMap: Directory path to ordered navigation entries.

    Raises:
        ValueError: If two directories resolve to the same key.
        OSError: If a document cannot be read. This includes a directory
            whose name contains the include suffix, which the scanner lists
            as a document too.
    """
    content: List[NavEntry] = []
    result: ContentMap = {dir_path: content}

    for file_name in node.files:
        if file_name == TOC_FILE_NAME:
            continue

        file_path = join_relative(dir_path, file_name)
        title = extract_title(fs.read_text(file_path))
        if title is None:
            logger.warning(f"No title separator on the first line of {file_path}")
        content.append(NavEntry(indent=0, title=title, file=file_name))

    for folder, sub_node in node.folders.items():
        sub_path = join_relative(dir_path, folder)
        sub_map = build_content_map(fs, sub_node, sub_path)

        _merge_content_maps(result, sub_map)

        content.append(NavEntry(
            indent=0,
            title=capitalize(folder),
            file=f"{folder}/{TOC_FILE_NAME}",
        ))
        content.extend(entry.nested_under(folder) for entry in sub_map[sub_path])

    return result


def extract_title(text: str) -> Optional[str]:
    """
    Extract the display title from a document's text.

    The title is the second separator-delimited segment of the first line.
    Text after a further separator is not part of the title.

    Args:
        text: Full document text.

    Returns:
        Optional[str]: The title, or None when the first line carries no separator.
    """
    first_line = text.split("\n")[0]
    segments = first_line.split(TITLE_SEPARATOR)
    if len(segments) < 2:
        return None
    return segments[1]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _merge_content_maps(target: ContentMap, source: ContentMap) -> None:
    """Insert every key of ``source`` into ``target``, refusing duplicates."""
    for key, entries in source.items():
        if key in target:
            raise ValueError(f"Duplicate directory key in content map: {key}")
        target[key] = entries

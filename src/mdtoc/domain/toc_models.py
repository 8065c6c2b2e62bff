from __future__ import annotations

"""
Table of Contents Data Models.

Provides the structures exchanged between the pipeline stages: the
scanned directory tree, the navigation entries of each index and the
rendered documents waiting to be written.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

# -----------------------------------------------------------------------------
# SCAN STAGE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    Represents one scanned directory.

    Attributes:
        files: Qualifying document filenames directly inside the directory.
        folders: Qualifying subdirectories keyed by name, in listing order.
    """
    files: List[str] = field(default_factory=list)
    folders: Dict[str, "TreeNode"] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """Return True when the directory holds no documents and no subfolders."""
        return not self.files and not self.folders

# -----------------------------------------------------------------------------
# MAPPING STAGE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NavEntry:
    """
    One link line of a generated index.

    Attributes:
        indent: Nesting depth relative to the owning index.
        title: Display text. None when the document title line is malformed.
        file: Forward-slash path from the owning index to the target.
    """
    indent: int
    title: Optional[str]
    file: str

    def nested_under(self, folder: str) -> NavEntry:
        """Return a copy re-targeted from the parent of ``folder``, one level deeper."""
        return replace(self, indent=self.indent + 1, file=f"{folder}/{self.file}")


ContentMap = Dict[str, List[NavEntry]]

# -----------------------------------------------------------------------------
# RENDER STAGE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderedDocument:
    """
    A generated index ready for persistence.

    Attributes:
        path: Output path relative to the scan root.
        data: Full Markdown text.
    """
    path: str
    data: str

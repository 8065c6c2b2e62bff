from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the narrow filesystem surface consumed by the TOC pipeline. All
paths handed to a FileSystem are relative to its root and use forward
slashes, with "." denoting the root itself. Implementations exist for the
local disk and for an in-memory tree (tests and simulations).
"""

import os
import posixpath
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def join_relative(start_path: str, name: str) -> str:
    """
    Join a child name onto a root-relative directory path.

    The root marker is elided so that children of the root are addressed
    by their bare name ("docs", not "./docs").
    """
    if start_path in ("", "."):
        return name
    return f"{start_path}/{name}"

# -----------------------------------------------------------------------------
# COLLABORATOR INTERFACE
# -----------------------------------------------------------------------------

class FileSystem(ABC):
    """
    Abstract filesystem collaborator used by every pipeline stage.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if the path exists (file or directory)."""

    @abstractmethod
    def list_children(self, path: str) -> List[str]:
        """
        List the entry names directly inside a directory.

        Args:
            path: Root-relative directory path.

        Returns:
            List[str]: Child names in the implementation's listing order.
        """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if the path is a directory."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a UTF-8 document. I/O errors propagate."""

    @abstractmethod
    def write_text(self, path: str, data: str) -> None:
        """Create or overwrite a UTF-8 document. I/O errors propagate."""

# -----------------------------------------------------------------------------
# LOCAL DISK IMPLEMENTATION
# -----------------------------------------------------------------------------

class LocalFileSystem(FileSystem):
    """
    FileSystem backed by the operating system, anchored at an explicit root.

    Directory listings are sorted lexicographically so that generated
    indices do not depend on the platform's listing order.
    """

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def resolve(self, path: str) -> str:
        """Translate a root-relative path into an absolute OS path."""
        rel = posixpath.normpath(path or ".")
        if rel == ".":
            return self.root
        return os.path.join(self.root, *rel.split("/"))

    def exists(self, path: str) -> bool:
        return os.path.exists(self.resolve(path))

    def list_children(self, path: str) -> List[str]:
        return sorted(os.listdir(self.resolve(path)))

    def is_directory(self, path: str) -> bool:
        # Symlinked directories below the root are not followed
        full = self.resolve(path)
        if full == self.root:
            return os.path.isdir(full)
        return os.path.isdir(full) and not os.path.islink(full)

    def read_text(self, path: str) -> str:
        with open(self.resolve(path), "r", encoding="utf-8") as f:
            return f.read()

    def write_text(self, path: str, data: str) -> None:
        # newline="" keeps the rendered "\n" endings byte-exact on every OS
        with open(self.resolve(path), "w", encoding="utf-8", newline="") as f:
            f.write(data)

# -----------------------------------------------------------------------------
# IN-MEMORY IMPLEMENTATION
# -----------------------------------------------------------------------------

class MemoryFileSystem(FileSystem):
    """
    FileSystem held entirely in memory.

    Children are listed in insertion order, which makes it possible to
    exercise order-sensitive behavior without touching the disk.

    Args:
        files: Mapping of root-relative file paths to their text.
        directories: Extra (possibly empty) directories to create.
    """

    def __init__(
            self,
            files: Optional[Dict[str, str]] = None,
            directories: Iterable[str] = (),
    ):
        self.files: Dict[str, str] = {}
        self._children: Dict[str, List[str]] = {".": []}

        for d in directories:
            self._ensure_dir(self._norm(d))
        for path, data in (files or {}).items():
            p = self._norm(path)
            self._ensure_dir(posixpath.dirname(p) or ".")
            self.write_text(p, data)

    @staticmethod
    def _norm(path: str) -> str:
        return posixpath.normpath(path or ".")

    def _ensure_dir(self, path: str) -> None:
        if path in self._children:
            return
        parent, name = posixpath.split(path)
        parent = parent or "."
        self._ensure_dir(parent)
        self._children[parent].append(name)
        self._children[path] = []

    def exists(self, path: str) -> bool:
        p = self._norm(path)
        return p in self._children or p in self.files

    def list_children(self, path: str) -> List[str]:
        p = self._norm(path)
        if p not in self._children:
            raise NotADirectoryError(path)
        return list(self._children[p])

    def is_directory(self, path: str) -> bool:
        return self._norm(path) in self._children

    def read_text(self, path: str) -> str:
        p = self._norm(path)
        if p in self._children:
            raise IsADirectoryError(path)
        if p not in self.files:
            raise FileNotFoundError(path)
        return self.files[p]

    def write_text(self, path: str, data: str) -> None:
        p = self._norm(path)
        if p in self._children:
            raise IsADirectoryError(path)
        if p not in self.files:
            parent, name = posixpath.split(p)
            parent = parent or "."
            if parent not in self._children:
                raise FileNotFoundError(path)
            self._children[parent].append(name)
        self.files[p] = data

from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared documentation trees, both in memory and on disk.
"""

import os
import sys
from pathlib import Path
from typing import Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from mdtoc.infra.fs import MemoryFileSystem  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def docs_files() -> Dict[str, str]:
    """
    Return a small documentation tree as path -> text.

    Structure:
    /docs
      a.md        (# &nbsp; Alpha)
      /sub
        b.md      (# &nbsp; Beta)
    """
    return {
        "docs/a.md": "# &nbsp; Alpha\n\nBody of alpha.\n",
        "docs/sub/b.md": "# &nbsp; Beta\n\nBody of beta.\n",
    }


@pytest.fixture
def memory_fs(docs_files: Dict[str, str]) -> MemoryFileSystem:
    """In-memory filesystem holding the shared documentation tree."""
    return MemoryFileSystem(docs_files)


@pytest.fixture
def docs_on_disk(tmp_path: Path, docs_files: Dict[str, str]) -> Path:
    """
    Materialize the shared documentation tree under a temporary root.

    Also drops a non-document file and a .gitignore excluding 'drafts'.
    """
    root = tmp_path / "project"
    for rel, text in docs_files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")

    (root / "drafts").mkdir()
    (root / "drafts" / "wip.md").write_text("# &nbsp; Work In Progress\n", encoding="utf-8")
    (root / "docs" / "diagram.png").write_bytes(b"\x89PNG")
    (root / ".gitignore").write_text("# build output\n/drafts\n\nnode_modules\n", encoding="utf-8")

    return root

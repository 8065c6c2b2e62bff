from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates the local-disk collaborator against real directories, the
in-memory collaborator's contract, and path normalization helpers.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from mdtoc.infra.fs import LocalFileSystem, MemoryFileSystem, join_relative, normalize_path

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_normalize_path_expansion() -> None:
    """Environment variables are expanded and the result is absolute."""
    with patch.dict(os.environ, {"TOC_TEST_VAR": "my_folder"}):
        path = normalize_path("$TOC_TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())
        assert os.path.isabs(path)


def test_normalize_path_fallback() -> None:
    assert normalize_path("   ", fallback="/srv/docs") == os.path.abspath("/srv/docs")


def test_join_relative_elides_root_marker() -> None:
    assert join_relative(".", "docs") == "docs"
    assert join_relative("docs", "sub") == "docs/sub"

# -----------------------------------------------------------------------------
# LOCAL FILESYSTEM TESTS
# -----------------------------------------------------------------------------

def test_local_fs_listing_is_sorted(tmp_path: Path) -> None:
    for name in ["zeta.md", "Alpha.md", "beta"]:
        if name.endswith(".md"):
            (tmp_path / name).write_text("x", encoding="utf-8")
        else:
            (tmp_path / name).mkdir()

    fs = LocalFileSystem(str(tmp_path))

    assert fs.list_children(".") == ["Alpha.md", "beta", "zeta.md"]
    assert fs.is_directory("beta") is True
    assert fs.is_directory("zeta.md") is False


def test_local_fs_read_write_round_trip(tmp_path: Path) -> None:
    (tmp_path / "docs").mkdir()
    fs = LocalFileSystem(str(tmp_path))

    fs.write_text("docs/README.md", "# Title\n\n* [A](a.md)\n")

    assert fs.exists("docs/README.md") is True
    assert (tmp_path / "docs" / "README.md").read_bytes() == b"# Title\n\n* [A](a.md)\n"
    assert fs.read_text("./docs/README.md") == "# Title\n\n* [A](a.md)\n"


def test_local_fs_missing_paths(tmp_path: Path) -> None:
    fs = LocalFileSystem(str(tmp_path / "absent"))

    assert fs.exists(".") is False
    with pytest.raises(FileNotFoundError):
        fs.read_text("nothing.md")


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks required")
def test_local_fs_does_not_follow_symlinked_directories(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    (tmp_path / "link").symlink_to(real, target_is_directory=True)

    fs = LocalFileSystem(str(tmp_path))

    assert fs.is_directory("real") is True
    assert fs.is_directory("link") is False

# -----------------------------------------------------------------------------
# IN-MEMORY FILESYSTEM TESTS
# -----------------------------------------------------------------------------

def test_memory_fs_structure() -> None:
    fs = MemoryFileSystem({"docs/a.md": "A", "docs/sub/b.md": "B"}, directories=["empty"])

    assert fs.list_children(".") == ["empty", "docs"]
    assert fs.list_children("docs") == ["a.md", "sub"]
    assert fs.is_directory("docs/sub") is True
    assert fs.is_directory("docs/a.md") is False
    assert fs.exists("docs/sub/b.md") is True
    assert fs.read_text("docs/sub/b.md") == "B"


def test_memory_fs_errors() -> None:
    fs = MemoryFileSystem({"docs/a.md": "A"})

    with pytest.raises(FileNotFoundError):
        fs.read_text("docs/missing.md")
    with pytest.raises(FileNotFoundError):
        fs.write_text("nowhere/README.md", "x")
    with pytest.raises(IsADirectoryError):
        fs.write_text("docs", "x")
    with pytest.raises(NotADirectoryError):
        fs.list_children("docs/a.md")


def test_reading_a_directory_fails_alike_on_both_filesystems(tmp_path: Path) -> None:
    """Both collaborators raise IsADirectoryError when asked to read a folder."""
    (tmp_path / "docs").mkdir()
    local = LocalFileSystem(str(tmp_path))
    memory = MemoryFileSystem(directories=["docs"])

    with pytest.raises(IsADirectoryError):
        local.read_text("docs")
    with pytest.raises(IsADirectoryError):
        memory.read_text("docs")

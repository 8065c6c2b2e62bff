from __future__ import annotations

"""
Unit tests for the Tree Scanner.

Verifies hierarchical structure building, exclusion exactness,
self-name suppression, empty-branch pruning and the substring-based
document detection.
"""

from mdtoc.core.analysis.tree_scanner import scan
from mdtoc.domain.toc_models import TreeNode
from mdtoc.infra.fs import MemoryFileSystem


def test_scan_builds_nested_tree(memory_fs):
    tree = scan(memory_fs)

    assert tree.files == []
    assert list(tree.folders) == ["docs"]

    docs = tree.folders["docs"]
    assert docs.files == ["a.md"]
    assert list(docs.folders) == ["sub"]
    assert docs.folders["sub"] == TreeNode(files=["b.md"], folders={})


def test_scan_from_subdirectory(memory_fs):
    """Children of a non-root start path are addressed relative to the root."""
    tree = scan(memory_fs, "docs", exclusions={"docs/sub"})

    assert tree.files == ["a.md"]
    assert tree.folders == {}


def test_scan_missing_start_path_returns_empty_node(memory_fs):
    tree = scan(memory_fs, "does/not/exist")

    assert tree == TreeNode()
    assert tree.is_empty()


def test_scan_skips_exact_exclusions_only():
    """An exact match removes the child; a mere substring match does not."""
    fs = MemoryFileSystem({
        "docs/private/secret.md": "# &nbsp; Secret\n",
        "docs/private_notes/n.md": "# &nbsp; Notes\n",
        "docs/skip.md": "# &nbsp; Skip\n",
        "docs/keep.md": "# &nbsp; Keep\n",
    })

    tree = scan(fs, exclusions={"docs/private", "docs/skip.md", "private"})

    docs = tree.folders["docs"]
    assert "private" not in docs.folders
    assert "private_notes" in docs.folders
    assert docs.files == ["keep.md"]


def test_scan_excluded_top_level_directory():
    fs = MemoryFileSystem({
        "node_modules/pkg/readme.md": "# &nbsp; Pkg\n",
        "guide.md": "# &nbsp; Guide\n",
    })

    tree = scan(fs, exclusions={"node_modules"})

    assert tree.folders == {}
    assert tree.files == ["guide.md"]


def test_scan_suppresses_self_named_document():
    """docs/docs.md is the folder's own summary and is not listed."""
    fs = MemoryFileSystem({
        "docs/docs.md": "# &nbsp; Docs Summary\n",
        "docs/docs.v2.md": "# &nbsp; Docs V2\n",
        "docs/other.md": "# &nbsp; Other\n",
    })

    tree = scan(fs)

    # The name is compared up to its first dot
    assert tree.folders["docs"].files == ["other.md"]


def test_scan_prunes_empty_branches():
    fs = MemoryFileSystem(
        {
            "docs/images/logo.png": "binary",
            "docs/a.md": "# &nbsp; A\n",
        },
        directories=["docs/empty", "docs/nested/deeper"],
    )

    tree = scan(fs)

    assert list(tree.folders["docs"].folders) == []
    assert tree.folders["docs"].files == ["a.md"]


def test_scan_keeps_directory_holding_only_subdirectories():
    fs = MemoryFileSystem({"docs/level1/level2/deep.md": "# &nbsp; Deep\n"})

    tree = scan(fs)

    level1 = tree.folders["docs"].folders["level1"]
    assert level1.files == []
    assert level1.folders["level2"].files == ["deep.md"]


def test_scan_include_suffix_is_a_substring_match():
    """Documented quirk: '.md' anywhere in the path qualifies the file."""
    fs = MemoryFileSystem({
        "docs/notes.md.bak": "# &nbsp; Backup\n",
        "docs/readme.txt": "plain",
    })

    tree = scan(fs)

    assert tree.folders["docs"].files == ["notes.md.bak"]


def test_scan_custom_include_suffix():
    fs = MemoryFileSystem({
        "docs/a.rst": "# &nbsp; A\n",
        "docs/b.md": "# &nbsp; B\n",
    })

    tree = scan(fs, include_suffix=".rst")

    assert tree.folders["docs"].files == ["a.rst"]


def test_scan_follows_listing_order():
    """Files and folders keep the collaborator's listing order."""
    fs = MemoryFileSystem({
        "docs/zeta.md": "# &nbsp; Z\n",
        "docs/alpha.md": "# &nbsp; A\n",
        "docs/zz/x.md": "# &nbsp; X\n",
        "docs/aa/y.md": "# &nbsp; Y\n",
    })

    docs = scan(fs).folders["docs"]

    assert docs.files == ["zeta.md", "alpha.md"]
    assert list(docs.folders) == ["zz", "aa"]


def test_scan_is_deterministic(memory_fs):
    assert scan(memory_fs) == scan(memory_fs)


def test_scan_directory_named_like_a_document_is_both_file_and_folder():
    """Recursion and the document check both apply to every child."""
    fs = MemoryFileSystem({
        "docs/guide.md/x.md": "# &nbsp; X\n",
        "docs/a.md": "# &nbsp; A\n",
    })

    docs = scan(fs).folders["docs"]

    assert docs.files == ["guide.md", "a.md"]
    assert docs.folders["guide.md"] == TreeNode(files=["x.md"], folders={})

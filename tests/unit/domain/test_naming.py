from __future__ import annotations

"""
Unit tests for the display naming helpers shared by the mapper and the
renderer.
"""

import pytest

from mdtoc.core.analysis.content_mapper import build_content_map
from mdtoc.core.analysis.markdown_renderer import render_document
from mdtoc.core.analysis.tree_scanner import scan
from mdtoc.domain.naming import capitalize
from mdtoc.infra.fs import MemoryFileSystem


@pytest.mark.parametrize(
    "name, expected",
    [
        ("apiGuide", "ApiGuide"),
        ("FAQ", "FAQ"),
        ("2024-notes", "2024-notes"),
        ("", ""),
    ],
)
def test_capitalize_only_touches_first_character(name, expected):
    assert capitalize(name) == expected


def test_folder_link_and_folder_header_agree():
    fs = MemoryFileSystem({"docs/apiGuide/x.md": "# &nbsp; X"})

    parent_entries = build_content_map(fs, scan(fs, "docs"), "docs")["docs"]
    header = render_document("docs/apiGuide", []).data.split("\n")[0]

    assert parent_entries[0].title == "ApiGuide"
    assert header.endswith("ApiGuide Conventions")

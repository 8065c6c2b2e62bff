from __future__ import annotations

"""
Markdown Renderer.

Converts a ContentMap into the text of one index document per directory.
Rendering is pure string construction; persistence is left to the writer.
"""

from typing import List

from mdtoc.domain.constants import (
    BACK_LINK,
    MAIN_HEADER,
    ROOT_DIR_KEY,
    SECTION_HEADER_SUFFIX,
    TITLE_SEPARATOR,
    TOC_FILE_NAME,
    TOC_SECTION_LABEL,
)
from mdtoc.domain.naming import capitalize
from mdtoc.domain.toc_models import ContentMap, NavEntry, RenderedDocument

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_documents(
        content_map: ContentMap,
        main_header: str = MAIN_HEADER,
) -> List[RenderedDocument]:
    """
    Render every directory of the content map, preserving key order.

    Args:
        content_map: Directory path to navigation entries.
        main_header: Title of the root index.

    Returns:
        List[RenderedDocument]: One document per map key.
    """
    return [
        render_document(key, entries, main_header=main_header)
        for key, entries in content_map.items()
    ]


def render_document(
        dir_path: str,
        entries: List[NavEntry],
        main_header: str = MAIN_HEADER,
) -> RenderedDocument:
    """
    Render the index document of a single directory.

    Layout:
        <header>

        ## Table of Contents

        * [title](file)
          * [nested title](folder/file)

    Titles are emitted as-is. An entry whose title is None (document
    without a title separator) renders with empty link text, ``* [](file)``.
    Entries pointing at this directory's own index are skipped.

    Args:
        dir_path: Root-relative directory path (map key).
        entries: The directory's navigation entries.
        main_header: Title used when ``dir_path`` is the root.

    Returns:
        RenderedDocument: Output path and full text.
    """
    header = _render_header(dir_path, main_header)
    body = "".join(
        _render_entry(entry) for entry in entries if entry.file != TOC_FILE_NAME
    )

    return RenderedDocument(
        path=f"{dir_path}/{TOC_FILE_NAME}",
        data=f"{header}\n\n{TOC_SECTION_LABEL}\n\n{body}",
    )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_header(dir_path: str, main_header: str) -> str:
    """Root indices get the main title, others a back-link plus the folder name."""
    dir_name = dir_path.split("/")[-1]
    if dir_name == ROOT_DIR_KEY:
        return f"# {main_header}"
    return f"# {BACK_LINK}{TITLE_SEPARATOR}{capitalize(dir_name)} {SECTION_HEADER_SUFFIX}"


def _render_entry(entry: NavEntry) -> str:
    # A missing title renders as empty link text
    title = entry.title if entry.title is not None else ""
    return f"{' ' * (entry.indent * 2)}* [{title}]({entry.file})\n"

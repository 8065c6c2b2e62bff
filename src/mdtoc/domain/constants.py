from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed naming conventions shared by the scanner, the
content mapper and the renderer: the generated index filename, the
document title separator and the header wording of generated indices.
"""

# -----------------------------------------------------------------------------
# OUTPUT NAMING
# -----------------------------------------------------------------------------

TOC_FILE_NAME = "README.md"
ROOT_DIR_KEY = "."

# -----------------------------------------------------------------------------
# DOCUMENT CONVENTIONS
# -----------------------------------------------------------------------------

DEFAULT_INCLUDE_SUFFIX = ".md"
TITLE_SEPARATOR = " &nbsp; "

MAIN_HEADER = "Edge Development Conventions"
SECTION_HEADER_SUFFIX = "Conventions"
TOC_SECTION_LABEL = "## Table of Contents"
BACK_LINK = f"[<](../{TOC_FILE_NAME})"

# -----------------------------------------------------------------------------
# CONFIGURATION SOURCES
# -----------------------------------------------------------------------------

DEFAULT_EXCLUSION_FILE = ".gitignore"
COMMENT_MARKER = "#"

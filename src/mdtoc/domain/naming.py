from __future__ import annotations

"""
Display Naming Helpers.

Folder names are shown in two places: as the link text of a folder entry
in its parent's index and in the header of the folder's own index. Both
go through capitalize() so they always agree.
"""


def capitalize(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]

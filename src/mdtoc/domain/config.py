from __future__ import annotations

"""
Configuration Domain Defaults.

Defines the dictionary-based runtime configuration that drives the TOC
pipeline. Interfaces (CLI) merge their overrides over these defaults
before handing the result to the validator.
"""

import os
from typing import Any, Dict

from mdtoc.domain.constants import (
    DEFAULT_EXCLUSION_FILE,
    DEFAULT_INCLUDE_SUFFIX,
    MAIN_HEADER,
)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    The scan root defaults to the current working directory. This is the
    only place where the process working directory is consulted.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "root_path": os.getcwd(),

        # Discovery
        "include_suffix": DEFAULT_INCLUDE_SUFFIX,

        # Exclusions
        "exclusion_file": DEFAULT_EXCLUSION_FILE,
        "respect_exclusion_file": True,
        "extra_exclusions": [],

        # Rendering
        "main_header": MAIN_HEADER,
    }

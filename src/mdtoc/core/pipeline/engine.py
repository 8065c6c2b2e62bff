from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the whole TOC generation workflow:
1. Validates configuration and resolves the scan root.
2. Loads the exclusion fragments.
3. Scans the documentation tree.
4. Builds the per-directory content map.
5. Renders one index document per directory.
6. Writes every document (skipped on dry runs).

Each stage completes before the next one starts.
"""

import logging
from typing import Any, Dict, Optional

from mdtoc.core.analysis.content_mapper import build_content_map
from mdtoc.core.analysis.markdown_renderer import render_documents
from mdtoc.core.analysis.tree_scanner import scan
from mdtoc.core.pipeline.components.filters import load_exclusions, parse_exclusion_patterns
from mdtoc.core.pipeline.components.writer import write_documents
from mdtoc.core.pipeline.validator import validate_config
from mdtoc.domain.constants import ROOT_DIR_KEY
from mdtoc.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from mdtoc.infra.fs import FileSystem, LocalFileSystem, normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]] = None,
        *,
        fs: Optional[FileSystem] = None,
        dry_run: bool = False,
) -> PipelineResult:
    """
    Execute the full scan -> map -> render -> write pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        fs: Filesystem collaborator. Defaults to the local disk anchored at
            the configured root.
        dry_run: If True, render every document but write nothing.

    Returns:
        PipelineResult: Object containing status, paths and summary.

    Raises:
        OSError: On filesystem read or write failures. Documents written
                 before the failure are left in place.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Root Resolution
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    root_path = normalize_path(cfg["root_path"], cfg["root_path"])
    if fs is None:
        fs = LocalFileSystem(root_path)

    if not fs.exists(ROOT_DIR_KEY) or not fs.is_directory(ROOT_DIR_KEY):
        msg = f"Invalid root directory: {root_path}"
        logger.error(msg)
        return create_error_result(msg, root_path)

    # -------------------------------------------------------------------------
    # 2) Exclusions
    # -------------------------------------------------------------------------
    exclusions = parse_exclusion_patterns(cfg["extra_exclusions"])
    if cfg["respect_exclusion_file"]:
        exclusions |= load_exclusions(fs, cfg["exclusion_file"])

    # -------------------------------------------------------------------------
    # 3) Scan, Map, Render
    # -------------------------------------------------------------------------
    tree = scan(fs, ROOT_DIR_KEY, cfg["include_suffix"], exclusions)
    content_map = build_content_map(fs, tree, ROOT_DIR_KEY)
    documents = render_documents(content_map, main_header=cfg["main_header"])

    logger.info(f"Rendered {len(documents)} index documents under {root_path}")

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: Skipping index persistence.")
        written = []
    else:
        written = write_documents(fs, documents)

    summary = {
        "directories": len(content_map),
        "documents": len(documents),
        "entries": sum(len(entries) for entries in content_map.values()),
        "exclusions": len(exclusions),
    }

    logger.info("Pipeline completed successfully.")
    return create_success_result(
        root_path,
        [doc.path for doc in documents],
        written,
        dry_run=dry_run,
        summary_extra=summary,
    )

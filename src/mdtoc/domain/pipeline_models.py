from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object exchanged between the pipeline engine and the
interface layer, together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete TOC generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Normalized scan root.
        dry_run: Whether writes were skipped.
        documents: Output paths of every rendered index (relative to root).
        written: Output paths actually persisted.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    root_path: str
    dry_run: bool = False
    documents: List[str] = field(default_factory=list)
    written: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root_path: str,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        root_path: The targeted scan root.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        root_path=root_path,
        summary=summary_extra or {},
    )


def create_success_result(
        root_path: str,
        documents: List[str],
        written: List[str],
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        root_path: Normalized scan root.
        documents: Paths of every rendered index.
        written: Paths persisted to disk.
        dry_run: Whether the run was a simulation.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        root_path=root_path,
        dry_run=dry_run,
        documents=list(documents),
        written=list(written),
        summary=summary_extra or {},
    )

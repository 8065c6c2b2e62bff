from __future__ import annotations

"""
Index Document Writer.

Persists rendered index documents through the filesystem collaborator.
Writes are not transactional: a failure leaves the documents written so
far in place and propagates to the caller.
"""

import logging
from typing import Iterable, List

from mdtoc.domain.toc_models import RenderedDocument
from mdtoc.infra.fs import FileSystem

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_documents(fs: FileSystem, documents: Iterable[RenderedDocument]) -> List[str]:
    """
    Write every rendered document, overwriting existing indices.

    Args:
        fs: Filesystem collaborator anchored at the scan root.
        documents: Rendered documents to persist.

    Returns:
        List[str]: Paths written, in write order.

    Raises:
        OSError: If filesystem write permissions are denied.
    """
    written: List[str] = []
    for doc in documents:
        fs.write_text(doc.path, doc.data)
        logger.debug(f"Index written: {doc.path}")
        written.append(doc.path)
    return written

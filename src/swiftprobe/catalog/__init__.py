"""Knowledge-base document catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from swiftprobe.catalog.discovery import discover_documents
from swiftprobe.catalog.parser import parse_document
from swiftprobe.catalog.validator import validate_documents
from swiftprobe.config import ProbeConfig
from swiftprobe.model import DocumentRecord
from swiftprobe.types import DocumentKind

logger = logging.getLogger(__name__)

__all__ = ["discover_documents", "load_catalog", "parse_document", "validate_documents"]


def load_catalog(
    root: Path,
    config: ProbeConfig | None = None,
    *,
    kinds: Iterable[DocumentKind] | None = None,
) -> list[DocumentRecord]:
    """Discover and parse documents under *root*, optionally limited to *kinds*.

    Raises :class:`~swiftprobe.exceptions.DocumentParseError` on the first
    malformed document.
    """
    wanted = set(kinds) if kinds is not None else None
    records: list[DocumentRecord] = []
    for kind, path in discover_documents(root, config):
        if wanted is not None and kind not in wanted:
            continue
        records.append(parse_document(path, root=root, kind=kind))
    logger.debug("Loaded %d documents from %s", len(records), root)
    return records

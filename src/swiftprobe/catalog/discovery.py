"""Knowledge-base document discovery."""

from __future__ import annotations

import logging
from pathlib import Path

from swiftprobe.config import ProbeConfig
from swiftprobe.constants.catalog import DOCUMENT_KIND_COMMAND, DOCUMENT_KIND_REFERENCE, DOCUMENT_KIND_SKILL
from swiftprobe.types import DocumentKind

logger = logging.getLogger(__name__)


def discover_documents(root: Path, config: ProbeConfig | None = None) -> list[tuple[DocumentKind, Path]]:
    """Discover skill, command and reference documents under *root*.

    A file matched by several kinds is reported once, under the first kind in
    skill, command, reference order. Results are sorted by relative path.
    """
    config = config or ProbeConfig()
    resolved_root = root.resolve()
    kinds: dict[Path, DocumentKind] = {}

    sources: tuple[tuple[DocumentKind, tuple[str, ...]], ...] = (
        (DOCUMENT_KIND_SKILL, config.skill_globs),
        (DOCUMENT_KIND_COMMAND, config.command_globs),
        (DOCUMENT_KIND_REFERENCE, config.reference_globs),
    )
    for kind, patterns in sources:
        for pattern in patterns:
            for path in resolved_root.glob(pattern):
                if not path.is_file():
                    continue
                kinds.setdefault(path.resolve(), kind)

    logger.debug("Discovered %d documents under %s", len(kinds), resolved_root)
    return sorted(
        ((kind, path) for path, kind in kinds.items()),
        key=lambda item: relative_posix(item[1], resolved_root),
    )


def relative_posix(path: Path, root: Path) -> str:
    """Return *path* relative to *root* as a posix string when possible."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()

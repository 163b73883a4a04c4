"""Depth-limited directory walk used by the detection probe."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkEntry:
    """A file or directory visited by :func:`walk_entries`.

    ``depth`` is 1 for immediate children of the walk root.
    """

    path: PurePosixPath
    depth: int


def walk_entries(root: Path, max_depth: int) -> Iterator[WalkEntry]:
    """Yield entries below *root* in depth-first pre-order, siblings sorted by name.

    Directories deeper than *max_depth* are never opened, symlinked directories
    are not followed, and unreadable directories are skipped.
    """
    if max_depth < 1:
        return
    yield from _walk(root, PurePosixPath(), 1, max_depth)


def _walk(directory: Path, relative: PurePosixPath, depth: int, max_depth: int) -> Iterator[WalkEntry]:
    try:
        children = sorted(directory.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return

    for child in children:
        child_relative = relative / child.name
        yield WalkEntry(path=child_relative, depth=depth)
        if depth < max_depth and _is_real_directory(child):
            yield from _walk(child, child_relative, depth + 1, max_depth)


def _is_real_directory(path: Path) -> bool:
    try:
        return path.is_dir() and not path.is_symlink()
    except OSError:
        return False

"""Parser for Markdown documents with optional YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from swiftprobe.catalog.discovery import relative_posix
from swiftprobe.constants.catalog import (
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    HEADING_PATTERN,
    SKILL_MARKDOWN_FILENAME,
)
from swiftprobe.exceptions import DocumentParseError
from swiftprobe.model import DocumentRecord, Frontmatter
from swiftprobe.types import DocumentKind


def split_frontmatter(path: Path) -> tuple[dict[str, Any] | None, str]:
    """Read *path* and return its frontmatter mapping (or ``None``) and body text."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentParseError(f"Cannot read {path}: {exc}") from exc

    lines = raw_text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None, "\n".join(lines).strip()

    frontmatter_end = _find_frontmatter_end(lines)
    if frontmatter_end is None:
        raise DocumentParseError(f"Unterminated frontmatter block in {path}")

    frontmatter_text = "\n".join(lines[1:frontmatter_end])
    try:
        payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
    except yaml.YAMLError as exc:
        raise DocumentParseError(f"Failed to parse frontmatter in {path}: {exc}") from exc

    if payload is not None and not isinstance(payload, dict):
        raise DocumentParseError(f"Frontmatter in {path} must be a YAML mapping")

    return payload, "\n".join(lines[frontmatter_end + 1 :]).strip()


def parse_document(path: Path, *, root: Path, kind: DocumentKind) -> DocumentRecord:
    """Parse a knowledge-base document into a :class:`DocumentRecord`."""
    payload, body = split_frontmatter(path)
    frontmatter = build_frontmatter(payload) if payload is not None else None
    return DocumentRecord(
        kind=kind,
        title=_derive_title(path, body, frontmatter),
        category=path.parent.name,
        path=relative_posix(path.resolve(), root.resolve()),
        body=body,
        frontmatter=frontmatter,
    )


def build_frontmatter(payload: dict[str, Any]) -> Frontmatter:
    """Build a lenient :class:`Frontmatter` record from a raw YAML mapping."""
    return Frontmatter(
        name=_scalar(payload.get("name")),
        description=_scalar(payload.get("description")),
        version=_scalar(payload.get("version")),
        allowed_tools=parse_allowed_tools(payload.get("allowed-tools")),
        raw=dict(payload),
    )


def parse_allowed_tools(value: Any) -> tuple[str, ...]:
    """Normalize ``allowed-tools`` given as a YAML list or a comma-separated string."""
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, list):
        items = [item for item in value if isinstance(item, str)]
    else:
        return ()
    return tuple(item.strip() for item in items if item.strip())


def _scalar(value: Any) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        return text or None
    return None


def _derive_title(path: Path, body: str, frontmatter: Frontmatter | None) -> str:
    if frontmatter is not None and frontmatter.name:
        return frontmatter.name
    for line in body.splitlines():
        match = HEADING_PATTERN.match(line.strip())
        if match:
            return match.group(1)
    if path.name == SKILL_MARKDOWN_FILENAME:
        return path.parent.name
    return path.stem


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None

"""Knowledge-base document records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from swiftprobe.constants.catalog import FRONTMATTER_KEYS
from swiftprobe.types import DocumentKind, JsonObject


@dataclass(frozen=True)
class Frontmatter:
    """Declarative metadata block at the top of a skill or command document."""

    name: str | None = None
    description: str | None = None
    version: str | None = None
    allowed_tools: tuple[str, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def extra_keys(self) -> tuple[str, ...]:
        """Keys present in the raw block that are not part of the known record."""
        return tuple(sorted(str(key) for key in self.raw if key not in FRONTMATTER_KEYS))

    def to_dict(self) -> JsonObject:
        return {
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "allowed_tools": list(self.allowed_tools),
        }


@dataclass(frozen=True)
class DocumentRecord:
    """A single Markdown document in the knowledge base."""

    kind: DocumentKind
    title: str
    category: str
    path: str
    body: str
    frontmatter: Frontmatter | None = None

    def to_dict(self) -> JsonObject:
        """Serialize for JSON catalog output (body omitted)."""
        return {
            "kind": self.kind,
            "title": self.title,
            "category": self.category,
            "path": self.path,
            "frontmatter": self.frontmatter.to_dict() if self.frontmatter is not None else None,
        }

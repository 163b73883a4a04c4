"""Constants for knowledge-base document discovery and parsing."""

from __future__ import annotations

import re

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"

DEFAULT_SKILL_GLOBS: tuple[str, ...] = ("skills/**/SKILL.md",)
DEFAULT_COMMAND_GLOBS: tuple[str, ...] = ("commands/**/*.md",)
DEFAULT_REFERENCE_GLOBS: tuple[str, ...] = ("**/references/**/*.md",)

FRONTMATTER_DELIMITER: str = "---"
FRONTMATTER_ALT_DELIMITER: str = "..."

FRONTMATTER_KEYS: frozenset[str] = frozenset({"name", "description", "version", "allowed-tools"})
FRONTMATTER_SCALAR_KEYS: tuple[str, ...] = ("name", "description", "version")
SKILL_REQUIRED_KEYS: tuple[str, ...] = ("name", "description")

HEADING_PATTERN: re.Pattern[str] = re.compile(r"^#\s+(.+?)\s*#*\s*$")

DOCUMENT_KIND_SKILL: str = "skill"
DOCUMENT_KIND_COMMAND: str = "command"
DOCUMENT_KIND_REFERENCE: str = "reference"
DOCUMENT_KINDS: tuple[str, ...] = (DOCUMENT_KIND_SKILL, DOCUMENT_KIND_COMMAND, DOCUMENT_KIND_REFERENCE)

VALID_CATALOG_FORMATS: frozenset[str] = frozenset({"text", "json"})
CATALOG_SCHEMA_VERSION: str = "1.0.0"

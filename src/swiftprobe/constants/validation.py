"""Stable validation error codes and allowed-key sets for config and document validation."""

from __future__ import annotations

from swiftprobe.constants.config import DEPTH_KEYS, GLOB_KEYS

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG007: str = "CFG007"  # value out of range
CFG010: str = "CFG010"  # root directory not found

DOC001: str = "DOC001"  # document unreadable / unparseable
DOC002: str = "DOC002"  # skill without frontmatter
DOC003: str = "DOC003"  # missing required frontmatter field
DOC004: str = "DOC004"  # unknown frontmatter key
DOC005: str = "DOC005"  # invalid frontmatter value type
DOC006: str = "DOC006"  # duplicate skill name

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        *DEPTH_KEYS,
        *GLOB_KEYS,
        "report_podfile_only",
        "version_command",
        "version_timeout_seconds",
    }
)

"""Parsing-related exceptions."""

from __future__ import annotations

from swiftprobe.exceptions.base import SwiftProbeError


class DocumentParseError(SwiftProbeError, ValueError):
    """Raised when a knowledge-base document cannot be parsed."""

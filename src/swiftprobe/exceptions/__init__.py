"""Shared exception hierarchy for swiftprobe."""

from __future__ import annotations

from .base import SwiftProbeError
from .config import ConfigError
from .parsing import DocumentParseError

__all__ = [
    "ConfigError",
    "DocumentParseError",
    "SwiftProbeError",
]

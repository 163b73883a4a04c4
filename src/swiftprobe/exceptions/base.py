"""Base exception for swiftprobe."""

from __future__ import annotations


class SwiftProbeError(Exception):
    """Base class for all swiftprobe errors."""

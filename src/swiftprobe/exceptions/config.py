"""Configuration-related exceptions."""

from __future__ import annotations

from swiftprobe.exceptions.base import SwiftProbeError


class ConfigError(SwiftProbeError, ValueError):
    """Raised when probe configuration is invalid."""

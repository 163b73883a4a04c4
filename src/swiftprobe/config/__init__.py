"""Configuration loading and validation for swiftprobe."""

from __future__ import annotations

from swiftprobe.config.loader import load_config
from swiftprobe.config.model import ProbeConfig
from swiftprobe.config.validator import validate_config_file

__all__ = [
    "ProbeConfig",
    "load_config",
    "validate_config_file",
]

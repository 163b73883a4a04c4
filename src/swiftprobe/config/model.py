"""Config data model for swiftprobe."""

from __future__ import annotations

from dataclasses import dataclass

from swiftprobe.constants.catalog import DEFAULT_COMMAND_GLOBS, DEFAULT_REFERENCE_GLOBS, DEFAULT_SKILL_GLOBS
from swiftprobe.constants.detection import (
    DEFAULT_PACKAGE_MAX_DEPTH,
    DEFAULT_PODFILE_MAX_DEPTH,
    DEFAULT_SWIFT_MAX_DEPTH,
    DEFAULT_VERSION_COMMAND,
    DEFAULT_VERSION_TIMEOUT_SECONDS,
    DEFAULT_XCODE_MAX_DEPTH,
)


@dataclass(frozen=True)
class ProbeConfig:
    """Resolved probe and catalog config."""

    swift_max_depth: int = DEFAULT_SWIFT_MAX_DEPTH
    xcode_max_depth: int = DEFAULT_XCODE_MAX_DEPTH
    package_max_depth: int = DEFAULT_PACKAGE_MAX_DEPTH
    podfile_max_depth: int = DEFAULT_PODFILE_MAX_DEPTH
    report_podfile_only: bool = False
    version_command: tuple[str, ...] = DEFAULT_VERSION_COMMAND
    version_timeout_seconds: float = DEFAULT_VERSION_TIMEOUT_SECONDS
    skill_globs: tuple[str, ...] = DEFAULT_SKILL_GLOBS
    command_globs: tuple[str, ...] = DEFAULT_COMMAND_GLOBS
    reference_globs: tuple[str, ...] = DEFAULT_REFERENCE_GLOBS

    @property
    def max_walk_depth(self) -> int:
        """Deepest level the detection walk has to visit."""
        return max(
            self.swift_max_depth,
            self.xcode_max_depth,
            self.package_max_depth,
            self.podfile_max_depth,
        )

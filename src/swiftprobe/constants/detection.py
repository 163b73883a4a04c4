"""Project marker patterns and walk limits for the detection probe."""

from __future__ import annotations

SWIFT_SOURCE_PATTERN: str = "*.swift"
XCODE_PROJECT_PATTERN: str = "*.xcodeproj"
XCODE_PROJECT_SUFFIX: str = ".xcodeproj"
SWIFT_PACKAGE_MANIFEST: str = "Package.swift"
PODFILE_NAME: str = "Podfile"

DEFAULT_SWIFT_MAX_DEPTH: int = 3
DEFAULT_XCODE_MAX_DEPTH: int = 2
DEFAULT_PACKAGE_MAX_DEPTH: int = 2
DEFAULT_PODFILE_MAX_DEPTH: int = 1

DEFAULT_VERSION_COMMAND: tuple[str, ...] = ("swift", "--version")
DEFAULT_VERSION_TIMEOUT_SECONDS: float = 10.0

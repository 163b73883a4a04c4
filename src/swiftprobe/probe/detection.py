"""Apple-platform project marker detection."""

from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from swiftprobe.config import ProbeConfig
from swiftprobe.constants.detection import (
    PODFILE_NAME,
    SWIFT_PACKAGE_MANIFEST,
    SWIFT_SOURCE_PATTERN,
    XCODE_PROJECT_PATTERN,
)
from swiftprobe.model import ProjectMarkers
from swiftprobe.probe.walk import walk_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkerRule:
    """Name pattern and depth limit for one :class:`ProjectMarkers` field."""

    field: str
    pattern: str
    max_depth: int

    def matches(self, path: PurePosixPath, depth: int) -> bool:
        return depth <= self.max_depth and fnmatch.fnmatchcase(path.name, self.pattern)


def marker_rules(config: ProbeConfig) -> tuple[MarkerRule, ...]:
    """Return the marker rules in banner order."""
    return (
        MarkerRule(field="swift_file", pattern=SWIFT_SOURCE_PATTERN, max_depth=config.swift_max_depth),
        MarkerRule(field="xcode_project", pattern=XCODE_PROJECT_PATTERN, max_depth=config.xcode_max_depth),
        MarkerRule(field="package_manifest", pattern=SWIFT_PACKAGE_MANIFEST, max_depth=config.package_max_depth),
        MarkerRule(field="podfile", pattern=PODFILE_NAME, max_depth=config.podfile_max_depth),
    )


def detect_markers(root: Path, config: ProbeConfig | None = None) -> ProjectMarkers:
    """Walk *root* once and record the first entry matching each marker rule."""
    config = config or ProbeConfig()
    rules = marker_rules(config)
    found: dict[str, PurePosixPath] = {}

    for entry in walk_entries(root, config.max_walk_depth):
        for rule in rules:
            if rule.field not in found and rule.matches(entry.path, entry.depth):
                logger.debug("Marker %s matched %s (depth %d)", rule.field, entry.path, entry.depth)
                found[rule.field] = entry.path
        if len(found) == len(rules):
            break

    return ProjectMarkers(**found)

"""Detection probe result records."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from swiftprobe.constants.detection import XCODE_PROJECT_SUFFIX


@dataclass(frozen=True)
class ProjectMarkers:
    """First match for each Apple-platform project marker, relative to the probed root.

    A marker is ``None`` when nothing matched within its depth limit.
    """

    swift_file: PurePosixPath | None = None
    xcode_project: PurePosixPath | None = None
    package_manifest: PurePosixPath | None = None
    podfile: PurePosixPath | None = None

    @property
    def is_swift_project(self) -> bool:
        """Whether a Swift source, Xcode project or package manifest was found.

        A Podfile on its own does not qualify.
        """
        return any(
            marker is not None for marker in (self.swift_file, self.xcode_project, self.package_manifest)
        )

    @property
    def any_marker(self) -> bool:
        return self.is_swift_project or self.podfile is not None

    @property
    def xcode_project_name(self) -> str | None:
        """Display name of the Xcode project with its bundle extension removed."""
        if self.xcode_project is None:
            return None
        name = self.xcode_project.name
        # `basename NAME SUFFIX` leaves NAME alone when it equals SUFFIX.
        if name.endswith(XCODE_PROJECT_SUFFIX) and name != XCODE_PROJECT_SUFFIX:
            return name[: -len(XCODE_PROJECT_SUFFIX)]
        return name


@dataclass(frozen=True)
class ProbeReport:
    """Markers plus the optional toolchain version line."""

    markers: ProjectMarkers
    toolchain_version: str | None = None
    report_podfile_only: bool = False

    @property
    def triggered(self) -> bool:
        """Whether the banner should be printed for this report."""
        if self.markers.is_swift_project:
            return True
        return self.report_podfile_only and self.markers.podfile is not None

"""Session banner rendering for probe reports."""

from __future__ import annotations

from swiftprobe.constants.branding import (
    BANNER_CLOSING,
    BANNER_COCOAPODS,
    BANNER_COMMANDS,
    BANNER_COMMANDS_HEADER,
    BANNER_DETECTED,
    BANNER_SKILL_TOPICS,
    BANNER_SKILLS_HEADER,
    BANNER_SWIFT_PACKAGE,
    BANNER_TOOLCHAIN,
    BANNER_XCODE_PROJECT,
)
from swiftprobe.model import ProbeReport


class BannerReporter:
    """Formats a probe report as the plain-text session banner."""

    def __init__(self, report: ProbeReport) -> None:
        self._report = report

    def render_lines(self) -> list[str]:
        """Return banner lines, or an empty list when the probe did not trigger."""
        if not self._report.triggered:
            return []
        return [
            *self._render_commands(),
            *self._render_project_lines(),
            *self._render_skills(),
        ]

    def render(self) -> str:
        """Render the banner as a single string without a trailing newline."""
        return "\n".join(self.render_lines())

    @staticmethod
    def _render_commands() -> list[str]:
        lines = [BANNER_DETECTED, "", BANNER_COMMANDS_HEADER]
        lines.extend(f"  {command} - {summary}" for command, summary in BANNER_COMMANDS)
        lines.append("")
        return lines

    def _render_project_lines(self) -> list[str]:
        markers = self._report.markers
        lines: list[str] = []
        if markers.xcode_project_name is not None:
            lines.append(BANNER_XCODE_PROJECT.format(name=markers.xcode_project_name))
        if markers.package_manifest is not None:
            lines.append(BANNER_SWIFT_PACKAGE)
        if markers.podfile is not None:
            lines.append(BANNER_COCOAPODS)
        if self._report.toolchain_version is not None:
            lines.append(BANNER_TOOLCHAIN.format(version=self._report.toolchain_version))
        return lines

    @staticmethod
    def _render_skills() -> list[str]:
        lines = ["", BANNER_SKILLS_HEADER]
        lines.extend(f"  • {topic}" for topic in BANNER_SKILL_TOPICS)
        lines.extend(["", BANNER_CLOSING])
        return lines

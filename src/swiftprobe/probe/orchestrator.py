"""Detection probe entrypoint."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from swiftprobe.config import ProbeConfig
from swiftprobe.model import ProbeReport
from swiftprobe.probe.detection import detect_markers
from swiftprobe.probe.toolchain import query_toolchain_version

logger = logging.getLogger(__name__)


def probe_workspace(
    root: Path,
    config: ProbeConfig | None = None,
    *,
    query_toolchain: bool = True,
) -> ProbeReport:
    """Detect project markers under *root* and, for Swift projects, the toolchain version.

    The toolchain is only queried once the banner is known to be shown.
    """
    config = config or ProbeConfig()
    markers = detect_markers(root, config)
    report = ProbeReport(markers=markers, report_podfile_only=config.report_podfile_only)
    if not report.triggered:
        logger.debug("No Swift project markers under %s", root)
        return report

    if not query_toolchain:
        return report

    version = query_toolchain_version(config.version_command, timeout=config.version_timeout_seconds)
    return replace(report, toolchain_version=version)

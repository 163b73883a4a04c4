"""Tests for the session banner renderer."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path, PurePosixPath
from unittest.mock import MagicMock, patch

from swiftprobe.model import ProbeReport, ProjectMarkers
from swiftprobe.probe import probe_workspace
from swiftprobe.reporting import BannerReporter

COMMAND_LINES: list[str] = [
    "Available Swift plugin commands:",
    "  /new-swiftui-view - Scaffold a new SwiftUI view",
    "  /review-memory - Analyze for memory leaks",
    "  /optimize-performance - Performance analysis",
    "  /add-tests - Generate test coverage",
    "  /fix-accessibility - Accessibility audit",
    "  /setup-storekit - Setup in-app purchases",
]

CLOSING_LINES: list[str] = [
    "I have access to 23 specialized Swift/Xcode skills covering:",
    "  • Swift 6 & concurrency",
    "  • SwiftUI & UIKit/AppKit",
    "  • Testing & debugging",
    "  • Performance & security",
    "  • All Apple platforms (iOS, macOS, watchOS, tvOS, visionOS)",
    "",
    "Just ask me anything about your Swift project!",
]


def _report(**markers: PurePosixPath) -> ProbeReport:
    return ProbeReport(markers=ProjectMarkers(**markers))


def test_untriggered_report_renders_nothing() -> None:
    reporter = BannerReporter(_report())

    assert reporter.render_lines() == []
    assert reporter.render() == ""


def test_podfile_only_renders_nothing() -> None:
    assert BannerReporter(_report(podfile=PurePosixPath("Podfile"))).render() == ""


def test_swift_file_only_banner_is_exact() -> None:
    lines = BannerReporter(_report(swift_file=PurePosixPath("main.swift"))).render_lines()

    assert lines == ["🎯 Swift/Xcode project detected!", "", *COMMAND_LINES, "", "", *CLOSING_LINES]


def test_all_project_lines_in_order() -> None:
    report = ProbeReport(
        markers=ProjectMarkers(
            swift_file=PurePosixPath("Package.swift"),
            xcode_project=PurePosixPath("ios/Shop.xcodeproj"),
            package_manifest=PurePosixPath("Package.swift"),
            podfile=PurePosixPath("Podfile"),
        ),
        toolchain_version="Swift version 6.0.3",
    )

    lines = BannerReporter(report).render_lines()
    start = lines.index("📦 Xcode project: Shop")

    assert lines[start : start + 5] == [
        "📦 Xcode project: Shop",
        "📦 Swift Package Manager project detected",
        "📦 CocoaPods detected",
        "⚡ Swift version 6.0.3",
        "",
    ]


def test_podfile_reported_alongside_swift_project() -> None:
    output = BannerReporter(
        _report(swift_file=PurePosixPath("a.swift"), podfile=PurePosixPath("Podfile"))
    ).render()

    assert "📦 CocoaPods detected" in output


def test_podfile_only_opt_in_renders_banner() -> None:
    report = ProbeReport(markers=ProjectMarkers(podfile=PurePosixPath("Podfile")), report_podfile_only=True)

    output = BannerReporter(report).render()

    assert output.startswith("🎯 Swift/Xcode project detected!")
    assert "📦 CocoaPods detected" in output


@patch("swiftprobe.probe.orchestrator.query_toolchain_version", return_value=None)
def test_xcode_project_name_line(_mock_query: MagicMock, make_tree: Callable[..., Path]) -> None:
    root = make_tree(["MyApp.xcodeproj/"])

    output = BannerReporter(probe_workspace(root)).render()

    assert "📦 Xcode project: MyApp" in output.splitlines()


@patch("swiftprobe.probe.orchestrator.query_toolchain_version", return_value=None)
def test_package_and_swift_file(_mock_query: MagicMock, make_tree: Callable[..., Path]) -> None:
    root = make_tree(["Package.swift", "Sources/x.swift"])

    lines = BannerReporter(probe_workspace(root)).render_lines()

    assert lines[0] == "🎯 Swift/Xcode project detected!"
    assert "📦 Swift Package Manager project detected" in lines


@patch("swiftprobe.probe.orchestrator.query_toolchain_version", return_value=None)
def test_end_to_end_xcode_app(_mock_query: MagicMock, make_tree: Callable[..., Path]) -> None:
    root = make_tree(["App.xcodeproj/", "Sources/main.swift"])

    lines = BannerReporter(probe_workspace(root)).render_lines()

    assert lines == [
        "🎯 Swift/Xcode project detected!",
        "",
        *COMMAND_LINES,
        "",
        "📦 Xcode project: App",
        "",
        *CLOSING_LINES,
    ]


@patch("swiftprobe.probe.orchestrator.query_toolchain_version", return_value="Swift version 6.0")
def test_repeated_runs_are_identical(_mock_query: MagicMock, make_tree: Callable[..., Path]) -> None:
    root = make_tree(["App.xcodeproj/", "Sources/main.swift", "Podfile"])

    first = BannerReporter(probe_workspace(root)).render()
    second = BannerReporter(probe_workspace(root)).render()

    assert first.encode("utf-8") == second.encode("utf-8")

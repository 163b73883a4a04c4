"""Branding constants for the CLI and the session banner."""

from __future__ import annotations

BRAND_NAME: str = "SWIFTPROBE"
CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ SWIFTPROBE",
        "     // Swift/Xcode project detection and skill catalog",
        "",
        f"{BRAND_NAME} session probe",
    )
)

BANNER_DETECTED: str = "🎯 Swift/Xcode project detected!"
BANNER_COMMANDS_HEADER: str = "Available Swift plugin commands:"
BANNER_COMMANDS: tuple[tuple[str, str], ...] = (
    ("/new-swiftui-view", "Scaffold a new SwiftUI view"),
    ("/review-memory", "Analyze for memory leaks"),
    ("/optimize-performance", "Performance analysis"),
    ("/add-tests", "Generate test coverage"),
    ("/fix-accessibility", "Accessibility audit"),
    ("/setup-storekit", "Setup in-app purchases"),
)

BANNER_XCODE_PROJECT: str = "📦 Xcode project: {name}"
BANNER_SWIFT_PACKAGE: str = "📦 Swift Package Manager project detected"
BANNER_COCOAPODS: str = "📦 CocoaPods detected"
BANNER_TOOLCHAIN: str = "⚡ {version}"

BANNER_SKILLS_HEADER: str = "I have access to 23 specialized Swift/Xcode skills covering:"
BANNER_SKILL_TOPICS: tuple[str, ...] = (
    "Swift 6 & concurrency",
    "SwiftUI & UIKit/AppKit",
    "Testing & debugging",
    "Performance & security",
    "All Apple platforms (iOS, macOS, watchOS, tvOS, visionOS)",
)
BANNER_CLOSING: str = "Just ask me anything about your Swift project!"

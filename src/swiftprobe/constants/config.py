"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "swiftprobe.yaml"

DEPTH_KEYS: tuple[str, ...] = (
    "swift_max_depth",
    "xcode_max_depth",
    "package_max_depth",
    "podfile_max_depth",
)
GLOB_KEYS: tuple[str, ...] = ("skill_globs", "command_globs", "reference_globs")

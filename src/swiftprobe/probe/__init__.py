"""Project detection probe package."""

from __future__ import annotations

from typing import Any

__all__ = ["detect_markers", "probe_workspace", "query_toolchain_version"]


def __getattr__(name: str) -> Any:
    """Lazily expose probe APIs to avoid import cycles at package import time."""
    if name == "probe_workspace":
        from .orchestrator import probe_workspace

        return probe_workspace
    if name == "detect_markers":
        from .detection import detect_markers

        return detect_markers
    if name == "query_toolchain_version":
        from .toolchain import query_toolchain_version

        return query_toolchain_version
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

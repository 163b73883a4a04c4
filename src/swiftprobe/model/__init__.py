"""Core data models for swiftprobe."""

from .documents import DocumentRecord, Frontmatter
from .markers import ProbeReport, ProjectMarkers

__all__ = [
    "DocumentRecord",
    "Frontmatter",
    "ProbeReport",
    "ProjectMarkers",
]

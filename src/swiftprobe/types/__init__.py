"""Shared type aliases for swiftprobe."""

from .common import CatalogFormat, DocumentKind, JsonObject, JsonScalar, JsonValue

__all__ = [
    "CatalogFormat",
    "DocumentKind",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]

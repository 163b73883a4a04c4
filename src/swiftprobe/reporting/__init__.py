"""Reporting package for swiftprobe outputs."""

from __future__ import annotations

from .banner import BannerReporter
from .catalog import CatalogReporter, build_catalog_payload, render_catalog_json

__all__ = ["BannerReporter", "CatalogReporter", "build_catalog_payload", "render_catalog_json"]

"""Shared constants for swiftprobe."""

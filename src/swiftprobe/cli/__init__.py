"""Command-line interface for swiftprobe."""

"""Shared pytest fixtures for building probe and catalog trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

TreeBuilder: TypeAlias = Callable[[dict[str, str] | list[str]], Path]


def build_tree(root: Path, entries: dict[str, str] | list[str]) -> Path:
    """Create files and directories under *root*.

    Entries ending in ``/`` are created as directories; everything else is a
    file, with content taken from the mapping value when one is given.
    """
    items = entries.items() if isinstance(entries, dict) else ((entry, "") for entry in entries)
    for relative, content in items:
        target = root / relative
        if relative.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture()
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Return a builder that lays out a directory tree inside ``tmp_path``."""

    def _make(entries: dict[str, str] | list[str]) -> Path:
        return build_tree(tmp_path, entries)

    return _make


@pytest.fixture()
def knowledge_base(tmp_path: Path) -> Path:
    """A small knowledge base with skills, commands and references."""
    return build_tree(
        tmp_path,
        {
            "skills/swift-concurrency/SKILL.md": (
                "---\n"
                "name: swift-concurrency\n"
                "description: Swift 6 strict concurrency guidance\n"
                "version: 1.0.0\n"
                "allowed-tools: Read, Grep\n"
                "---\n"
                "# Swift Concurrency\n"
                "Use actors for shared mutable state.\n"
            ),
            "skills/swiftui-layout/SKILL.md": (
                "---\n"
                "name: swiftui-layout\n"
                "description: Layout patterns for SwiftUI\n"
                "allowed-tools:\n"
                "  - Read\n"
                "  - Edit\n"
                "---\n"
                "# SwiftUI Layout\n"
            ),
            "skills/swiftui-layout/references/stacks.md": "# Stacks\nHStack and VStack notes.\n",
            "commands/add-tests.md": (
                "---\n"
                "description: Generate test coverage\n"
                "---\n"
                "# Add Tests\n"
                "Write XCTest cases for the selected type.\n"
            ),
            "commands/review-memory.md": "# Review Memory\nLook for retain cycles.\n",
            "README.md": "# Knowledge base\n",
        },
    )

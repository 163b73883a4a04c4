"""Tests for knowledge-base document discovery."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from swiftprobe.catalog import discover_documents
from swiftprobe.config import ProbeConfig


def _relative(root: Path, found: list[tuple[str, Path]]) -> list[tuple[str, str]]:
    resolved = root.resolve()
    return [(kind, path.relative_to(resolved).as_posix()) for kind, path in found]


def test_discovers_each_kind_sorted_by_path(knowledge_base: Path) -> None:
    found = _relative(knowledge_base, discover_documents(knowledge_base))

    assert found == [
        ("command", "commands/add-tests.md"),
        ("command", "commands/review-memory.md"),
        ("skill", "skills/swift-concurrency/SKILL.md"),
        ("skill", "skills/swiftui-layout/SKILL.md"),
        ("reference", "skills/swiftui-layout/references/stacks.md"),
    ]


def test_file_matching_several_kinds_is_listed_once(make_tree: Callable[..., Path]) -> None:
    root = make_tree(["commands/references/notes.md"])

    found = _relative(root, discover_documents(root))

    assert found == [("command", "commands/references/notes.md")]


def test_directories_matching_globs_are_ignored(make_tree: Callable[..., Path]) -> None:
    root = make_tree(["commands/fake.md/"])

    assert discover_documents(root) == []


def test_custom_globs(make_tree: Callable[..., Path]) -> None:
    root = make_tree(["docs/skills/a/SKILL.md", "skills/b/SKILL.md"])
    config = ProbeConfig(skill_globs=("docs/skills/*/SKILL.md",), command_globs=(), reference_globs=())

    found = _relative(root, discover_documents(root, config))

    assert found == [("skill", "docs/skills/a/SKILL.md")]


def test_empty_root(tmp_path: Path) -> None:
    assert discover_documents(tmp_path) == []

"""Tests for the catalog text and JSON renderers."""

from __future__ import annotations

import json

from swiftprobe.model import DocumentRecord, Frontmatter
from swiftprobe.reporting import CatalogReporter, build_catalog_payload, render_catalog_json


def _record(
    kind: str = "skill",
    title: str = "swift-testing",
    path: str = "skills/swift-testing/SKILL.md",
) -> DocumentRecord:
    return DocumentRecord(
        kind=kind,  # type: ignore[arg-type]
        title=title,
        category="swift-testing",
        path=path,
        body="# Swift Testing",
        frontmatter=Frontmatter(name=title, description="Testing guidance", allowed_tools=("Read",)),
    )


def test_empty_catalog_header_only() -> None:
    output = CatalogReporter([]).render()

    assert output == "  Documents   0 (0 skill · 0 command · 0 reference)"


def test_catalog_rows_are_aligned() -> None:
    records = [
        _record(),
        _record(kind="command", title="add-tests", path="commands/add-tests.md"),
    ]

    lines = CatalogReporter(records).render().splitlines()

    assert lines[0] == "  Documents   2 (1 skill · 1 command · 0 reference)"
    assert lines[2] == "  skill    swift-testing  skills/swift-testing/SKILL.md"
    assert lines[3] == "  command  add-tests      commands/add-tests.md"


def test_long_titles_are_truncated() -> None:
    output = CatalogReporter([_record(title="x" * 60)]).render()

    assert "x" * 39 + "…" in output
    assert "x" * 41 not in output


def test_payload_counts_every_kind() -> None:
    payload = build_catalog_payload([_record(), _record(kind="reference", path="skills/a/references/b.md")])

    assert payload["total_documents"] == 2
    assert payload["counts_by_kind"] == {"skill": 1, "command": 0, "reference": 1}


def test_json_output_omits_body_and_keeps_unicode() -> None:
    record = DocumentRecord(
        kind="command",
        title="Révision",
        category="commands",
        path="commands/revision.md",
        body="secret body",
        frontmatter=None,
    )

    rendered = render_catalog_json([record])
    payload = json.loads(rendered)

    assert "Révision" in rendered
    assert "body" not in payload["documents"][0]
    assert payload["documents"][0]["frontmatter"] is None

"""Text and JSON renderers for the document catalog."""

from __future__ import annotations

import json
from collections import Counter

from swiftprobe.constants.catalog import CATALOG_SCHEMA_VERSION, DOCUMENT_KINDS
from swiftprobe.model import DocumentRecord
from swiftprobe.types import JsonObject


def build_catalog_payload(records: list[DocumentRecord]) -> JsonObject:
    """Build the JSON catalog payload described by ``schemas/catalog.schema.json``."""
    counts = Counter(record.kind for record in records)
    return {
        "schema_version": CATALOG_SCHEMA_VERSION,
        "total_documents": len(records),
        "counts_by_kind": {kind: counts.get(kind, 0) for kind in DOCUMENT_KINDS},
        "documents": [record.to_dict() for record in records],
    }


def render_catalog_json(records: list[DocumentRecord]) -> str:
    return json.dumps(build_catalog_payload(records), indent=2, ensure_ascii=False)


class CatalogReporter:
    """Formats catalog records as an aligned, human-readable listing."""

    def __init__(self, records: list[DocumentRecord]) -> None:
        self._records = records

    def render(self) -> str:
        counts = Counter(record.kind for record in self._records)
        breakdown = " · ".join(f"{counts.get(kind, 0)} {kind}" for kind in DOCUMENT_KINDS)
        lines = [f"  Documents   {len(self._records)} ({breakdown})"]
        if not self._records:
            return "\n".join(lines)

        w_kind = max(len(record.kind) for record in self._records)
        w_title = min(40, max(len(record.title) for record in self._records))
        lines.append("")
        for record in self._records:
            title = record.title if len(record.title) <= w_title else record.title[: w_title - 1] + "…"
            lines.append(f"  {record.kind:<{w_kind}}  {title:<{w_title}}  {record.path}")
        return "\n".join(lines)

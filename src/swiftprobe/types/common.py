"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

DocumentKind: TypeAlias = Literal["skill", "command", "reference"]
CatalogFormat: TypeAlias = Literal["text", "json"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

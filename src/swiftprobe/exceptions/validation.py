"""Structured validation error model for config and document linting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single validation problem with a stable code and its location."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = self.path if self.line is None else f"{self.path}:{self.line}"
        parts = [f"[{self.code}]", location, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors deterministically by code, path, field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field, e.line or 0))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(e.format() for e in sort_errors(errors))

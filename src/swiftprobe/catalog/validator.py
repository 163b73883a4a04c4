"""Collect-all linting for knowledge-base documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from swiftprobe.catalog.discovery import discover_documents, relative_posix
from swiftprobe.catalog.parser import split_frontmatter
from swiftprobe.config import ProbeConfig
from swiftprobe.constants.catalog import (
    DOCUMENT_KIND_SKILL,
    FRONTMATTER_KEYS,
    FRONTMATTER_SCALAR_KEYS,
    SKILL_REQUIRED_KEYS,
)
from swiftprobe.constants.validation import DOC001, DOC002, DOC003, DOC004, DOC005, DOC006
from swiftprobe.exceptions import DocumentParseError
from swiftprobe.exceptions.validation import ValidationError
from swiftprobe.utils import suggest_key

logger = logging.getLogger(__name__)


def validate_documents(root: Path, config: ProbeConfig | None = None) -> list[ValidationError]:
    """Lint every discovered document and return all problems found.

    Never raises for document content; unreadable or malformed files are
    reported as ``DOC001``.
    """
    resolved_root = root.resolve()
    errors: list[ValidationError] = []
    skill_names: dict[str, str] = {}

    for kind, path in discover_documents(resolved_root, config):
        rel_path = relative_posix(path, resolved_root)
        try:
            payload, _ = split_frontmatter(path)
        except DocumentParseError as exc:
            errors.append(ValidationError(code=DOC001, path=rel_path, field="", message=str(exc)))
            continue

        if payload is None:
            if kind == DOCUMENT_KIND_SKILL:
                errors.append(
                    ValidationError(
                        code=DOC002,
                        path=rel_path,
                        field="",
                        message="skill document has no frontmatter",
                        hint="add a `---` block with name and description",
                    )
                )
            continue

        errors.extend(_validate_frontmatter(payload, rel_path, is_skill=kind == DOCUMENT_KIND_SKILL))

        if kind == DOCUMENT_KIND_SKILL:
            name = payload.get("name")
            if isinstance(name, str) and name.strip():
                key = name.strip().lower()
                first_path = skill_names.setdefault(key, rel_path)
                if first_path != rel_path:
                    errors.append(
                        ValidationError(
                            code=DOC006,
                            path=rel_path,
                            field="name",
                            message=f"duplicate skill name `{name.strip()}`",
                            hint=f"already declared by {first_path}",
                        )
                    )

    logger.debug("Document validation found %d problem(s)", len(errors))
    return errors


def _validate_frontmatter(payload: dict[str, Any], rel_path: str, *, is_skill: bool) -> list[ValidationError]:
    errors: list[ValidationError] = []

    for key in sorted(str(k) for k in payload):
        if key not in FRONTMATTER_KEYS:
            errors.append(
                ValidationError(
                    code=DOC004,
                    path=rel_path,
                    field=key,
                    message=f"unknown frontmatter key `{key}`",
                    hint=suggest_key(key, FRONTMATTER_KEYS),
                )
            )

    for key in FRONTMATTER_SCALAR_KEYS:
        if key not in payload or payload[key] is None:
            continue
        value = payload[key]
        valid = isinstance(value, str) or (key == "version" and _is_number(value))
        if not valid:
            errors.append(
                ValidationError(
                    code=DOC005,
                    path=rel_path,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint=f"expected a string, got {type(value).__name__}",
                )
            )

    tools = payload.get("allowed-tools")
    if tools is not None and not (
        isinstance(tools, str) or (isinstance(tools, list) and all(isinstance(item, str) for item in tools))
    ):
        errors.append(
            ValidationError(
                code=DOC005,
                path=rel_path,
                field="allowed-tools",
                message="invalid type for `allowed-tools`",
                hint="expected a list of strings or a comma-separated string",
            )
        )

    if is_skill:
        for key in SKILL_REQUIRED_KEYS:
            value = payload.get(key)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.append(
                    ValidationError(
                        code=DOC003,
                        path=rel_path,
                        field=key,
                        message=f"missing required field `{key}`",
                    )
                )

    return errors


def _is_number(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float))

"""Config file validation for swiftprobe."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from swiftprobe.constants.config import CONFIG_FILENAME, DEPTH_KEYS, GLOB_KEYS
from swiftprobe.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG007,
)
from swiftprobe.exceptions.validation import ValidationError
from swiftprobe.utils import suggest_key


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a swiftprobe.yaml file and return all validation errors.

    Never raises; every problem is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in DEPTH_KEYS:
        if key in raw:
            errors.extend(_check_positive_int(raw[key], key, path_str))

    for key in GLOB_KEYS:
        if key in raw and not _is_string_list(raw[key]):
            errors.append(_type_error(path_str, key, "expected a list of strings"))

    if "report_podfile_only" in raw and not isinstance(raw["report_podfile_only"], bool):
        errors.append(_type_error(path_str, "report_podfile_only", "expected true or false"))

    if "version_command" in raw:
        command = raw["version_command"]
        if not _is_string_list(command):
            errors.append(_type_error(path_str, "version_command", "expected a list of strings"))
        elif not command or not command[0].strip():
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="version_command",
                    message="`version_command` must name an executable",
                )
            )

    if "version_timeout_seconds" in raw:
        timeout = raw["version_timeout_seconds"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            errors.append(_type_error(path_str, "version_timeout_seconds", "expected a positive number"))
        elif timeout <= 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="version_timeout_seconds",
                    message=f"`version_timeout_seconds` must be positive, got {timeout}",
                )
            )

    return errors


def _check_positive_int(value: Any, key: str, path_str: str) -> list[ValidationError]:
    if isinstance(value, bool) or not isinstance(value, int):
        return [_type_error(path_str, key, "expected a positive integer")]
    if value <= 0:
        return [
            ValidationError(
                code=CFG007,
                path=path_str,
                field=key,
                message=f"`{key}` must be a positive integer, got {value}",
            )
        ]
    return []


def _type_error(path_str: str, key: str, hint: str) -> ValidationError:
    return ValidationError(code=CFG005, path=path_str, field=key, message=f"invalid type for `{key}`", hint=hint)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)

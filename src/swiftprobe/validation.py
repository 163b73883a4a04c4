"""Preflight validation shared by every CLI command."""

from __future__ import annotations

from pathlib import Path

from swiftprobe.config import validate_config_file
from swiftprobe.constants.validation import CFG010
from swiftprobe.exceptions.validation import ValidationError, sort_errors


def preflight_validate(
    root: Path,
    config_path: Path | None = None,
    *,
    include_default_config: bool = True,
) -> list[ValidationError]:
    """Check the root directory and config file, returning errors in deterministic order.

    With ``include_default_config=False`` only an explicit *config_path* is
    validated. Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    errors: list[ValidationError] = []
    if config_path is not None or include_default_config:
        errors.extend(validate_config_file(root, config_path, config_explicit=config_path is not None))
    return sort_errors(errors)

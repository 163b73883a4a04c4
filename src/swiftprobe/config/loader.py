"""Config loading and normalization for swiftprobe."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from swiftprobe.config.model import ProbeConfig
from swiftprobe.constants.config import CONFIG_FILENAME, DEPTH_KEYS, GLOB_KEYS
from swiftprobe.constants.validation import ALLOWED_CONFIG_KEYS
from swiftprobe.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None, *, use_default_file: bool = True) -> ProbeConfig:
    """Load and validate config from ``swiftprobe.yaml`` or an explicit path.

    With ``use_default_file=False`` only an explicit ``config_path`` is read;
    otherwise defaults are returned.
    """
    root = root.resolve()
    if config_path is not None:
        path = config_path.resolve()
    elif use_default_file:
        path = root / CONFIG_FILENAME
    else:
        return ProbeConfig()

    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ProbeConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    defaults = ProbeConfig()
    depths = {key: _positive_int(raw.get(key, getattr(defaults, key)), key) for key in DEPTH_KEYS}
    globs = {key: tuple(_ensure_string_list(raw.get(key, list(getattr(defaults, key))), key)) for key in GLOB_KEYS}

    report_podfile_only = raw.get("report_podfile_only", defaults.report_podfile_only)
    if not isinstance(report_podfile_only, bool):
        raise ConfigError("report_podfile_only must be a boolean")

    version_command = _ensure_string_list(raw.get("version_command", list(defaults.version_command)), "version_command")
    if not version_command or not version_command[0].strip():
        raise ConfigError("version_command must name an executable")

    timeout = raw.get("version_timeout_seconds", defaults.version_timeout_seconds)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("version_timeout_seconds must be a positive number")

    logger.debug("Loaded config from %s", path)
    return ProbeConfig(
        report_podfile_only=report_podfile_only,
        version_command=tuple(version_command),
        version_timeout_seconds=float(timeout),
        **depths,
        **globs,
    )


def _positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)

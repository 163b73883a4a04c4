"""Swift toolchain version query."""

from __future__ import annotations

import logging
import shutil
import subprocess

from swiftprobe.constants.detection import DEFAULT_VERSION_COMMAND, DEFAULT_VERSION_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def query_toolchain_version(
    command: tuple[str, ...] = DEFAULT_VERSION_COMMAND,
    *,
    timeout: float = DEFAULT_VERSION_TIMEOUT_SECONDS,
) -> str | None:
    """Return the first line the version command prints, stderr included.

    Returns ``None`` when the executable is not on ``PATH``, cannot be run,
    times out, or prints nothing.
    """
    executable = shutil.which(command[0])
    if executable is None:
        logger.debug("Toolchain executable %r not found on PATH", command[0])
        return None

    try:
        completed = subprocess.run(
            [executable, *command[1:]],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.debug("Toolchain query %s timed out after %ss", command, timeout)
        return None
    except OSError as exc:
        logger.debug("Toolchain query %s failed: %s", command, exc)
        return None

    output = completed.stdout or ""
    lines = output.splitlines()
    if not lines or not lines[0].strip():
        return None
    return lines[0].rstrip()

from __future__ import annotations

import logging
import os
from pathlib import Path
import subprocess
import sys

from pgfplots.errors import OpenError


LOGGER = logging.getLogger(__name__)


def viewer_command(path: Path, *, platform: str | None = None) -> list[str] | None:
    """Command that opens ``path`` in the system's default viewer.

    Returns ``None`` on Windows, where ``os.startfile`` is used instead.
    """
    platform = sys.platform if platform is None else platform
    if platform == "darwin":
        return ["open", str(path)]
    if platform == "win32":
        return None
    return ["xdg-open", str(path)]


def open_file(path: str | Path) -> None:
    target = Path(path)
    if not target.exists():
        raise OpenError(f"file does not exist: {target}")
    command = viewer_command(target)
    LOGGER.debug("opening %s with %s", target, command or "os.startfile")
    try:
        if command is None:
            os.startfile(str(target))  # type: ignore[attr-defined]
        else:
            subprocess.run(command, check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        LOGGER.warning("could not open %s: %s", target, exc)
        raise OpenError(f"could not open {target}: {exc}") from exc

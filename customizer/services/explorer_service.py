"""Open the characters folder in the platform file browser."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import List

from customizer.core.config import get_settings

logger = logging.getLogger(__name__)


class ExplorerError(Exception):
    """Raised when the file browser could not be launched."""


def explorer_command(directory: Path, platform: str | None = None) -> List[str]:
    """Command line that opens directory on the given platform (default: current)."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["explorer", str(directory)]
    if platform == "darwin":
        return ["open", str(directory)]
    return ["xdg-open", str(directory)]


def open_explorer(directory: Path | None = None) -> List[str]:
    target = directory or get_settings().characters_dir
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Could not create %s due to %s", target, exc)
        raise ExplorerError(f"Could not create {target}: {exc}") from exc
    cmd = explorer_command(target)
    logger.info("Opening file explorer: %s", " ".join(cmd))
    try:
        subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        logger.error("Failed to open file explorer: %s", exc)
        raise ExplorerError(f"Failed to open file explorer: {exc}") from exc
    return cmd

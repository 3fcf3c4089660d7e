"""Logging bootstrap shared by the app factory and the scripts."""
from __future__ import annotations

import logging

from .config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Install a basic handler unless the host process already configured one."""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

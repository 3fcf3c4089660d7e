"""
Configuration helpers for the customizer backend.

Paths default to the locations the desktop bundle expects, relative to the
working directory, so routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    app_version: str
    characters_dir: Path
    template_path: Path
    catalog_path: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: str) -> Path:
        raw = (value or "").strip()
        return Path(raw or default)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        app_version=os.getenv("APP_VERSION", "0.1.0"),
        characters_dir=_path(os.getenv("CHARACTERS_DIR"), "characters"),
        template_path=_path(os.getenv("TEMPLATE_PATH"), "Fallback.json"),
        catalog_path=_path(os.getenv("CATALOG_PATH"), "catalog.db"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )

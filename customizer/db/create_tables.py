"""Utility script to create an empty catalog schema (development fixtures)."""
from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(path: Path | str) -> None:
    engine = get_engine(path, read_only=False)
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else "catalog.db"
    try:
        create_all(target)
        print(f"Catalog tables created in {target}.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc

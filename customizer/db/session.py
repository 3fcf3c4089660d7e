"""Engine/session helpers for the SQLite catalog."""
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
from urllib.parse import quote

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import NullPool

Base = declarative_base()


def catalog_uri(path: Path | str) -> str:
    """Read-only sqlite URI; mode=ro makes sqlite refuse to create a missing file."""
    return f"file:{quote(Path(path).as_posix(), safe='/:')}?mode=ro"


def get_engine(path: Path | str, *, read_only: bool = True) -> Engine:
    # The connection is built by hand so the path never goes through URL parsing.
    if read_only:
        uri = catalog_uri(path)

        def _connect() -> sqlite3.Connection:
            return sqlite3.connect(uri, uri=True)
    else:
        target = str(path)

        def _connect() -> sqlite3.Connection:
            return sqlite3.connect(target)

    # NullPool: the connection is closed as soon as the session releases it.
    return create_engine("sqlite://", creator=_connect, future=True, poolclass=NullPool)


@contextmanager
def catalog_session(path: Path | str) -> Iterator[Session]:
    engine = get_engine(path)
    session: Session = sessionmaker(bind=engine, autoflush=False, future=True)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()

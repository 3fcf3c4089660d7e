"""Database helpers (engine/session export)."""

from .session import Base, catalog_session, get_engine

__all__ = ["Base", "catalog_session", "get_engine"]

"""Read-only queries over the cosmetic options catalog."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Type, TypeVar

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.sql import Select

from customizer.db.models import EyeColorRow, ExtraRow, FacePaintRow, HairColorRow, HairRow
from customizer.db.session import catalog_session
from customizer.schemas import CatalogRecord, EyeColor, Extras, FacePaint, Hair, HairColor

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=CatalogRecord)


class CatalogError(Exception):
    """Base class for catalog failures."""


class CatalogUnavailableError(CatalogError):
    """Raised when the catalog file cannot be opened."""


class CatalogQueryError(CatalogError):
    """Raised when a query fails or a row does not fit its record type."""


class CatalogRepository:
    """Each call opens the catalog, runs one SELECT and closes it again."""

    def _fetch(self, path: Path | str, stmt: Select, record: Type[R]) -> List[R]:
        path = Path(path)
        if not path.is_file():
            logger.error("Catalog %s not found", path)
            raise CatalogUnavailableError(f"Catalog {path} not found")
        try:
            with catalog_session(path) as session:
                rows = session.execute(stmt).all()
        except OperationalError as exc:
            logger.error("Error querying catalog %s due to %s", path, exc)
            if "unable to open" in str(exc):
                raise CatalogUnavailableError(f"Catalog {path} cannot be opened") from exc
            raise CatalogQueryError(str(exc.orig or exc)) from exc
        except SQLAlchemyError as exc:
            logger.error("Error querying catalog %s due to %s", path, exc)
            raise CatalogQueryError(str(exc)) from exc
        try:
            return [record.model_validate(dict(row._mapping)) for row in rows]
        except ValidationError as exc:
            logger.error("Error mapping %s rows due to %s", record.__name__, exc)
            raise CatalogQueryError(f"Unexpected {record.__name__} row in catalog") from exc

    def list_eye_colors(self, path: Path | str) -> List[EyeColor]:
        stmt = select(EyeColorRow.name, EyeColorRow.color)
        return self._fetch(path, stmt, EyeColor)

    def list_hair_colors(self, path: Path | str) -> List[HairColor]:
        stmt = select(HairColorRow.name, HairColorRow.color)
        return self._fetch(path, stmt, HairColor)

    def list_facepaints(self, path: Path | str) -> List[FacePaint]:
        stmt = select(FacePaintRow.id, FacePaintRow.texture_alias)
        return self._fetch(path, stmt, FacePaint)

    def list_hairs(self, path: Path | str, gender: str) -> List[Hair]:
        stmt = select(HairRow.id, HairRow.addr, HairRow.name).where(HairRow.gender == gender)
        return self._fetch(path, stmt, Hair)

    def list_extras(self, path: Path | str, gender: str, species: str) -> List[Extras]:
        stmt = select(
            ExtraRow.id,
            ExtraRow.name,
            ExtraRow.species,
            ExtraRow.gender,
            ExtraRow.addr,
        ).where(ExtraRow.gender == gender, ExtraRow.species == species)
        return self._fetch(path, stmt, Extras)


_repo = CatalogRepository()

list_eye_colors = _repo.list_eye_colors
list_hair_colors = _repo.list_hair_colors
list_facepaints = _repo.list_facepaints
list_hairs = _repo.list_hairs
list_extras = _repo.list_extras

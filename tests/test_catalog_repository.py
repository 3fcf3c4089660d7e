"""
Smoke tests for the CatalogRepository against a temporary SQLite catalog.
"""
from __future__ import annotations

import sqlite3
import sys
from pathlib import Path

import pytest

# Make the customizer package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.orm import Session  # noqa: E402

from customizer.db import models  # noqa: E402
from customizer.db.create_tables import create_all  # noqa: E402
from customizer.db.session import get_engine  # noqa: E402
from customizer.repositories import catalog_repository  # noqa: E402
from customizer.repositories.catalog_repository import (  # noqa: E402
    CatalogQueryError,
    CatalogRepository,
    CatalogUnavailableError,
)
from customizer.schemas import EyeColor, Extras, Hair  # noqa: E402


@pytest.fixture()
def catalog(tmp_path):
    """Build a small catalog file and dispose the writer before the tests read it."""
    db_file = tmp_path / "catalog.db"
    create_all(db_file)
    engine = get_engine(db_file, read_only=False)
    try:
        with Session(engine) as session:
            session.add_all(
                [
                    models.EyeColorRow(name="Blue", color=3),
                    models.EyeColorRow(name="Amber", color=9),
                    models.HairColorRow(name="Black", color=1),
                    models.HairRow(id=1, addr="hair/m_short", name="Short", gender="male"),
                    models.HairRow(id=2, addr="hair/f_long", name="Long", gender="female"),
                    models.HairRow(id=3, addr="hair/f_bun", name="Bun", gender="female"),
                    models.FacePaintRow(id=1, texture_alias="tribal_01"),
                    models.ExtraRow(id=1, name="Wings", species="pixie", gender="female", addr="x/wings_f"),
                    models.ExtraRow(id=2, name="Beard", species="human", gender="male", addr="x/beard"),
                    models.ExtraRow(id=3, name="Wings", species="pixie", gender="male", addr="x/wings_m"),
                ]
            )
            session.commit()
    finally:
        engine.dispose()
    yield db_file


def test_seeded_eye_color_is_returned_exactly(tmp_path):
    db_file = tmp_path / "eyes.db"
    create_all(db_file)
    with sqlite3.connect(db_file) as conn:
        conn.execute("INSERT INTO Eye_Color (name, color) VALUES (?, ?)", ("Blue", 3))
    conn.close()

    assert CatalogRepository().list_eye_colors(db_file) == [EyeColor(name="Blue", color=3)]


def test_unfiltered_lists_follow_row_order(catalog):
    repo = CatalogRepository()
    assert [c.name for c in repo.list_eye_colors(catalog)] == ["Blue", "Amber"]
    assert repo.list_hair_colors(catalog)[0].color == 1
    facepaints = repo.list_facepaints(catalog)
    assert [(f.id, f.texture_alias) for f in facepaints] == [(1, "tribal_01")]


def test_hairs_filtered_by_gender(catalog):
    hairs = CatalogRepository().list_hairs(catalog, "female")
    assert hairs == [
        Hair(id=2, addr="hair/f_long", name="Long"),
        Hair(id=3, addr="hair/f_bun", name="Bun"),
    ]


def test_extras_filtered_by_gender_and_species(catalog):
    extras = catalog_repository.list_extras(catalog, "male", "pixie")
    assert extras == [Extras(id=3, name="Wings", species="pixie", gender="male", addr="x/wings_m")]


def test_filters_without_matches_return_empty_list(catalog):
    repo = CatalogRepository()
    assert repo.list_hairs(catalog, "other") == []
    assert repo.list_extras(catalog, "female", "orc") == []


def test_filter_values_are_bound_not_interpolated(catalog):
    assert CatalogRepository().list_hairs(catalog, "male' OR '1'='1") == []


def test_missing_catalog_is_not_created(tmp_path):
    missing = tmp_path / "nope.db"
    with pytest.raises(CatalogUnavailableError):
        CatalogRepository().list_eye_colors(missing)
    assert not missing.exists()


def test_missing_table_raises_query_error(tmp_path):
    db_file = tmp_path / "empty.db"
    sqlite3.connect(db_file).close()
    with pytest.raises(CatalogQueryError):
        CatalogRepository().list_facepaints(db_file)


def test_unmappable_row_raises_query_error(tmp_path):
    db_file = tmp_path / "bad.db"
    with sqlite3.connect(db_file) as conn:
        conn.execute("CREATE TABLE Hair_Color (name TEXT, color TEXT)")
        conn.execute("INSERT INTO Hair_Color VALUES ('Red', 'not-a-number')")
    conn.close()
    with pytest.raises(CatalogQueryError):
        CatalogRepository().list_hair_colors(db_file)


@pytest.mark.parametrize("folder", ["Bob#1", "what?", "50%25off", "My Games"])
def test_catalog_under_folder_with_uri_characters(tmp_path, folder):
    db_file = tmp_path / folder / "catalog.db"
    db_file.parent.mkdir()
    create_all(db_file)
    with sqlite3.connect(db_file) as conn:
        conn.execute("INSERT INTO Eye_Color (name, color) VALUES (?, ?)", ("Blue", 3))
    conn.close()

    assert CatalogRepository().list_eye_colors(db_file) == [EyeColor(name="Blue", color=3)]

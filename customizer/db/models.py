"""SQLAlchemy mappings of the catalog tables.

The catalog file is produced outside this project; these classes only mirror
the columns the application reads. Tables without a declared key in the
shipped file are mapped on their natural key.
"""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class EyeColorRow(Base):
    __tablename__ = "Eye_Color"

    name = Column(String, primary_key=True)
    color = Column(Integer, nullable=False)


class HairColorRow(Base):
    __tablename__ = "Hair_Color"

    name = Column(String, primary_key=True)
    color = Column(Integer, nullable=False)


class HairRow(Base):
    __tablename__ = "Hair"

    id = Column(Integer, primary_key=True)
    addr = Column(String, nullable=False)
    name = Column(String, nullable=False)
    gender = Column(String, nullable=False)


class FacePaintRow(Base):
    __tablename__ = "FacePaint"

    id = Column(Integer, primary_key=True)
    texture_alias = Column(String, nullable=False)


class ExtraRow(Base):
    __tablename__ = "extras"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    species = Column(String, nullable=False)
    gender = Column(String, nullable=False)
    addr = Column(String, nullable=False)

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


# --- catalog records ---
class CatalogRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)


class EyeColor(CatalogRecord):
    name: str
    color: int


class HairColor(CatalogRecord):
    name: str
    color: int


class Hair(CatalogRecord):
    id: int
    addr: str
    name: str


class FacePaint(CatalogRecord):
    id: int
    texture_alias: str


class Extras(CatalogRecord):
    id: int
    name: str
    species: str
    gender: str
    addr: str


# --- character requests/responses ---
class CharacterCreateIn(BaseModel):
    first_name: str = Field(min_length=1)
    surname: str = Field(min_length=1)


class CharacterCreateOut(BaseModel):
    first_name: str
    surname: str
    file: str
    created: bool


class CharacterListOut(BaseModel):
    items: List[str] = Field(default_factory=list)


class CharacterOut(BaseModel):
    first_name: str
    surname: str
    document: Dict[str, Any]


class GenderIn(BaseModel):
    gender: int = Field(ge=0, le=255)


class EyeColorIn(BaseModel):
    eye_color: int = Field(ge=0)


class HairIn(BaseModel):
    hair: str
    hair_color: int = Field(ge=0)


class SkintoneIn(BaseModel):
    skintone: str


class ExtrasIn(BaseModel):
    extra: str


class FacePaintIn(BaseModel):
    facepaint: str

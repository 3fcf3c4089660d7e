from __future__ import annotations

from pathlib import Path
from typing import List, NoReturn

from fastapi import APIRouter, HTTPException, Query, Request

from customizer.repositories.catalog_repository import (
    CatalogError,
    CatalogRepository,
    CatalogUnavailableError,
)
from customizer.schemas import EyeColor, Extras, FacePaint, Hair, HairColor

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _get_repository(request: Request) -> CatalogRepository:
    repo = getattr(getattr(request.app, "state", None), "catalog_repository", None)
    if not repo:
        raise RuntimeError("CatalogRepository not configured")
    return repo


def _catalog_path(request: Request) -> Path:
    return request.app.state.settings.catalog_path


def _raise_http(exc: CatalogError) -> NoReturn:
    if isinstance(exc, CatalogUnavailableError):
        raise HTTPException(503, str(exc)) from exc
    raise HTTPException(500, str(exc)) from exc


@router.get("/eye-colors", response_model=List[EyeColor])
def eye_colors(request: Request):
    try:
        return _get_repository(request).list_eye_colors(_catalog_path(request))
    except CatalogError as exc:
        _raise_http(exc)


@router.get("/hair-colors", response_model=List[HairColor])
def hair_colors(request: Request):
    try:
        return _get_repository(request).list_hair_colors(_catalog_path(request))
    except CatalogError as exc:
        _raise_http(exc)


@router.get("/hairs", response_model=List[Hair])
def hairs(request: Request, gender: str = Query(...)):
    try:
        return _get_repository(request).list_hairs(_catalog_path(request), gender)
    except CatalogError as exc:
        _raise_http(exc)


@router.get("/facepaints", response_model=List[FacePaint])
def facepaints(request: Request):
    try:
        return _get_repository(request).list_facepaints(_catalog_path(request))
    except CatalogError as exc:
        _raise_http(exc)


@router.get("/extras", response_model=List[Extras])
def extras(request: Request, gender: str = Query(...), species: str = Query(...)):
    try:
        return _get_repository(request).list_extras(_catalog_path(request), gender, species)
    except CatalogError as exc:
        _raise_http(exc)

from __future__ import annotations

from typing import NoReturn

from fastapi import APIRouter, HTTPException, Request

from customizer.domain.characters import normalize_name
from customizer.schemas import (
    CharacterCreateIn,
    CharacterCreateOut,
    CharacterListOut,
    CharacterOut,
    EyeColorIn,
    ExtrasIn,
    FacePaintIn,
    GenderIn,
    HairIn,
    SkintoneIn,
)
from customizer.services.character_service import (
    CharacterError,
    CharacterNotFoundError,
    CharacterService,
    InvalidCharacterNameError,
)

router = APIRouter(prefix="/characters", tags=["characters"])


def _get_character_service(request: Request) -> CharacterService:
    svc = getattr(getattr(request.app, "state", None), "character_service", None)
    if not svc:
        raise RuntimeError("CharacterService not configured")
    return svc


def _raise_http(exc: CharacterError) -> NoReturn:
    if isinstance(exc, InvalidCharacterNameError):
        raise HTTPException(400, str(exc)) from exc
    if isinstance(exc, CharacterNotFoundError):
        raise HTTPException(404, str(exc)) from exc
    raise HTTPException(500, str(exc)) from exc


def _out(first_name: str, surname: str, doc: dict) -> CharacterOut:
    return CharacterOut(
        first_name=normalize_name(first_name),
        surname=normalize_name(surname),
        document=doc,
    )


@router.post("", response_model=CharacterCreateOut)
def create_character(body: CharacterCreateIn, request: Request) -> CharacterCreateOut:
    svc = _get_character_service(request)
    try:
        result = svc.create(body.first_name, body.surname)
    except CharacterError as exc:
        _raise_http(exc)
    return CharacterCreateOut(
        first_name=normalize_name(body.first_name),
        surname=normalize_name(body.surname),
        file=result.path.name,
        created=result.created,
    )


@router.get("", response_model=CharacterListOut)
def list_characters(request: Request) -> CharacterListOut:
    return CharacterListOut(items=_get_character_service(request).list_characters())


@router.get("/{first_name}/{surname}", response_model=CharacterOut)
def get_character(first_name: str, surname: str, request: Request) -> CharacterOut:
    svc = _get_character_service(request)
    try:
        doc = svc.get(first_name, surname)
    except CharacterError as exc:
        _raise_http(exc)
    return _out(first_name, surname, doc)


@router.put("/{first_name}/{surname}/gender", response_model=CharacterOut)
def set_gender(first_name: str, surname: str, body: GenderIn, request: Request) -> CharacterOut:
    svc = _get_character_service(request)
    try:
        doc = svc.set_gender(first_name, surname, body.gender)
    except CharacterError as exc:
        _raise_http(exc)
    return _out(first_name, surname, doc)


@router.put("/{first_name}/{surname}/eyes", response_model=CharacterOut)
def set_eyes(first_name: str, surname: str, body: EyeColorIn, request: Request) -> CharacterOut:
    svc = _get_character_service(request)
    try:
        doc = svc.set_eye_color(first_name, surname, body.eye_color)
    except CharacterError as exc:
        _raise_http(exc)
    return _out(first_name, surname, doc)


@router.put("/{first_name}/{surname}/hair", response_model=CharacterOut)
def set_hair(first_name: str, surname: str, body: HairIn, request: Request) -> CharacterOut:
    svc = _get_character_service(request)
    try:
        doc = svc.set_hair(first_name, surname, body.hair, body.hair_color)
    except CharacterError as exc:
        _raise_http(exc)
    return _out(first_name, surname, doc)


@router.put("/{first_name}/{surname}/skintone", response_model=CharacterOut)
def set_skintone(first_name: str, surname: str, body: SkintoneIn, request: Request) -> CharacterOut:
    svc = _get_character_service(request)
    try:
        doc = svc.set_skintone(first_name, surname, body.skintone)
    except CharacterError as exc:
        _raise_http(exc)
    return _out(first_name, surname, doc)


@router.put("/{first_name}/{surname}/extras", response_model=CharacterOut)
def set_extras(first_name: str, surname: str, body: ExtrasIn, request: Request) -> CharacterOut:
    svc = _get_character_service(request)
    try:
        doc = svc.set_extras(first_name, surname, body.extra)
    except CharacterError as exc:
        _raise_http(exc)
    return _out(first_name, surname, doc)


@router.put("/{first_name}/{surname}/facepaint", response_model=CharacterOut)
def set_facepaint(first_name: str, surname: str, body: FacePaintIn, request: Request) -> CharacterOut:
    svc = _get_character_service(request)
    try:
        doc = svc.set_facepaint(first_name, surname, body.facepaint)
    except CharacterError as exc:
        _raise_http(exc)
    return _out(first_name, surname, doc)

"""Domain helpers for character identity and document fields."""
from __future__ import annotations

import re

MAX_NAME_LENGTH = 64
_FORBIDDEN = re.compile(r"[\\/:*?\"<>|\x00-\x1f]")

# Keys of the character document touched by the customization operations.
FIRST_NAME = "FirstName"
LAST_NAME = "LastName"
PLAYER_GUID = "PlayerGUID"
PLAYER_MODEL = "PlayerModel"
EYE_COLOR = "EyeColor"
PLAYER_HAIR = "PlayerHair"
HAIR_COLOR = "HairColor"
SKINTONE = "Skintone"
EXTRAS = "HumanBeardsPixieWings"
FACE_PAINT = "FacePaint"


def normalize_name(value: str | None) -> str:
    return (value or "").strip()


def is_valid_name(value: str | None) -> bool:
    """Return True when the name can safely become part of a file name."""
    if not value:
        return False
    if len(value) > MAX_NAME_LENGTH or ".." in value:
        return False
    return _FORBIDDEN.search(value) is None


def character_filename(first_name: str, surname: str) -> str:
    """File name of a character document: first name and surname joined."""
    return f"{first_name}{surname}.json"

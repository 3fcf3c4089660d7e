"""
Character profile use cases: creation from the template and per-field edits.

Every operation is a full read-modify-write cycle on one JSON document under
the configured characters directory.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping

from customizer.core.config import Settings, get_settings
from customizer.domain import characters as fields
from customizer.domain.characters import character_filename, is_valid_name, normalize_name
from customizer.repositories import json_storage

logger = logging.getLogger(__name__)


class CharacterError(Exception):
    """Base class for character profile failures."""


class InvalidCharacterNameError(CharacterError):
    """Raised when a first name or surname cannot be used as a file name."""


class CharacterNotFoundError(CharacterError):
    """Raised when editing a character that was never created."""


class CharacterFileCorruptError(CharacterError):
    """Raised when a character document is not a valid JSON object."""


class TemplateError(CharacterError):
    """Raised when the template document is missing or invalid."""


class CharacterWriteError(CharacterError):
    """Raised when a document could not be serialized or written."""


@dataclass
class CreateResult:
    path: Path
    created: bool


@dataclass
class CharacterService:
    """Reads and patches character documents."""

    settings: Settings = field(default_factory=get_settings)

    # -------------------------------------- helpers --------------------------------------
    @property
    def characters_dir(self) -> Path:
        return self.settings.characters_dir

    def _identity(self, first_name: str, surname: str) -> tuple[str, str]:
        first = normalize_name(first_name)
        last = normalize_name(surname)
        if not is_valid_name(first) or not is_valid_name(last):
            raise InvalidCharacterNameError(f"Invalid character name {first_name!r} {surname!r}")
        return first, last

    def path_for(self, first_name: str, surname: str) -> Path:
        first, last = self._identity(first_name, surname)
        return self.characters_dir / character_filename(first, last)

    def _read(self, path: Path) -> dict:
        try:
            return json_storage.load(path)
        except FileNotFoundError as exc:
            logger.error("Character file %s does not exist", path)
            raise CharacterNotFoundError(f"Character file {path.name} not found") from exc
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as exc:
            logger.error("Character file %s is not valid JSON: %s", path, exc)
            raise CharacterFileCorruptError(f"Character file {path.name} is corrupt") from exc
        except OSError as exc:
            logger.error("Could not read %s due to %s", path, exc)
            raise CharacterError(f"Could not read {path.name}: {exc}") from exc

    def _write(self, path: Path, doc: dict) -> None:
        try:
            json_storage.save(path, doc)
        except (TypeError, ValueError, OSError) as exc:
            logger.error("Operation failed due to %r", exc)
            raise CharacterWriteError(f"Could not write {path.name}: {exc}") from exc
        logger.info("Operation finished successfully")

    def _patch(self, first_name: str, surname: str, values: Mapping[str, Any]) -> dict:
        path = self.path_for(first_name, surname)
        with json_storage.locked(path):
            doc = self._read(path)
            doc.update(values)
            self._write(path, doc)
        return doc

    def _load_template(self) -> dict:
        template = self.settings.template_path
        try:
            return json_storage.load(template)
        except FileNotFoundError as exc:
            logger.error("Template %s is missing", template)
            raise TemplateError(f"Template {template} not found") from exc
        except (ValueError, OSError) as exc:
            logger.error("Template %s could not be loaded: %s", template, exc)
            raise TemplateError(f"Template {template} is invalid") from exc

    # -------------------------------------- use cases --------------------------------------
    def create(self, first_name: str, surname: str) -> CreateResult:
        """Seed a new character from the template unless the file already exists."""
        first, last = self._identity(first_name, surname)
        path = self.path_for(first, last)
        try:
            self.characters_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Could not create %s due to %s", self.characters_dir, exc)
            raise CharacterWriteError(f"Could not create {self.characters_dir}: {exc}") from exc

        with json_storage.locked(path):
            if path.is_file():
                logger.warning("Character file %s is already present, skipping creation step...", path.name)
                return CreateResult(path=path, created=False)
            logger.warning("Character file %s does not exist, creating...", path.name)
            doc = self._load_template()
            doc[fields.FIRST_NAME] = first
            doc[fields.LAST_NAME] = last
            self._write(path, doc)
        return CreateResult(path=path, created=True)

    def get(self, first_name: str, surname: str) -> dict:
        return self._read(self.path_for(first_name, surname))

    def list_characters(self) -> List[str]:
        if not self.characters_dir.is_dir():
            return []
        return sorted(p.stem for p in self.characters_dir.glob("*.json") if p.is_file())

    def set_gender(self, first_name: str, surname: str, gender: int) -> dict:
        logger.info("Setting GenderRace")
        value = int(gender)
        return self._patch(first_name, surname, {fields.PLAYER_GUID: value, fields.PLAYER_MODEL: value})

    def set_eye_color(self, first_name: str, surname: str, eye_color: int) -> dict:
        logger.info("Setting Eye Color")
        return self._patch(first_name, surname, {fields.EYE_COLOR: int(eye_color)})

    def set_hair(self, first_name: str, surname: str, hair: str, hair_color: int) -> dict:
        logger.info("Setting Hair")
        return self._patch(
            first_name,
            surname,
            {fields.PLAYER_HAIR: str(hair), fields.HAIR_COLOR: int(hair_color)},
        )

    def set_skintone(self, first_name: str, surname: str, skintone: str) -> dict:
        logger.info("Setting Skintone")
        return self._patch(first_name, surname, {fields.SKINTONE: str(skintone)})

    def set_extras(self, first_name: str, surname: str, extra: str) -> dict:
        logger.info("Setting Extras")
        return self._patch(first_name, surname, {fields.EXTRAS: str(extra)})

    def set_facepaint(self, first_name: str, surname: str, facepaint: str) -> dict:
        logger.info("Setting FacePaint")
        return self._patch(first_name, surname, {fields.FACE_PAINT: str(facepaint)})

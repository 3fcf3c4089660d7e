"""FastAPI application exposing the customizer operations to the GUI."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from customizer.core.config import Settings, get_settings
from customizer.core.logging_setup import configure_logging
from customizer.repositories.catalog_repository import CatalogRepository
from customizer.routers import catalog as catalog_router
from customizer.routers import characters as characters_router
from customizer.routers import explorer as explorer_router
from customizer.services.character_service import CharacterService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory for uvicorn (`uvicorn customizer.app:create_app --factory`) and the tests."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Character Customizer API", version=settings.app_version)
    app.state.settings = settings
    app.state.character_service = CharacterService(settings=settings)
    app.state.catalog_repository = CatalogRepository()

    app.include_router(characters_router.router)
    app.include_router(catalog_router.router)
    app.include_router(explorer_router.router)

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "version": settings.app_version,
            "characters_dir": str(settings.characters_dir),
            "template_present": settings.template_path.is_file(),
            "catalog_present": settings.catalog_path.is_file(),
        }

    logger.info(
        "Customizer API ready (characters=%s, catalog=%s)",
        settings.characters_dir,
        settings.catalog_path,
    )
    return app

"""Routers exposing the customizer operations to the GUI frontend."""

from . import catalog, characters, explorer

__all__ = ["catalog", "characters", "explorer"]

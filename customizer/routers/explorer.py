from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from customizer.services.explorer_service import ExplorerError, open_explorer

router = APIRouter(prefix="/explorer", tags=["explorer"])


@router.post("/open")
def explorer_open(request: Request):
    try:
        cmd = open_explorer(request.app.state.settings.characters_dir)
    except ExplorerError as exc:
        raise HTTPException(500, str(exc)) from exc
    return {"opened": True, "command": cmd}

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from services.dashboard import DashboardService, build_default_dashboard


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def get_dashboard() -> DashboardService:
    return build_default_dashboard()


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
async def ui_index(
    request: Request,
    dashboard: DashboardService = Depends(get_dashboard),
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {"deck": dashboard.snapshot()},
    )


@router.post("/ui/relays/{key}", name="ui_flip_relay")
async def ui_flip_relay(
    request: Request,
    key: str,
    dashboard: DashboardService = Depends(get_dashboard),
) -> RedirectResponse:
    try:
        dashboard.flip_relay(key)
    except KeyError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return RedirectResponse(request.url_for("ui_index"), status_code=status.HTTP_303_SEE_OTHER)


@router.post("/ui/mode", name="ui_flip_mode")
async def ui_flip_mode(
    request: Request,
    dashboard: DashboardService = Depends(get_dashboard),
) -> RedirectResponse:
    dashboard.flip_mode()
    return RedirectResponse(request.url_for("ui_index"), status_code=status.HTTP_303_SEE_OTHER)

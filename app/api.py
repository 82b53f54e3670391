"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas import DashboardSnapshot, ToggleView, TrendView
from services.dashboard import DashboardService, build_default_dashboard

router = APIRouter()


def get_dashboard() -> DashboardService:
    return build_default_dashboard()


@router.get(
    "/dashboard",
    response_model=DashboardSnapshot,
    summary="Full control deck snapshot.",
)
async def get_snapshot(
    dashboard: DashboardService = Depends(get_dashboard),
) -> DashboardSnapshot:
    return dashboard.snapshot()


@router.get(
    "/trend",
    response_model=TrendView,
    summary="Normalized voltage trend bars.",
)
async def get_trend(
    dashboard: DashboardService = Depends(get_dashboard),
) -> TrendView:
    return dashboard.trend()


@router.get(
    "/toggles",
    response_model=ToggleView,
    summary="Current relay flags and operating mode.",
)
async def get_toggles(
    dashboard: DashboardService = Depends(get_dashboard),
) -> ToggleView:
    return dashboard.toggles()


@router.post(
    "/relays/{key}/flip",
    response_model=ToggleView,
    summary="Negate a single relay flag.",
)
async def flip_relay(
    key: str,
    dashboard: DashboardService = Depends(get_dashboard),
) -> ToggleView:
    try:
        return dashboard.flip_relay(key)
    except KeyError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.post(
    "/mode/flip",
    response_model=ToggleView,
    summary="Switch between automatic and manual mode.",
)
async def flip_mode(
    dashboard: DashboardService = Depends(get_dashboard),
) -> ToggleView:
    return dashboard.flip_mode()


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /ui for the control deck."}

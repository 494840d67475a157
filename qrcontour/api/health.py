"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from qrcontour import __version__
from qrcontour.engine.registry import get_registry
from qrcontour.models.responses import HealthResponse, StyleInfo, StylesResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        styles_registered=get_registry().count,
    )


@router.get("/styles", response_model=StylesResponse)
async def styles() -> StylesResponse:
    return StylesResponse(
        styles=[StyleInfo(name=s.style.value, description=s.description) for s in get_registry().all()]
    )

"""POST /api/contour and /api/render: bitmask to path data or SVG.

Handlers are plain ``def`` so FastAPI runs the CPU-bound tracing in its
threadpool; every request builds its own grid and generator.
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from qrcontour.config import Settings
from qrcontour.dependencies import get_settings
from qrcontour.engine.bitmask import Bitmask
from qrcontour.engine.pipeline import compute_contour
from qrcontour.engine.registry import Style, UnsupportedStyleError
from qrcontour.engine.summary import summarize
from qrcontour.models.requests import ContourRequest, RenderRequest
from qrcontour.models.responses import ContourResponse, SummaryModel
from qrcontour.svg.serializer import render_svg

logger = logging.getLogger(__name__)

router = APIRouter()


def _load_grid(rows: list[str], settings: Settings) -> Bitmask:
    try:
        grid = Bitmask.from_text(rows)
    except ValueError as e:
        logger.warning("Rejected grid: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    if grid.width * grid.height > settings.max_grid_cells:
        logger.warning("Rejected %dx%d grid (limit %d cells)", grid.width, grid.height, settings.max_grid_cells)
        raise HTTPException(
            status_code=413,
            detail=f"Grid has {grid.width * grid.height} cells, limit is {settings.max_grid_cells}",
        )
    return grid


def _resolve_style(req: ContourRequest, settings: Settings) -> Style:
    try:
        return Style.parse(req.style or settings.default_style)
    except UnsupportedStyleError as e:
        logger.warning("Rejected style %r", req.style)
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/contour", response_model=ContourResponse)
def contour(req: ContourRequest, settings: Settings = Depends(get_settings)) -> ContourResponse:
    start = time.perf_counter()
    style = _resolve_style(req, settings)
    grid = _load_grid(req.rows, settings)
    margin = settings.default_margin if req.margin is None else req.margin

    result = compute_contour(grid, margin=margin, style=style, seed=req.seed)
    summary = summarize(result)

    elapsed = (time.perf_counter() - start) * 1000
    return ContourResponse(
        style=style.value,
        width=grid.width,
        height=grid.height,
        margin=margin,
        paths=result.as_dict(),
        summary=SummaryModel(**summary.as_dict()),
        processing_time_ms=round(elapsed, 3),
    )


@router.post("/render")
def render(req: RenderRequest, settings: Settings = Depends(get_settings)) -> Response:
    style = _resolve_style(req, settings)
    grid = _load_grid(req.rows, settings)
    margin = settings.default_margin if req.margin is None else req.margin

    result = compute_contour(grid, margin=margin, style=style, seed=req.seed)
    svg = render_svg(result, grid.width, grid.height, margin, req.title, req.attributes)
    return Response(content=svg, media_type="image/svg+xml")

"""Contour pipeline: markers, then the style handler, with timing logs."""

from __future__ import annotations

import logging
import time

import qrcontour.engine.styles  # noqa: F401  (registers style handlers)
from qrcontour.engine.alignment import build_alignment_markers
from qrcontour.engine.config import EngineConfig
from qrcontour.engine.context import ContourJob, ContourResult
from qrcontour.engine.prng import DeterministicGenerator
from qrcontour.engine.registry import Style, get_registry
from qrcontour.engine.tracer import GridLike

logger = logging.getLogger(__name__)

get_registry().verify()


def _check_margin(margin: int) -> int:
    if not isinstance(margin, int) or isinstance(margin, bool):
        raise ValueError(f"margin must be an integer, got {margin!r}")
    if margin < 0:
        raise ValueError(f"margin must not be negative, got {margin}")
    return margin


def compute_contour(
    grid: GridLike,
    margin: int = 1,
    style: Style | str = Style.BASIC,
    seed: int | None = None,
    config: EngineConfig | None = None,
) -> ContourResult:
    """Turn a bitmask into the four contour groups for ``style``.

    ``margin`` is added to every coordinate; the default of 1 leaves room for
    jitter and mosaic marks that reach slightly outside the grid. ``seed``
    drives jitter and mosaic rotation; the default seed makes repeated calls
    produce identical output.

    Raises UnsupportedStyleError for unknown styles, before any work is done.
    """
    spec = get_registry().get(style)
    margin = _check_margin(margin)
    config = config or EngineConfig()
    start = time.perf_counter()

    job = ContourJob(
        grid=grid,
        margin=margin,
        style=spec.style,
        prng=DeterministicGenerator(config.default_seed if seed is None else seed),
        config=config,
    )
    # Built for every style; skipped below the QR size threshold.
    job.result.alignment_outer, job.result.alignment_inner = build_alignment_markers(
        grid.width, grid.height, margin, config
    )
    t0 = time.perf_counter()
    spec.fn(job)
    logger.debug("  %s handler completed in %.1fms", spec.style.value, (time.perf_counter() - t0) * 1000)

    logger.info(
        "Contour %dx%d (%s): %d loops, %d random draws in %.1fms",
        grid.width,
        grid.height,
        spec.style.value,
        job.result.loop_count,
        job.prng.draws,
        (time.perf_counter() - start) * 1000,
    )
    return job.result

"""Style handlers: one per ``Style`` member.

Each handler receives a job whose alignment markers are already built and
fills in dots and shapes, then post-processes all four groups.

| Style          | Marks              | Post-processing               |
|----------------|--------------------|-------------------------------|
| basic          | traced outlines    | compaction                    |
| rounded        | traced outlines    | rounding (all groups), compaction |
| dots           | per-cell circles   | rounded markers, compaction   |
| mosaic         | per-cell squares   | compaction                    |
| jitter-*       | traced outlines    | jitter, no compaction         |
"""

from __future__ import annotations

from qrcontour.engine.cell_marks import build_cell_marks
from qrcontour.engine.compactor import compact
from qrcontour.engine.context import ContourJob, ContourResult
from qrcontour.engine.jitter import add_jitter
from qrcontour.engine.registry import Style, style_handler
from qrcontour.engine.rounding import round_corners
from qrcontour.engine.tracer import trace_boundaries


def _trace(job: ContourJob) -> None:
    job.result.dots, job.result.shapes = trace_boundaries(job.grid, job.margin, job.config)


def _compact_all(result: ContourResult) -> None:
    result.alignment_outer = compact(result.alignment_outer)
    result.alignment_inner = compact(result.alignment_inner)
    result.dots = compact(result.dots)
    result.shapes = compact(result.shapes)


def _round_markers(result: ContourResult) -> None:
    result.alignment_inner = round_corners(result.alignment_inner)
    result.alignment_outer = round_corners(result.alignment_outer)


@style_handler(Style.BASIC, description="Traced outlines with merged straight runs")
def basic(job: ContourJob) -> None:
    _trace(job)
    _compact_all(job.result)


@style_handler(Style.ROUNDED, description="Traced outlines with quarter-circle corners")
def rounded(job: ContourJob) -> None:
    _round_markers(job.result)
    _trace(job)
    job.result.shapes = round_corners(job.result.shapes)
    job.result.dots = round_corners(job.result.dots)
    _compact_all(job.result)


@style_handler(Style.DOTS, description="One circle per filled cell")
def dots(job: ContourJob) -> None:
    _round_markers(job.result)
    job.result.dots, job.result.shapes = build_cell_marks(
        job.grid, job.margin, mosaic=False, prng=job.prng, config=job.config
    )
    _compact_all(job.result)


@style_handler(Style.MOSAIC, description="One slightly rotated square per filled cell")
def mosaic(job: ContourJob) -> None:
    job.result.dots, job.result.shapes = build_cell_marks(
        job.grid, job.margin, mosaic=True, prng=job.prng, config=job.config
    )
    _compact_all(job.result)


def _jitter(job: ContourJob, amplitude: float) -> None:
    _trace(job)
    result = job.result
    # Shapes and dots differ per grid and go first, so the markers drawn
    # afterwards get grid-dependent noise as well.
    result.shapes = add_jitter(result.shapes, amplitude, job.prng)
    result.dots = add_jitter(result.dots, amplitude, job.prng)
    result.alignment_inner = add_jitter(result.alignment_inner, amplitude, job.prng)
    result.alignment_outer = add_jitter(result.alignment_outer, amplitude, job.prng)


@style_handler(Style.JITTER_LIGHT, description="Traced outlines with light hand-drawn noise")
def jitter_light(job: ContourJob) -> None:
    _jitter(job, job.config.jitter_light)


@style_handler(Style.JITTER_HEAVY, description="Traced outlines with heavy hand-drawn noise")
def jitter_heavy(job: ContourJob) -> None:
    _jitter(job, job.config.jitter_heavy)

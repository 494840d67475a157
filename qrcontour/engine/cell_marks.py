"""Per-cell marks for the dots and mosaic styles.

These styles draw every filled cell on its own instead of tracing connected
outlines. Marker zones are skipped; the finder markers stay solid because
per-cell markers there scan badly.
"""

from __future__ import annotations

import math

from qrcontour.engine.alignment import in_alignment_zone
from qrcontour.engine.config import EngineConfig
from qrcontour.engine.prng import DeterministicGenerator
from qrcontour.engine.segments import CLOSE, Arc, Loop, MoveTo, RelLine
from qrcontour.engine.tracer import GridLike


def circle_loop(x: int, y: int, margin: int) -> Loop:
    """Unit-diameter circle inscribed in cell (x, y), starting at its top."""
    return [
        MoveTo(x + margin + 0.5, y + margin),
        Arc(1, 0.5, 0.5),
        Arc(1, -0.5, 0.5),
        Arc(1, -0.5, -0.5),
        Arc(1, 0.5, -0.5),
        CLOSE,
    ]


def tilted_square_loop(
    x: int,
    y: int,
    margin: int,
    angle: float,
    size: float = 0.9,
    digits: int | None = 3,
) -> Loop:
    """Square of edge ``size`` rotated by ``angle`` radians inside cell (x, y)."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    inset = (1 - size) / 2
    # Cell centre, shifted to the rotated top-left corner
    left = x + margin + 0.5 + inset - 0.5 * cos_a + 0.5 * sin_a
    top = y + margin + 0.5 + inset + 0.5 * cos_a - 0.5 * sin_a - 1
    along = (size * cos_a, size * sin_a)
    return [
        MoveTo(left, top, digits),
        RelLine(along[0], along[1], digits),
        RelLine(-along[1], along[0], digits),
        RelLine(-along[0], -along[1], digits),
        RelLine(along[1], -along[0], digits),
        CLOSE,
    ]


def is_isolated(grid: GridLike, x: int, y: int) -> bool:
    return not (
        grid.get(x - 1, y) or grid.get(x + 1, y) or grid.get(x, y - 1) or grid.get(x, y + 1)
    )


def build_cell_marks(
    grid: GridLike,
    margin: int,
    mosaic: bool,
    prng: DeterministicGenerator,
    config: EngineConfig | None = None,
) -> tuple[list[Loop], list[Loop]]:
    """Return (dots, shapes) with one mark per filled cell.

    In mosaic mode the generator is drawn once per filled cell in row-major
    order, so a cell's angle depends on how many filled cells precede it.
    """
    config = config or EngineConfig()
    dots: list[Loop] = []
    shapes: list[Loop] = []
    for y in range(grid.height):
        for x in range(grid.width):
            if in_alignment_zone(x, y, grid.width, grid.height, margin, config):
                continue
            if not grid.get(x, y):
                continue
            if mosaic:
                angle = prng.symmetric(config.mosaic_max_angle)
                loop = tilted_square_loop(
                    x, y, margin, angle, config.mosaic_size, config.mosaic_precision
                )
            else:
                loop = circle_loop(x, y, margin)
            if is_isolated(grid, x, y):
                dots.append(loop)
            else:
                shapes.append(loop)
    return dots, shapes

"""Finder (alignment) markers at three corners of QR-sized grids.

The markers are built from fixed geometry regardless of the cell values, so
they stay solid in every style. The generic tracer and the cell-mark builder
skip the marker zones so nothing is drawn twice.
"""

from __future__ import annotations

from qrcontour.engine.config import EngineConfig
from qrcontour.engine.segments import CLOSE, Axis, Hop, Loop, MoveTo

_DEFAULT_CONFIG = EngineConfig()


def has_alignment_markers(width: int, height: int, config: EngineConfig = _DEFAULT_CONFIG) -> bool:
    return width > config.alignment_min_size and height > config.alignment_min_size


def in_alignment_zone(
    x: int,
    y: int,
    width: int,
    height: int,
    margin: int,
    config: EngineConfig = _DEFAULT_CONFIG,
) -> bool:
    """True if (x, y) lies in a marker zone (top-left, bottom-left, top-right).

    Used with both cell and vertex coordinates. The bounds include the margin,
    which widens the zones by ``margin`` cells toward the grid interior.
    """
    if not has_alignment_markers(width, height, config):
        return False
    size = config.marker_size
    near_left = x < size + margin
    near_top = y < size + margin
    return (
        (near_left and near_top)
        or (near_left and y > height - margin - size)
        or (x > width - margin - size and near_top)
    )


def marker_offsets(width: int, height: int, margin: int, size: int = 7) -> list[tuple[int, int]]:
    """Top-left corners of the three markers, margin included."""
    return [
        (margin, margin),
        (width + margin - size, margin),
        (margin, height + margin - size),
    ]


def square_loop(x: int, y: int, size: int, first: Axis = Axis.H) -> Loop:
    """Unit-hop outline of a size x size square starting at (x, y).

    ``first=Axis.H`` walks clockwise (h, v, -h, -v); ``Axis.V`` walks the
    opposite way, which cuts a hole when combined with an enclosing outline.
    """
    second = Axis.V if first is Axis.H else Axis.H
    loop: Loop = [MoveTo(x, y)]
    for axis, sign in ((first, 1), (second, 1), (first, -1), (second, -1)):
        loop.extend(Hop(axis, sign) for _ in range(size))
    loop.append(CLOSE)
    return loop


def build_alignment_markers(
    width: int,
    height: int,
    margin: int,
    config: EngineConfig = _DEFAULT_CONFIG,
) -> tuple[list[Loop], list[Loop]]:
    """Return (outer, inner) marker loops; both empty for small grids.

    Each marker contributes two outer loops (the 7x7 outline and the 5x5
    counter-wound cutout) and one inner 3x3 square.
    """
    outer: list[Loop] = []
    inner: list[Loop] = []
    if not has_alignment_markers(width, height, config):
        return outer, inner

    size = config.marker_size
    for ox, oy in marker_offsets(width, height, margin, size):
        outer.append(square_loop(ox, oy, size, Axis.H))
        outer.append(square_loop(ox + 1, oy + 1, size - 2, Axis.V))
        inner.append(square_loop(ox + 2, oy + 2, size - 4, Axis.H))
    return outer, inner

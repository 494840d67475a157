"""Leaf-node geometry helpers. No engine imports beyond the segment model."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from qrcontour.engine.segments import Arc, Hop, LineTo, Loop, MoveTo, RelLine


def loop_vertices(loop: Loop) -> NDArray[np.float64]:
    """Replay a loop and return the endpoint of every drawing segment.

    The first row is the ``MoveTo`` point. Arcs contribute only their
    endpoints, which is enough for orientation and closure checks.
    """
    points: list[tuple[float, float]] = []
    x = y = 0.0
    for seg in loop:
        if isinstance(seg, MoveTo):
            x, y = seg.x, seg.y
        elif isinstance(seg, (Hop, Arc, RelLine)):
            x, y = x + seg.dx, y + seg.dy
        elif isinstance(seg, LineTo):
            x, y = seg.x, seg.y
        else:
            continue
        points.append((x, y))
    return np.array(points, dtype=np.float64).reshape(-1, 2)


def is_closed(loop: Loop, tolerance: float = 1e-9) -> bool:
    """True if replaying the loop ends where it started."""
    pts = loop_vertices(loop)
    if len(pts) < 2:
        return False
    return bool(np.all(np.abs(pts[-1] - pts[0]) <= tolerance))


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over a closed ring (first point not repeated).

    Positive for loops that run clockwise on screen (y down), i.e. outlines
    with the filled area on their right.
    """
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))

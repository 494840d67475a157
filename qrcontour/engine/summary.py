"""Contour summary: counts, orientation and extent of a computed result."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from shapely.geometry import LinearRing

from qrcontour.engine.context import ContourResult
from qrcontour.engine.segments import Arc
from qrcontour.svg.parser import path_bounds
from qrcontour.utils.geometry import loop_vertices, signed_area


@dataclass
class ContourSummary:
    loops: dict[str, int] = field(default_factory=dict)
    segments: dict[str, int] = field(default_factory=dict)
    # Loops with filled area on their right (outer boundaries)
    outlines: int = 0
    # Loops running the other way (holes)
    holes: int = 0
    # Net enclosed area; None when curved segments make the polygon inexact
    filled_area: float | None = None
    # (xmin, ymin, xmax, ymax) of all path data
    bounds: tuple[float, float, float, float] | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize(result: ContourResult) -> ContourSummary:
    summary = ContourSummary()
    area = 0.0
    curved = False
    bounds = []

    for category, loops in result.items():
        summary.loops[category] = len(loops)
        summary.segments[category] = sum(len(loop) for loop in loops)
        for loop in loops:
            pts = loop_vertices(loop)
            if len(pts) < 4:
                continue
            # Shapely measures in y-up space, where screen-clockwise loops are CCW
            if LinearRing(pts).is_ccw:
                summary.outlines += 1
            else:
                summary.holes += 1
            curved = curved or any(isinstance(seg, Arc) for seg in loop)
            area += signed_area(pts)
        category_bounds = path_bounds(result.path_data(category)) if loops else None
        if category_bounds is not None:
            bounds.append(category_bounds)

    summary.filled_area = None if curved else round(area, 6)
    if bounds:
        summary.bounds = (
            min(b[0] for b in bounds),
            min(b[1] for b in bounds),
            max(b[2] for b in bounds),
            max(b[3] for b in bounds),
        )
    return summary

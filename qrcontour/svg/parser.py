"""Path-data reader: facade over svgpathtools.

Reads emitted ``d`` strings back into svgpathtools paths, one per loop, for
bounds and closure checks.
"""

from __future__ import annotations

import logging
import re

from svgpathtools import Path, parse_path

logger = logging.getLogger(__name__)

# Every loop starts with an absolute move
_SUBPATH_RE = re.compile(r"(?=M)")


def parse_path_data(d: str) -> list[Path]:
    """Split path data at each ``M`` and parse every loop separately."""
    paths: list[Path] = []
    for chunk in _SUBPATH_RE.split(d):
        chunk = chunk.strip()
        if not chunk:
            continue
        paths.append(parse_path(chunk))
    return paths


def path_bounds(d: str) -> tuple[float, float, float, float] | None:
    """(xmin, ymin, xmax, ymax) over all loops, or None for empty data."""
    xmins, ymins, xmaxs, ymaxs = [], [], [], []
    for path in parse_path_data(d):
        if len(path) == 0:
            logger.debug("Skipping empty sub-path in bounds")
            continue
        xmin, xmax, ymin, ymax = path.bbox()
        xmins.append(xmin)
        xmaxs.append(xmax)
        ymins.append(ymin)
        ymaxs.append(ymax)
    if not xmins:
        return None
    return (float(min(xmins)), float(min(ymins)), float(max(xmaxs)), float(max(ymaxs)))

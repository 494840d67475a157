"""Engine configuration: geometry constants and style tunables."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Constants shared by the tracing and styling stages."""

    # Alignment markers are only drawn when both dimensions exceed this.
    # Smaller bitmasks are assumed not to be QR codes.
    alignment_min_size: int = 16
    # Edge length of a finder marker, in cells
    marker_size: int = 7

    # Jitter amplitude per style, in grid units. Derived experimentally;
    # larger values start to hurt scanning compatibility.
    jitter_light: float = 0.07
    jitter_heavy: float = 0.15

    # Mosaic squares: edge length relative to a cell, max rotation in radians
    mosaic_size: float = 0.9
    mosaic_max_angle: float = math.pi * 0.03
    # Significant digits for mosaic coordinates
    mosaic_precision: int = 3

    # Generator seed used when the caller does not supply one
    default_seed: int = 1

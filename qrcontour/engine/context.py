"""ContourResult: the four loop groups produced by one contour computation.

The alignment markers, isolated dots and all larger shapes are kept apart so
a renderer can color them independently. Each group renders as one path.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from qrcontour.engine.config import EngineConfig
from qrcontour.engine.prng import DeterministicGenerator
from qrcontour.engine.segments import Loop, path_data

if TYPE_CHECKING:
    from qrcontour.engine.registry import Style
    from qrcontour.engine.tracer import GridLike

# Render order, outermost marker ring first
CATEGORIES = ("alignment_outer", "alignment_inner", "dots", "shapes")


@dataclass
class ContourResult:
    """Loops per category; coordinates already include the margin."""

    # 7x7 and 5x5 rings of the three finder markers
    alignment_outer: list[Loop] = field(default_factory=list)
    # 3x3 centres of the finder markers
    alignment_inner: list[Loop] = field(default_factory=list)
    # Isolated single cells
    dots: list[Loop] = field(default_factory=list)
    # Everything else
    shapes: list[Loop] = field(default_factory=list)

    def loops(self, category: str) -> list[Loop]:
        if category not in CATEGORIES:
            raise KeyError(f"Unknown contour category: {category}")
        return getattr(self, category)

    def items(self) -> Iterator[tuple[str, list[Loop]]]:
        for category in CATEGORIES:
            yield category, getattr(self, category)

    def path_data(self, category: str) -> str:
        return path_data(self.loops(category))

    def as_dict(self) -> dict[str, str]:
        """Path data per category, in render order."""
        return {category: path_data(loops) for category, loops in self.items()}

    @property
    def loop_count(self) -> int:
        return sum(len(loops) for _, loops in self.items())

    @property
    def is_empty(self) -> bool:
        return self.loop_count == 0


@dataclass
class ContourJob:
    """Mutable state handed to a style handler for one computation."""

    grid: GridLike
    margin: int
    style: Style
    # One stream per computation; handlers draw from it in a fixed order
    prng: DeterministicGenerator
    config: EngineConfig = field(default_factory=EngineConfig)
    result: ContourResult = field(default_factory=ContourResult)

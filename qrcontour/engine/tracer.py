"""Boundary tracer: walks the edges between filled and unfilled cells into loops.

Two passes:

1. Direction map. Every lattice vertex sits between four cells (NW, NE, SW,
   SE), read as a 4-bit pattern. A transition table keyed by the pattern and
   the heading on which a boundary arrives gives the heading on which it
   leaves. Filled cells always stay on the right-hand side of travel, so
   outlines run clockwise (on screen) and holes counter-clockwise. Saddle
   vertices, where only diagonally opposite cells are filled, carry two
   independent entries.
2. Loop extraction. Vertices are scanned row-major; each pending entry starts
   a walk that consumes entries and emits one unit hop per step until it
   returns to an already consumed entry.
"""

from __future__ import annotations

import enum
import logging
from typing import Protocol

import numpy as np
from numpy.typing import NDArray

from qrcontour.engine.alignment import in_alignment_zone
from qrcontour.engine.config import EngineConfig
from qrcontour.engine.segments import CLOSE, Axis, Hop, Loop, MoveTo

logger = logging.getLogger(__name__)


class GridLike(Protocol):
    width: int
    height: int

    def get(self, x: int, y: int) -> bool: ...


class TracingError(RuntimeError):
    """The direction map is inconsistent. Always a defect, never retried."""


class Direction(enum.IntEnum):
    N = 0
    E = 1
    S = 2
    W = 3

    @property
    def step(self) -> tuple[int, int]:
        return _STEPS[self]

    def right(self) -> Direction:
        return Direction((self + 1) % 4)

    def left(self) -> Direction:
        return Direction((self + 3) % 4)


# Screen coordinates: y grows downward
_STEPS = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}

# Neighbourhood bits of the cells around a vertex
NW, NE, SW, SE = 1, 2, 4, 8

# Arrival heading -> (cell that is filled, cell that is empty) along the edge
# just travelled. Filled is on the right of travel.
_ARRIVAL = {
    Direction.E: (SW, NW),
    Direction.S: (NW, NE),
    Direction.W: (NE, SE),
    Direction.N: (SE, SW),
}

# Heading -> (cell ahead on the right, cell ahead on the left)
_AHEAD = {
    Direction.E: (SE, NE),
    Direction.S: (SW, SE),
    Direction.W: (NW, SW),
    Direction.N: (NE, NW),
}

_NO_EXIT = -1


def _exit_heading(pattern: int, heading: Direction) -> Direction:
    right, left = _AHEAD[heading]
    if pattern & right and not pattern & left:
        return heading
    if not pattern & right:
        return heading.right()
    return heading.left()


def _build_transition_table() -> NDArray[np.int8]:
    """table[pattern, arrival] = exit heading, or -1 where no boundary arrives."""
    table = np.full((16, 4), _NO_EXIT, dtype=np.int8)
    for pattern in range(16):
        for heading in Direction:
            filled, empty = _ARRIVAL[heading]
            if pattern & filled and not pattern & empty:
                table[pattern, heading] = _exit_heading(pattern, heading)
    return table


TRANSITIONS = _build_transition_table()


def neighbourhood_patterns(grid: GridLike) -> NDArray[np.uint8]:
    """4-bit cell pattern for every vertex, shape (height + 1, width + 1).

    Reads one cell beyond each edge; the grid reports those as unfilled.
    """
    cells = np.array(
        [[grid.get(x, y) for x in range(-1, grid.width + 1)] for y in range(-1, grid.height + 1)],
        dtype=np.uint8,
    )
    return (
        cells[:-1, :-1] * NW
        + cells[:-1, 1:] * NE
        + cells[1:, :-1] * SW
        + cells[1:, 1:] * SE
    ).astype(np.uint8)


def boundary_edge_count(grid: GridLike) -> int:
    """Number of unit edges separating a filled cell from an unfilled one."""
    cells = np.array(
        [[grid.get(x, y) for x in range(-1, grid.width + 1)] for y in range(-1, grid.height + 1)],
        dtype=np.bool_,
    )
    horizontal = np.count_nonzero(cells[:, 1:] != cells[:, :-1])
    vertical = np.count_nonzero(cells[1:, :] != cells[:-1, :])
    return int(horizontal + vertical)


class BoundaryTracer:
    """Traces one grid into dot and shape loops."""

    def __init__(self, grid: GridLike, margin: int = 1, config: EngineConfig | None = None) -> None:
        self.grid = grid
        self.margin = margin
        self.config = config or EngineConfig()
        # exits[y, x, arrival] = exit heading; one slot per arrival heading
        self.exits: NDArray[np.int8] = TRANSITIONS[neighbourhood_patterns(grid)]
        self.pending: NDArray[np.bool_] = self.exits != _NO_EXIT

    def entries(self, x: int, y: int) -> dict[Direction, Direction]:
        """Direction entries recorded at a vertex, consumed or not."""
        return {
            heading: Direction(int(self.exits[y, x, heading]))
            for heading in Direction
            if self.exits[y, x, heading] != _NO_EXIT
        }

    def trace(self) -> tuple[list[Loop], list[Loop]]:
        """Return (dots, shapes). Consumes the direction map; call once."""
        dots: list[Loop] = []
        shapes: list[Loop] = []
        width, height = self.grid.width, self.grid.height

        for y, x in np.argwhere(self.pending.any(axis=2)):
            x, y = int(x), int(y)
            if in_alignment_zone(x, y, width, height, self.margin, self.config):
                continue
            waiting = np.flatnonzero(self.pending[y, x])
            if waiting.size == 0:
                continue
            loop = self._close(x, y, self._walk(x, y, Direction(int(waiting[0]))))
            if loop is None:
                continue
            if is_dot_loop(loop):
                dots.append(loop)
            else:
                shapes.append(loop)

        logger.debug("Traced %d dots and %d shapes", len(dots), len(shapes))
        return dots, shapes

    def _walk(self, x: int, y: int, heading: Direction) -> list[Hop]:
        steps: list[Hop] = []
        max_x, max_y = self.grid.width, self.grid.height
        while self.pending[y, x, heading]:
            self.pending[y, x, heading] = False
            heading = Direction(int(self.exits[y, x, heading]))
            dx, dy = heading.step
            steps.append(Hop(Axis.H, dx) if dx else Hop(Axis.V, dy))
            x, y = x + dx, y + dy
            if not (0 <= x <= max_x and 0 <= y <= max_y) or self.exits[y, x, heading] == _NO_EXIT:
                raise TracingError(
                    f"Boundary walk reached vertex ({x}, {y}) heading {heading.name} "
                    "without a matching entry"
                )
        return steps

    def _close(self, x: int, y: int, steps: list[Hop]) -> Loop | None:
        loop: Loop = [MoveTo(x + self.margin, y + self.margin), *steps]
        if len(loop) <= 2:
            return None
        # An odd hop count means the walk retraced its opening hop
        if len(loop) % 2 == 0:
            loop.pop()
        loop.append(CLOSE)
        return loop


def is_dot_loop(loop: Loop) -> bool:
    """A single isolated cell: four hops, opening along the top edge."""
    steps = [seg for seg in loop if isinstance(seg, Hop)]
    return len(steps) == 4 and steps[0].axis is Axis.H


def trace_boundaries(
    grid: GridLike,
    margin: int = 1,
    config: EngineConfig | None = None,
) -> tuple[list[Loop], list[Loop]]:
    """Trace ``grid`` and return (dots, shapes)."""
    return BoundaryTracer(grid, margin, config).trace()

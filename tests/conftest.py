"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from qrcontour.engine.bitmask import Bitmask


# Small grids, X = filled

EMPTY_3X3 = """
...
...
...
"""

CENTER_3X3 = """
...
.X.
...
"""

BLOCK_4X4 = """
....
.XX.
.XX.
....
"""

RING_3X3 = """
XXX
X.X
XXX
"""

SADDLE_2X2 = """
X.
.X
"""

L_SHAPE = """
X...
X...
XXX.
....
"""


def grid_from(text: str) -> Bitmask:
    return Bitmask.from_text(text)


def qr_sized(width: int = 20, height: int = 20, cells: tuple[tuple[int, int], ...] = ()) -> Bitmask:
    """A grid large enough for finder markers, with the given cells filled."""
    grid = Bitmask(width, height)
    for x, y in cells:
        grid.set(x, y, True)
    return grid


def random_grid(size: int = 12, seed: int = 7, density: float = 0.5) -> Bitmask:
    rng = np.random.default_rng(seed)
    return Bitmask.from_array(rng.random((size, size)) < density)


@pytest.fixture
def center_grid() -> Bitmask:
    return grid_from(CENTER_3X3)


@pytest.fixture
def ring_grid() -> Bitmask:
    return grid_from(RING_3X3)


@pytest.fixture
def saddle_grid() -> Bitmask:
    return grid_from(SADDLE_2X2)


@pytest.fixture
def block_grid() -> Bitmask:
    return grid_from(BLOCK_4X4)

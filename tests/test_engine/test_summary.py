"""Tests for contour summaries."""

from __future__ import annotations

import pytest

from qrcontour.engine.bitmask import Bitmask
from qrcontour.engine.context import ContourResult
from qrcontour.engine.pipeline import compute_contour
from qrcontour.engine.summary import summarize
from tests.conftest import RING_3X3, grid_from, random_grid


def test_empty_result():
    summary = summarize(ContourResult())
    assert summary.outlines == 0
    assert summary.holes == 0
    assert summary.filled_area == 0.0
    assert summary.bounds is None


def test_ring_has_one_hole():
    summary = summarize(compute_contour(grid_from(RING_3X3), margin=0))
    assert summary.outlines == 1
    assert summary.holes == 1
    assert summary.filled_area == 8.0
    assert summary.bounds == (0.0, 0.0, 3.0, 3.0)
    assert summary.loops["shapes"] == 2


def test_markers():
    summary = summarize(compute_contour(Bitmask(20, 20)))
    assert summary.outlines == 6
    assert summary.holes == 3
    # Each marker: 7x7 ring minus 5x5 cutout, plus the 3x3 centre
    assert summary.filled_area == 3 * (49 - 25 + 9)
    assert summary.bounds == (1.0, 1.0, 21.0, 21.0)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_area_matches_filled_cells(seed):
    grid = random_grid(size=12, seed=seed)
    summary = summarize(compute_contour(grid))
    assert summary.filled_area == grid.count()


def test_curved_styles_have_no_exact_area(center_grid):
    summary = summarize(compute_contour(center_grid, style="rounded"))
    assert summary.filled_area is None
    assert summary.outlines == 1
    assert summary.bounds == pytest.approx((2.0, 2.0, 3.0, 3.0))


def test_as_dict(center_grid):
    data = summarize(compute_contour(center_grid)).as_dict()
    assert data["loops"] == {"alignment_outer": 0, "alignment_inner": 0, "dots": 1, "shapes": 0}
    assert data["segments"]["dots"] == 6
    assert data["filled_area"] == 1.0

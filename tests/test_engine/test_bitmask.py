"""Tests for the Bitmask grid."""

from __future__ import annotations

import numpy as np
import pytest

from qrcontour.engine.bitmask import Bitmask
from tests.conftest import CENTER_3X3, grid_from


class TestAccess:
    def test_new_grid_is_empty(self):
        grid = Bitmask(4, 3)
        assert grid.width == 4
        assert grid.height == 3
        assert grid.count() == 0

    def test_set_and_get(self):
        grid = Bitmask(3, 3)
        grid.set(2, 1, True)
        assert grid.get(2, 1) is True
        assert grid.get(1, 2) is False

    def test_out_of_range_reads_are_unfilled(self):
        grid = Bitmask(2, 2)
        grid.wipe(True)
        assert grid.get(-1, 0) is False
        assert grid.get(0, -1) is False
        assert grid.get(2, 0) is False
        assert grid.get(0, 2) is False

    def test_out_of_range_writes_fail(self):
        grid = Bitmask(2, 2)
        with pytest.raises(IndexError):
            grid.set(2, 0, True)
        with pytest.raises(IndexError):
            grid.set(0, -1, True)

    def test_non_integer_coordinates_fail(self):
        grid = Bitmask(2, 2)
        with pytest.raises(TypeError):
            grid.get(0.5, 0)
        with pytest.raises(TypeError):
            grid.set(0, 1.0, True)

    def test_numpy_integers_are_accepted(self):
        grid = Bitmask(2, 2)
        grid.set(np.int64(1), np.int32(1), True)
        assert grid.get(np.int64(1), np.int64(1))

    def test_bad_dimensions(self):
        with pytest.raises(ValueError):
            Bitmask(0, 3)
        with pytest.raises(TypeError):
            Bitmask(2.5, 3)


def test_wipe_repeats_pattern():
    grid = Bitmask(3, 3)
    grid.wipe(True, False)
    # Odd width: alternating values form a checkerboard
    assert grid.to_text() == "X.X\n.X.\nX.X"
    grid.wipe(False)
    assert grid.count() == 0


def test_wipe_needs_a_value():
    with pytest.raises(ValueError):
        Bitmask(2, 2).wipe()


def test_text_round_trip():
    grid = grid_from(CENTER_3X3)
    assert grid.width == 3
    assert grid.height == 3
    assert grid.get(1, 1)
    assert grid.count() == 1
    assert grid.to_text() == "...\n.X.\n..."


def test_from_text_accepts_alternative_characters():
    assert Bitmask.from_text(["#0", "01"]) == Bitmask.from_text("X.\n.X")


def test_from_text_rejects_unknown_characters():
    with pytest.raises(ValueError, match="unexpected character"):
        Bitmask.from_text("X?\n..")


def test_ragged_rows_rejected():
    with pytest.raises(ValueError, match="row 1"):
        Bitmask.from_rows([[1, 0, 1], [1, 0]])


def test_from_array_is_row_major():
    grid = Bitmask.from_array(np.array([[0, 1, 0], [0, 0, 0]]))
    assert grid.width == 3
    assert grid.height == 2
    assert grid.get(1, 0)
    assert grid.array.shape == (2, 3)


def test_array_is_a_copy():
    grid = Bitmask(2, 2)
    cells = grid.array
    cells[0, 0] = True
    assert not grid.get(0, 0)

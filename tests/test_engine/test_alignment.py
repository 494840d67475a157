"""Tests for finder marker geometry and zones."""

from __future__ import annotations

import pytest

from qrcontour.engine.alignment import (
    build_alignment_markers,
    has_alignment_markers,
    in_alignment_zone,
    marker_offsets,
    square_loop,
)
from qrcontour.engine.compactor import compact
from qrcontour.engine.config import EngineConfig
from qrcontour.engine.segments import Axis, hop_length, loop_text
from qrcontour.utils.geometry import is_closed, loop_vertices, signed_area


@pytest.mark.parametrize(
    "width, height, expected",
    [(16, 16, False), (17, 17, True), (17, 16, False), (16, 30, False), (21, 21, True)],
)
def test_marker_threshold(width, height, expected):
    assert has_alignment_markers(width, height) is expected


def test_threshold_is_configurable():
    config = EngineConfig(alignment_min_size=8)
    assert has_alignment_markers(9, 9, config)


def test_small_grids_have_no_markers():
    assert build_alignment_markers(16, 16, 1) == ([], [])


def test_marker_loop_counts():
    outer, inner = build_alignment_markers(21, 21, 1)
    assert len(outer) == 6
    assert len(inner) == 3


def test_marker_offsets():
    assert marker_offsets(20, 20, 1) == [(1, 1), (14, 1), (1, 14)]
    assert marker_offsets(25, 21, 0) == [(0, 0), (18, 0), (0, 14)]


def test_marker_paths():
    outer, inner = build_alignment_markers(20, 20, 1)
    outer_text = [loop_text(loop) for loop in compact(outer)]
    inner_text = [loop_text(loop) for loop in compact(inner)]
    assert outer_text[:2] == ["M1 1h7v7h-7v-7z", "M2 2v5h5v-5h-5z"]
    assert outer_text[2] == "M14 1h7v7h-7v-7z"
    assert outer_text[4] == "M1 14h7v7h-7v-7z"
    assert inner_text == ["M3 3h3v3h-3v-3z", "M16 3h3v3h-3v-3z", "M3 16h3v3h-3v-3z"]


def test_marker_rings_cut_a_hole():
    outer, inner = build_alignment_markers(20, 20, 1)
    areas = [signed_area(loop_vertices(loop)) for loop in outer]
    assert areas == [49.0, -25.0] * 3
    assert [signed_area(loop_vertices(loop)) for loop in inner] == [9.0] * 3


def test_square_loop():
    loop = square_loop(0, 0, 2, Axis.V)
    assert loop_text(loop) == "M0 0v1v1h1h1v-1v-1h-1h-1z"
    assert hop_length(loop) == 8
    assert is_closed(loop)


class TestZone:
    def test_outside_for_small_grids(self):
        assert not in_alignment_zone(0, 0, 16, 16, 1)

    def test_corners(self):
        # 20x20 with margin 1: x < 8 on the left, x > 12 on the right
        assert in_alignment_zone(7, 7, 20, 20, 1)
        assert not in_alignment_zone(8, 7, 20, 20, 1)
        assert in_alignment_zone(0, 13, 20, 20, 1)
        assert not in_alignment_zone(0, 12, 20, 20, 1)
        assert in_alignment_zone(13, 0, 20, 20, 1)
        assert not in_alignment_zone(12, 0, 20, 20, 1)

    def test_bottom_right_is_free(self):
        assert not in_alignment_zone(19, 19, 20, 20, 1)

    def test_margin_shifts_zone(self):
        assert in_alignment_zone(6, 6, 20, 20, 0)
        assert not in_alignment_zone(7, 6, 20, 20, 0)

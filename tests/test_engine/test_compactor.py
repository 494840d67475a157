"""Tests for segment compaction."""

from __future__ import annotations

import pytest
from shapely.geometry import Polygon

from qrcontour.engine.compactor import append_merged, compact, compact_loop
from qrcontour.engine.segments import CLOSE, Arc, MoveTo, h, hop_length, loop_text, v
from qrcontour.engine.tracer import trace_boundaries
from qrcontour.utils.geometry import loop_vertices
from tests.conftest import BLOCK_4X4, L_SHAPE, grid_from, random_grid


def test_merges_runs_on_the_same_axis():
    loop = [MoveTo(1, 1), h(1), h(1), v(1), v(1), h(-1), h(-1), v(-1), v(-1), CLOSE]
    assert loop_text(compact_loop(loop)) == "M1 1h2v2h-2v-2z"


def test_leaves_other_segments_alone():
    loop = [MoveTo(0, 0), h(1), Arc(1, 0.5, 0.5), h(1), CLOSE]
    assert compact_loop(loop) == loop


def test_append_merged():
    out = [MoveTo(0, 0), h(2)]
    append_merged(out, h(3))
    append_merged(out, v(1))
    assert out == [MoveTo(0, 0), h(5), v(1)]


def test_traced_block():
    (shape,) = trace_boundaries(grid_from(BLOCK_4X4), margin=0)[1]
    assert loop_text(compact_loop(shape)) == "M1 1h2v2h-2v-2z"


@pytest.mark.parametrize("seed", [2, 4])
def test_idempotent(seed):
    _, shapes = trace_boundaries(random_grid(size=10, seed=seed))
    once = compact(shapes)
    assert compact(once) == once


def test_preserves_polygon_and_length():
    (shape,) = trace_boundaries(grid_from(L_SHAPE), margin=0)[1]
    compacted = compact_loop(shape)
    assert len(compacted) < len(shape)
    assert hop_length(compacted) == hop_length(shape)
    before = Polygon(loop_vertices(shape))
    after = Polygon(loop_vertices(compacted))
    assert before.equals(after)
    assert after.area == 5.0


def test_no_consecutive_hops_share_an_axis():
    _, shapes = trace_boundaries(random_grid(size=12, seed=11))
    for loop in compact(shapes):
        hop_axes = [seg.axis for seg in loop[1:-1]]
        assert all(a is not b for a, b in zip(hop_axes, hop_axes[1:]))

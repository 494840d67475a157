"""Segment compaction: merge consecutive hops along the same axis."""

from __future__ import annotations

from qrcontour.engine.segments import Hop, Loop, Segment


def append_merged(out: list[Segment], seg: Segment) -> None:
    """Append ``seg``, folding it into the previous hop if both share an axis."""
    prev = out[-1] if out else None
    if isinstance(seg, Hop) and isinstance(prev, Hop) and prev.axis is seg.axis:
        out[-1] = Hop(seg.axis, prev.delta + seg.delta)
    else:
        out.append(seg)


def compact_loop(loop: Loop) -> Loop:
    out: Loop = []
    for seg in loop:
        append_merged(out, seg)
    return out


def compact(loops: list[Loop]) -> list[Loop]:
    """Compact every loop. Purely syntactic: the traced polygon is unchanged."""
    return [compact_loop(loop) for loop in loops]

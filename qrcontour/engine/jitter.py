"""Jitter: replace hops with slightly displaced absolute line points.

Displacements are drawn from the shared generator and never accumulate: each
point is the exact lattice position plus fresh noise on both axes.
"""

from __future__ import annotations

from qrcontour.engine.prng import DeterministicGenerator
from qrcontour.engine.segments import Hop, LineTo, Loop, MoveTo


def jitter_loop(loop: Loop, amplitude: float, prng: DeterministicGenerator) -> Loop:
    out: Loop = []
    x = y = 0.0
    for seg in loop:
        if isinstance(seg, MoveTo):
            x, y = seg.x, seg.y
            out.append(seg)
        elif isinstance(seg, Hop):
            x += seg.dx
            y += seg.dy
            # x is drawn before y
            jx = x + prng.symmetric(amplitude)
            jy = y + prng.symmetric(amplitude)
            out.append(LineTo(jx, jy))
        else:
            out.append(seg)
    return out


def add_jitter(loops: list[Loop], amplitude: float, prng: DeterministicGenerator) -> list[Loop]:
    return [jitter_loop(loop, amplitude, prng) for loop in loops]

"""Corner rounding: rewrite square-cornered loops with quarter-circle arcs.

The loop start moves to the midpoint of its first hop. Every change of axis
between consecutive hops becomes a radius-0.5 arc joining the midpoints of
the two hops; straight continuations stay hops. The wraparound from the last
hop back to the first closes the loop the same way, so a single cell turns
into a circle of four arcs.
"""

from __future__ import annotations

from qrcontour.engine.compactor import append_merged
from qrcontour.engine.segments import CLOSE, Arc, ClosePath, Hop, Loop, MoveTo, h, v

ROUND_RADIUS = 0.5

# (incoming hop, outgoing hop) -> SVG sweep flag. Right turns on screen
# (clockwise, y down) sweep positively.
SWEEP_FLAGS: dict[tuple[Hop, Hop], int] = {
    (h(1), v(1)): 1,
    (h(1), v(-1)): 0,
    (h(-1), v(1)): 0,
    (h(-1), v(-1)): 1,
    (v(1), h(1)): 0,
    (v(1), h(-1)): 1,
    (v(-1), h(1)): 1,
    (v(-1), h(-1)): 0,
}


def turn_arc(incoming: Hop, outgoing: Hop) -> Arc:
    """Quarter arc from the midpoint of ``incoming`` to the midpoint of ``outgoing``."""
    try:
        sweep = SWEEP_FLAGS[(incoming, outgoing)]
    except KeyError:
        raise ValueError(f"Not a corner: {incoming} -> {outgoing}") from None
    return Arc(
        sweep=sweep,
        dx=(incoming.dx + outgoing.dx) * ROUND_RADIUS,
        dy=(incoming.dy + outgoing.dy) * ROUND_RADIUS,
        radius=ROUND_RADIUS,
    )


def _unit_hops(loop: Loop) -> list[Hop]:
    steps: list[Hop] = []
    for seg in loop[1:]:
        if isinstance(seg, Hop):
            sign = 1 if seg.delta > 0 else -1
            steps.extend(Hop(seg.axis, sign) for _ in range(abs(seg.delta)))
        elif not isinstance(seg, ClosePath):
            raise ValueError(f"Only hop loops can be rounded, found {type(seg).__name__}")
    return steps


def round_loop(loop: Loop) -> Loop:
    start = loop[0]
    if not isinstance(start, MoveTo):
        raise ValueError("Loop must start with MoveTo")
    steps = _unit_hops(loop)
    if not steps:
        return list(loop)

    first = steps[0]
    out: Loop = [MoveTo(start.x + first.dx * 0.5, start.y + first.dy * 0.5)]
    for incoming, outgoing in zip(steps, steps[1:] + [first]):
        if incoming == outgoing:
            append_merged(out, incoming)
        else:
            out.append(turn_arc(incoming, outgoing))
    out.append(CLOSE)
    return out


def round_corners(loops: list[Loop]) -> list[Loop]:
    return [round_loop(loop) for loop in loops]

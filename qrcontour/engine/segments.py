"""Path segment model: tagged segment variants and path-data formatting.

Loops are lists of segments that start with ``MoveTo`` and end with
``ClosePath``. Stages rewrite loops by inspecting segment types instead of
re-parsing formatted path text. Formatting follows the compact SVG path
convention used for output: tokens are concatenated without separators,
e.g. ``M2 2h1v1h-1v-1z``.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class Axis(enum.Enum):
    H = "h"
    V = "v"


def format_number(value: float) -> str:
    """Shortest round-trip text for a coordinate; integral values lose the ``.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_precision(value: float, digits: int) -> str:
    """Format with a fixed number of significant digits, keeping trailing zeros.

    Integers with exactly ``digits`` digits print without a decimal point
    (``106``, not ``106.``).
    """
    return format(float(value), f"#.{digits}g").rstrip(".")


def _fmt(value: float, digits: int | None) -> str:
    return format_number(value) if digits is None else to_precision(value, digits)


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float
    # Significant digits when formatting; None = shortest exact text
    digits: int | None = None

    def __str__(self) -> str:
        return f"M{_fmt(self.x, self.digits)} {_fmt(self.y, self.digits)}"


@dataclass(frozen=True)
class Hop:
    """Relative straight step along one axis."""

    axis: Axis
    delta: int

    @property
    def dx(self) -> int:
        return self.delta if self.axis is Axis.H else 0

    @property
    def dy(self) -> int:
        return self.delta if self.axis is Axis.V else 0

    def __str__(self) -> str:
        return f"{self.axis.value}{self.delta}"


@dataclass(frozen=True)
class Arc:
    """Relative quarter-circle arc; no rotation, never the large arc."""

    sweep: int
    dx: float
    dy: float
    radius: float = 0.5

    def __str__(self) -> str:
        r = format_number(self.radius)
        return f"a{r} {r} 0 0 {self.sweep} {format_number(self.dx)} {format_number(self.dy)}"


@dataclass(frozen=True)
class LineTo:
    """Absolute line endpoint."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"L{format_number(self.x)} {format_number(self.y)}"


@dataclass(frozen=True)
class RelLine:
    """Relative line, used for the rotated mosaic squares."""

    dx: float
    dy: float
    digits: int | None = None

    def __str__(self) -> str:
        return f"l{_fmt(self.dx, self.digits)} {_fmt(self.dy, self.digits)}"


@dataclass(frozen=True)
class ClosePath:
    def __str__(self) -> str:
        return "z"


Segment = MoveTo | Hop | Arc | LineTo | RelLine | ClosePath
Loop = list[Segment]

CLOSE = ClosePath()


def h(delta: int) -> Hop:
    return Hop(Axis.H, delta)


def v(delta: int) -> Hop:
    return Hop(Axis.V, delta)


def hops(loop: Loop) -> list[Hop]:
    return [seg for seg in loop if isinstance(seg, Hop)]


def hop_length(loop: Loop) -> int:
    """Total unit length of the loop's hops."""
    return sum(abs(seg.delta) for seg in loop if isinstance(seg, Hop))


def loop_text(loop: Loop) -> str:
    return "".join(str(seg) for seg in loop)


def path_data(loops: Iterable[Loop]) -> str:
    """Concatenate loops into one SVG ``d`` attribute value."""
    return "".join(loop_text(loop) for loop in loops)

"""Bitmask: rectangular boolean grid addressed by (x, y).

Reads outside the grid return False so the tracer can treat the area around
the grid as unfilled without special-casing the perimeter. Writes outside the
grid are programmer errors and raise.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

# Characters accepted as filled / unfilled cells in text grids.
_FILLED_CHARS = frozenset("X#1")
_EMPTY_CHARS = frozenset(".0")


def _is_int(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Bitmask:
    """A width x height grid of booleans, True meaning filled."""

    def __init__(self, width: int, height: int) -> None:
        if not _is_int(width) or not _is_int(height):
            raise TypeError(f"Bitmask: width and height must be integers: {width!r}, {height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Bitmask: width and height must be positive: {width}, {height}")
        self.width = int(width)
        self.height = int(height)
        # Row-major: _cells[y, x]
        self._cells: NDArray[np.bool_] = np.zeros((self.height, self.width), dtype=np.bool_)

    def get(self, x: int, y: int) -> bool:
        if not _is_int(x) or not _is_int(y):
            raise TypeError(f"Bitmask: x and y must be integers: {x!r}, {y!r}")
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return False
        return bool(self._cells[y, x])

    def set(self, x: int, y: int, value: bool) -> None:
        if not _is_int(x) or not _is_int(y):
            raise TypeError(f"Bitmask: x and y must be integers: {x!r}, {y!r}")
        if x < 0 or x >= self.width:
            raise IndexError(f"Bitmask: x must be at least 0 and less than width: {x}")
        if y < 0 or y >= self.height:
            raise IndexError(f"Bitmask: y must be at least 0 and less than height: {y}")
        self._cells[y, x] = bool(value)

    def wipe(self, *pattern: bool) -> None:
        """Overwrite every cell with ``pattern`` repeated in row-major order.

        ``wipe(False)`` clears the grid; ``wipe(True, False)`` produces
        alternating cells along each row (and a checkerboard when the width
        is odd).
        """
        if not pattern:
            raise ValueError("Bitmask: wipe() needs at least one value")
        flat = np.resize(np.array(pattern, dtype=np.bool_), self.width * self.height)
        self._cells = flat.reshape(self.height, self.width)

    @property
    def array(self) -> NDArray[np.bool_]:
        """Copy of the cells as a (height, width) boolean array."""
        return self._cells.copy()

    def count(self) -> int:
        """Number of filled cells."""
        return int(np.count_nonzero(self._cells))

    # ── Construction helpers ──

    @classmethod
    def from_array(cls, array: NDArray | Sequence[Sequence[object]]) -> Bitmask:
        """Build from a 2D array-like indexed [row][column]."""
        cells = np.asarray(array)
        if cells.ndim != 2:
            raise ValueError(f"Bitmask: expected a 2D array, got {cells.ndim} dimensions")
        mask = cls(int(cells.shape[1]), int(cells.shape[0]))
        mask._cells = cells.astype(np.bool_)
        return mask

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[object]]) -> Bitmask:
        """Build from an iterable of equally long rows of truthy values."""
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise ValueError("Bitmask: at least one non-empty row is required")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Bitmask: row {i} has {len(row)} cells, expected {width}")
        return cls.from_array([[bool(v) for v in row] for row in rows])

    @classmethod
    def from_text(cls, text: str | Iterable[str]) -> Bitmask:
        """Parse a text grid: ``X``, ``#`` or ``1`` filled; ``.`` or ``0`` empty.

        Accepts either one string with newline-separated rows or an iterable
        of row strings. Surrounding whitespace and blank lines are ignored.
        """
        lines = text.splitlines() if isinstance(text, str) else list(text)
        rows: list[list[bool]] = []
        for line_no, line in enumerate(lines):
            if not line.strip():
                continue
            row = []
            for ch in line.strip():
                if ch in _FILLED_CHARS:
                    row.append(True)
                elif ch in _EMPTY_CHARS:
                    row.append(False)
                else:
                    raise ValueError(f"Bitmask: unexpected character {ch!r} on line {line_no + 1}")
            rows.append(row)
        return cls.from_rows(rows)

    def to_text(self, filled: str = "X", empty: str = ".") -> str:
        return "\n".join("".join(filled if v else empty for v in row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmask):
            return NotImplemented
        return self.width == other.width and self.height == other.height and bool(
            np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"Bitmask(width={self.width}, height={self.height}, filled={self.count()})"

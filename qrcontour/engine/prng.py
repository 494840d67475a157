"""Deterministic pseudo-random stream for jitter and mosaic rotation.

A linear congruential generator with GCC's constants. Rerendering a stylized
bitmask must give identical output, so every computation creates its own
generator from a fixed or caller-supplied seed instead of using global state.

The state is a double and the product is rounded like any other IEEE 754
multiplication once it passes 2**53. Existing mosaic and jitter renderings
depend on that exact stream, so the arithmetic stays in floating point.
"""

from __future__ import annotations

_MODULUS = float(0x80000000)
_MULTIPLIER = 1103515245.0
_INCREMENT = 12345.0


class DeterministicGenerator:
    """Sequential LCG stream; ``next()`` returns floats in [0, 1]."""

    def __init__(self, seed: int) -> None:
        if not isinstance(seed, int) or isinstance(seed, bool):
            raise TypeError(f"seed must be an integer, got {seed!r}")
        self.state = float(seed % 0x80000000)
        self.draws = 0

    def next(self) -> float:
        self.state = (_MULTIPLIER * self.state + _INCREMENT) % _MODULUS
        self.draws += 1
        return self.state / (_MODULUS - 1)

    def symmetric(self, amplitude: float) -> float:
        """Uniform value in [-amplitude, amplitude]."""
        return (self.next() * 2 - 1) * amplitude

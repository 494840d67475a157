"""qrcontour contour engine."""

from qrcontour.engine.bitmask import Bitmask
from qrcontour.engine.context import ContourResult
from qrcontour.engine.pipeline import compute_contour
from qrcontour.engine.prng import DeterministicGenerator
from qrcontour.engine.registry import Style, UnsupportedStyleError, get_registry
from qrcontour.engine.tracer import TracingError

__all__ = [
    "Bitmask",
    "ContourResult",
    "compute_contour",
    "DeterministicGenerator",
    "Style",
    "UnsupportedStyleError",
    "get_registry",
    "TracingError",
]

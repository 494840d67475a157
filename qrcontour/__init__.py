"""qrcontour: trace QR-code bitmasks into stylized SVG path outlines."""

from qrcontour.engine import Bitmask, ContourResult, Style, UnsupportedStyleError, compute_contour

__version__ = "0.1.0"

__all__ = ["Bitmask", "ContourResult", "Style", "UnsupportedStyleError", "compute_contour"]

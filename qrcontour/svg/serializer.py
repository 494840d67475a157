"""Write SVG documents from contour results."""

from __future__ import annotations

from html import escape

from qrcontour.engine.context import ContourResult
from qrcontour.engine.pipeline import compute_contour
from qrcontour.engine.registry import Style
from qrcontour.engine.tracer import GridLike


def render_svg(
    result: ContourResult,
    width: int,
    height: int,
    margin: int = 1,
    title: str = "",
    attributes: dict[str, dict[str, str]] | None = None,
) -> str:
    """Generate SVG markup with one ``<path>`` per contour category.

    The viewBox covers the grid plus the margin on every side. ``attributes``
    maps a category name (e.g. ``"dots"``) to extra attributes for its path,
    typically fill colors; they override the defaults.
    """
    canvas_w = width + 2 * margin
    canvas_h = height + 2 * margin
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w} {canvas_h}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for category, loops in result.items():
        attrs = {"class": category.replace("_", "-"), "d": result.path_data(category)}
        if attributes and category in attributes:
            attrs.update(attributes[category])
        attr_str = " ".join(f'{k}="{escape(str(v))}"' for k, v in attrs.items())
        lines.append(f"  <path {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def render_bitmask(
    grid: GridLike,
    style: Style | str = Style.BASIC,
    margin: int = 1,
    seed: int | None = None,
    title: str = "",
    attributes: dict[str, dict[str, str]] | None = None,
) -> str:
    """Compute the contour for ``grid`` and return it as an SVG document."""
    result = compute_contour(grid, margin=margin, style=style, seed=seed)
    return render_svg(result, grid.width, grid.height, margin, title, attributes)

"""Style registry: every render style is a handler function registered via decorator.

Usage:
    @style_handler(Style.ROUNDED, description="Traced outlines with rounded corners")
    def rounded(job: ContourJob) -> None:
        job.result.dots, job.result.shapes = trace_boundaries(job.grid, job.margin)

The set of styles is closed: ``Style`` lists them all and ``verify()`` refuses
a registry that misses any of them.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from qrcontour.engine.context import ContourJob

logger = logging.getLogger(__name__)


class UnsupportedStyleError(ValueError):
    """Raised for style names outside the ``Style`` enumeration."""


class Style(str, enum.Enum):
    BASIC = "basic"
    ROUNDED = "rounded"
    DOTS = "dots"
    MOSAIC = "mosaic"
    JITTER_LIGHT = "jitter-light"
    JITTER_HEAVY = "jitter-heavy"

    @classmethod
    def parse(cls, value: Style | str) -> Style:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedStyleError(f"Unsupported render style: {value!r}") from None


@dataclass
class StyleSpec:
    style: Style
    fn: Callable[["ContourJob"], None]
    description: str = ""


class StyleRegistry:
    """Maps each style to exactly one handler."""

    def __init__(self) -> None:
        self._handlers: dict[Style, StyleSpec] = {}

    def register(self, spec: StyleSpec) -> None:
        if spec.style in self._handlers:
            raise ValueError(f"Duplicate style handler: {spec.style.value}")
        self._handlers[spec.style] = spec
        logger.debug("Registered style %s (%s)", spec.style.value, spec.fn.__name__)

    def get(self, style: Style | str) -> StyleSpec:
        style = Style.parse(style)
        try:
            return self._handlers[style]
        except KeyError:
            raise UnsupportedStyleError(f"No handler registered for style {style.value!r}") from None

    def all(self) -> list[StyleSpec]:
        return [self._handlers[s] for s in Style if s in self._handlers]

    def verify(self) -> None:
        """Raise if any member of ``Style`` has no handler."""
        missing = [s.value for s in Style if s not in self._handlers]
        if missing:
            raise ValueError(f"Styles without a handler: {missing}")

    @property
    def count(self) -> int:
        return len(self._handlers)


# Module-level singleton
_registry = StyleRegistry()


def get_registry() -> StyleRegistry:
    return _registry


def style_handler(style: Style, *, description: str = ""):
    """Decorator to register a style handler."""

    def decorator(fn: Callable[["ContourJob"], None]):
        _registry.register(StyleSpec(style=style, fn=fn, description=description))
        return fn

    return decorator

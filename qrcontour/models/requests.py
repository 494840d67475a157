"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ContourRequest(BaseModel):
    rows: list[str] = Field(
        ...,
        min_length=1,
        description="Grid rows, top to bottom: X, # or 1 filled; . or 0 empty",
    )
    style: str | None = Field(default=None, description="Render style; server default if omitted")
    margin: int | None = Field(default=None, ge=0, description="Coordinate offset on every side")
    seed: int | None = Field(default=None, ge=0, description="Seed for jitter and mosaic styles")


class RenderRequest(ContourRequest):
    title: str = Field(default="", description="Optional <title> for the SVG document")
    attributes: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Extra path attributes per category, e.g. {'dots': {'fill': '#333'}}",
    )

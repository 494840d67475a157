"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    styles_registered: int = 0


class StyleInfo(BaseModel):
    name: str
    description: str = ""


class StylesResponse(BaseModel):
    styles: list[StyleInfo] = Field(default_factory=list)


class SummaryModel(BaseModel):
    loops: dict[str, int] = Field(default_factory=dict)
    segments: dict[str, int] = Field(default_factory=dict)
    outlines: int = 0
    holes: int = 0
    filled_area: float | None = None
    bounds: tuple[float, float, float, float] | None = None


class ContourResponse(BaseModel):
    style: str
    width: int
    height: int
    margin: int
    paths: dict[str, str] = Field(default_factory=dict)
    summary: SummaryModel
    processing_time_ms: float = 0.0

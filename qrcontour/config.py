"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    qrcontour_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Request defaults
    default_style: str = "basic"
    default_margin: int = 1

    # Largest grid accepted over HTTP (version 40 QR codes are 177x177)
    max_grid_cells: int = 200 * 200

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

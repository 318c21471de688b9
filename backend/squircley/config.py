"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    squircley_env: str = "development"
    squircley_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rotation preview
    transition_duration_ms: float = 300.0
    frame_rate: int = Field(default=60, gt=0)
    allowed_rotations: list[int] = [0, 45, 90, 135, 180, 225, 270, 315]

    # Shape defaults (curvature slider starts at 75)
    default_curvature: int = 75
    canvas_size: int = 289
    stroke_weight: int = 4

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

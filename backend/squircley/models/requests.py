"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from squircley.config import settings
from squircley.engine.constants import (
    MAX_CURVATURE,
    MAX_EXPONENT,
    MIN_CURVATURE,
    MIN_EXPONENT,
    SEMI_MAJOR_AXIS,
    SEMI_MINOR_AXIS,
)
from squircley.engine.superellipse import curvature_to_exponent
from squircley.models.shape import ShapeParameters
from squircley.svg.colors import (
    DEFAULT_FILL,
    DEFAULT_FILL_HEX,
    DEFAULT_STROKE,
    DEFAULT_STROKE_HEX,
    RGBColor,
    hex_to_rgb,
)


class PathRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    curvature: int | None = Field(
        default=None,
        ge=MIN_CURVATURE,
        le=MAX_CURVATURE,
        description="Slider value 0-100; ignored when p is given",
    )
    p: float | None = Field(
        default=None,
        ge=MIN_EXPONENT,
        le=MAX_EXPONENT,
        description="Superellipse exponent, overrides curvature",
    )
    rotation: float = Field(default=0.0, description="Rotation in degrees")
    a: float = Field(default=SEMI_MAJOR_AXIS, gt=0, description="Semi-major axis")
    b: float = Field(default=SEMI_MINOR_AXIS, gt=0, description="Semi-minor axis")

    def exponent(self) -> float:
        if self.p is not None:
            return self.p
        curvature = self.curvature if self.curvature is not None else settings.default_curvature
        return curvature_to_exponent(curvature)

    def to_parameters(self) -> ShapeParameters:
        return ShapeParameters(a=self.a, b=self.b, p=self.exponent(), rotation=self.rotation)


class SvgRequest(PathRequest):
    fill: RGBColor = Field(default=DEFAULT_FILL, description="Fill as 0-1 RGB channels or #RRGGBB")
    stroke: RGBColor = Field(default=DEFAULT_STROKE, description="Stroke as 0-1 RGB channels or #RRGGBB")
    stroke_width: float = Field(default=settings.stroke_weight, ge=0)

    @field_validator("fill", "stroke", mode="before")
    @classmethod
    def _accept_hex(cls, value: Any) -> Any:
        if isinstance(value, str):
            return hex_to_rgb(value)
        return value


class ExportRequest(PathRequest):
    fill: str = Field(default=DEFAULT_FILL_HEX, description="Fill paint, passed through")
    stroke: str = Field(default=DEFAULT_STROKE_HEX, description="Stroke paint, passed through")
    stroke_width: float = Field(default=settings.stroke_weight, ge=0)


class RotationPreviewRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    curvature: int = Field(default=settings.default_curvature, ge=MIN_CURVATURE, le=MAX_CURVATURE)
    from_rotation: float = Field(default=0.0, description="Rotation currently displayed")
    to_rotation: int = Field(..., description="Target rotation, one of the allowed angles")
    duration_ms: float | None = Field(default=None, ge=0, description="Overrides the configured duration")

    @field_validator("to_rotation")
    @classmethod
    def _allowed_rotation(cls, value: int) -> int:
        if value not in settings.allowed_rotations:
            raise ValueError(f"rotation must be one of {settings.allowed_rotations}")
        return value


class PluginMessage(BaseModel):
    type: str = Field(..., description="'create-squircle' or 'cancel'")
    # Left untyped: a missing or non-numeric curvature must reach the handler
    # so it can answer with a notification instead of a 422.
    curvature: Any = None

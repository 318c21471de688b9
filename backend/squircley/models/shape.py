"""Static shape description."""

from __future__ import annotations

from pydantic import BaseModel, Field

from squircley.engine.constants import (
    DEFAULT_CONSTANTS,
    MAX_EXPONENT,
    MIN_EXPONENT,
    SEMI_MAJOR_AXIS,
    SEMI_MINOR_AXIS,
    ShapeConstants,
)
from squircley.engine.superellipse import build_path


class ShapeParameters(BaseModel):
    """Fully determines one static squircle instance."""

    a: float = Field(default=SEMI_MAJOR_AXIS, gt=0, description="Semi-major axis")
    b: float = Field(default=SEMI_MINOR_AXIS, gt=0, description="Semi-minor axis")
    p: float = Field(..., ge=MIN_EXPONENT, le=MAX_EXPONENT, description="Superellipse exponent")
    rotation: float = Field(default=0.0, description="Rotation in degrees, periodic mod 360")

    model_config = {"frozen": True}

    def path(self, constants: ShapeConstants = DEFAULT_CONSTANTS) -> str:
        return build_path(self.a, self.b, self.p, self.rotation, constants)

"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class PathResponse(BaseModel):
    path: str
    p: float
    curvature: float
    rotation: float = 0.0
    # (xmin, ymin, xmax, ymax)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    valid: bool = True
    issues: list[str] = Field(default_factory=list)


class SvgResponse(BaseModel):
    svg: str
    path: str


class PluginResponse(BaseModel):
    ok: bool
    node_id: str | None = None
    closed: bool = False
    notifications: list[str] = Field(default_factory=list)


class NotificationsResponse(BaseModel):
    notifications: list[str] = Field(default_factory=list)

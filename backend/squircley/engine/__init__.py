"""Squircley geometry engine: superellipse paths and rotation transitions."""

from squircley.engine.animation import (
    AnimationState,
    AsyncioFrameClock,
    ManualFrameClock,
    RotationTransitionController,
)
from squircley.engine.constants import DEFAULT_CONSTANTS, ShapeConstants
from squircley.engine.superellipse import (
    BezierSegment,
    Point,
    build_path,
    build_segments,
    curvature_to_exponent,
    point_on_superellipse,
    rotate,
)

__all__ = [
    "AnimationState",
    "AsyncioFrameClock",
    "ManualFrameClock",
    "RotationTransitionController",
    "DEFAULT_CONSTANTS",
    "ShapeConstants",
    "BezierSegment",
    "Point",
    "build_path",
    "build_segments",
    "curvature_to_exponent",
    "point_on_superellipse",
    "rotate",
]

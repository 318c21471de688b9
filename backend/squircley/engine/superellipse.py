"""Superellipse → four cubic Béziers. Pure functions, no engine imports.

The curve is sampled with the signed-power parametrisation

    x = a · sign(cos t) · |cos t|^(2/p)
    y = b · sign(sin t) · |sin t|^(2/p)

at the four cardinal angles. Each Bézier handle is the chord between two probe
points at ±tangent_offset around a cardinal point, scaled by control_factor.

Precondition for every function here: 0.5 <= p <= 10. Nothing is checked.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from squircley.engine.constants import (
    DEFAULT_CONSTANTS,
    MAX_CURVATURE,
    MAX_EXPONENT,
    MIN_EXPONENT,
    ShapeConstants,
)


class Point(NamedTuple):
    x: float
    y: float


class BezierSegment(NamedTuple):
    start: Point
    cp1: Point
    cp2: Point
    end: Point


# Right, top, left, bottom.
_CARDINAL_ANGLES = np.arange(4) * (np.pi / 2)


def superellipse_points(angles: ArrayLike, a: float, b: float, p: float) -> NDArray[np.float64]:
    """Nx2 array of curve points for the given parameter angles (radians)."""
    t = np.atleast_1d(np.asarray(angles, dtype=np.float64))
    cos_t = np.cos(t)
    sin_t = np.sin(t)
    power = 2.0 / p
    x = a * np.sign(cos_t) * np.abs(cos_t) ** power
    y = b * np.sign(sin_t) * np.abs(sin_t) ** power
    return np.column_stack([x, y])


def point_on_superellipse(angle: float, a: float, b: float, p: float) -> Point:
    x, y = superellipse_points(angle, a, b, p)[0]
    return Point(float(x), float(y))


def rotation_matrix(degrees: float) -> NDArray[np.float64]:
    rad = np.deg2rad(degrees)
    cos_r = np.cos(rad)
    sin_r = np.sin(rad)
    return np.array([[cos_r, -sin_r], [sin_r, cos_r]])


def rotate_points(points: NDArray[np.float64], degrees: float) -> NDArray[np.float64]:
    """Rotate Nx2 points about the origin. Returns the input unchanged for 0°."""
    if degrees == 0:
        return points
    return points @ rotation_matrix(degrees).T


def rotate(point: Point, degrees: float) -> Point:
    """Rotate a point about the origin (counter-clockwise in a y-up frame).

    Exactly 0° returns the same point so the common case carries no trig noise.
    """
    if degrees == 0:
        return point
    x, y = rotate_points(np.array([[point[0], point[1]]], dtype=np.float64), degrees)[0]
    return Point(float(x), float(y))


def _placed_points(
    angles: NDArray[np.float64],
    a: float,
    b: float,
    p: float,
    rotation: float,
    constants: ShapeConstants,
) -> NDArray[np.float64]:
    """Curve points rotated, then translated into the positive viewbox."""
    pts = rotate_points(superellipse_points(angles, a, b, p), rotation)
    return pts + constants.center


def _as_point(row: NDArray[np.float64]) -> Point:
    return Point(float(row[0]), float(row[1]))


def build_segments(
    a: float,
    b: float,
    p: float,
    rotation: float = 0.0,
    constants: ShapeConstants = DEFAULT_CONSTANTS,
) -> list[BezierSegment]:
    """Four Bézier segments: right→top, top→left, left→bottom, bottom→right."""
    key_points = _placed_points(_CARDINAL_ANGLES, a, b, p, rotation, constants)
    before = _placed_points(_CARDINAL_ANGLES - constants.tangent_offset, a, b, p, rotation, constants)
    after = _placed_points(_CARDINAL_ANGLES + constants.tangent_offset, a, b, p, rotation, constants)

    # after - before only gives a direction; control_factor sets the handle length.
    handles = (after - before) * constants.control_factor

    segments: list[BezierSegment] = []
    for i in range(4):
        j = (i + 1) % 4
        start = key_points[i]
        end = key_points[j]
        segments.append(
            BezierSegment(
                start=_as_point(start),
                cp1=_as_point(start + handles[i]),
                cp2=_as_point(end - handles[j]),
                end=_as_point(end),
            )
        )
    return segments


def format_number(value: float) -> str:
    """Shortest round-trip repr, integral values without '.0', no negative zero."""
    if value == 0:
        return "0"
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def _pair(point: Point) -> str:
    return f"{format_number(point.x)} {format_number(point.y)}"


def segments_to_path(segments: list[BezierSegment]) -> str:
    """M x0 y0 C c1x c1y, c2x c2y, ex ey ... Z"""
    parts = [f"M {_pair(segments[0].start)}"]
    for seg in segments:
        parts.append(f"C {_pair(seg.cp1)}, {_pair(seg.cp2)}, {_pair(seg.end)}")
    parts.append("Z")
    return " ".join(parts)


def build_path(
    a: float,
    b: float,
    p: float,
    rotation: float = 0.0,
    constants: ShapeConstants = DEFAULT_CONSTANTS,
) -> str:
    """SVG path data for the closed superellipse boundary."""
    return segments_to_path(build_segments(a, b, p, rotation, constants))


def curvature_to_exponent(curvature: float) -> float:
    """Slider value 0..100 → exponent 0.5..10 (linear)."""
    return MIN_EXPONENT + (MAX_EXPONENT - MIN_EXPONENT) * (curvature / MAX_CURVATURE)


def exponent_to_curvature(p: float) -> float:
    """Inverse of curvature_to_exponent."""
    return (p - MIN_EXPONENT) / (MAX_EXPONENT - MIN_EXPONENT) * MAX_CURVATURE

"""Write SVG markup around generated squircle path data."""

from __future__ import annotations

from squircley.engine.constants import SEMI_MAJOR_AXIS, SEMI_MINOR_AXIS
from squircley.engine.superellipse import build_path, curvature_to_exponent, format_number
from squircley.svg.colors import (
    DEFAULT_FILL,
    DEFAULT_FILL_HEX,
    DEFAULT_STROKE,
    DEFAULT_STROKE_HEX,
    RGBColor,
    to_rgb_string,
)

SVG_NS = "http://www.w3.org/2000/svg"

CANVAS_SIZE = 289
STROKE_WEIGHT = 4

# Web export pads the 289 canvas by 4 on each side so the stroke is not clipped.
EXPORT_VIEWBOX = "-4 -4 297 297"
EXPORT_FILENAME = "squircle.svg"


def serialize_squircle_svg(
    path_data: str,
    width: float = CANVAS_SIZE,
    height: float = CANVAS_SIZE,
    fill: RGBColor = DEFAULT_FILL,
    stroke: RGBColor = DEFAULT_STROKE,
    stroke_width: float = STROKE_WEIGHT,
) -> str:
    """Markup handed to the plugin host. The layout is a fixed contract."""
    w = format_number(width)
    h = format_number(height)
    lines = [
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" fill="none" xmlns="{SVG_NS}">',
        f'  <path d="{path_data}" fill="{to_rgb_string(fill)}" stroke="{to_rgb_string(stroke)}"'
        f' stroke-width="{format_number(stroke_width)}"/>',
        "</svg>",
    ]
    return "\n".join(lines)


def serialize_export_svg(
    path_data: str,
    fill: str = DEFAULT_FILL_HEX,
    stroke: str = DEFAULT_STROKE_HEX,
    stroke_width: float = STROKE_WEIGHT,
    width: float = CANVAS_SIZE,
    height: float = CANVAS_SIZE,
    viewbox: str = EXPORT_VIEWBOX,
) -> str:
    """Standalone file markup for download / clipboard, paint passed through as-is."""
    lines = [
        f'<svg xmlns="{SVG_NS}" width="{format_number(width)}" height="{format_number(height)}"'
        f' viewBox="{viewbox}" fill="none">',
        f'  <path d="{path_data}" fill="{fill}" stroke="{stroke}"'
        f' stroke-width="{format_number(stroke_width)}" />',
        "</svg>",
    ]
    return "\n".join(lines)


def generate_squircle_svg(
    curvature: float,
    rotation: float = 0.0,
    fill: RGBColor = DEFAULT_FILL,
    stroke: RGBColor = DEFAULT_STROKE,
    stroke_width: float = STROKE_WEIGHT,
    size: float = CANVAS_SIZE,
) -> str:
    """Curvature slider value → complete plugin SVG for the reference squircle."""
    p = curvature_to_exponent(curvature)
    path_data = build_path(SEMI_MAJOR_AXIS, SEMI_MINOR_AXIS, p, rotation)
    return serialize_squircle_svg(path_data, size, size, fill, stroke, stroke_width)

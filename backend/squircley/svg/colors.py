"""Colour helpers for SVG paint attributes."""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, Field

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


class RGBColor(BaseModel):
    """Colour as 0..1 float channels (the plugin host's paint format)."""

    r: float = Field(..., ge=0.0, le=1.0)
    g: float = Field(..., ge=0.0, le=1.0)
    b: float = Field(..., ge=0.0, le=1.0)


# #EFB435 and #000000
DEFAULT_FILL = RGBColor(r=0.937, g=0.706, b=0.208)
DEFAULT_STROKE = RGBColor(r=0.0, g=0.0, b=0.0)

DEFAULT_FILL_HEX = "#EFB435"
DEFAULT_STROKE_HEX = "#000000"


def channel_to_byte(channel: float) -> int:
    """0..1 → 0..255, halves rounded up."""
    return int(math.floor(channel * 255 + 0.5))


def to_rgb_string(color: RGBColor) -> str:
    """RGBColor → 'rgb(R, G, B)'."""
    return f"rgb({channel_to_byte(color.r)}, {channel_to_byte(color.g)}, {channel_to_byte(color.b)})"


def hex_to_rgb(value: str) -> RGBColor:
    """'#RRGGBB' → RGBColor. Raises ValueError on anything else."""
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"Not a #RRGGBB colour: {value!r}")
    digits = match.group(1)
    r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return RGBColor(r=r, g=g, b=b)

"""Geometry and animation constants for squircle generation.

The values are visual calibration, not derived optima:

- CONTROL_FACTOR 0.552 is the circle-as-four-Béziers handle ratio (0.5523),
  applied here to a numerically estimated tangent chord instead of a radius.
- TANGENT_OFFSET π/16 is the half-width of the angular probe used to estimate
  the tangent direction at each cardinal point.
- The exponent domain [0.5, 10] keeps |cos|^(2/p) away from the p→0 blow-up.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Viewbox is 289x289, so the shape is recentred on 144.5.
CENTER = 144.5

# Semi axes of the reference squircle (a == b gives the rounded square).
SEMI_MAJOR_AXIS = 100.0
SEMI_MINOR_AXIS = 100.0

CONTROL_FACTOR = 0.552
TANGENT_OFFSET = math.pi / 16

MIN_EXPONENT = 0.5
MAX_EXPONENT = 10.0

MIN_CURVATURE = 0
MAX_CURVATURE = 100

TRANSITION_DURATION_MS = 300.0


@dataclass(frozen=True)
class ShapeConstants:
    """Process-wide geometry constants. Override only for tests or custom canvases."""

    center: float = CENTER
    control_factor: float = CONTROL_FACTOR
    tangent_offset: float = TANGENT_OFFSET


DEFAULT_CONSTANTS = ShapeConstants()

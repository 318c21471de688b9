"""Validate generated path data by parsing it back, using svgpathtools and shapely."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from svgpathtools import CubicBezier, parse_path

logger = logging.getLogger(__name__)

_NUM = r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_PAIR = rf"{_NUM} {_NUM}"
_PATH_GRAMMAR_RE = re.compile(rf"^M {_PAIR}(?: C {_PAIR}, {_PAIR}, {_PAIR}){{4}} Z$")

# Samples per cubic when flattening for area / validity checks.
_SAMPLES_PER_SEGMENT = 24


@dataclass
class PathReport:
    valid: bool
    closed: bool = False
    cubic_count: int = 0
    # Bounding box: (xmin, ymin, xmax, ymax)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    area: float = 0.0
    issues: list[str] = field(default_factory=list)

    @property
    def width(self) -> float:
        return self.bbox[2] - self.bbox[0]

    @property
    def height(self) -> float:
        return self.bbox[3] - self.bbox[1]


def matches_path_grammar(d: str) -> bool:
    """Exactly one M, four C groups, terminal Z."""
    return _PATH_GRAMMAR_RE.match(d) is not None


def _sample(segments: list[CubicBezier]) -> NDArray[np.float64]:
    ts = np.linspace(0.0, 1.0, _SAMPLES_PER_SEGMENT, endpoint=False)
    points = [seg.point(float(t)) for seg in segments for t in ts]
    return np.array([[z.real, z.imag] for z in points])


def inspect_path(d: str) -> PathReport:
    """Parse path data and report grammar, closedness, bbox and enclosed area."""
    issues: list[str] = []
    if not matches_path_grammar(d):
        issues.append("Path data does not match 'M x y (C x y, x y, x y){4} Z'")

    try:
        path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path: %s", e)
        return PathReport(valid=False, issues=issues + [f"Parse error: {e}"])

    cubics = [seg for seg in path if isinstance(seg, CubicBezier)]
    if len(cubics) != 4:
        issues.append(f"Expected 4 cubic segments, found {len(cubics)}")

    closed = len(path) > 0 and path.isclosed()
    if not closed:
        issues.append("Contour is not closed")

    if len(path) == 0:
        return PathReport(valid=False, cubic_count=len(cubics), issues=issues)

    xmin, xmax, ymin, ymax = path.bbox()

    area = 0.0
    if cubics:
        polygon = Polygon(_sample(cubics))
        if not polygon.is_valid:
            issues.append("Contour self-intersects")
        area = float(abs(polygon.area))

    return PathReport(
        valid=not issues,
        closed=closed,
        cubic_count=len(cubics),
        bbox=(float(xmin), float(ymin), float(xmax), float(ymax)),
        area=area,
        issues=issues,
    )

"""Easing helpers for rotation transitions."""

from __future__ import annotations


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def ease_in_out_cubic(progress: float) -> float:
    """Cubic ease-in-out on [0, 1]: slow start, fast middle, slow finish."""
    if progress < 0.5:
        return 4 * progress**3
    return 1 - (-2 * progress + 2) ** 3 / 2


def lerp(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction

"""Geometry and numeric-safety helpers used throughout the layout layers."""

import math
from typing import Tuple


def safe(value: float) -> float:
    """Return ``value`` as a float, or ``0.0`` when it is NaN or infinite."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def safe_non_negative(value: float) -> float:
    """Like :func:`safe` but also clamps negative values to ``0.0``."""
    return max(0.0, safe(value))


def is_finite(value: float) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def polar_point(
    cx: float, cy: float, radius: float, angle_deg: float
) -> Tuple[float, float]:
    """Point at ``radius`` from ``(cx, cy)``; 0° is 3 o'clock, clockwise."""
    theta = math.radians(angle_deg)
    return cx + math.cos(theta) * radius, cy + math.sin(theta) * radius


def distance_sq(ax: float, ay: float, bx: float, by: float) -> float:
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def format_value(value: float) -> str:
    """Whole numbers without decimals, everything else with one decimal place."""
    v = safe(value)
    if v == float(int(v)):
        return str(int(v))
    return f"{v:.1f}"


__all__ = [
    "safe",
    "safe_non_negative",
    "is_finite",
    "clamp",
    "polar_point",
    "distance_sq",
    "format_value",
]

"""Shared helper utilities."""

from .geometry import (
    clamp,
    distance_sq,
    format_value,
    is_finite,
    polar_point,
    safe,
    safe_non_negative,
)

__all__ = [
    "clamp",
    "distance_sq",
    "format_value",
    "is_finite",
    "polar_point",
    "safe",
    "safe_non_negative",
]

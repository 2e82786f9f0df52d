"""Pointer hit-testing for every chart family.

All functions return ``None`` when there is nothing to hit: an empty
dataset, a degenerate layout or a pointer outside the region the chart
responds to.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ..commands import Point
from ..utils import distance_sq, is_finite


def _valid_pointer(pointer: Optional[Point]) -> bool:
    return (
        pointer is not None and is_finite(pointer[0]) and is_finite(pointer[1])
    )


def nearest_x_index(x: float, xs: Sequence[float]) -> Optional[int]:
    """Index of the entry in ``xs`` horizontally closest to ``x``.

    Ties resolve to the lower index.
    """
    if not xs or not is_finite(x):
        return None
    best = None
    best_distance = math.inf
    for i, px in enumerate(xs):
        d = abs(x - px)
        if d < best_distance:
            best_distance = d
            best = i
    return best


def nearest_point_index(
    pointer: Optional[Point], points: Sequence[Point]
) -> Optional[int]:
    """Index of the point with the smallest Euclidean distance to ``pointer``."""
    if not points or not _valid_pointer(pointer):
        return None
    px, py = pointer  # type: ignore[misc]
    best = None
    best_distance = math.inf
    for i, (x, y) in enumerate(points):
        d = distance_sq(px, py, x, y)
        if d < best_distance:
            best_distance = d
            best = i
    return best


def nearest_axis(pointer: Optional[Point], vertices: Sequence[Point]) -> Optional[int]:
    """Radar axis whose outer vertex is closest to ``pointer``."""
    return nearest_point_index(pointer, vertices)


def slice_at(
    pointer: Optional[Point],
    center: Point,
    radius: float,
    hole_radius: float,
    start_angle: float,
    sweeps: Sequence[float],
) -> Optional[int]:
    """Slice containing ``pointer`` on a ring starting at ``start_angle``.

    ``sweeps`` are the full (un-animated) sweep angles in degrees. The
    pointer must lie between ``hole_radius`` and ``radius`` from the centre.
    """
    if not sweeps or radius <= 0.0 or not _valid_pointer(pointer):
        return None
    dx = pointer[0] - center[0]  # type: ignore[index]
    dy = pointer[1] - center[1]  # type: ignore[index]
    distance = math.hypot(dx, dy)
    if distance > radius or distance < hole_radius:
        return None

    angle = (math.degrees(math.atan2(dy, dx)) - start_angle + 720.0) % 360.0
    accumulated = 0.0
    last = len(sweeps) - 1
    for i, sweep in enumerate(sweeps):
        # The last slice absorbs any rounding shortfall below 360.
        if accumulated <= angle and (angle < accumulated + sweep or i == last):
            return i
        accumulated += sweep
    return None


def bar_group_at(
    coord: float,
    start: float,
    extent: float,
    group_count: int,
    group_width: float,
    group_spacing: float,
) -> Optional[int]:
    """Bar group under ``coord`` along the category axis.

    Group boundaries sit halfway through the spacing between two groups, so
    a pointer in a gap selects the nearer group. Pointers before ``start``
    or beyond ``start + extent`` select nothing.
    """
    if group_count <= 0 or not is_finite(coord):
        return None
    relative = coord - start
    if relative < 0.0 or relative > extent:
        return None
    pitch = group_width + group_spacing
    if pitch <= 0.0:
        return None
    index = int((relative + group_spacing / 2.0) / pitch)
    return max(0, min(group_count - 1, index))


def bar_entry_at(
    coord: float,
    group_start: float,
    entry_count: int,
    bar_width: float,
    bar_spacing: float,
) -> Optional[int]:
    """Bar within a group under ``coord``; clamped to the group's entries."""
    if entry_count <= 0 or not is_finite(coord):
        return None
    if entry_count == 1:
        return 0
    pitch = bar_width + bar_spacing
    if pitch <= 0.0:
        return 0
    index = int((coord - group_start) / pitch)
    return max(0, min(entry_count - 1, index))


__all__ = [
    "nearest_x_index",
    "nearest_point_index",
    "nearest_axis",
    "slice_at",
    "bar_group_at",
    "bar_entry_at",
]

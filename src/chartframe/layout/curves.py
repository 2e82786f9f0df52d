"""Polyline and Catmull-Rom/Bezier path construction for line charts."""

from __future__ import annotations

from typing import Sequence

from ..colors import Color
from ..commands import DrawPath, Path, Point, VerticalGradient

DEFAULT_TENSION = 0.3


def bezier_path(points: Sequence[Point], tension: float = DEFAULT_TENSION) -> Path:
    """Smooth path through ``points`` using Catmull-Rom derived control points.

    ``tension`` 0 gives straight segments, larger values bow the curve more.
    Neighbours beyond either end are clamped to the boundary point.
    """
    path = Path()
    n = len(points)
    if n == 0:
        return path

    path.move_to(points[0][0], points[0][1])
    if n == 1:
        return path
    if n == 2:
        path.line_to(points[1][0], points[1][1])
        return path

    for i in range(n - 1):
        p0 = points[i - 1] if i > 0 else points[i]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 2] if i < n - 2 else points[i + 1]

        cp1x = p1[0] + (p2[0] - p0[0]) * tension
        cp1y = p1[1] + (p2[1] - p0[1]) * tension
        cp2x = p2[0] - (p3[0] - p1[0]) * tension
        cp2y = p2[1] - (p3[1] - p1[1]) * tension
        path.cubic_to(cp1x, cp1y, cp2x, cp2y, p2[0], p2[1])

    return path


def linear_path(points: Sequence[Point]) -> Path:
    path = Path()
    if not points:
        return path
    path.move_to(points[0][0], points[0][1])
    for x, y in points[1:]:
        path.line_to(x, y)
    return path


def area_fill_path(
    line_path: Path, baseline_y: float, start_x: float, end_x: float
) -> Path:
    """Close ``line_path`` down to ``baseline_y`` to form the area beneath it."""
    fill = line_path.copy()
    fill.line_to(end_x, baseline_y)
    fill.line_to(start_x, baseline_y)
    fill.close()
    return fill


def gradient_fill(
    line_path: Path,
    color: Color,
    alpha: float,
    top_y: float,
    baseline_y: float,
    start_x: float,
    end_x: float,
) -> DrawPath:
    """Area fill fading from ``color`` at ``alpha`` to transparent at the baseline."""
    return DrawPath(
        path=area_fill_path(line_path, baseline_y, start_x, end_x),
        color=color.with_alpha(alpha),
        gradient=VerticalGradient(
            top=color.with_alpha(alpha),
            bottom=color.with_alpha(0.0),
            y0=top_y,
            y1=baseline_y,
        ),
    )


__all__ = [
    "DEFAULT_TENSION",
    "bezier_path",
    "linear_path",
    "area_fill_path",
    "gradient_fill",
]

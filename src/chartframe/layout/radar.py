"""Radar (spider) layout: web rings, spokes, axis labels and entry polygons."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..colors import resolve_axis_label_color, resolve_radar_web_color
from ..commands import (
    DrawCircle,
    DrawLine,
    DrawPath,
    DrawText,
    Frame,
    Path,
    Point,
    Selection,
)
from ..models import RadarChartData, RadarEntry
from ..style import RadarChartStyle
from ..utils import clamp, polar_point, safe
from .frame import FrameContext
from .hit_test import nearest_axis

logger = logging.getLogger(__name__)

MIN_AXES = 3
START_ANGLE = -90.0


def axis_angle(index: int, axis_count: int) -> float:
    return START_ANGLE + 360.0 / axis_count * index


def resolved_max(data: RadarChartData, entries: Sequence[RadarEntry]) -> float:
    """Explicit ``max_value`` when positive, else the largest value seen (or 1)."""
    explicit = safe(data.max_value)
    if explicit > 0.0:
        return explicit
    largest = max((v for e in entries for v in e.safe_values), default=0.0)
    return largest if largest > 0.0 else 1.0


def polygon(points: Sequence[Point]) -> Path:
    path = Path()
    for i, (x, y) in enumerate(points):
        if i == 0:
            path.move_to(x, y)
        else:
            path.line_to(x, y)
    return path.close()


def layout_radar(
    data: RadarChartData, style: RadarChartStyle, ctx: FrameContext
) -> Frame:
    frame = Frame(ctx.width, ctx.height, background=style.chart.background_color)
    axis_count = len(data.axis_labels)
    if axis_count < MIN_AXES:
        logger.debug("Radar chart needs %d axes, got %d", MIN_AXES, axis_count)
        return frame
    entries = [e for e in data.entries if len(e.values) >= axis_count]
    if not entries:
        logger.debug("No radar entry has a value for every axis")
        return frame

    max_value = resolved_max(data, entries)
    cx, cy = ctx.width / 2.0, ctx.height / 2.0
    radius = (
        min(ctx.width, ctx.height) / 2.0
        - style.chart.chart_padding
        - style.label_size * 1.5
    )
    if radius <= 0.0:
        logger.debug("Radar radius %.1f leaves no room to draw", radius)
        return frame

    web = resolve_radar_web_color(style.web_line_color, ctx.dark)
    angles = [axis_angle(i, axis_count) for i in range(axis_count)]
    outer = [polar_point(cx, cy, radius, a) for a in angles]

    levels = max(0, style.web_levels)
    for level in range(1, levels + 1):
        r = radius * level / levels
        ring = polygon([polar_point(cx, cy, r, a) for a in angles])
        frame.add(DrawPath(ring, web, stroke_width=style.web_line_width))
    for vertex in outer:
        frame.add(DrawLine((cx, cy), vertex, web, style.web_line_width))

    label_color = resolve_axis_label_color(style.label_color, ctx.dark)
    label_radius = radius + style.label_size * 1.2
    for label, angle in zip(data.axis_labels, angles):
        x, y = polar_point(cx, cy, label_radius, angle)
        frame.add(
            DrawText(
                label, (x, y + style.label_size / 3.0), label_color, style.label_size
            )
        )

    for n, entry in enumerate(entries):
        color = ctx.color(n, entry.color)
        values = entry.safe_values
        vertices: List[Point] = []
        for i, angle in enumerate(angles):
            fraction = clamp(values[i], 0.0, max_value) / max_value
            r = radius * fraction * ctx.progress
            vertices.append(polar_point(cx, cy, r, angle))
        shape = polygon(vertices)
        frame.add(DrawPath(shape, color.multiply_alpha(style.fill_alpha)))
        frame.add(DrawPath(shape, color, stroke_width=style.outline_width))
        if style.show_dots:
            for vertex in vertices:
                frame.add(DrawCircle(vertex, style.dot_radius, color))

    axis = nearest_axis(ctx.pointer, outer)
    if axis is not None:
        frame.selections.append(
            Selection(
                index=axis,
                value=entries[0].safe_values[axis],
                label=data.axis_labels[axis],
                position=outer[axis],
            )
        )
    return frame


__all__ = ["layout_radar", "axis_angle", "resolved_max", "polygon"]

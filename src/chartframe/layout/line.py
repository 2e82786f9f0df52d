"""Line chart layout: smoothed or straight series with gradient fill."""

from __future__ import annotations

import logging
from typing import List

from ..colors import resolve_axis_label_color, resolve_grid_line_color
from ..commands import (
    ClipGroup,
    Command,
    DrawCircle,
    DrawPath,
    Frame,
    Point,
    Rect,
    Selection,
)
from ..models import LineChartData
from ..style import LineChartStyle
from ..utils import format_value
from .curves import bezier_path, gradient_fill, linear_path
from .frame import (
    FrameContext,
    chart_area,
    grid_commands,
    indicator_line,
    tooltip_commands,
    x_axis_label_commands,
    y_axis_label_commands,
)
from .hit_test import nearest_x_index
from .scale import LinearScale, padded_range, value_range

logger = logging.getLogger(__name__)


def layout_line(data: LineChartData, style: LineChartStyle, ctx: FrameContext) -> Frame:
    frame = Frame(ctx.width, ctx.height, background=style.chart.background_color)
    series = [s for s in data.series if s.points]
    if not series:
        logger.debug("Line chart has no series with points")
        return frame

    all_points = [p for s in series for p in s.points]
    x_min, x_max = value_range(p.safe_x for p in all_points)  # type: ignore[misc]
    y_lo, y_hi = value_range(p.safe_y for p in all_points)  # type: ignore[misc]
    y_min, y_max = padded_range(y_lo, y_hi)

    axis = style.axis
    area = chart_area(ctx.width, ctx.height, style.chart, axis)
    grid_color = resolve_grid_line_color(style.grid.line_color, ctx.dark)
    label_color = resolve_axis_label_color(axis.label_color, ctx.dark)
    frame.extend(grid_commands(style.grid, grid_color, area, axis.y_label_count))
    if axis.show_y_axis:
        frame.extend(y_axis_label_commands(y_min, y_max, axis, label_color, area))
    if axis.show_x_axis and data.x_labels:
        frame.extend(x_axis_label_commands(data.x_labels, axis, label_color, area))
    if area.is_empty:
        logger.debug("Line chart area is empty at %sx%s", ctx.width, ctx.height)
        return frame

    x_scale = LinearScale(x_min, x_max, area.left, area.right)
    y_scale = LinearScale(y_min, y_max, area.bottom, area.top)
    clip = Rect(area.left, area.top, area.left + area.width * ctx.progress, area.bottom)

    overlay: List[Command] = []
    for n, s in enumerate(series):
        color = ctx.color(n, s.color)
        mapped: List[Point] = [
            (x_scale(p.safe_x), y_scale(p.safe_y)) for p in s.points
        ]
        if style.curved:
            path = bezier_path(mapped, style.tension)
        else:
            path = linear_path(mapped)

        clipped: List[Command] = []
        if style.gradient_fill and len(mapped) >= 2:
            clipped.append(
                gradient_fill(
                    path,
                    color,
                    style.gradient_alpha,
                    area.top,
                    area.bottom,
                    mapped[0][0],
                    mapped[-1][0],
                )
            )
        clipped.append(DrawPath(path, color, stroke_width=style.line_width))
        if style.show_dots:
            clipped.extend(DrawCircle(pt, style.dot_radius, color) for pt in mapped)
        frame.add(ClipGroup(clip, tuple(clipped)))

        if ctx.pointer is None:
            continue
        nearest = nearest_x_index(ctx.pointer[0], [x for x, _ in mapped])
        if nearest is None:
            continue
        point = s.points[nearest]
        position = mapped[nearest]
        if style.show_tooltip_on_touch:
            if n == 0:
                overlay.append(indicator_line(position[0], area.top, area.bottom))
            overlay.extend(
                tooltip_commands(
                    position,
                    point.label or format_value(point.y),
                    style.tooltip,
                    color,
                    ctx.width,
                    ctx.height,
                    ctx.measure,
                )
            )
        frame.selections.append(
            Selection(
                index=nearest,
                series_index=n,
                value=point.safe_y,
                label=point.label,
                position=position,
            )
        )

    frame.extend(overlay)
    return frame


__all__ = ["layout_line"]

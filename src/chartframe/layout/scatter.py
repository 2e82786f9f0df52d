"""Scatter and bubble layout.

Both families share the same axis handling: x maps over the raw data
range, y over the data range padded by 10% top and bottom. A bubble
additionally maps its ``size`` onto a radius between the style's minimum
and maximum bubble radius.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..colors import Color, resolve_axis_label_color, resolve_grid_line_color
from ..commands import DrawCircle, Frame, Point, Rect, Selection
from ..models import BubbleChartData, BubblePoint, ScatterChartData, ScatterPoint
from ..style import BubbleChartStyle, ScatterChartStyle
from ..utils import format_value, is_finite
from .frame import (
    FrameContext,
    chart_area,
    grid_commands,
    indicator_line,
    tooltip_commands,
    x_axis_label_commands,
    y_axis_label_commands,
)
from .hit_test import nearest_point_index
from .scale import LinearScale, padded_range, value_range

logger = logging.getLogger(__name__)

AnyPoint = Union[ScatterPoint, BubblePoint]
AnyStyle = Union[ScatterChartStyle, BubbleChartStyle]


@dataclass(frozen=True)
class PlottedPoint:
    """A finite input point, its index in the data and its pixel centre."""

    index: int
    point: AnyPoint
    center: Point


def finite_points(points: Sequence[AnyPoint]) -> List[Tuple[int, AnyPoint]]:
    """Points whose coordinates (and size, for bubbles) are all finite."""
    kept = []
    for i, p in enumerate(points):
        if not (is_finite(p.x) and is_finite(p.y)):
            continue
        if isinstance(p, BubblePoint) and not is_finite(p.size):
            continue
        kept.append((i, p))
    return kept


def bubble_radius(
    size: float, min_size: float, size_range: float, min_r: float, max_r: float
) -> float:
    return min_r + (size - min_size) / size_range * (max_r - min_r)


def _plot(
    points: Sequence[Tuple[int, AnyPoint]],
    x_labels: Sequence[str],
    style: AnyStyle,
    ctx: FrameContext,
    frame: Frame,
) -> Optional[Tuple[Rect, List[PlottedPoint]]]:
    """Draw grid and axis labels and map ``points`` into the chart area."""
    x_min, x_max = value_range(p.safe_x for _, p in points)  # type: ignore[misc]
    y_lo, y_hi = value_range(p.safe_y for _, p in points)  # type: ignore[misc]
    y_min, y_max = padded_range(y_lo, y_hi)

    axis = style.axis
    area = chart_area(ctx.width, ctx.height, style.chart, axis)
    grid_color = resolve_grid_line_color(style.grid.line_color, ctx.dark)
    label_color = resolve_axis_label_color(axis.label_color, ctx.dark)
    frame.extend(grid_commands(style.grid, grid_color, area, axis.y_label_count))
    if axis.show_y_axis:
        frame.extend(y_axis_label_commands(y_min, y_max, axis, label_color, area))
    if axis.show_x_axis and x_labels:
        frame.extend(x_axis_label_commands(x_labels, axis, label_color, area))
    if area.is_empty:
        logger.debug("Chart area is empty at %sx%s", ctx.width, ctx.height)
        return None

    x_scale = LinearScale(x_min, x_max, area.left, area.right)
    y_scale = LinearScale(y_min, y_max, area.bottom, area.top)
    plotted = [
        PlottedPoint(i, p, (x_scale(p.safe_x), y_scale(p.safe_y))) for i, p in points
    ]
    return area, plotted


def _touch(
    plotted: Sequence[PlottedPoint],
    area: Rect,
    style: AnyStyle,
    ctx: FrameContext,
    frame: Frame,
) -> None:
    nearest = nearest_point_index(ctx.pointer, [p.center for p in plotted])
    if nearest is None:
        return
    hit = plotted[nearest]
    point = hit.point
    color: Color = ctx.color(hit.index, point.color)
    if style.show_tooltip_on_touch:
        frame.add(indicator_line(hit.center[0], area.top, area.bottom))
        frame.extend(
            tooltip_commands(
                hit.center,
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
            index=hit.index,
            value=point.safe_y,
            label=point.label,
            position=hit.center,
        )
    )


def layout_scatter(
    data: ScatterChartData, style: ScatterChartStyle, ctx: FrameContext
) -> Frame:
    frame = Frame(ctx.width, ctx.height, background=style.chart.background_color)
    points = finite_points(data.points)
    if not points:
        logger.debug("Scatter chart has no finite points")
        return frame
    plot = _plot(points, data.x_labels, style, ctx, frame)
    if plot is None:
        return frame
    area, plotted = plot

    radius = style.dot_radius * ctx.progress
    for p in plotted:
        frame.add(DrawCircle(p.center, radius, ctx.color(p.index, p.point.color)))
    _touch(plotted, area, style, ctx, frame)
    return frame


def layout_bubble(
    data: BubbleChartData, style: BubbleChartStyle, ctx: FrameContext
) -> Frame:
    frame = Frame(ctx.width, ctx.height, background=style.chart.background_color)
    points = finite_points(data.points)
    if not points:
        logger.debug("Bubble chart has no finite points")
        return frame
    plot = _plot(points, data.x_labels, style, ctx, frame)
    if plot is None:
        return frame
    area, plotted = plot

    sizes = [p.safe_size for _, p in points]  # type: ignore[union-attr]
    min_size = min(sizes)
    size_range = (max(sizes) - min_size) or 1.0
    for p in plotted:
        r = bubble_radius(
            p.point.safe_size,  # type: ignore[union-attr]
            min_size,
            size_range,
            style.min_bubble_radius,
            style.max_bubble_radius,
        )
        color = ctx.color(p.index, p.point.color).multiply_alpha(style.bubble_alpha)
        frame.add(DrawCircle(p.center, r * ctx.progress, color))
    _touch(plotted, area, style, ctx, frame)
    return frame


__all__ = [
    "PlottedPoint",
    "finite_points",
    "bubble_radius",
    "layout_scatter",
    "layout_bubble",
]

"""Grouped and stacked bar layout, vertical or horizontal."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..colors import Color, resolve_axis_label_color, resolve_grid_line_color
from ..commands import Command, CornerRadii, DrawRect, DrawText, Frame, Rect, Selection
from ..models import BarChartData, BarEntry, BarGroup
from ..style import BarChartStyle
from ..utils import format_value
from .frame import (
    AXIS_LABEL_GAP,
    MIN_LABEL_EXTENT,
    FrameContext,
    chart_area,
    grid_commands,
    tooltip_commands,
    x_axis_label_commands,
    y_axis_label_commands,
)
from .hit_test import bar_entry_at, bar_group_at
from .scale import bar_headroom_max

logger = logging.getLogger(__name__)


def slot_size(extent: float, count: int, spacing: float) -> float:
    """Width of one of ``count`` slots sharing ``extent`` with ``spacing`` between.

    Never smaller than 1 pixel.
    """
    if count <= 0:
        return 1.0
    return max(1.0, (extent - spacing * max(0, count - 1)) / count)


def stacked_segments(
    entry: BarEntry,
    palette: Sequence[Color],
    slot_start: float,
    slot_width: float,
    baseline: float,
    extent: float,
    adjusted_max: float,
    progress: float,
    alpha: float,
    corner_radius: float,
    horizontal: bool = False,
) -> List[DrawRect]:
    """Rectangles for one bar, one per stacked value.

    Vertical bars grow up from ``baseline``; horizontal bars grow right
    from it. Only the outermost segment gets rounded corners.
    """
    values = entry.safe_values
    colors = entry.colors or tuple(palette)
    rects: List[DrawRect] = []
    current = baseline
    last = len(values) - 1
    for i, value in enumerate(values):
        length = value / adjusted_max * extent * progress
        color = colors[i % len(colors)].multiply_alpha(alpha)
        rounded = i == last and corner_radius > 0.0
        if horizontal:
            rect = Rect(current, slot_start, current + length, slot_start + slot_width)
            radii = (
                CornerRadii(top_right=corner_radius, bottom_right=corner_radius)
                if rounded
                else CornerRadii()
            )
            current += length
        else:
            rect = Rect(slot_start, current - length, slot_start + slot_width, current)
            radii = (
                CornerRadii(top_left=corner_radius, top_right=corner_radius)
                if rounded
                else CornerRadii()
            )
            current -= length
        rects.append(DrawRect(rect, color, radii))
    return rects


def _category_labels_left(
    labels: Sequence[str],
    style: BarChartStyle,
    color: Color,
    area: Rect,
    group_width: float,
) -> List[Command]:
    axis = style.axis
    if not labels or area.height < MIN_LABEL_EXTENT:
        return []
    commands: List[Command] = []
    for i, label in enumerate(labels):
        y = (
            area.top
            + i * (group_width + style.group_spacing)
            + group_width / 2.0
            + axis.label_size / 3.0
        )
        commands.append(
            DrawText(
                label,
                (area.left - AXIS_LABEL_GAP, y),
                color,
                axis.label_size,
                align="right",
            )
        )
    return commands


def _axis_commands(
    style: BarChartStyle,
    groups: Sequence[BarGroup],
    area: Rect,
    adjusted_max: float,
    group_width: float,
    dark: bool,
) -> List[Command]:
    axis = style.axis
    label_color = resolve_axis_label_color(axis.label_color, dark)
    grid_color = resolve_grid_line_color(style.grid.line_color, dark)
    commands: List[Command] = grid_commands(
        style.grid, grid_color, area, axis.y_label_count
    )
    labels = [g.label for g in groups]
    has_labels = any(labels)

    if not style.horizontal:
        if axis.show_y_axis:
            commands += y_axis_label_commands(
                0.0, adjusted_max, axis, label_color, area
            )
        if axis.show_x_axis and has_labels:
            commands += x_axis_label_commands(
                labels, axis, label_color, area, group_width, style.group_spacing
            )
        return commands

    # Horizontal bars: values run along the bottom, categories down the left.
    if axis.show_x_axis and axis.y_label_count > 0:
        count = axis.y_label_count
        values = [format_value(adjusted_max * i / count) for i in range(count + 1)]
        commands += x_axis_label_commands(values, axis, label_color, area)
    if axis.show_y_axis and has_labels:
        commands += _category_labels_left(labels, style, label_color, area, group_width)
    return commands


def _tooltip_text(group: BarGroup, total: float) -> str:
    value = format_value(total)
    return f"{group.label}: {value}" if group.label else value


def layout_bar(data: BarChartData, style: BarChartStyle, ctx: FrameContext) -> Frame:
    frame = Frame(ctx.width, ctx.height, background=style.chart.background_color)
    groups = [g for g in data.groups if g.entries]
    if not groups:
        logger.debug("Bar chart has no non-empty groups; nothing to draw")
        return frame

    max_total = max(e.total for g in groups for e in g.entries)
    adjusted_max = bar_headroom_max(max_total)
    area = chart_area(ctx.width, ctx.height, style.chart, style.axis)
    if area.is_empty:
        logger.debug("Bar chart area is empty at %sx%s", ctx.width, ctx.height)
        return frame

    horizontal = style.horizontal
    if horizontal:
        cat_start, cat_extent = area.top, area.height
        baseline, value_extent = area.left, area.width
    else:
        cat_start, cat_extent = area.left, area.width
        baseline, value_extent = area.bottom, area.height

    group_count = len(groups)
    group_width = slot_size(cat_extent, group_count, style.group_spacing)
    frame.extend(
        _axis_commands(style, groups, area, adjusted_max, group_width, ctx.dark)
    )

    selected: Optional[int] = None
    if ctx.pointer is not None:
        coord = ctx.pointer[1] if horizontal else ctx.pointer[0]
        selected = bar_group_at(
            coord, cat_start, cat_extent, group_count, group_width, style.group_spacing
        )

    tooltip: List[Command] = []
    for g, group in enumerate(groups):
        group_start = cat_start + g * (group_width + style.group_spacing)
        entry_count = len(group.entries)
        bar_width = slot_size(group_width, entry_count, style.bar_spacing)
        highlighted = not style.highlight_on_touch or selected is None or selected == g
        alpha = 1.0 if highlighted else style.highlight_alpha

        for e, entry in enumerate(group.entries):
            slot = group_start + e * (bar_width + style.bar_spacing)
            frame.extend(
                stacked_segments(
                    entry,
                    ctx.palette,
                    slot,
                    bar_width,
                    baseline,
                    value_extent,
                    adjusted_max,
                    ctx.progress,
                    alpha,
                    style.corner_radius,
                    horizontal=horizontal,
                )
            )

        if selected != g or ctx.pointer is None:
            continue
        coord = ctx.pointer[1] if horizontal else ctx.pointer[0]
        e = bar_entry_at(coord, group_start, entry_count, bar_width, style.bar_spacing)
        if e is None:
            continue
        entry = group.entries[e]
        total = entry.total
        length = total / adjusted_max * value_extent * ctx.progress
        slot_mid = group_start + e * (bar_width + style.bar_spacing) + bar_width / 2.0
        position: Tuple[float, float]
        if horizontal:
            position = (baseline + length, slot_mid)
        else:
            position = (slot_mid, baseline - length)
        tooltip = tooltip_commands(
            position,
            _tooltip_text(group, total),
            style.tooltip,
            ctx.color(e),
            ctx.width,
            ctx.height,
            ctx.measure,
        )
        frame.selections.append(
            Selection(
                index=g,
                sub_index=e,
                value=total,
                label=group.label,
                position=position,
            )
        )

    frame.extend(tooltip)
    return frame


__all__ = ["layout_bar", "slot_size", "stacked_segments"]

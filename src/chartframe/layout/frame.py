"""Shared chart-frame pieces: chart area, grid, axis labels and tooltips.

Every axis-based chart (line, bar, scatter, bubble) lays its data out
inside the rectangle returned by :func:`chart_area` and reuses the grid,
label and tooltip builders here, so that padding and axis behaviour stay
identical across chart families.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Sequence

from ..colors import DEFAULT_PALETTE, INDICATOR_LINE, Color, palette_color
from ..commands import (
    Command,
    CornerRadii,
    DrawCircle,
    DrawLine,
    DrawRect,
    DrawText,
    Point,
    Rect,
)
from ..style import AxisStyle, ChartStyle, GridStyle, TooltipStyle
from ..utils import format_value

TextMeasurer = Callable[[str, float, bool], float]

# Labels are dropped when the chart area is smaller than this in the
# direction the labels run along.
MIN_LABEL_EXTENT = 80.0
AXIS_LABEL_GAP = 8.0
TOOLTIP_ARROW_HEIGHT = 6.0
TOOLTIP_GAP = 4.0


@dataclass(frozen=True)
class FrameContext:
    """Per-frame inputs shared by every layout engine.

    ``emphasis`` maps a slice index to its current scale factor; slices not
    listed are drawn at scale 1.
    """

    width: float
    height: float
    progress: float = 1.0
    pointer: Optional[Point] = None
    dark: bool = False
    palette: Sequence[Color] = DEFAULT_PALETTE
    measure: TextMeasurer = field(default=None)  # type: ignore[assignment]
    emphasis: Mapping[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.measure is None:
            object.__setattr__(self, "measure", approx_text_width)

    def color(self, index: int, explicit: Optional[Color] = None) -> Color:
        return palette_color(self.palette, index, explicit)


def approx_text_width(text: str, size: float, bold: bool = False) -> float:
    """Font-free width estimate used when no backend measurer is supplied."""
    return len(text) * size * (0.6 if bold else 0.55)


def chart_area(
    width: float, height: float, chart: ChartStyle, axis: AxisStyle
) -> Rect:
    """Data rectangle left after padding and axis-label gutters."""
    pad = chart.chart_padding
    y_axis_width = axis.y_axis_width if axis.show_y_axis else 0.0
    x_axis_height = axis.x_axis_height if axis.show_x_axis else 0.0
    return Rect(
        left=pad + y_axis_width,
        top=pad,
        right=width - pad,
        bottom=height - pad - x_axis_height,
    )


def grid_commands(
    style: GridStyle, color: Color, area: Rect, count: int
) -> List[Command]:
    commands: List[Command] = []
    if count <= 0 or area.is_empty:
        return commands
    if style.show_horizontal_lines:
        step = area.height / count
        for i in range(count + 1):
            y = area.top + step * i
            commands.append(
                DrawLine(
                    (area.left, y),
                    (area.right, y),
                    color,
                    style.stroke_width,
                    style.dash_pattern,
                )
            )
    if style.show_vertical_lines:
        step = area.width / count
        for i in range(count + 1):
            x = area.left + step * i
            commands.append(
                DrawLine(
                    (x, area.top),
                    (x, area.bottom),
                    color,
                    style.stroke_width,
                    style.dash_pattern,
                )
            )
    return commands


def x_axis_label_commands(
    labels: Sequence[str],
    axis: AxisStyle,
    color: Color,
    area: Rect,
    group_width: float = 0.0,
    group_spacing: float = 0.0,
) -> List[Command]:
    """Labels under the chart area.

    With a positive ``group_width`` each label is centred under its bar
    group; otherwise labels are spread edge to edge across the area.
    """
    if not labels or area.width < MIN_LABEL_EXTENT:
        return []
    y = area.bottom + axis.label_size + AXIS_LABEL_GAP
    if len(labels) == 1:
        return [DrawText(labels[0], (area.center[0], y), color, axis.label_size)]

    commands: List[Command] = []
    if group_width > 0.0:
        for i, label in enumerate(labels):
            x = area.left + i * (group_width + group_spacing) + group_width / 2.0
            commands.append(DrawText(label, (x, y), color, axis.label_size))
    else:
        step = area.width / (len(labels) - 1)
        for i, label in enumerate(labels):
            commands.append(
                DrawText(label, (area.left + step * i, y), color, axis.label_size)
            )
    return commands


def y_axis_label_commands(
    min_value: float, max_value: float, axis: AxisStyle, color: Color, area: Rect
) -> List[Command]:
    """Evenly spaced value labels to the left of the chart area."""
    count = axis.y_label_count
    if count <= 0 or area.height < MIN_LABEL_EXTENT:
        return []
    step = area.height / count
    value_step = (max_value - min_value) / count
    commands: List[Command] = []
    for i in range(count + 1):
        y = area.bottom - step * i + axis.label_size / 3.0
        text = format_value(min_value + value_step * i)
        commands.append(
            DrawText(
                text,
                (area.left - AXIS_LABEL_GAP, y),
                color,
                axis.label_size,
                align="right",
            )
        )
    return commands


def indicator_line(x: float, top: float, bottom: float) -> DrawLine:
    return DrawLine((x, top), (x, bottom), INDICATOR_LINE, 1.0)


def tooltip_commands(
    position: Point,
    text: str,
    style: TooltipStyle,
    line_color: Color,
    canvas_width: float,
    canvas_height: float,
    measure: Optional[TextMeasurer] = None,
) -> List[Command]:
    """Rounded bubble above ``position`` plus the indicator dot on the point.

    The bubble flips below the point when there is no room above and is
    clamped so it never leaves the canvas. Nothing is drawn on a canvas
    smaller than the text itself.
    """
    text_size = style.text_size
    if canvas_width < text_size or canvas_height < text_size:
        return []

    measure = measure or approx_text_width
    text_width = measure(text, text_size, True)
    bubble_w = min(text_width + style.padding_horizontal * 2.0, canvas_width)
    bubble_h = min(text_size + style.padding_vertical * 2.0, canvas_height)

    px, py = position
    left = px - bubble_w / 2.0
    top = py - bubble_h - TOOLTIP_ARROW_HEIGHT - style.indicator_radius - TOOLTIP_GAP

    if left < 0.0:
        left = 0.0
    if left + bubble_w > canvas_width:
        left = max(0.0, canvas_width - bubble_w)
    if top < 0.0:
        top = py + style.indicator_radius + TOOLTIP_ARROW_HEIGHT + TOOLTIP_GAP
    if top + bubble_h > canvas_height:
        top = max(0.0, canvas_height - bubble_h)

    r = style.corner_radius
    border = style.indicator_border_color or line_color
    baseline = top + style.padding_vertical + text_size * 0.85
    ring = style.indicator_radius + style.indicator_border_width
    return [
        DrawRect(
            Rect(left, top, left + bubble_w, top + bubble_h),
            style.background_color,
            CornerRadii(r, r, r, r),
        ),
        DrawText(
            text,
            (left + style.padding_horizontal, baseline),
            style.text_color,
            text_size,
            align="left",
            bold=True,
        ),
        DrawCircle(position, ring, border),
        DrawCircle(position, style.indicator_radius, style.indicator_color),
    ]


__all__ = [
    "TextMeasurer",
    "FrameContext",
    "MIN_LABEL_EXTENT",
    "approx_text_width",
    "chart_area",
    "grid_commands",
    "x_axis_label_commands",
    "y_axis_label_commands",
    "indicator_line",
    "tooltip_commands",
]

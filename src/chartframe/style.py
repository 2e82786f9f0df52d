"""Style records for every chart family.

Lengths are logical pixels. Colours left as ``None`` are resolved against
the current light/dark theme when a frame is computed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .colors import TRANSPARENT, WHITE, Color


@dataclass(frozen=True)
class ChartStyle:
    """Base settings shared by all charts."""

    background_color: Color = TRANSPARENT
    chart_padding: float = 16.0


@dataclass(frozen=True)
class AxisStyle:
    show_x_axis: bool = True
    show_y_axis: bool = False
    label_color: Optional[Color] = None
    label_size: float = 11.0
    y_label_count: int = 5
    y_axis_width: float = 40.0
    x_axis_height: float = 20.0


@dataclass(frozen=True)
class GridStyle:
    show_horizontal_lines: bool = True
    show_vertical_lines: bool = False
    line_color: Optional[Color] = None
    stroke_width: float = 0.5
    dash_pattern: Optional[Tuple[float, ...]] = None


@dataclass(frozen=True)
class TooltipStyle:
    background_color: Color = Color.from_hex(0xFF333333)
    text_color: Color = WHITE
    text_size: float = 12.0
    corner_radius: float = 8.0
    padding_horizontal: float = 12.0
    padding_vertical: float = 6.0
    indicator_radius: float = 5.0
    indicator_color: Color = WHITE
    indicator_border_color: Optional[Color] = None
    indicator_border_width: float = 2.0


@dataclass(frozen=True)
class LineChartStyle:
    line_width: float = 2.0
    curved: bool = True
    tension: float = 0.3
    show_dots: bool = False
    dot_radius: float = 4.0
    gradient_fill: bool = True
    gradient_alpha: float = 0.15
    show_tooltip_on_touch: bool = True
    animation_duration_ms: int = 800
    chart: ChartStyle = field(default_factory=ChartStyle)
    axis: AxisStyle = field(default_factory=AxisStyle)
    grid: GridStyle = field(default_factory=GridStyle)
    tooltip: TooltipStyle = field(default_factory=TooltipStyle)


@dataclass(frozen=True)
class BarChartStyle:
    """``corner_radius`` rounds the top (vertical) or right (horizontal) edge."""

    corner_radius: float = 6.0
    bar_spacing: float = 4.0
    group_spacing: float = 12.0
    horizontal: bool = False
    animation_duration_ms: int = 600
    highlight_on_touch: bool = True
    highlight_alpha: float = 0.3
    chart: ChartStyle = field(default_factory=ChartStyle)
    axis: AxisStyle = field(default_factory=AxisStyle)
    grid: GridStyle = field(default_factory=GridStyle)
    tooltip: TooltipStyle = field(default_factory=TooltipStyle)


@dataclass(frozen=True)
class DonutChartStyle:
    """``hole_radius`` is a ratio of the outer radius (0 = filled wedges)."""

    hole_radius: float = 0.6
    slice_spacing: float = 2.0
    selected_scale: float = 1.05
    selection_duration_ms: int = 200
    show_labels: bool = True
    animation_duration_ms: int = 800
    start_angle: float = -90.0
    label_color: Color = WHITE
    chart: ChartStyle = field(default_factory=ChartStyle)


@dataclass(frozen=True)
class PieChartStyle(DonutChartStyle):
    hole_radius: float = 0.0


@dataclass(frozen=True)
class GaugeChartStyle:
    """``sweep_angle`` 360 draws a full ring, 240 an open-bottom gauge."""

    track_color: Optional[Color] = None
    progress_color: Color = Color.from_hex(0xFF3182F6)
    stroke_width: float = 12.0
    round_cap: bool = True
    sweep_angle: float = 240.0
    show_center_text: bool = True
    center_text_size: float = 24.0
    center_text_color: Optional[Color] = None
    animation_duration_ms: int = 1000
    chart: ChartStyle = field(default_factory=ChartStyle)


@dataclass(frozen=True)
class RadarChartStyle:
    web_line_color: Optional[Color] = None
    web_line_width: float = 1.0
    fill_alpha: float = 0.25
    outline_width: float = 2.0
    show_dots: bool = True
    dot_radius: float = 4.0
    web_levels: int = 5
    label_size: float = 11.0
    label_color: Optional[Color] = None
    animation_duration_ms: int = 800
    chart: ChartStyle = field(default_factory=ChartStyle)


@dataclass(frozen=True)
class ScatterChartStyle:
    dot_radius: float = 5.0
    show_tooltip_on_touch: bool = True
    animation_duration_ms: int = 600
    chart: ChartStyle = field(default_factory=ChartStyle)
    axis: AxisStyle = field(default_factory=AxisStyle)
    grid: GridStyle = field(default_factory=GridStyle)
    tooltip: TooltipStyle = field(default_factory=TooltipStyle)


@dataclass(frozen=True)
class BubbleChartStyle:
    min_bubble_radius: float = 4.0
    max_bubble_radius: float = 30.0
    bubble_alpha: float = 0.7
    show_tooltip_on_touch: bool = True
    animation_duration_ms: int = 600
    chart: ChartStyle = field(default_factory=ChartStyle)
    axis: AxisStyle = field(default_factory=AxisStyle)
    grid: GridStyle = field(default_factory=GridStyle)
    tooltip: TooltipStyle = field(default_factory=TooltipStyle)


__all__ = [
    "ChartStyle",
    "AxisStyle",
    "GridStyle",
    "TooltipStyle",
    "LineChartStyle",
    "BarChartStyle",
    "DonutChartStyle",
    "PieChartStyle",
    "GaugeChartStyle",
    "RadarChartStyle",
    "ScatterChartStyle",
    "BubbleChartStyle",
]

"""Frame computation entry point.

:func:`compute_frame` is a pure function: the same data, size, style,
progress and pointer always yield the same :class:`~chartframe.commands.Frame`.
Dispatch goes through a registry keyed on the chart-data type.
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Callable,
    Dict,
    Mapping,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
)

from .colors import DEFAULT_PALETTE, Color
from .commands import Frame, Point
from .layout import (
    FrameContext,
    TextMeasurer,
    layout_bar,
    layout_bubble,
    layout_donut,
    layout_gauge,
    layout_line,
    layout_radar,
    layout_scatter,
)
from .models import (
    BarChartData,
    BubbleChartData,
    DonutChartData,
    GaugeChartData,
    LineChartData,
    PieChartData,
    RadarChartData,
    ScatterChartData,
)
from .style import (
    BarChartStyle,
    BubbleChartStyle,
    DonutChartStyle,
    GaugeChartStyle,
    LineChartStyle,
    PieChartStyle,
    RadarChartStyle,
    ScatterChartStyle,
)
from .utils import clamp, is_finite, safe

logger = logging.getLogger(__name__)

Size = Tuple[float, float]


class ChartKind(NamedTuple):
    layout: Callable[[Any, Any, FrameContext], Frame]
    style_type: type


_LAYOUTS: Dict[type, ChartKind] = {
    LineChartData: ChartKind(layout_line, LineChartStyle),
    BarChartData: ChartKind(layout_bar, BarChartStyle),
    DonutChartData: ChartKind(layout_donut, DonutChartStyle),
    PieChartData: ChartKind(layout_donut, PieChartStyle),
    GaugeChartData: ChartKind(layout_gauge, GaugeChartStyle),
    RadarChartData: ChartKind(layout_radar, RadarChartStyle),
    ScatterChartData: ChartKind(layout_scatter, ScatterChartStyle),
    BubbleChartData: ChartKind(layout_bubble, BubbleChartStyle),
}


def _kind(data: object) -> ChartKind:
    for cls in type(data).__mro__:
        kind = _LAYOUTS.get(cls)
        if kind is not None:
            return kind
    raise TypeError(f"Unsupported chart data type: {type(data).__name__}")


def default_style(data: object) -> Any:
    """Default style record for the chart family of ``data``."""
    return _kind(data).style_type()


def animation_duration_ms(data: object, style: Optional[Any] = None) -> int:
    style = style if style is not None else default_style(data)
    return int(style.animation_duration_ms)


def compute_frame(
    data: object,
    size: Size,
    style: Optional[Any] = None,
    progress: float = 1.0,
    pointer: Optional[Point] = None,
    dark: bool = False,
    palette: Sequence[Color] = DEFAULT_PALETTE,
    measure: Optional[TextMeasurer] = None,
    emphasis: Optional[Mapping[int, float]] = None,
) -> Frame:
    """Lay out one frame of ``data`` on a canvas of ``size`` (width, height).

    :param style: Style record matching the data's chart family; ``None``
        uses that family's defaults.
    :param progress: Entry-animation progress in ``[0, 1]``.
    :param pointer: Pointer position in canvas pixels, or ``None``.
    :param dark: Resolve theme-dependent default colours for a dark scheme.
    :param palette: Colours assigned by index to items without their own.
    :param measure: ``measure(text, size, bold) -> width`` used to fit
        labels and tooltips; a character-count estimate when omitted.
    :param emphasis: Donut/pie slice index to current scale factor.
    :raises TypeError: If ``data`` or ``style`` is of an unsupported type.
    :raises ValueError: For a negative or non-finite size or an empty palette.
    """
    kind = _kind(data)
    width, height = size
    if not (is_finite(width) and is_finite(height)) or width < 0 or height < 0:
        raise ValueError(
            f"Canvas size must be finite and non-negative, got {size!r}"
        )
    if not palette:
        raise ValueError("palette must contain at least one colour")
    if style is None:
        style = kind.style_type()
    elif not isinstance(style, _base_style(kind.style_type)):
        raise TypeError(
            f"{type(style).__name__} cannot style {type(data).__name__}; "
            f"expected {kind.style_type.__name__}"
        )

    ctx = FrameContext(
        width=float(width),
        height=float(height),
        progress=clamp(safe(progress), 0.0, 1.0),
        pointer=pointer,
        dark=dark,
        palette=tuple(palette),
        measure=measure,  # type: ignore[arg-type]
        emphasis=dict(emphasis or {}),
    )
    if width == 0 or height == 0:
        logger.debug("Zero-sized canvas; returning an empty frame")
        return Frame(ctx.width, ctx.height, background=style.chart.background_color)
    return kind.layout(data, style, ctx)


def _base_style(style_type: type) -> type:
    # Pie and donut share one layout, so either style record fits both.
    return DonutChartStyle if issubclass(style_type, DonutChartStyle) else style_type


__all__ = [
    "ChartKind",
    "compute_frame",
    "default_style",
    "animation_duration_ms",
]

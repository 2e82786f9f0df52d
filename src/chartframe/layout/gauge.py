"""Gauge layout: a track arc, an animated progress arc and centre text."""

from __future__ import annotations

import logging

from ..colors import resolve_gauge_center_text_color, resolve_gauge_track_color
from ..commands import DrawArc, DrawText, Frame
from ..models import GaugeChartData
from ..style import GaugeChartStyle
from ..utils import clamp, format_value
from .frame import FrameContext

logger = logging.getLogger(__name__)

# Diameter at which centre text is drawn at full size.
REFERENCE_DIAMETER = 120.0
MIN_TEXT_SCALE = 0.3
LABEL_ALPHA = 0.6


def gauge_start_angle(sweep_angle: float) -> float:
    """Start angle that centres the open gap at 6 o'clock."""
    return 90.0 + (360.0 - sweep_angle) / 2.0


def gauge_diameter(width: float, height: float, style: GaugeChartStyle) -> float:
    return min(width, height) - style.chart.chart_padding * 2.0 - style.stroke_width


def layout_gauge(
    data: GaugeChartData, style: GaugeChartStyle, ctx: FrameContext
) -> Frame:
    frame = Frame(ctx.width, ctx.height, background=style.chart.background_color)
    diameter = gauge_diameter(ctx.width, ctx.height, style)
    if diameter <= 0.0:
        logger.debug("Gauge diameter %.1f leaves no room to draw", diameter)
        return frame

    center = (ctx.width / 2.0, ctx.height / 2.0)
    radius = diameter / 2.0
    start = gauge_start_angle(style.sweep_angle)

    frame.add(
        DrawArc(
            center,
            radius,
            start,
            style.sweep_angle,
            resolve_gauge_track_color(style.track_color, ctx.dark),
            stroke_width=style.stroke_width,
            round_cap=style.round_cap,
        )
    )
    progress_sweep = style.sweep_angle * data.ratio * ctx.progress
    if progress_sweep > 0.0:
        frame.add(
            DrawArc(
                center,
                radius,
                start,
                progress_sweep,
                style.progress_color,
                stroke_width=style.stroke_width,
                round_cap=style.round_cap,
            )
        )

    if not style.show_center_text:
        return frame
    text_scale = clamp(diameter / REFERENCE_DIAMETER, 0.0, 1.0)
    if text_scale < MIN_TEXT_SCALE:
        return frame

    color = resolve_gauge_center_text_color(style.center_text_color, ctx.dark)
    size = style.center_text_size * text_scale
    label_size = size * 0.5
    block = size + (label_size if data.label else 0.0)
    value_baseline = center[1] - block / 2.0 + size * 0.85
    frame.add(
        DrawText(
            format_value(data.safe_value * ctx.progress),
            (center[0], value_baseline),
            color,
            size,
            bold=True,
        )
    )
    if data.label:
        frame.add(
            DrawText(
                data.label,
                (center[0], value_baseline + label_size * 1.1),
                color.with_alpha(LABEL_ALPHA),
                label_size,
            )
        )
    return frame


__all__ = ["layout_gauge", "gauge_start_angle", "gauge_diameter"]

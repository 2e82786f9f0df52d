"""Donut and pie layout: slice sweeps, gaps, emphasis offset and labels."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from ..commands import DrawArc, DrawText, Frame, Point, Selection
from ..models import DonutChartData, PieChartData, Slice
from ..style import DonutChartStyle
from ..utils import clamp, is_finite, polar_point
from .frame import FrameContext
from .hit_test import slice_at

logger = logging.getLogger(__name__)

MAX_HOLE_RATIO = 0.95
MIN_SWEEP = 0.1
MIN_LABEL_SWEEP = 15.0
MIN_LABEL_RADIUS = 40.0
LABEL_PROGRESS = 0.8
LABEL_MARGIN = 4.0


@dataclass(frozen=True)
class SliceGeometry:
    """Resolved angles for one visible slice (degrees, clockwise from 3 o'clock)."""

    index: int
    slice: Slice
    raw_sweep: float
    start: float
    sweep: float
    drawn_start: float
    drawn_sweep: float

    @property
    def mid_angle(self) -> float:
        return self.start + self.sweep / 2.0


def visible_slices(slices: Sequence[Slice]) -> List[Slice]:
    return [s for s in slices if is_finite(s.value) and s.value > 0.0]


def gap_angle(spacing: float, radius: float, slice_count: int) -> float:
    """Arc-length ``spacing`` converted to degrees on a circle of ``radius``."""
    if slice_count <= 1:
        return 0.0
    circumference = 2.0 * math.pi * radius
    if circumference <= 0.0:
        return 0.0
    return spacing / circumference * 360.0


def slice_geometry(
    slices: Sequence[Slice], start_angle: float, gap: float, progress: float
) -> List[SliceGeometry]:
    total = sum(s.value for s in slices)
    result: List[SliceGeometry] = []
    if total <= 0.0:
        return result
    current = start_angle
    for i, s in enumerate(slices):
        raw = s.value / total * 360.0
        sweep = raw * progress
        result.append(
            SliceGeometry(
                index=i,
                slice=s,
                raw_sweep=raw,
                start=current,
                sweep=sweep,
                drawn_start=current + gap / 2.0,
                drawn_sweep=max(MIN_SWEEP, sweep - gap),
            )
        )
        current += sweep
    return result


def _label_command(
    geom: SliceGeometry,
    center: Point,
    label_radius: float,
    radius: float,
    style: DonutChartStyle,
    ctx: FrameContext,
) -> Optional[DrawText]:
    x, y = polar_point(center[0], center[1], label_radius, geom.mid_angle)
    size = clamp(radius * 0.12, 8.0, 14.0)
    text = geom.slice.label
    width = ctx.measure(text, size, True)
    if x - width / 2.0 < LABEL_MARGIN or x + width / 2.0 > ctx.width - LABEL_MARGIN:
        return None
    if y - size < LABEL_MARGIN or y + size / 2.0 > ctx.height - LABEL_MARGIN:
        return None
    return DrawText(text, (x, y + size / 3.0), style.label_color, size, bold=True)


def layout_donut(
    data: Union[DonutChartData, PieChartData],
    style: DonutChartStyle,
    ctx: FrameContext,
) -> Frame:
    """Lay out a donut (``hole_radius > 0``) or pie (``hole_radius == 0``)."""
    frame = Frame(ctx.width, ctx.height, background=style.chart.background_color)
    slices = visible_slices(data.slices)
    if not slices:
        logger.debug("No positive slices; nothing to draw")
        return frame

    cx, cy = ctx.width / 2.0, ctx.height / 2.0
    radius = min(ctx.width, ctx.height) / 2.0 - style.chart.chart_padding
    if radius <= 0.0:
        logger.debug("Donut radius %.1f leaves no room to draw", radius)
        return frame

    hole = radius * clamp(style.hole_radius, 0.0, MAX_HOLE_RATIO)
    gap = gap_angle(style.slice_spacing, radius, len(slices))
    geometry = slice_geometry(slices, style.start_angle, gap, ctx.progress)

    selected = slice_at(
        ctx.pointer,
        (cx, cy),
        radius,
        hole,
        style.start_angle,
        [g.raw_sweep for g in geometry],
    )

    donut = hole > 0.0
    labels: List[DrawText] = []
    for geom in geometry:
        color = ctx.color(geom.index, geom.slice.color)
        scale = ctx.emphasis.get(geom.index, 1.0)
        offset = radius * (scale - 1.0) * 2.0 if scale > 1.0 else 0.0
        center = polar_point(cx, cy, offset, geom.mid_angle)

        if donut:
            stroke = radius - hole
            frame.add(
                DrawArc(
                    center,
                    hole + stroke / 2.0,
                    geom.drawn_start,
                    geom.drawn_sweep,
                    color,
                    stroke_width=stroke,
                )
            )
        else:
            frame.add(
                DrawArc(
                    center,
                    radius,
                    geom.drawn_start,
                    geom.drawn_sweep,
                    color,
                    use_center=True,
                )
            )

        if (
            style.show_labels
            and geom.slice.label
            and ctx.progress > LABEL_PROGRESS
            and geom.raw_sweep >= MIN_LABEL_SWEEP
            and radius >= MIN_LABEL_RADIUS
        ):
            label_radius = (hole + radius) / 2.0 if donut else radius * 0.65
            label = _label_command(geom, center, label_radius, radius, style, ctx)
            if label is not None:
                labels.append(label)

    frame.extend(labels)

    if selected is not None:
        geom = geometry[selected]
        frame.selections.append(
            Selection(
                index=selected,
                value=geom.slice.value,
                label=geom.slice.label,
                position=polar_point(cx, cy, (hole + radius) / 2.0, geom.mid_angle),
            )
        )
    return frame


__all__ = [
    "SliceGeometry",
    "visible_slices",
    "gap_angle",
    "slice_geometry",
    "layout_donut",
]

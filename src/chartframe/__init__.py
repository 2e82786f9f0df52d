"""chartframe: chart layout as pure draw-command frames, with Qt and OpenCV backends.

Importing the package loads only ``PySide6.QtCore`` (for easing curves);
:mod:`chartframe.widgets`, :mod:`chartframe.render.painter` and the gallery
load QtGui and QtWidgets on demand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._version import get_version
from .animation import ChartAnimator, EmphasisAnimation, EntryAnimation
from .charts import animation_duration_ms, compute_frame, default_style
from .colors import DEFAULT_PALETTE, Color
from .commands import Frame, Selection
from .models import (
    BarChartData,
    BarEntry,
    BarGroup,
    BubbleChartData,
    BubblePoint,
    ChartPoint,
    DonutChartData,
    GaugeChartData,
    LineChartData,
    LineSeries,
    PieChartData,
    RadarChartData,
    RadarEntry,
    ScatterChartData,
    ScatterPoint,
    Slice,
)
from .style import (
    AxisStyle,
    BarChartStyle,
    BubbleChartStyle,
    ChartStyle,
    DonutChartStyle,
    GaugeChartStyle,
    GridStyle,
    LineChartStyle,
    PieChartStyle,
    RadarChartStyle,
    ScatterChartStyle,
    TooltipStyle,
)

__version__ = get_version()

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    from .app import main as _main_type  # noqa: F401


def main() -> None:
    """Entry point for ``python -m chartframe`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = [
    "main",
    "__version__",
    "get_version",
    "compute_frame",
    "default_style",
    "animation_duration_ms",
    "Frame",
    "Selection",
    "Color",
    "DEFAULT_PALETTE",
    "ChartAnimator",
    "EntryAnimation",
    "EmphasisAnimation",
    "ChartPoint",
    "LineSeries",
    "LineChartData",
    "BarEntry",
    "BarGroup",
    "BarChartData",
    "Slice",
    "DonutChartData",
    "PieChartData",
    "GaugeChartData",
    "RadarEntry",
    "RadarChartData",
    "ScatterPoint",
    "ScatterChartData",
    "BubblePoint",
    "BubbleChartData",
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

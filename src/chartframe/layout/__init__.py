"""Pure layout engines turning chart data into draw commands."""

from .bar import layout_bar
from .donut import layout_donut
from .frame import FrameContext, TextMeasurer, approx_text_width
from .gauge import layout_gauge
from .line import layout_line
from .radar import layout_radar
from .scatter import layout_bubble, layout_scatter

__all__ = [
    "FrameContext",
    "TextMeasurer",
    "approx_text_width",
    "layout_bar",
    "layout_bubble",
    "layout_donut",
    "layout_gauge",
    "layout_line",
    "layout_radar",
    "layout_scatter",
]

"""Colour value type, the default palette and theme-aware default colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .utils import clamp


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    @staticmethod
    def from_hex(value: int) -> "Color":
        """Build a colour from ``0xAARRGGBB`` (or ``0xRRGGBB``, taken as opaque)."""
        if value <= 0xFFFFFF:
            value |= 0xFF000000
        return Color(
            r=(value >> 16) & 0xFF,
            g=(value >> 8) & 0xFF,
            b=value & 0xFF,
            a=(value >> 24) & 0xFF,
        )

    def to_hex(self) -> int:
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    @property
    def alpha(self) -> float:
        return self.a / 255.0

    def with_alpha(self, alpha: float) -> "Color":
        """Return a copy with the alpha channel set to ``alpha`` (0..1)."""
        a = int(round(clamp(alpha, 0.0, 1.0) * 255))
        return Color(self.r, self.g, self.b, a)

    def multiply_alpha(self, factor: float) -> "Color":
        return self.with_alpha(self.alpha * clamp(factor, 0.0, 1.0))


TRANSPARENT = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255)

# Assigned in order to series/slices/points; cycles when exhausted.
DEFAULT_PALETTE: Tuple[Color, ...] = (
    Color.from_hex(0xFF3182F6),  # blue
    Color.from_hex(0xFF48BB78),  # green
    Color.from_hex(0xFFED8936),  # orange
    Color.from_hex(0xFFE53E3E),  # red
    Color.from_hex(0xFF9F7AEA),  # purple
    Color.from_hex(0xFF38B2AC),  # teal
)

GRID_LINE_LIGHT = Color.from_hex(0xFFEEEEEE)
GRID_LINE_DARK = Color.from_hex(0xFF333333)
AXIS_LABEL_LIGHT = Color.from_hex(0xFF9E9E9E)
AXIS_LABEL_DARK = Color.from_hex(0xFFBBBBBB)
GAUGE_TRACK_LIGHT = Color.from_hex(0xFFF0F0F0)
GAUGE_TRACK_DARK = Color.from_hex(0xFF2A2A2A)
GAUGE_TEXT_LIGHT = Color.from_hex(0xFF191F28)
GAUGE_TEXT_DARK = Color.from_hex(0xFFE8E8E8)
RADAR_WEB_LIGHT = Color.from_hex(0xFFE0E0E0)
RADAR_WEB_DARK = Color.from_hex(0xFF3A3A3A)
INDICATOR_LINE = Color.from_hex(0xFFDDDDDD)


def palette_color(
    palette: Sequence[Color], index: int, explicit: Optional[Color] = None
) -> Color:
    """Explicit colour if given, otherwise the palette entry for ``index`` (cyclic)."""
    if explicit is not None:
        return explicit
    if not palette:
        raise ValueError("palette must contain at least one colour")
    return palette[index % len(palette)]


def _resolve(
    color: Optional[Color], dark: bool, light_default: Color, dark_default: Color
) -> Color:
    if color is not None:
        return color
    return dark_default if dark else light_default


def resolve_grid_line_color(color: Optional[Color], dark: bool) -> Color:
    return _resolve(color, dark, GRID_LINE_LIGHT, GRID_LINE_DARK)


def resolve_axis_label_color(color: Optional[Color], dark: bool) -> Color:
    return _resolve(color, dark, AXIS_LABEL_LIGHT, AXIS_LABEL_DARK)


def resolve_gauge_track_color(color: Optional[Color], dark: bool) -> Color:
    return _resolve(color, dark, GAUGE_TRACK_LIGHT, GAUGE_TRACK_DARK)


def resolve_gauge_center_text_color(color: Optional[Color], dark: bool) -> Color:
    return _resolve(color, dark, GAUGE_TEXT_LIGHT, GAUGE_TEXT_DARK)


def resolve_radar_web_color(color: Optional[Color], dark: bool) -> Color:
    return _resolve(color, dark, RADAR_WEB_LIGHT, RADAR_WEB_DARK)


__all__ = [
    "Color",
    "TRANSPARENT",
    "WHITE",
    "DEFAULT_PALETTE",
    "INDICATOR_LINE",
    "palette_color",
    "resolve_grid_line_color",
    "resolve_axis_label_color",
    "resolve_gauge_track_color",
    "resolve_gauge_center_text_color",
    "resolve_radar_web_color",
]

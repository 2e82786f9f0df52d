import pytest

from chartframe.colors import (
    DEFAULT_PALETTE,
    GRID_LINE_DARK,
    GRID_LINE_LIGHT,
    Color,
    palette_color,
    resolve_grid_line_color,
)


def test_hex_round_trip_keeps_alpha() -> None:
    color = Color.from_hex(0x803182F6)
    assert (color.r, color.g, color.b, color.a) == (0x31, 0x82, 0xF6, 0x80)
    assert color.to_hex() == 0x803182F6


def test_hex_without_alpha_is_opaque() -> None:
    assert Color.from_hex(0x3182F6).to_hex() == 0xFF3182F6


@pytest.mark.parametrize(
    "alpha, expected", [(0.0, 0), (0.5, 128), (1.0, 255), (-1.0, 0), (3.0, 255)]
)
def test_with_alpha_is_clamped(alpha: float, expected: int) -> None:
    assert Color(1, 2, 3).with_alpha(alpha).a == expected


def test_palette_cycles_and_explicit_colour_wins() -> None:
    assert palette_color(DEFAULT_PALETTE, 0) == DEFAULT_PALETTE[0]
    wrapped = palette_color(DEFAULT_PALETTE, len(DEFAULT_PALETTE) + 1)
    assert wrapped == DEFAULT_PALETTE[1]
    red = Color(255, 0, 0)
    assert palette_color(DEFAULT_PALETTE, 3, red) == red
    with pytest.raises(ValueError):
        palette_color((), 0)


def test_theme_defaults() -> None:
    assert resolve_grid_line_color(None, dark=False) == GRID_LINE_LIGHT
    assert resolve_grid_line_color(None, dark=True) == GRID_LINE_DARK
    custom = Color(9, 9, 9)
    assert resolve_grid_line_color(custom, dark=True) == custom

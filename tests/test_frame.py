from chartframe.colors import Color
from chartframe.commands import DrawCircle, DrawLine, DrawRect, DrawText, Rect
from chartframe.layout.frame import (
    MIN_LABEL_EXTENT,
    FrameContext,
    approx_text_width,
    chart_area,
    grid_commands,
    tooltip_commands,
    x_axis_label_commands,
    y_axis_label_commands,
)
from chartframe.style import AxisStyle, ChartStyle, GridStyle, TooltipStyle

GREY = Color(128, 128, 128)
RED = Color(255, 0, 0)


def test_chart_area_reserves_padding_and_axis_gutters() -> None:
    area = chart_area(400.0, 300.0, ChartStyle(), AxisStyle())
    assert area == Rect(16.0, 16.0, 384.0, 264.0)

    with_y = chart_area(400.0, 300.0, ChartStyle(), AxisStyle(show_y_axis=True))
    assert with_y.left == 56.0

    bare = chart_area(
        400.0, 300.0, ChartStyle(chart_padding=0.0), AxisStyle(show_x_axis=False)
    )
    assert bare == Rect(0.0, 0.0, 400.0, 300.0)


def test_grid_draws_count_plus_one_lines() -> None:
    area = Rect(0.0, 0.0, 100.0, 100.0)
    lines = grid_commands(GridStyle(), GREY, area, 5)
    assert len(lines) == 6
    assert all(isinstance(c, DrawLine) for c in lines)

    both = grid_commands(
        GridStyle(show_vertical_lines=True, dash_pattern=(4.0, 2.0)), GREY, area, 4
    )
    assert len(both) == 10
    assert all(c.dash == (4.0, 2.0) for c in both)

    assert grid_commands(GridStyle(), GREY, area, 0) == []


def test_x_labels_centre_under_groups_or_spread_edge_to_edge() -> None:
    area = Rect(16.0, 16.0, 384.0, 264.0)
    spread = x_axis_label_commands(["a", "b", "c"], AxisStyle(), GREY, area)
    assert [c.position[0] for c in spread] == [16.0, 200.0, 384.0]

    grouped = x_axis_label_commands(
        ["a", "b"], AxisStyle(), GREY, area, group_width=64.0, group_spacing=12.0
    )
    assert [c.position[0] for c in grouped] == [48.0, 124.0]


def test_labels_hidden_in_small_areas() -> None:
    small = Rect(0.0, 0.0, MIN_LABEL_EXTENT - 1.0, MIN_LABEL_EXTENT - 1.0)
    assert x_axis_label_commands(["a", "b"], AxisStyle(), GREY, small) == []
    assert y_axis_label_commands(0.0, 10.0, AxisStyle(), GREY, small) == []


def test_y_labels_are_formatted_values() -> None:
    area = Rect(56.0, 16.0, 384.0, 264.0)
    labels = y_axis_label_commands(0.0, 50.0, AxisStyle(), GREY, area)
    assert [c.text for c in labels] == ["0", "10", "20", "30", "40", "50"]
    assert all(c.align == "right" for c in labels)

    fractional = y_axis_label_commands(0.0, 1.0, AxisStyle(y_label_count=4), GREY, area)
    assert [c.text for c in fractional] == ["0", "0.2", "0.5", "0.8", "1"]


def test_tooltip_sits_above_the_point() -> None:
    cmds = tooltip_commands((150.0, 150.0), "Apr: 55", TooltipStyle(), RED, 300, 300)
    bubble, text, ring, dot = cmds
    assert isinstance(bubble, DrawRect)
    assert isinstance(text, DrawText) and text.text == "Apr: 55"
    assert bubble.rect.bottom < 150.0
    assert isinstance(ring, DrawCircle) and ring.color == RED
    assert isinstance(dot, DrawCircle) and dot.radius < ring.radius


def test_tooltip_flips_below_and_stays_on_canvas() -> None:
    bubble = tooltip_commands((295.0, 4.0), "value", TooltipStyle(), RED, 300, 200)[0]
    assert bubble.rect.top > 4.0
    assert bubble.rect.right <= 300.0
    assert bubble.rect.left >= 0.0


def test_tooltip_skipped_on_tiny_canvas() -> None:
    assert tooltip_commands((2.0, 2.0), "x", TooltipStyle(), RED, 5, 5) == []


def test_frame_context_defaults() -> None:
    ctx = FrameContext(100.0, 50.0)
    assert ctx.measure is approx_text_width
    assert ctx.color(0) == ctx.palette[0]
    assert ctx.color(len(ctx.palette)) == ctx.palette[0]
    assert ctx.color(3, RED) == RED

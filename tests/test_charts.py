import math

import pytest

from chartframe import (
    BarChartData,
    BarChartStyle,
    ChartStyle,
    DonutChartStyle,
    GaugeChartData,
    LineChartStyle,
    PieChartData,
    PieChartStyle,
    animation_duration_ms,
    compute_frame,
    default_style,
)
from chartframe.colors import Color
from chartframe.samples import DATASETS, EMPTY, NORMAL


def test_default_style_matches_the_chart_family() -> None:
    assert isinstance(default_style(NORMAL["line"]), LineChartStyle)
    assert isinstance(default_style(NORMAL["bar"]), BarChartStyle)
    assert isinstance(default_style(NORMAL["pie"]), PieChartStyle)
    assert type(default_style(NORMAL["donut"])) is DonutChartStyle


def test_animation_durations() -> None:
    assert animation_duration_ms(NORMAL["gauge"]) == 1000
    assert animation_duration_ms(NORMAL["bar"]) == 600
    quick = BarChartStyle(animation_duration_ms=5)
    assert animation_duration_ms(NORMAL["bar"], quick) == 5


def test_unsupported_data_type_raises() -> None:
    with pytest.raises(TypeError):
        compute_frame("not chart data", (100.0, 100.0))
    with pytest.raises(TypeError):
        default_style(42)


def test_mismatched_style_raises() -> None:
    with pytest.raises(TypeError):
        compute_frame(NORMAL["line"], (100.0, 100.0), BarChartStyle())
    with pytest.raises(TypeError):
        compute_frame(NORMAL["pie"], (100.0, 100.0), LineChartStyle())


@pytest.mark.parametrize(
    "size", [(-1.0, 10.0), (10.0, -1.0), (math.nan, 10.0), (10.0, math.inf)]
)
def test_invalid_size_raises(size) -> None:
    with pytest.raises(ValueError):
        compute_frame(NORMAL["bar"], size)


def test_empty_palette_raises() -> None:
    with pytest.raises(ValueError):
        compute_frame(NORMAL["bar"], (100.0, 100.0), palette=[])


def test_zero_size_gives_an_empty_frame() -> None:
    frame = compute_frame(NORMAL["line"], (0.0, 300.0))
    assert frame.is_empty
    assert frame.selections == []


def test_progress_is_clamped() -> None:
    over = compute_frame(NORMAL["gauge"], (200.0, 200.0), progress=3.0)
    full = compute_frame(NORMAL["gauge"], (200.0, 200.0), progress=1.0)
    assert over.commands == full.commands
    nan = compute_frame(NORMAL["gauge"], (200.0, 200.0), progress=math.nan)
    zero = compute_frame(NORMAL["gauge"], (200.0, 200.0), progress=0.0)
    assert nan.commands == zero.commands


def test_compute_frame_is_pure() -> None:
    a = compute_frame(NORMAL["donut"], (300.0, 300.0), pointer=(150.0, 40.0))
    b = compute_frame(NORMAL["donut"], (300.0, 300.0), pointer=(150.0, 40.0))
    assert a.commands == b.commands
    assert a.selections == b.selections


def test_custom_palette_colours_items() -> None:
    red = Color(255, 0, 0)
    data = PieChartData.from_values({"a": 1})
    frame = compute_frame(data, (100.0, 100.0), palette=[red])
    assert frame.commands[0].color == red


def test_background_comes_from_the_style() -> None:
    blue = Color(0, 0, 255)
    style = BarChartStyle(chart=ChartStyle(background_color=blue))
    frame = compute_frame(NORMAL["bar"], (200.0, 200.0), style)
    assert frame.background == blue


@pytest.mark.parametrize("dataset", sorted(DATASETS))
def test_every_sample_lays_out(dataset: str) -> None:
    for name, data in DATASETS[dataset].items():
        for dark in (False, True):
            frame = compute_frame(
                data, (320.0, 240.0), pointer=(160.0, 120.0), dark=dark
            )
            assert frame.width == 320.0, name


def test_normal_samples_draw_something() -> None:
    for name, data in NORMAL.items():
        assert not compute_frame(data, (320.0, 240.0)).is_empty, name


def test_empty_samples_report_no_selection() -> None:
    for name, data in EMPTY.items():
        frame = compute_frame(data, (320.0, 240.0), pointer=(160.0, 120.0))
        assert frame.selections == [], name


def test_gauge_in_the_dark_uses_dark_track() -> None:
    light = compute_frame(GaugeChartData(1, 2), (200.0, 200.0))
    dark = compute_frame(GaugeChartData(1, 2), (200.0, 200.0), dark=True)
    assert light.commands[0].color != dark.commands[0].color


def test_bar_chart_with_no_groups_is_empty() -> None:
    assert compute_frame(BarChartData(groups=[]), (200.0, 200.0)).is_empty

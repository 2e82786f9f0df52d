import pytest

from chartframe import RadarChartData, RadarChartStyle, compute_frame
from chartframe.commands import DrawCircle, DrawLine, DrawPath, DrawText
from chartframe.layout.radar import axis_angle, resolved_max
from chartframe.samples import NORMAL

SIZE = (300.0, 300.0)
# half the canvas, minus padding, minus room for labels
RADIUS = 150.0 - 16.0 - 11.0 * 1.5


def test_fewer_than_three_axes_draws_nothing() -> None:
    data = RadarChartData.single([1, 2], axis_labels=["a", "b"])
    assert compute_frame(data, SIZE).is_empty


def test_entries_missing_values_are_skipped() -> None:
    data = RadarChartData.single([1, 2], axis_labels=["a", "b", "c"])
    assert compute_frame(data, SIZE).is_empty


def test_first_axis_points_up() -> None:
    assert axis_angle(0, 5) == -90.0
    assert axis_angle(1, 4) == 0.0


def test_max_value_falls_back_to_the_data() -> None:
    data = NORMAL["radar"]
    assert resolved_max(data, data.entries) == 90.0
    explicit = RadarChartData.single([1, 2, 3], ["a", "b", "c"], max_value=10.0)
    assert resolved_max(explicit, explicit.entries) == 10.0
    zeros = RadarChartData.single([0, 0, 0], ["a", "b", "c"])
    assert resolved_max(zeros, zeros.entries) == 1.0


@pytest.mark.parametrize("max_value", [float("inf"), float("nan")])
def test_non_finite_max_value_uses_the_data(max_value: float) -> None:
    data = RadarChartData.single([3, 4, 5], ["a", "b", "c"], max_value=max_value)
    assert resolved_max(data, data.entries) == 5.0

    frame = compute_frame(data, SIZE)
    centers = [c.center for c in frame.commands if isinstance(c, DrawCircle)]
    assert len(set(centers)) == 3
    outer = centers[2]
    distance = ((outer[0] - 150.0) ** 2 + (outer[1] - 150.0) ** 2) ** 0.5
    assert distance == pytest.approx(RADIUS)


def test_web_spokes_labels_and_polygon() -> None:
    frame = compute_frame(NORMAL["radar"], SIZE)
    strokes = [
        c for c in frame.commands if isinstance(c, DrawPath) and c.stroke_width
    ]
    fills = [
        c for c in frame.commands if isinstance(c, DrawPath) and not c.stroke_width
    ]
    spokes = [c for c in frame.commands if isinstance(c, DrawLine)]
    labels = [c.text for c in frame.commands if isinstance(c, DrawText)]
    dots = [c for c in frame.commands if isinstance(c, DrawCircle)]

    assert len(strokes) == 5 + 1  # web rings plus the entry outline
    assert len(fills) == 1
    assert fills[0].color.a == round(0.25 * 255)
    assert len(spokes) == 5
    assert labels == ["STR", "DEX", "INT", "WIS", "CHA"]
    assert len(dots) == 5


def test_largest_value_reaches_the_outer_ring() -> None:
    frame = compute_frame(NORMAL["radar"], SIZE)
    dots = [c for c in frame.commands if isinstance(c, DrawCircle)]
    top = dots[0].center
    assert top == pytest.approx((150.0, 150.0 - RADIUS * 80 / 90))
    # INT (90) is the maximum
    intel = dots[2].center
    distance = ((intel[0] - 150.0) ** 2 + (intel[1] - 150.0) ** 2) ** 0.5
    assert distance == pytest.approx(RADIUS)


def test_progress_grows_the_polygon() -> None:
    frame = compute_frame(NORMAL["radar"], SIZE, progress=0.0)
    dots = [c for c in frame.commands if isinstance(c, DrawCircle)]
    assert all(d.center == pytest.approx((150.0, 150.0)) for d in dots)


def test_pointer_selects_the_nearest_axis() -> None:
    frame = compute_frame(NORMAL["radar"], SIZE, pointer=(150.0, 20.0))
    selection = frame.selection
    assert selection.index == 0
    assert selection.label == "STR"
    assert selection.value == 80


def test_dots_can_be_hidden() -> None:
    style = RadarChartStyle(show_dots=False, web_levels=3)
    frame = compute_frame(NORMAL["radar"], SIZE, style)
    assert not any(isinstance(c, DrawCircle) for c in frame.commands)
    strokes = [c for c in frame.commands if isinstance(c, DrawPath) and c.stroke_width]
    assert len(strokes) == 3 + 1

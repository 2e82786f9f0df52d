import pytest

from chartframe import GaugeChartData, GaugeChartStyle, compute_frame
from chartframe.commands import DrawArc, DrawText
from chartframe.layout.gauge import gauge_diameter, gauge_start_angle

SIZE = (200.0, 200.0)


def _arcs(frame):
    return [c for c in frame.commands if isinstance(c, DrawArc)]


def _texts(frame):
    return [c for c in frame.commands if isinstance(c, DrawText)]


def test_ratio_is_clamped_to_one() -> None:
    assert GaugeChartData(value=150, max_value=100).ratio == 1.0
    assert GaugeChartData(value=-5, max_value=100).ratio == 0.0
    assert GaugeChartData(value=5, max_value=0).safe_max == 1.0


def test_start_angle_centres_the_gap_at_the_bottom() -> None:
    assert gauge_start_angle(240.0) == 150.0
    assert gauge_start_angle(360.0) == 90.0


def test_diameter_leaves_room_for_padding_and_stroke() -> None:
    assert gauge_diameter(200.0, 300.0, GaugeChartStyle()) == 156.0


def test_track_and_progress_arcs() -> None:
    frame = compute_frame(GaugeChartData(72, 100, "Progress"), SIZE)
    track, progress = _arcs(frame)
    assert track.sweep_angle == 240.0
    assert progress.sweep_angle == pytest.approx(240.0 * 0.72)
    assert track.start_angle == progress.start_angle == 150.0
    assert track.radius == 78.0
    assert progress.round_cap and progress.stroke_width == 12.0


def test_progress_animates_arc_and_value() -> None:
    frame = compute_frame(GaugeChartData(72, 100, "Progress"), SIZE, progress=0.5)
    _, progress = _arcs(frame)
    assert progress.sweep_angle == pytest.approx(240.0 * 0.72 * 0.5)
    value, label = _texts(frame)
    assert value.text == "36"
    assert value.bold
    assert label.text == "Progress"
    assert label.size == pytest.approx(value.size * 0.5)
    assert label.color.a < value.color.a


def test_over_full_gauge_sweeps_the_whole_track() -> None:
    frame = compute_frame(GaugeChartData(150, 100), SIZE)
    track, progress = _arcs(frame)
    assert progress.sweep_angle == track.sweep_angle
    assert [t.text for t in _texts(frame)] == ["100"]


def test_invalid_value_draws_only_the_track() -> None:
    frame = compute_frame(GaugeChartData(float("nan"), 100), SIZE)
    assert len(_arcs(frame)) == 1
    assert [t.text for t in _texts(frame)] == ["0"]


def test_center_text_hidden_when_small_or_disabled() -> None:
    small = compute_frame(GaugeChartData(50, 100, "x"), (60.0, 60.0))
    assert _arcs(small)
    assert _texts(small) == []
    off = compute_frame(
        GaugeChartData(50, 100), SIZE, GaugeChartStyle(show_center_text=False)
    )
    assert _texts(off) == []


def test_no_room_gives_an_empty_frame() -> None:
    assert compute_frame(GaugeChartData(50, 100), (40.0, 40.0)).is_empty


def test_butt_cap_and_full_ring() -> None:
    style = GaugeChartStyle(round_cap=False, sweep_angle=360.0)
    track, _ = _arcs(compute_frame(GaugeChartData(1, 2), SIZE, style))
    assert not track.round_cap
    assert track.start_angle == 90.0
    assert track.sweep_angle == 360.0

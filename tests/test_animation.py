from hypothesis import given
from hypothesis import strategies as st
import pytest

from chartframe.animation import (
    ChartAnimator,
    EmphasisAnimation,
    EntryAnimation,
    fast_out_slow_in,
)

unit = st.floats(min_value=0.0, max_value=1.0)


def test_easing_end_points() -> None:
    assert fast_out_slow_in(0.0) == 0.0
    assert fast_out_slow_in(1.0) == 1.0
    assert fast_out_slow_in(-2.0) == 0.0
    assert fast_out_slow_in(5.0) == 1.0


def test_easing_is_fast_out() -> None:
    assert fast_out_slow_in(0.5) > 0.7
    assert fast_out_slow_in(0.1) < 0.1


@pytest.mark.parametrize("t", [0.1, 0.25, 0.5, 0.75, 0.9])
def test_easing_follows_the_control_points(t: float) -> None:
    # Point on cubic-bezier(0.4, 0, 0.2, 1) at curve parameter t.
    mt = 1.0 - t
    x = 3 * mt * mt * t * 0.4 + 3 * mt * t * t * 0.2 + t**3
    y = 3 * mt * t * t + t**3
    assert fast_out_slow_in(x) == pytest.approx(y, abs=1e-3)


@given(unit, unit)
def test_easing_is_monotonic(a: float, b: float) -> None:
    lo, hi = sorted((a, b))
    assert fast_out_slow_in(lo) <= fast_out_slow_in(hi) + 1e-4


def test_entry_runs_once() -> None:
    entry = EntryAnimation(800)
    assert not entry.started
    assert entry.progress(0.0) == 0.0

    entry.start(100.0)
    assert entry.started
    assert entry.progress(100.0) == 0.0
    assert 0.0 < entry.progress(500.0) < 1.0
    assert entry.progress(900.0) == 1.0
    assert entry.finished(900.0)

    # a second start never replays
    entry.start(2000.0)
    assert entry.progress(2000.0) == 1.0


def test_zero_duration_is_complete_immediately() -> None:
    entry = EntryAnimation(0)
    assert entry.progress(0.0) == 1.0
    assert entry.finished(0.0)


def test_emphasis_tweens_toward_the_selected_scale() -> None:
    emphasis = EmphasisAnimation(200)
    emphasis.select(1, 1.05, 0.0)
    assert emphasis.scales(0.0) == {1: 1.0}
    assert 1.0 < emphasis.scales(100.0)[1] < 1.05
    assert emphasis.scales(200.0) == {1: 1.05}
    assert emphasis.running(100.0)
    assert not emphasis.running(250.0)


def test_emphasis_releases_the_previous_slice() -> None:
    emphasis = EmphasisAnimation(200)
    emphasis.select(0, 1.05, 0.0)
    emphasis.select(2, 1.05, 300.0)
    mid = emphasis.scales(400.0)
    assert 1.0 < mid[0] < 1.05
    assert 1.0 < mid[2] < 1.05
    assert emphasis.scales(500.0) == {2: 1.05}

    emphasis.select(None, 1.05, 600.0)
    assert emphasis.scales(800.0) == {}
    assert not emphasis.running(800.0)


def test_reselecting_the_same_slice_keeps_its_tween() -> None:
    emphasis = EmphasisAnimation(200)
    emphasis.select(0, 1.05, 0.0)
    emphasis.select(0, 1.05, 150.0)
    assert emphasis.scales(200.0) == {0: 1.05}


def test_chart_animator_running_state() -> None:
    animator = ChartAnimator(800, 200)
    animator.start(0.0)
    assert animator.running(100.0)
    assert animator.progress(800.0) == 1.0
    assert not animator.running(800.0)

    animator.select(0, 1.05, 1000.0)
    assert animator.running(1100.0)
    assert animator.scales(1200.0) == {0: pytest.approx(1.05)}
    assert not animator.running(1200.0)

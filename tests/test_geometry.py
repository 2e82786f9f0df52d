import math

from hypothesis import given
from hypothesis import strategies as st
import pytest

from chartframe.utils import (
    clamp,
    format_value,
    is_finite,
    polar_point,
    safe,
    safe_non_negative,
)


@given(st.floats(allow_nan=True, allow_infinity=True))
def test_safe_zeroes_only_non_finite_values(value: float) -> None:
    if math.isfinite(value):
        assert safe(value) == value
    else:
        assert safe(value) == 0.0


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_safe_non_negative_clamps_at_zero(value: float) -> None:
    assert safe_non_negative(value) == max(value, 0.0)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_values_are_rejected(value: float) -> None:
    assert not is_finite(value)
    assert safe_non_negative(value) == 0.0


def test_clamp_limits_both_ends() -> None:
    assert clamp(-1.0, 0.0, 1.0) == 0.0
    assert clamp(2.0, 0.0, 1.0) == 1.0
    assert clamp(0.25, 0.0, 1.0) == 0.25


def test_polar_point_runs_clockwise_from_three_oclock() -> None:
    x, y = polar_point(10.0, 20.0, 5.0, 0.0)
    assert (x, y) == pytest.approx((15.0, 20.0))
    x, y = polar_point(10.0, 20.0, 5.0, 90.0)
    assert (x, y) == pytest.approx((10.0, 25.0))
    x, y = polar_point(10.0, 20.0, 5.0, -90.0)
    assert (x, y) == pytest.approx((10.0, 15.0))


@pytest.mark.parametrize(
    ("value", "text"),
    [(3.0, "3"), (42, "42"), (2.5, "2.5"), (1.25, "1.2"), (float("nan"), "0")],
)
def test_format_value(value: float, text: str) -> None:
    assert format_value(value) == text

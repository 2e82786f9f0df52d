"""Linear data-space to pixel-space mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..utils import safe

Y_PADDING_RATIO = 0.1
BAR_HEADROOM = 1.1


@dataclass(frozen=True)
class LinearScale:
    """Map ``[domain_min, domain_max]`` onto ``[pixel_start, pixel_end]``.

    ``pixel_end`` may be smaller than ``pixel_start`` (the usual case for a
    y axis, where larger values sit higher on screen). A zero-width domain
    is treated as having width 1 so the mapping never divides by zero.
    """

    domain_min: float
    domain_max: float
    pixel_start: float
    pixel_end: float

    @property
    def span(self) -> float:
        rng = self.domain_max - self.domain_min
        return rng if rng != 0.0 else 1.0

    def fraction(self, value: float) -> float:
        return (safe(value) - self.domain_min) / self.span

    def __call__(self, value: float) -> float:
        # lerp form keeps both ends exact
        t = self.fraction(value)
        return self.pixel_start * (1.0 - t) + self.pixel_end * t

    def invert(self, pixel: float) -> float:
        extent = self.pixel_end - self.pixel_start
        if extent == 0.0:
            return self.domain_min
        return self.domain_min + (pixel - self.pixel_start) / extent * self.span


def value_range(values: Iterable[float]) -> Optional[Tuple[float, float]]:
    """``(min, max)`` over the safe form of ``values``; ``None`` when empty."""
    lo: Optional[float] = None
    hi: Optional[float] = None
    for v in values:
        s = safe(v)
        lo = s if lo is None or s < lo else lo
        hi = s if hi is None or s > hi else hi
    if lo is None or hi is None:
        return None
    return lo, hi


def padded_range(lo: float, hi: float) -> Tuple[float, float]:
    """Expand ``[lo, hi]`` by 10% of its width on both sides."""
    rng = hi - lo
    if rng == 0.0:
        rng = 1.0
    pad = rng * Y_PADDING_RATIO
    return lo - pad, hi + pad


def bar_headroom_max(max_value: float) -> float:
    """Top of a bar chart's value axis: the largest total plus 10% headroom."""
    m = safe(max_value)
    return m * BAR_HEADROOM if m > 0.0 else 1.0


__all__ = [
    "LinearScale",
    "value_range",
    "padded_range",
    "bar_headroom_max",
    "Y_PADDING_RATIO",
    "BAR_HEADROOM",
]

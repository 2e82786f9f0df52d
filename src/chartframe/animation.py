"""Time-based animation state for chart entry and slice emphasis.

Nothing here owns a clock: callers pass the current time in milliseconds
(``QElapsedTimer`` in the widget, plain numbers in tests) and read back the
eased values for that instant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from PySide6.QtCore import QEasingCurve, QPointF

from .utils import clamp

# The standard "fast out, slow in" curve, cubic-bezier(0.4, 0, 0.2, 1).
_FAST_OUT_SLOW_IN = QEasingCurve(QEasingCurve.Type.BezierSpline)
_FAST_OUT_SLOW_IN.addCubicBezierSegment(
    QPointF(0.4, 0.0), QPointF(0.2, 1.0), QPointF(1.0, 1.0)
)


def fast_out_slow_in(fraction: float) -> float:
    """Cubic-bezier(0.4, 0, 0.2, 1) easing of ``fraction`` in ``[0, 1]``."""
    x = clamp(fraction, 0.0, 1.0)
    if x in (0.0, 1.0):
        return x
    return _FAST_OUT_SLOW_IN.valueForProgress(x)


class EntryAnimation:
    """One-shot 0 → 1 progress over ``duration_ms``.

    The first :meth:`start` call fixes the start time; later calls are
    ignored so the animation never replays.
    """

    def __init__(self, duration_ms: int) -> None:
        self.duration_ms = duration_ms
        self._start_ms: Optional[float] = None

    @property
    def started(self) -> bool:
        return self._start_ms is not None

    def start(self, now_ms: float) -> None:
        if self._start_ms is None:
            self._start_ms = now_ms

    def progress(self, now_ms: float) -> float:
        if self.duration_ms <= 0:
            return 1.0
        if self._start_ms is None:
            return 0.0
        fraction = (now_ms - self._start_ms) / float(self.duration_ms)
        return fast_out_slow_in(fraction)

    def finished(self, now_ms: float) -> bool:
        if self.duration_ms <= 0:
            return True
        if self._start_ms is None:
            return False
        return now_ms - self._start_ms >= self.duration_ms


@dataclass
class _Tween:
    origin: float
    target: float
    start_ms: float


class EmphasisAnimation:
    """Per-slice scale tweens toward 1.0 or the selected scale."""

    def __init__(self, duration_ms: int = 200) -> None:
        self.duration_ms = duration_ms
        self._tweens: Dict[int, _Tween] = {}

    def _value(self, tween: _Tween, now_ms: float) -> float:
        if self.duration_ms <= 0:
            return tween.target
        fraction = (now_ms - tween.start_ms) / float(self.duration_ms)
        if fraction >= 1.0:
            return tween.target
        eased = fast_out_slow_in(fraction)
        return tween.origin + (tween.target - tween.origin) * eased

    def select(self, index: Optional[int], scale: float, now_ms: float) -> None:
        """Retarget tweens so only ``index`` (if any) grows to ``scale``."""
        targets = {i: 1.0 for i in self._tweens}
        if index is not None:
            targets[index] = scale
        for i, target in targets.items():
            current = self._tweens.get(i)
            if current is not None and current.target == target:
                continue
            origin = self._value(current, now_ms) if current is not None else 1.0
            self._tweens[i] = _Tween(origin, target, now_ms)

    def scales(self, now_ms: float) -> Dict[int, float]:
        """Current scale of every slice that is not at rest at 1.0."""
        result = {}
        for i, tween in list(self._tweens.items()):
            value = self._value(tween, now_ms)
            if value == tween.target == 1.0:
                del self._tweens[i]
                continue
            result[i] = value
        return result

    def running(self, now_ms: float) -> bool:
        if self.duration_ms <= 0:
            return False
        return any(
            now_ms - t.start_ms < self.duration_ms for t in self._tweens.values()
        )


class ChartAnimator:
    """Entry progress plus slice emphasis for one chart instance."""

    def __init__(self, duration_ms: int, emphasis_duration_ms: int = 200) -> None:
        self.entry = EntryAnimation(duration_ms)
        self.emphasis = EmphasisAnimation(emphasis_duration_ms)

    def start(self, now_ms: float) -> None:
        self.entry.start(now_ms)

    def progress(self, now_ms: float) -> float:
        return self.entry.progress(now_ms)

    def select(self, index: Optional[int], scale: float, now_ms: float) -> None:
        self.emphasis.select(index, scale, now_ms)

    def scales(self, now_ms: float) -> Dict[int, float]:
        return self.emphasis.scales(now_ms)

    def running(self, now_ms: float) -> bool:
        """Whether another frame is needed to reach a resting state."""
        return not self.entry.finished(now_ms) or self.emphasis.running(now_ms)


__all__ = [
    "fast_out_slow_in",
    "EntryAnimation",
    "EmphasisAnimation",
    "ChartAnimator",
]

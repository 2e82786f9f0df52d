"""Immutable chart-data records consumed by the layout layer.

Every record is a frozen dataclass; values are stored as supplied and only
coerced (see :mod:`chartframe.utils.geometry`) at the point of use, so a
record with NaN or negative numbers is always valid to construct.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Tuple

from .colors import Color
from .utils import safe, safe_non_negative


def _label_at(labels: Sequence[str], index: int) -> str:
    return labels[index] if 0 <= index < len(labels) else ""


# ---------------------------------- Line --------------------------------------


@dataclass(frozen=True)
class ChartPoint:
    """A single x/y sample (``label`` is shown in the tooltip when present)."""

    x: float
    y: float
    label: str = ""

    @property
    def safe_x(self) -> float:
        return safe(self.x)

    @property
    def safe_y(self) -> float:
        return safe(self.y)


@dataclass(frozen=True)
class LineSeries:
    points: Tuple[ChartPoint, ...]
    label: str = ""
    color: Optional[Color] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class LineChartData:
    """One or more line series plus optional x-axis labels."""

    series: Tuple[LineSeries, ...]
    x_labels: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))
        object.__setattr__(self, "x_labels", tuple(self.x_labels))

    @staticmethod
    def single(
        points: Sequence[ChartPoint],
        x_labels: Sequence[str] = (),
        label: str = "",
        color: Optional[Color] = None,
    ) -> "LineChartData":
        return LineChartData(
            series=(LineSeries(points=tuple(points), label=label, color=color),),
            x_labels=tuple(x_labels),
        )

    @staticmethod
    def from_values(
        values: Sequence[float],
        x_labels: Sequence[str] = (),
        label: str = "",
        color: Optional[Color] = None,
    ) -> "LineChartData":
        """Single series whose x values are the indices of ``values``."""
        points = [ChartPoint(x=float(i), y=v) for i, v in enumerate(values)]
        return LineChartData.single(points, x_labels=x_labels, label=label, color=color)


# ----------------------------------- Bar --------------------------------------


@dataclass(frozen=True)
class BarEntry:
    """One bar; several ``values`` stack from the baseline outward."""

    values: Tuple[float, ...]
    label: str = ""
    colors: Tuple[Color, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "colors", tuple(self.colors))

    @property
    def safe_values(self) -> Tuple[float, ...]:
        return tuple(safe_non_negative(v) for v in self.values)

    @property
    def total(self) -> float:
        return sum(self.safe_values)


@dataclass(frozen=True)
class BarGroup:
    """Bars drawn side by side under one x-axis label."""

    entries: Tuple[BarEntry, ...]
    label: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))


@dataclass(frozen=True)
class BarChartData:
    groups: Tuple[BarGroup, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))

    @staticmethod
    def simple(values: Sequence[float], labels: Sequence[str] = ()) -> "BarChartData":
        """One single-value bar per group."""
        return BarChartData(
            groups=tuple(
                BarGroup(entries=(BarEntry(values=(v,)),), label=_label_at(labels, i))
                for i, v in enumerate(values)
            )
        )


# ------------------------------- Donut / Pie ----------------------------------


@dataclass(frozen=True)
class Slice:
    value: float
    label: str = ""
    color: Optional[Color] = None


@dataclass(frozen=True)
class DonutChartData:
    """Slices of a ring; non-positive and non-finite slices are not drawn."""

    slices: Tuple[Slice, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "slices", tuple(self.slices))

    @classmethod
    def from_values(cls, values: Mapping[str, float]):
        return cls(slices=tuple(Slice(value=v, label=k) for k, v in values.items()))


@dataclass(frozen=True)
class PieChartData(DonutChartData):
    """Same shape as :class:`DonutChartData`, drawn as filled wedges by default."""


# ---------------------------------- Gauge -------------------------------------


@dataclass(frozen=True)
class GaugeChartData:
    value: float
    max_value: float
    label: str = ""

    @property
    def safe_max(self) -> float:
        m = safe(self.max_value)
        return m if m > 0.0 else 1.0

    @property
    def safe_value(self) -> float:
        return min(safe_non_negative(self.value), self.safe_max)

    @property
    def ratio(self) -> float:
        return min(1.0, max(0.0, self.safe_value / self.safe_max))


# ---------------------------------- Radar -------------------------------------


@dataclass(frozen=True)
class RadarEntry:
    """One polygon; ``values`` are read per axis in ``axis_labels`` order."""

    values: Tuple[float, ...]
    label: str = ""
    color: Optional[Color] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def safe_values(self) -> Tuple[float, ...]:
        return tuple(safe_non_negative(v) for v in self.values)


@dataclass(frozen=True)
class RadarChartData:
    """Radar entries; ``max_value <= 0`` means derive the scale from the data."""

    entries: Tuple[RadarEntry, ...]
    axis_labels: Tuple[str, ...]
    max_value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "axis_labels", tuple(self.axis_labels))

    @staticmethod
    def single(
        values: Sequence[float],
        axis_labels: Sequence[str],
        label: str = "",
        max_value: float = 0.0,
    ) -> "RadarChartData":
        return RadarChartData(
            entries=(RadarEntry(values=tuple(values), label=label),),
            axis_labels=tuple(axis_labels),
            max_value=max_value,
        )


# --------------------------------- Scatter ------------------------------------


@dataclass(frozen=True)
class ScatterPoint:
    x: float
    y: float
    label: str = ""
    color: Optional[Color] = None

    @property
    def safe_x(self) -> float:
        return safe(self.x)

    @property
    def safe_y(self) -> float:
        return safe(self.y)


@dataclass(frozen=True)
class ScatterChartData:
    points: Tuple[ScatterPoint, ...]
    x_labels: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "x_labels", tuple(self.x_labels))

    @staticmethod
    def from_values(
        x_values: Sequence[float],
        y_values: Sequence[float],
        labels: Sequence[str] = (),
        x_labels: Sequence[str] = (),
    ) -> "ScatterChartData":
        points = tuple(
            ScatterPoint(x=x, y=y, label=_label_at(labels, i))
            for i, (x, y) in enumerate(zip(x_values, y_values))
        )
        return ScatterChartData(points=points, x_labels=tuple(x_labels))


# --------------------------------- Bubble -------------------------------------


@dataclass(frozen=True)
class BubblePoint:
    """A scatter point with a third ``size`` dimension mapped to radius."""

    x: float
    y: float
    size: float
    label: str = ""
    color: Optional[Color] = None

    @property
    def safe_x(self) -> float:
        return safe(self.x)

    @property
    def safe_y(self) -> float:
        return safe(self.y)

    @property
    def safe_size(self) -> float:
        return safe_non_negative(self.size)


@dataclass(frozen=True)
class BubbleChartData:
    points: Tuple[BubblePoint, ...]
    x_labels: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "x_labels", tuple(self.x_labels))

    @staticmethod
    def from_values(
        x_values: Sequence[float],
        y_values: Sequence[float],
        sizes: Sequence[float],
        labels: Sequence[str] = (),
        x_labels: Sequence[str] = (),
    ) -> "BubbleChartData":
        points = tuple(
            BubblePoint(x=x, y=y, size=s, label=_label_at(labels, i))
            for i, (x, y, s) in enumerate(zip(x_values, y_values, sizes))
        )
        return BubbleChartData(points=points, x_labels=tuple(x_labels))


__all__ = [
    "ChartPoint",
    "LineSeries",
    "LineChartData",
    "BarEntry",
    "BarGroup",
    "BarChartData",
    "Slice",
    "DonutChartData",
    "PieChartData",
    "GaugeChartData",
    "RadarEntry",
    "RadarChartData",
    "ScatterPoint",
    "ScatterChartData",
    "BubblePoint",
    "BubbleChartData",
]

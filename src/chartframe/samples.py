"""Sample datasets for the gallery and for tests.

Each dataset family (normal, extreme, invalid, empty) provides one chart
per kind listed in :data:`CHART_KINDS`.
"""

from __future__ import annotations

from typing import Dict

from .models import (
    BarChartData,
    BubbleChartData,
    BubblePoint,
    DonutChartData,
    GaugeChartData,
    LineChartData,
    PieChartData,
    RadarChartData,
    RadarEntry,
    ScatterChartData,
    ScatterPoint,
    Slice,
)

NAN = float("nan")
INF = float("inf")

# Gallery order and display names.
CHART_KINDS: Dict[str, str] = {
    "line": "Line Chart",
    "bar": "Bar Chart",
    "donut": "Donut Chart",
    "gauge": "Gauge Chart",
    "scatter": "Scatter Chart",
    "bubble": "Bubble Chart",
    "radar": "Radar Chart",
    "pie": "Pie Chart",
}


NORMAL: Dict[str, object] = {
    "line": LineChartData.from_values(
        [15, 28, 22, 35, 30, 42],
        x_labels=["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
    ),
    "bar": BarChartData.simple(
        [30, 45, 28, 55, 38], labels=["Jan", "Feb", "Mar", "Apr", "May"]
    ),
    "donut": DonutChartData.from_values(
        {"Food": 40, "Transport": 25, "Shopping": 20, "Other": 15}
    ),
    "gauge": GaugeChartData(value=72, max_value=100, label="Progress"),
    "scatter": ScatterChartData.from_values(
        [1, 2, 3, 4, 5, 6],
        [12, 28, 15, 35, 22, 40],
        labels=["A", "B", "C", "D", "E", "F"],
    ),
    "bubble": BubbleChartData.from_values(
        [1, 2, 3, 4, 5],
        [20, 35, 15, 45, 28],
        [8, 20, 5, 30, 12],
        labels=["A", "B", "C", "D", "E"],
    ),
    "radar": RadarChartData.single(
        [80, 65, 90, 70, 85], axis_labels=["STR", "DEX", "INT", "WIS", "CHA"]
    ),
    "pie": PieChartData.from_values(
        {"Food": 35, "Transport": 20, "Shopping": 25, "Other": 20}
    ),
}

# Values spanning 1 to 10000.
EXTREME: Dict[str, object] = {
    "line": LineChartData.from_values(
        [1, 5000, 10, 10000, 3, 8000], x_labels=["A", "B", "C", "D", "E", "F"]
    ),
    "bar": BarChartData.simple(
        [1, 10000, 50, 7500, 3], labels=["A", "B", "C", "D", "E"]
    ),
    "donut": DonutChartData.from_values({"Min": 1, "Max": 10000, "Mid": 500}),
    "gauge": GaugeChartData(value=1, max_value=10000, label="Score"),
    "scatter": ScatterChartData.from_values(
        [1, 500, 10, 10000, 3], [1, 5000, 10, 10000, 3]
    ),
    "bubble": BubbleChartData.from_values(
        [1, 500, 10000], [1, 5000, 10000], [1, 500, 10000]
    ),
    "radar": RadarChartData.single(
        [1, 10000, 50, 7500, 3], axis_labels=["A", "B", "C", "D", "E"]
    ),
    "pie": PieChartData.from_values({"Min": 1, "Max": 10000, "Mid": 500}),
}

# NaN, infinities and negatives; every chart must still draw without raising.
INVALID: Dict[str, object] = {
    "line": LineChartData.from_values(
        [NAN, 25, INF, -10, 30], x_labels=["NaN", "25", "Inf", "-10", "30"]
    ),
    "bar": BarChartData.simple(
        [NAN, 45, -INF, -20, 38], labels=["NaN", "45", "-Inf", "-20", "38"]
    ),
    "donut": DonutChartData(
        slices=[
            Slice(NAN, "NaN"),
            Slice(30, "Valid"),
            Slice(-10, "Negative"),
            Slice(INF, "Infinity"),
        ]
    ),
    "gauge": GaugeChartData(value=NAN, max_value=100, label="Invalid"),
    "scatter": ScatterChartData(
        points=[
            ScatterPoint(NAN, 10, "NaN X"),
            ScatterPoint(2, INF, "Inf Y"),
            ScatterPoint(3, -15, "Negative"),
            ScatterPoint(4, 25, "Valid"),
        ]
    ),
    "bubble": BubbleChartData(
        points=[
            BubblePoint(NAN, 10, 5, "NaN X"),
            BubblePoint(2, -INF, 10, "Inf Y"),
            BubblePoint(3, 20, NAN, "NaN Size"),
            BubblePoint(4, 30, 15, "Valid"),
        ]
    ),
    "radar": RadarChartData(
        entries=[RadarEntry(values=[NAN, 65, INF, -10, 85], label="Invalid")],
        axis_labels=["NaN", "65", "Inf", "-10", "85"],
    ),
    "pie": PieChartData(
        slices=[Slice(NAN, "NaN"), Slice(30, "Valid"), Slice(-5, "Negative")]
    ),
}

EMPTY: Dict[str, object] = {
    "line": LineChartData(series=[]),
    "bar": BarChartData(groups=[]),
    "donut": DonutChartData(slices=[]),
    "gauge": GaugeChartData(value=0, max_value=0),
    "scatter": ScatterChartData(points=[]),
    "bubble": BubbleChartData(points=[]),
    "radar": RadarChartData(entries=[], axis_labels=[]),
    "pie": PieChartData(slices=[]),
}

DATASETS: Dict[str, Dict[str, object]] = {
    "normal": NORMAL,
    "extreme": EXTREME,
    "invalid": INVALID,
    "empty": EMPTY,
}


def sample(kind: str, dataset: str = "normal") -> object:
    """Sample data for chart ``kind`` from ``dataset``.

    :raises KeyError: If either name is unknown.
    """
    if dataset not in DATASETS:
        raise KeyError(f"Unknown dataset {dataset!r}")
    charts = DATASETS[dataset]
    if kind not in charts:
        raise KeyError(f"Unknown chart kind {kind!r}")
    return charts[kind]


__all__ = [
    "CHART_KINDS",
    "DATASETS",
    "NORMAL",
    "EXTREME",
    "INVALID",
    "EMPTY",
    "sample",
]

"""Backend-neutral draw commands produced by :func:`chartframe.compute_frame`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from .colors import Color

Point = Tuple[float, float]


# --------------------------------- Geometry -----------------------------------


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        return (self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0


@dataclass(frozen=True)
class CornerRadii:
    top_left: float = 0.0
    top_right: float = 0.0
    bottom_right: float = 0.0
    bottom_left: float = 0.0

    @property
    def is_zero(self) -> bool:
        return not any(
            (self.top_left, self.top_right, self.bottom_right, self.bottom_left)
        )


# ----------------------------------- Paths ------------------------------------


class MoveTo(NamedTuple):
    x: float
    y: float


class LineTo(NamedTuple):
    x: float
    y: float


class CubicTo(NamedTuple):
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


class Close(NamedTuple):
    pass


Segment = Union[MoveTo, LineTo, CubicTo, Close]


class Path:
    """A sequence of move/line/cubic/close segments."""

    def __init__(self, segments: Sequence[Segment] = ()) -> None:
        self.segments: List[Segment] = list(segments)

    def __repr__(self) -> str:
        return f"Path({self.segments!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return [(type(s), s) for s in self.segments] == [
            (type(s), s) for s in other.segments
        ]

    def __len__(self) -> int:
        return len(self.segments)

    def move_to(self, x: float, y: float) -> "Path":
        self.segments.append(MoveTo(x, y))
        return self

    def line_to(self, x: float, y: float) -> "Path":
        self.segments.append(LineTo(x, y))
        return self

    def cubic_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> "Path":
        self.segments.append(CubicTo(c1x, c1y, c2x, c2y, x, y))
        return self

    def close(self) -> "Path":
        self.segments.append(Close())
        return self

    def copy(self) -> "Path":
        return Path(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def flatten(self, steps: int = 16) -> List[List[Point]]:
        """Approximate the path as polylines, one per sub-path.

        Cubic segments are sampled at ``steps`` evenly spaced parameters;
        closed sub-paths repeat their first point at the end.
        """
        polylines: List[List[Point]] = []
        current: List[Point] = []
        steps = max(1, int(steps))
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                if len(current) > 1:
                    polylines.append(current)
                current = [(seg.x, seg.y)]
            elif isinstance(seg, LineTo):
                if not current:
                    current = [(seg.x, seg.y)]
                else:
                    current.append((seg.x, seg.y))
            elif isinstance(seg, CubicTo):
                x0, y0 = current[-1] if current else (seg.x, seg.y)
                if not current:
                    current = [(x0, y0)]
                for i in range(1, steps + 1):
                    t = i / float(steps)
                    mt = 1.0 - t
                    a = mt * mt * mt
                    b = 3.0 * mt * mt * t
                    c = 3.0 * mt * t * t
                    d = t * t * t
                    current.append(
                        (
                            a * x0 + b * seg.c1x + c * seg.c2x + d * seg.x,
                            a * y0 + b * seg.c1y + c * seg.c2y + d * seg.y,
                        )
                    )
            elif isinstance(seg, Close):
                if current:
                    current.append(current[0])
                    polylines.append(current)
                    current = [current[0]]
        if len(current) > 1:
            polylines.append(current)
        return polylines


# ---------------------------------- Paints ------------------------------------


@dataclass(frozen=True)
class VerticalGradient:
    """Linear gradient from ``top`` at ``y0`` to ``bottom`` at ``y1``."""

    top: Color
    bottom: Color
    y0: float
    y1: float


@dataclass(frozen=True)
class DrawLine:
    start: Point
    end: Point
    color: Color
    width: float = 1.0
    dash: Optional[Tuple[float, ...]] = None


@dataclass(frozen=True)
class DrawRect:
    rect: Rect
    color: Color
    radii: CornerRadii = field(default_factory=CornerRadii)


@dataclass(frozen=True, eq=False)
class DrawPath:
    """Fill (``stroke_width is None``) or stroke a path."""

    path: Path
    color: Color
    stroke_width: Optional[float] = None
    gradient: Optional[VerticalGradient] = None


@dataclass(frozen=True)
class DrawArc:
    """Arc on a circle; angles in degrees, 0° at 3 o'clock, clockwise."""

    center: Point
    radius: float
    start_angle: float
    sweep_angle: float
    color: Color
    use_center: bool = False
    stroke_width: Optional[float] = None
    round_cap: bool = False


@dataclass(frozen=True)
class DrawCircle:
    center: Point
    radius: float
    color: Color


@dataclass(frozen=True)
class DrawText:
    """Text whose baseline-anchor is ``position``; ``align`` is left/center/right."""

    text: str
    position: Point
    color: Color
    size: float
    align: str = "center"
    bold: bool = False


@dataclass(frozen=True, eq=False)
class ClipGroup:
    """Commands drawn with a rectangular clip applied."""

    rect: Rect
    commands: Tuple["Command", ...]


Command = Union[
    DrawLine, DrawRect, DrawPath, DrawArc, DrawCircle, DrawText, ClipGroup
]


# --------------------------------- Results ------------------------------------


@dataclass(frozen=True)
class Selection:
    """Entity under the pointer, reported back to the host.

    ``index`` is the primary entity (point, group, slice, axis, bubble);
    ``series_index`` and ``sub_index`` carry the secondary coordinates
    (line series, bar entry within a group).
    """

    index: int
    series_index: int = 0
    sub_index: int = 0
    value: float = 0.0
    label: str = ""
    position: Optional[Point] = None


@dataclass
class Frame:
    """Everything needed to paint one frame of a chart."""

    width: float
    height: float
    commands: List[Command] = field(default_factory=list)
    selections: List[Selection] = field(default_factory=list)
    background: Optional[Color] = None

    @property
    def is_empty(self) -> bool:
        return not self.commands

    @property
    def selection(self) -> Optional[Selection]:
        return self.selections[0] if self.selections else None

    def add(self, command: Command) -> None:
        self.commands.append(command)

    def extend(self, commands: Sequence[Command]) -> None:
        self.commands.extend(commands)


__all__ = [
    "Point",
    "Rect",
    "CornerRadii",
    "MoveTo",
    "LineTo",
    "CubicTo",
    "Close",
    "Path",
    "VerticalGradient",
    "DrawLine",
    "DrawRect",
    "DrawPath",
    "DrawArc",
    "DrawCircle",
    "DrawText",
    "ClipGroup",
    "Command",
    "Selection",
    "Frame",
]

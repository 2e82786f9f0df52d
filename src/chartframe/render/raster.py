"""Headless rendering of frames into BGR NumPy images with OpenCV.

The raster backend trades exact font rendering for zero GUI dependencies:
text uses OpenCV's Hershey font and curves are flattened into polylines.
It is meant for snapshots and tests rather than on-screen display.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import cv2  # opencv-python
import numpy as np

from ..colors import WHITE, Color
from ..commands import (
    ClipGroup,
    Command,
    CornerRadii,
    DrawArc,
    DrawCircle,
    DrawLine,
    DrawPath,
    DrawRect,
    DrawText,
    Frame,
    Point,
    Rect,
    VerticalGradient,
)

# Sub-pixel precision for OpenCV drawing calls (coordinates are scaled by 2**SHIFT).
SHIFT = 4
_SCALE = 1 << SHIFT
_FONT = cv2.FONT_HERSHEY_SIMPLEX
# Pixel height of Hershey simplex capitals at font scale 1.
_FONT_HEIGHT = 22.0


def _bgr(color: Color) -> Tuple[int, int, int]:
    return color.b, color.g, color.r


def _fixed(points: Sequence[Point]) -> np.ndarray:
    return np.round(np.asarray(points, dtype=np.float64) * _SCALE).astype(np.int32)


def _font_scale(size: float) -> float:
    return max(0.1, size / _FONT_HEIGHT)


def raster_text_width(text: str, size: float, bold: bool = False) -> float:
    """Width of ``text`` as :func:`render_frame_bgr` would draw it."""
    thickness = 2 if bold else 1
    (width, _), _ = cv2.getTextSize(text, _FONT, _font_scale(size), thickness)
    return float(width)


def _blend(canvas: np.ndarray, layer: np.ndarray, alpha: float) -> None:
    """Composite ``layer`` over ``canvas`` in place at a uniform ``alpha``."""
    if alpha >= 1.0:
        canvas[...] = layer
    elif alpha > 0.0:
        canvas[...] = cv2.addWeighted(layer, alpha, canvas, 1.0 - alpha, 0.0)


def _draw(canvas: np.ndarray, color: Color, paint) -> None:
    """Run ``paint(target, bgr)`` with ``color``'s alpha applied."""
    if color.a == 0:
        return
    if color.a == 255:
        paint(canvas, _bgr(color))
        return
    layer = canvas.copy()
    paint(layer, _bgr(color))
    _blend(canvas, layer, color.alpha)


def _rounded_rect_points(rect: Rect, radii: CornerRadii) -> List[Point]:
    left, top = min(rect.left, rect.right), min(rect.top, rect.bottom)
    right, bottom = max(rect.left, rect.right), max(rect.top, rect.bottom)
    limit = min(right - left, bottom - top) / 2.0
    corners = (
        (radii.top_right, right, top, 270.0),
        (radii.bottom_right, right, bottom, 0.0),
        (radii.bottom_left, left, bottom, 90.0),
        (radii.top_left, left, top, 180.0),
    )
    points: List[Point] = []
    for radius, x, y, start in corners:
        r = min(radius, limit)
        if r <= 0.0:
            points.append((x, y))
            continue
        cx = x - r if x == right else x + r
        cy = y - r if y == bottom else y + r
        for step in range(9):
            a = math.radians(start + step * 90.0 / 8)
            points.append((cx + math.cos(a) * r, cy + math.sin(a) * r))
    return points


def _arc_points(
    center: Point, radius: float, start: float, sweep: float
) -> List[Point]:
    steps = max(2, int(abs(sweep) / 4.0) + 1)
    cx, cy = center
    return [
        (
            cx + math.cos(math.radians(start + sweep * i / steps)) * radius,
            cy + math.sin(math.radians(start + sweep * i / steps)) * radius,
        )
        for i in range(steps + 1)
    ]


def _fill_gradient(
    canvas: np.ndarray, polygons: Sequence[np.ndarray], gradient: VerticalGradient
) -> None:
    h, w = canvas.shape[:2]
    mask = np.zeros((h, w), dtype=np.uint8)
    cv2.fillPoly(mask, list(polygons), 255, lineType=cv2.LINE_AA, shift=SHIFT)
    span = gradient.y1 - gradient.y0 or 1.0
    t = np.clip((np.arange(h, dtype=np.float32) - gradient.y0) / span, 0.0, 1.0)
    top = np.array([*_bgr(gradient.top), gradient.top.a], dtype=np.float32)
    bottom = np.array([*_bgr(gradient.bottom), gradient.bottom.a], dtype=np.float32)
    rows = top[None, :] * (1.0 - t[:, None]) + bottom[None, :] * t[:, None]
    alpha = (rows[:, 3] / 255.0)[:, None] * (mask.astype(np.float32) / 255.0)
    color = rows[:, None, :3]
    a = alpha[..., None]
    blended = canvas.astype(np.float32) * (1.0 - a) + color * a
    canvas[...] = np.clip(np.round(blended), 0, 255).astype(np.uint8)


def _render_path(canvas: np.ndarray, cmd: DrawPath) -> None:
    polylines = [_fixed(p) for p in cmd.path.flatten() if len(p) > 1]
    if not polylines:
        return
    if cmd.stroke_width is not None:
        thickness = max(1, int(round(cmd.stroke_width)))
        _draw(
            canvas,
            cmd.color,
            lambda img, c: cv2.polylines(
                img, polylines, False, c, thickness, cv2.LINE_AA, SHIFT
            ),
        )
    elif cmd.gradient is not None:
        _fill_gradient(canvas, polylines, cmd.gradient)
    else:
        _draw(
            canvas,
            cmd.color,
            lambda img, c: cv2.fillPoly(img, polylines, c, cv2.LINE_AA, SHIFT),
        )


def _render_arc(canvas: np.ndarray, cmd: DrawArc) -> None:
    if cmd.radius <= 0.0:
        return
    points = _arc_points(cmd.center, cmd.radius, cmd.start_angle, cmd.sweep_angle)
    if cmd.stroke_width is None or cmd.use_center:
        poly = [_fixed([cmd.center] + points)]
        _draw(
            canvas,
            cmd.color,
            lambda img, c: cv2.fillPoly(img, poly, c, cv2.LINE_AA, SHIFT),
        )
        return

    thickness = max(1, int(round(cmd.stroke_width)))
    line = [_fixed(points)]
    ends = (_fixed([points[0]])[0], _fixed([points[-1]])[0])
    cap_radius = int(round(cmd.stroke_width / 2.0 * _SCALE))

    def paint(img: np.ndarray, c: Tuple[int, int, int]) -> None:
        cv2.polylines(img, line, False, c, thickness, cv2.LINE_AA, SHIFT)
        if cmd.round_cap:
            for end in ends:
                center = (int(end[0]), int(end[1]))
                cv2.circle(img, center, cap_radius, c, -1, cv2.LINE_AA, SHIFT)

    _draw(canvas, cmd.color, paint)


def _render_text(canvas: np.ndarray, cmd: DrawText) -> None:
    thickness = 2 if cmd.bold else 1
    scale = _font_scale(cmd.size)
    width = raster_text_width(cmd.text, cmd.size, cmd.bold)
    x, y = cmd.position
    if cmd.align == "center":
        x -= width / 2.0
    elif cmd.align == "right":
        x -= width
    origin = (int(round(x)), int(round(y)))
    _draw(
        canvas,
        cmd.color,
        lambda img, c: cv2.putText(
            img, cmd.text, origin, _FONT, scale, c, thickness, cv2.LINE_AA
        ),
    )


def render_command(canvas: np.ndarray, cmd: Command) -> None:
    if isinstance(cmd, ClipGroup):
        h, w = canvas.shape[:2]
        x0 = int(np.clip(math.floor(cmd.rect.left), 0, w))
        x1 = int(np.clip(math.ceil(cmd.rect.right), 0, w))
        y0 = int(np.clip(math.floor(cmd.rect.top), 0, h))
        y1 = int(np.clip(math.ceil(cmd.rect.bottom), 0, h))
        if x1 <= x0 or y1 <= y0:
            return
        layer = canvas.copy()
        for child in cmd.commands:
            render_command(layer, child)
        canvas[y0:y1, x0:x1] = layer[y0:y1, x0:x1]
    elif isinstance(cmd, DrawLine):
        start = tuple(int(v) for v in _fixed([cmd.start])[0])
        end = tuple(int(v) for v in _fixed([cmd.end])[0])
        thickness = max(1, int(round(cmd.width)))
        _draw(
            canvas,
            cmd.color,
            lambda img, c: cv2.line(img, start, end, c, thickness, cv2.LINE_AA, SHIFT),
        )
    elif isinstance(cmd, DrawRect):
        poly = [_fixed(_rounded_rect_points(cmd.rect, cmd.radii))]
        _draw(
            canvas,
            cmd.color,
            lambda img, c: cv2.fillPoly(img, poly, c, cv2.LINE_AA, SHIFT),
        )
    elif isinstance(cmd, DrawPath):
        _render_path(canvas, cmd)
    elif isinstance(cmd, DrawArc):
        _render_arc(canvas, cmd)
    elif isinstance(cmd, DrawCircle):
        center = tuple(int(v) for v in _fixed([cmd.center])[0])
        radius = int(round(cmd.radius * _SCALE))
        if radius <= 0:
            return
        _draw(
            canvas,
            cmd.color,
            lambda img, c: cv2.circle(img, center, radius, c, -1, cv2.LINE_AA, SHIFT),
        )
    elif isinstance(cmd, DrawText):
        _render_text(canvas, cmd)
    else:
        raise TypeError(f"Unknown draw command: {type(cmd).__name__}")


def render_frame_bgr(
    frame: Frame,
    width: Optional[int] = None,
    height: Optional[int] = None,
    background: Color = WHITE,
) -> np.ndarray:
    """Render ``frame`` into a ``(height, width, 3)`` uint8 BGR image.

    ``background`` fills the canvas first; the frame's own background is
    composited over it.
    """
    w = int(round(frame.width)) if width is None else int(width)
    h = int(round(frame.height)) if height is None else int(height)
    if w < 0 or h < 0:
        raise ValueError(f"Image size must be non-negative, got {w}x{h}")
    canvas = np.empty((h, w, 3), dtype=np.uint8)
    canvas[...] = _bgr(background)
    if w == 0 or h == 0:
        return canvas
    if frame.background is not None and frame.background.a > 0:
        layer = np.empty_like(canvas)
        layer[...] = _bgr(frame.background)
        _blend(canvas, layer, frame.background.alpha)
    for cmd in frame.commands:
        render_command(canvas, cmd)
    return canvas


__all__ = ["render_frame_bgr", "render_command", "raster_text_width", "SHIFT"]

"""Paint :class:`~chartframe.commands.Frame` objects with ``QPainter``."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from PySide6 import QtCore, QtGui

from ..commands import (
    ClipGroup,
    Command,
    CornerRadii,
    CubicTo,
    DrawArc,
    DrawCircle,
    DrawLine,
    DrawPath,
    DrawRect,
    DrawText,
    Frame,
    LineTo,
    MoveTo,
    Path,
    Rect,
)
from ..utils.qt import to_qcolor


def _qrect(rect: Rect) -> QtCore.QRectF:
    return QtCore.QRectF(rect.left, rect.top, rect.width, rect.height)


def to_qpath(path: Path) -> QtGui.QPainterPath:
    qpath = QtGui.QPainterPath()
    for seg in path.segments:
        if isinstance(seg, MoveTo):
            qpath.moveTo(seg.x, seg.y)
        elif isinstance(seg, LineTo):
            qpath.lineTo(seg.x, seg.y)
        elif isinstance(seg, CubicTo):
            qpath.cubicTo(seg.c1x, seg.c1y, seg.c2x, seg.c2y, seg.x, seg.y)
        else:
            qpath.closeSubpath()
    return qpath


def rounded_rect_path(rect: Rect, radii: CornerRadii) -> QtGui.QPainterPath:
    """Rectangle path with an independent radius per corner."""
    qpath = QtGui.QPainterPath()
    limit = max(0.0, min(abs(rect.width), abs(rect.height)) / 2.0)
    corners = (radii.top_left, radii.top_right, radii.bottom_right, radii.bottom_left)
    tl, tr, br, bl = (min(r, limit) for r in corners)
    left, top, right, bottom = rect.left, rect.top, rect.right, rect.bottom

    qpath.moveTo(left + tl, top)
    qpath.lineTo(right - tr, top)
    if tr > 0.0:
        qpath.arcTo(QtCore.QRectF(right - 2 * tr, top, 2 * tr, 2 * tr), 90.0, -90.0)
    qpath.lineTo(right, bottom - br)
    if br > 0.0:
        qpath.arcTo(
            QtCore.QRectF(right - 2 * br, bottom - 2 * br, 2 * br, 2 * br), 0.0, -90.0
        )
    qpath.lineTo(left + bl, bottom)
    if bl > 0.0:
        qpath.arcTo(QtCore.QRectF(left, bottom - 2 * bl, 2 * bl, 2 * bl), 270.0, -90.0)
    qpath.lineTo(left, top + tl)
    if tl > 0.0:
        qpath.arcTo(QtCore.QRectF(left, top, 2 * tl, 2 * tl), 180.0, -90.0)
    qpath.closeSubpath()
    return qpath


def _font(size: float, bold: bool, base: Optional[QtGui.QFont] = None) -> QtGui.QFont:
    font = QtGui.QFont(base) if base is not None else QtGui.QFont()
    font.setPixelSize(max(1, int(round(size))))
    font.setBold(bold)
    return font


def qt_text_measurer(
    base: Optional[QtGui.QFont] = None,
) -> Callable[[str, float, bool], float]:
    """Text width function backed by ``QFontMetricsF`` (needs a Qt GUI app)."""
    cache: Dict[Tuple[float, bool], QtGui.QFontMetricsF] = {}

    def measure(text: str, size: float, bold: bool = False) -> float:
        key = (size, bold)
        metrics = cache.get(key)
        if metrics is None:
            metrics = QtGui.QFontMetricsF(_font(size, bold, base))
            cache[key] = metrics
        return metrics.horizontalAdvance(text)

    return measure


def _paint_line(painter: QtGui.QPainter, cmd: DrawLine) -> None:
    pen = QtGui.QPen(to_qcolor(cmd.color), cmd.width)
    if cmd.dash:
        # Qt dash lengths are in units of the pen width.
        unit = cmd.width if cmd.width > 0 else 1.0
        pen.setDashPattern([d / unit for d in cmd.dash])
    painter.setPen(pen)
    painter.drawLine(QtCore.QPointF(*cmd.start), QtCore.QPointF(*cmd.end))


def _paint_rect(painter: QtGui.QPainter, cmd: DrawRect) -> None:
    painter.setPen(QtCore.Qt.PenStyle.NoPen)
    painter.setBrush(QtGui.QBrush(to_qcolor(cmd.color)))
    if cmd.radii.is_zero:
        painter.drawRect(_qrect(cmd.rect))
    else:
        painter.drawPath(rounded_rect_path(cmd.rect, cmd.radii))


def _paint_path(painter: QtGui.QPainter, cmd: DrawPath) -> None:
    qpath = to_qpath(cmd.path)
    if cmd.stroke_width is not None:
        pen = QtGui.QPen(to_qcolor(cmd.color), cmd.stroke_width)
        pen.setJoinStyle(QtCore.Qt.PenJoinStyle.RoundJoin)
        pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawPath(qpath)
        return

    painter.setPen(QtCore.Qt.PenStyle.NoPen)
    if cmd.gradient is not None:
        g = cmd.gradient
        gradient = QtGui.QLinearGradient(0.0, g.y0, 0.0, g.y1)
        gradient.setColorAt(0.0, to_qcolor(g.top))
        gradient.setColorAt(1.0, to_qcolor(g.bottom))
        painter.setBrush(QtGui.QBrush(gradient))
    else:
        painter.setBrush(QtGui.QBrush(to_qcolor(cmd.color)))
    painter.drawPath(qpath)


def _paint_arc(painter: QtGui.QPainter, cmd: DrawArc) -> None:
    cx, cy = cmd.center
    r = cmd.radius
    bounds = QtCore.QRectF(cx - r, cy - r, 2 * r, 2 * r)
    # Qt angles run counter-clockwise; frame angles run clockwise.
    start = -cmd.start_angle
    sweep = -cmd.sweep_angle
    if cmd.stroke_width is None or cmd.use_center:
        qpath = QtGui.QPainterPath()
        qpath.moveTo(cx, cy)
        qpath.arcTo(bounds, start, sweep)
        qpath.closeSubpath()
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(QtGui.QBrush(to_qcolor(cmd.color)))
        painter.drawPath(qpath)
        return

    pen = QtGui.QPen(to_qcolor(cmd.color), cmd.stroke_width)
    pen.setCapStyle(
        QtCore.Qt.PenCapStyle.RoundCap
        if cmd.round_cap
        else QtCore.Qt.PenCapStyle.FlatCap
    )
    painter.setPen(pen)
    painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
    painter.drawArc(bounds, int(round(start * 16)), int(round(sweep * 16)))


def _paint_circle(painter: QtGui.QPainter, cmd: DrawCircle) -> None:
    painter.setPen(QtCore.Qt.PenStyle.NoPen)
    painter.setBrush(QtGui.QBrush(to_qcolor(cmd.color)))
    painter.drawEllipse(QtCore.QPointF(*cmd.center), cmd.radius, cmd.radius)


def _paint_text(painter: QtGui.QPainter, cmd: DrawText) -> None:
    font = _font(cmd.size, cmd.bold, painter.font())
    width = QtGui.QFontMetricsF(font).horizontalAdvance(cmd.text)
    x, y = cmd.position
    if cmd.align == "center":
        x -= width / 2.0
    elif cmd.align == "right":
        x -= width
    painter.setFont(font)
    painter.setPen(QtGui.QPen(to_qcolor(cmd.color)))
    painter.drawText(QtCore.QPointF(x, y), cmd.text)


def paint_command(painter: QtGui.QPainter, cmd: Command) -> None:
    if isinstance(cmd, ClipGroup):
        painter.save()
        op = (
            QtCore.Qt.ClipOperation.IntersectClip
            if painter.hasClipping()
            else QtCore.Qt.ClipOperation.ReplaceClip
        )
        painter.setClipRect(_qrect(cmd.rect), op)
        for child in cmd.commands:
            paint_command(painter, child)
        painter.restore()
    elif isinstance(cmd, DrawLine):
        _paint_line(painter, cmd)
    elif isinstance(cmd, DrawRect):
        _paint_rect(painter, cmd)
    elif isinstance(cmd, DrawPath):
        _paint_path(painter, cmd)
    elif isinstance(cmd, DrawArc):
        _paint_arc(painter, cmd)
    elif isinstance(cmd, DrawCircle):
        _paint_circle(painter, cmd)
    elif isinstance(cmd, DrawText):
        _paint_text(painter, cmd)
    else:
        raise TypeError(f"Unknown draw command: {type(cmd).__name__}")


def paint_frame(painter: QtGui.QPainter, frame: Frame) -> None:
    """Replay every command of ``frame`` on an active ``painter``."""
    painter.save()
    painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
    painter.setRenderHint(QtGui.QPainter.RenderHint.TextAntialiasing, True)
    if frame.background is not None and frame.background.a > 0:
        painter.fillRect(
            QtCore.QRectF(0.0, 0.0, frame.width, frame.height),
            to_qcolor(frame.background),
        )
    for cmd in frame.commands:
        paint_command(painter, cmd)
    painter.restore()


def render_image(frame: Frame, fill: Optional[QtGui.QColor] = None) -> QtGui.QImage:
    """Paint ``frame`` into a new ARGB image of the frame's size."""
    image = QtGui.QImage(
        max(1, int(round(frame.width))),
        max(1, int(round(frame.height))),
        QtGui.QImage.Format.Format_ARGB32_Premultiplied,
    )
    image.fill(fill if fill is not None else QtGui.QColor(255, 255, 255))
    painter = QtGui.QPainter(image)
    try:
        paint_frame(painter, frame)
    finally:
        painter.end()
    return image


__all__ = [
    "paint_frame",
    "paint_command",
    "render_image",
    "qt_text_measurer",
    "rounded_rect_path",
    "to_qpath",
]

"""Qt widget hosting a chart: animation clock, pointer input and painting."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from PySide6 import QtCore, QtGui, QtWidgets

from .animation import ChartAnimator
from .charts import animation_duration_ms, compute_frame, default_style
from .colors import DEFAULT_PALETTE, Color
from .commands import Frame, Point, Selection
from .render.painter import paint_frame, qt_text_measurer
from .style import DonutChartStyle

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16


def system_prefers_dark() -> bool:
    """Whether the platform colour scheme is dark (False when unknown)."""
    app = QtGui.QGuiApplication.instance()
    if app is None:
        return False
    hints = QtGui.QGuiApplication.styleHints()
    scheme = getattr(hints, "colorScheme", None)
    if scheme is None:
        return False
    return scheme() == QtCore.Qt.ColorScheme.Dark


class ChartWidget(QtWidgets.QWidget):
    """Draws any supported chart data and reports pointer selections.

    The entry animation starts the first time the widget is shown and runs
    once. Pressing or dragging sets the pointer; releasing the button or
    leaving the widget clears it.
    """

    selectionChanged = QtCore.Signal(list)

    def __init__(
        self,
        data: Optional[object] = None,
        style: Optional[Any] = None,
        palette: Sequence[Color] = DEFAULT_PALETTE,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setMinimumSize(48, 48)

        self._data: Optional[object] = None
        self._style: Optional[Any] = None
        self._palette: Sequence[Color] = tuple(palette)
        self._dark_override: Optional[bool] = None
        self._animated = True
        self._pointer: Optional[Point] = None
        self._selections: List[Selection] = []
        self._animator = ChartAnimator(0)
        self._measure = qt_text_measurer(self.font())

        self._clock = QtCore.QElapsedTimer()
        self._clock.start()
        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._tick)

        if data is not None:
            self.set_data(data, style)

    # ------------------------------ Properties --------------------------------

    def data(self) -> Optional[object]:
        return self._data

    def chart_style(self) -> Optional[Any]:
        return self._style

    def selections(self) -> List[Selection]:
        return list(self._selections)

    def set_data(self, data: object, style: Optional[Any] = None) -> None:
        """Show ``data``; a new dataset replays the entry animation."""
        self._style = style if style is not None else default_style(data)
        self._data = data
        emphasis_ms = (
            self._style.selection_duration_ms
            if isinstance(self._style, DonutChartStyle)
            else 0
        )
        self._animator = ChartAnimator(
            animation_duration_ms(data, self._style) if self._animated else 0,
            emphasis_ms,
        )
        if self.isVisible():
            self._animator.start(self._now())
            self._schedule()
        self._set_selections([])
        self.update()

    def set_style(self, style: Any) -> None:
        if self._data is None:
            self._style = style
            return
        compute_frame(self._data, (0, 0), style)  # validates the pairing
        self._style = style
        self.update()

    def set_palette(self, palette: Sequence[Color]) -> None:
        if not palette:
            raise ValueError("palette must contain at least one colour")
        self._palette = tuple(palette)
        self.update()

    def set_dark(self, dark: Optional[bool]) -> None:
        """Force dark (``True``) or light (``False``); ``None`` follows the system."""
        self._dark_override = dark
        self.update()

    def is_dark(self) -> bool:
        if self._dark_override is not None:
            return self._dark_override
        return system_prefers_dark()

    def set_animated(self, animated: bool) -> None:
        """Enable or disable the entry animation for datasets set afterwards."""
        self._animated = bool(animated)

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(360, 240)

    # ------------------------------- Rendering --------------------------------

    def _now(self) -> float:
        return float(self._clock.elapsed())

    def _schedule(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def _tick(self) -> None:
        self.update()
        if not self._animator.running(self._now()):
            self._timer.stop()

    def current_frame(self) -> Frame:
        """Frame for the widget's current size, pointer and animation state."""
        if self._data is None:
            return Frame(float(self.width()), float(self.height()))
        now = self._now()
        return compute_frame(
            self._data,
            (float(self.width()), float(self.height())),
            self._style,
            progress=self._animator.progress(now),
            pointer=self._pointer,
            dark=self.is_dark(),
            palette=self._palette,
            measure=self._measure,
            emphasis=self._animator.scales(now),
        )

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        frame = self.current_frame()
        painter = QtGui.QPainter(self)
        try:
            paint_frame(painter, frame)
        finally:
            painter.end()
        self._set_selections(frame.selections)

    def _set_selections(self, selections: List[Selection]) -> None:
        if selections == self._selections:
            return
        self._selections = list(selections)
        if isinstance(self._style, DonutChartStyle):
            index = selections[0].index if selections else None
            self._animator.select(index, self._style.selected_scale, self._now())
            self._schedule()
        logger.debug("Selection changed: %s", self._selections)
        self.selectionChanged.emit(list(self._selections))

    # --------------------------------- Events ---------------------------------

    def showEvent(self, e: QtGui.QShowEvent) -> None:
        super().showEvent(e)
        if not self._animator.entry.started:
            self._animator.start(self._now())
        self._schedule()

    def hideEvent(self, e: QtGui.QHideEvent) -> None:
        self._timer.stop()
        super().hideEvent(e)

    def _set_pointer(self, pointer: Optional[Point]) -> None:
        if pointer == self._pointer:
            return
        self._pointer = pointer
        self.update()

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            pos = e.position()
            self._set_pointer((pos.x(), pos.y()))
            e.accept()
        else:
            super().mousePressEvent(e)

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.buttons() & QtCore.Qt.MouseButton.LeftButton:
            pos = e.position()
            self._set_pointer((pos.x(), pos.y()))
            e.accept()
        else:
            super().mouseMoveEvent(e)

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self._set_pointer(None)
            e.accept()
        else:
            super().mouseReleaseEvent(e)

    def leaveEvent(self, e: QtCore.QEvent) -> None:
        self._set_pointer(None)
        super().leaveEvent(e)


__all__ = ["ChartWidget", "system_prefers_dark", "FRAME_INTERVAL_MS"]

"""ChartWidget behaviour under the offscreen Qt platform."""

import pytest

from chartframe.commands import DrawArc, DrawRect
from chartframe.samples import NORMAL
from chartframe.style import LineChartStyle


@pytest.fixture()
def widget(qapp):
    from chartframe.widgets import ChartWidget

    w = ChartWidget()
    w.set_animated(False)
    w.set_data(NORMAL["bar"])
    w.resize(400, 300)
    yield w
    w.deleteLater()


def _mouse(kind, x, y):
    from PySide6 import QtCore, QtGui

    pos = QtCore.QPointF(x, y)
    button = QtCore.Qt.MouseButton.LeftButton
    buttons = (
        QtCore.Qt.MouseButton.NoButton
        if kind == QtCore.QEvent.Type.MouseButtonRelease
        else button
    )
    return QtGui.QMouseEvent(
        kind, pos, pos, button, buttons, QtCore.Qt.KeyboardModifier.NoModifier
    )


def test_frame_follows_widget_size(widget) -> None:
    frame = widget.current_frame()
    assert (frame.width, frame.height) == (400.0, 300.0)
    bars = [c for c in frame.commands if isinstance(c, DrawRect)]
    assert len(bars) == 5


def test_press_and_release_drive_the_selection(widget) -> None:
    from PySide6 import QtCore

    seen = []
    widget.selectionChanged.connect(seen.append)

    widget.mousePressEvent(_mouse(QtCore.QEvent.Type.MouseButtonPress, 276.0, 150.0))
    assert widget.current_frame().selection.index == 3
    widget.grab()
    assert [s.index for s in widget.selections()] == [3]
    assert seen and seen[-1][0].label == "Apr"

    widget.mouseReleaseEvent(
        _mouse(QtCore.QEvent.Type.MouseButtonRelease, 276.0, 150.0)
    )
    assert widget.current_frame().selections == []
    widget.grab()
    assert widget.selections() == []
    assert seen[-1] == []


def test_leaving_clears_the_pointer(widget) -> None:
    from PySide6 import QtCore

    widget.mousePressEvent(_mouse(QtCore.QEvent.Type.MouseButtonPress, 276.0, 150.0))
    widget.leaveEvent(QtCore.QEvent(QtCore.QEvent.Type.Leave))
    assert widget.current_frame().selections == []


def test_new_data_clears_selection(widget) -> None:
    from PySide6 import QtCore

    widget.mousePressEvent(_mouse(QtCore.QEvent.Type.MouseButtonPress, 276.0, 150.0))
    widget.grab()
    assert widget.selections()
    widget.set_data(NORMAL["line"])
    assert widget.selections() == []
    assert isinstance(widget.chart_style(), LineChartStyle)


def test_setters_validate(widget) -> None:
    with pytest.raises(ValueError):
        widget.set_palette([])
    with pytest.raises(TypeError):
        widget.set_style(LineChartStyle())


def test_dark_override(widget) -> None:
    widget.set_dark(True)
    assert widget.is_dark()
    widget.set_dark(False)
    assert not widget.is_dark()


def test_entry_animation_waits_for_show(qapp) -> None:
    from chartframe.widgets import ChartWidget

    w = ChartWidget(NORMAL["gauge"])
    w.resize(200, 200)
    assert not w._animator.entry.started
    arcs = [c for c in w.current_frame().commands if isinstance(c, DrawArc)]
    assert len(arcs) == 1  # track only, progress is still 0
    w.deleteLater()


def test_empty_widget_paints_nothing(qapp) -> None:
    from chartframe.widgets import ChartWidget

    w = ChartWidget()
    w.resize(100, 100)
    assert w.current_frame().is_empty
    assert w.sizeHint().width() == 360
    w.deleteLater()

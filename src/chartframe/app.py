"""Gallery window showing every chart kind with the bundled sample data."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import logging
import sys

from PySide6 import QtCore, QtGui, QtWidgets

from . import __version__ as APP_VERSION
from .commands import Selection
from .config import AppConfig, load_config, save_config
from .samples import CHART_KINDS, DATASETS, sample
from .utils import format_value
from .widgets import ChartWidget

logger = logging.getLogger(__name__)

# (label, dark override) pairs for the theme selector.
THEME_CHOICES = (("System", None), ("Light", False), ("Dark", True))


def describe_selections(selections: List[Selection]) -> str:
    """One-line status text for the current pointer selection."""
    if not selections:
        return "Press and drag on the chart to inspect values."
    parts = []
    for s in selections:
        name = s.label or f"#{s.index}"
        parts.append(f"{name}: {format_value(s.value)}")
    return "   ".join(parts)


class GalleryWindow(QtWidgets.QMainWindow):
    """Chart picker, dataset and theme controls around a :class:`ChartWidget`."""

    def __init__(self, cfg: AppConfig, app_version: str = "") -> None:
        super().__init__(None)
        self.cfg = cfg
        self._app_version = app_version or "unknown"
        self.setWindowTitle(f"chartframe {self._app_version} gallery")
        self.resize(cfg.window.width, cfg.window.height)

        # Widgets
        self.chart_list = QtWidgets.QListWidget()
        for key, title in CHART_KINDS.items():
            item = QtWidgets.QListWidgetItem(title)
            item.setData(QtCore.Qt.ItemDataRole.UserRole, key)
            self.chart_list.addItem(item)
        self.chart_list.setMaximumWidth(180)

        self.dataset_combo = QtWidgets.QComboBox()
        for name in DATASETS:
            self.dataset_combo.addItem(name.capitalize(), userData=name)

        self.theme_combo = QtWidgets.QComboBox()
        for label, _ in THEME_CHOICES:
            self.theme_combo.addItem(label)

        self.animate_check = QtWidgets.QCheckBox("Animate")
        self.animate_check.setChecked(cfg.animate)

        self.replay_btn = QtWidgets.QPushButton("Replay  (R)")

        self.chart = ChartWidget()
        self.chart.set_animated(cfg.animate)
        self.chart.set_dark(cfg.dark_mode)

        self.status_label = QtWidgets.QLabel(describe_selections([]))
        self.status_label.setWordWrap(True)

        # Layout
        controls = QtWidgets.QHBoxLayout()
        controls.addWidget(QtWidgets.QLabel("Data:"))
        controls.addWidget(self.dataset_combo)
        controls.addWidget(QtWidgets.QLabel("Theme:"))
        controls.addWidget(self.theme_combo)
        controls.addWidget(self.animate_check)
        controls.addStretch(1)
        controls.addWidget(self.replay_btn)

        right = QtWidgets.QVBoxLayout()
        right.addLayout(controls)
        right.addWidget(self.chart, stretch=1)
        right.addWidget(self.status_label)

        body = QtWidgets.QWidget(self)
        h = QtWidgets.QHBoxLayout(body)
        h.addWidget(self.chart_list)
        h.addLayout(right, stretch=1)
        self.setCentralWidget(body)

        # Initial values
        self._select_chart(cfg.selected_chart)
        self._select_dataset(cfg.dataset)
        self.theme_combo.setCurrentIndex(
            next(
                (i for i, (_, v) in enumerate(THEME_CHOICES) if v == cfg.dark_mode), 0
            )
        )
        self._show_current()

        # Wire signals
        self.chart_list.currentRowChanged.connect(self._on_chart_changed)
        self.dataset_combo.currentIndexChanged.connect(self._on_dataset_changed)
        self.theme_combo.currentIndexChanged.connect(self._on_theme_changed)
        self.animate_check.toggled.connect(self._on_animate_toggled)
        self.replay_btn.clicked.connect(self._show_current)
        self.chart.selectionChanged.connect(self._on_selection_changed)

    # ------------------------------- Helpers ----------------------------------

    def _select_chart(self, key: str) -> None:
        keys = list(CHART_KINDS)
        row = keys.index(key) if key in keys else 0
        self.chart_list.setCurrentRow(row)
        self.cfg.selected_chart = keys[row]

    def _select_dataset(self, name: str) -> None:
        index = self.dataset_combo.findData(name)
        self.dataset_combo.setCurrentIndex(index if index >= 0 else 0)
        self.cfg.dataset = str(self.dataset_combo.currentData())

    def current_chart(self) -> str:
        return self.cfg.selected_chart

    def current_dataset(self) -> str:
        return self.cfg.dataset

    def _show_current(self) -> None:
        data = sample(self.cfg.selected_chart, self.cfg.dataset)
        logger.debug("Showing %s / %s", self.cfg.selected_chart, self.cfg.dataset)
        self.chart.set_data(data)

    # ---------------------------- Event Handlers ------------------------------

    def _on_chart_changed(self, row: int) -> None:
        if row < 0:
            return
        self.cfg.selected_chart = list(CHART_KINDS)[row]
        self._show_current()

    def _on_dataset_changed(self, index: int) -> None:
        if index < 0:
            return
        self.cfg.dataset = str(self.dataset_combo.itemData(index))
        self._show_current()

    def _on_theme_changed(self, index: int) -> None:
        dark = THEME_CHOICES[index][1] if 0 <= index < len(THEME_CHOICES) else None
        self.cfg.dark_mode = dark
        self.chart.set_dark(dark)

    def _on_animate_toggled(self, enabled: bool) -> None:
        self.cfg.animate = bool(enabled)
        self.chart.set_animated(self.cfg.animate)
        self._show_current()

    def _on_selection_changed(self, selections: List[Selection]) -> None:
        self.status_label.setText(describe_selections(selections))

    def keyPressEvent(self, e: QtGui.QKeyEvent) -> None:
        if e.key() == QtCore.Qt.Key.Key_R:
            self._show_current()
            e.accept()
        elif e.key() == QtCore.Qt.Key.Key_Escape:
            self.close()
            e.accept()
        else:
            super().keyPressEvent(e)

    def resizeEvent(self, e: QtGui.QResizeEvent) -> None:
        super().resizeEvent(e)
        self.cfg.window.width = max(1, e.size().width())
        self.cfg.window.height = max(1, e.size().height())


# ---------------------------------- Main --------------------------------------


def main(config_path: Optional[Path] = None) -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("chartframe")
    app.setApplicationVersion(APP_VERSION)

    cfg = load_config(config_path)
    window = GalleryWindow(cfg, app.applicationVersion())
    window.show()
    ret = app.exec()

    if not save_config(window.cfg, config_path):
        logger.error("Preferences were not saved")

    sys.exit(ret)


__all__ = ["GalleryWindow", "describe_selections", "main"]

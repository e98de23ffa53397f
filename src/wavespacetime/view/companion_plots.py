"""Flat 2D companions of the diagram: the current snapshot and one point's oscillation."""
from __future__ import annotations

import logging

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from wavespacetime.config import ViewConfig
from wavespacetime.model.state import SceneStore
from wavespacetime.model.wave import WaveField
from wavespacetime.view import strings
from wavespacetime.view.renderer import sample_times

logger = logging.getLogger(__name__)

SNAPSHOT_COLOR = '#f43f5e'
OSCILLATION_COLOR = '#14b8a6'


def _style_plot(plot: pg.PlotWidget, bottom: str, left: str) -> None:
    plot.setBackground('w')
    plot.showGrid(x=True, y=True, alpha=0.3)
    plot.setLabel('bottom', bottom, color='black')
    plot.setLabel('left', left, color='black')
    for name in ('bottom', 'left'):
        plot.getAxis(name).setPen('k')
        plot.getAxis(name).setTextPen('k')
    plot.setMouseEnabled(x=False, y=False)
    plot.hideButtons()


class CompanionPlots(QWidget):
    """
    Two pyqtgraph plots following the store.

    The upper plot is the snapshot y(x) at the current time, the lower one the
    displacement history y(t) of the selected watch position up to the current
    time. Both use the same fixed axes as the 3D diagram.
    """

    def __init__(
        self,
        store: SceneStore,
        field: WaveField,
        view: ViewConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.field = field
        self.view = view or ViewConfig()
        config = store.config

        self.watch_positions = self.view.visible_watch_positions(config.spatial_extent)
        self.watch_x = self.watch_positions[0] if self.watch_positions else 0.0

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        y_pad = 1.2 * config.amplitude

        self.snapshot_plot = pg.PlotWidget()
        _style_plot(self.snapshot_plot, strings.text("axis_position"), strings.text("axis_displacement"))
        self.snapshot_plot.setXRange(0.0, config.spatial_extent, padding=0.02)
        self.snapshot_plot.setYRange(-y_pad, y_pad, padding=0.0)
        self.snapshot_curve = self.snapshot_plot.plot([], [], pen=pg.mkPen(color=SNAPSHOT_COLOR, width=3))
        layout.addWidget(self.snapshot_plot, 1)

        hbox_watch = QHBoxLayout()
        hbox_watch.addWidget(QLabel(strings.text("watch_position")))
        self.combo_watch = QComboBox()
        for wx in self.watch_positions:
            self.combo_watch.addItem(f"x = {wx:g} m", wx)
        self.combo_watch.currentIndexChanged.connect(self.on_watch_changed)
        hbox_watch.addWidget(self.combo_watch, 1)
        layout.addLayout(hbox_watch)

        self.oscillation_plot = pg.PlotWidget()
        _style_plot(self.oscillation_plot, strings.text("axis_time"), strings.text("axis_displacement"))
        self.oscillation_plot.setXRange(0.0, config.time_extent, padding=0.02)
        self.oscillation_plot.setYRange(-y_pad, y_pad, padding=0.0)
        self.oscillation_curve = self.oscillation_plot.plot(
            [], [], pen=pg.mkPen(color=OSCILLATION_COLOR, width=2)
        )
        self.time_line = pg.InfiniteLine(
            pos=0.0,
            angle=90,
            pen=pg.mkPen(color=SNAPSHOT_COLOR, width=1, style=Qt.PenStyle.DashLine),
        )
        self.oscillation_plot.addItem(self.time_line)
        layout.addWidget(self.oscillation_plot, 1)

        self.store.time_changed.connect(self.refresh)
        self.refresh()

    def on_watch_changed(self, index: int) -> None:
        if index < 0:
            return
        self.watch_x = float(self.combo_watch.itemData(index))
        logger.debug(f"Watching position x = {self.watch_x:g}")
        self.refresh()

    def refresh(self, *_: object) -> None:
        t_now = self.store.current_time

        xs = self.field.sample_positions()
        self.snapshot_curve.setData(xs, self.field.snapshot(t_now, xs))
        self.snapshot_plot.setTitle(strings.text("snapshot_title", t=t_now), color='black', size='11pt')

        ts = sample_times(t_now, self.view.vibration_step, include_end=True)
        self.oscillation_curve.setData(ts, self.field.oscillation(self.watch_x, ts))
        self.time_line.setValue(t_now)
        self.oscillation_plot.setTitle(
            strings.text("oscillation_title", x=self.watch_x), color='black', size='11pt'
        )

    def snapshot_data(self) -> tuple[np.ndarray, np.ndarray]:
        xs, ys = self.snapshot_curve.getData()
        return np.asarray(xs), np.asarray(ys)

    def oscillation_data(self) -> tuple[np.ndarray, np.ndarray]:
        ts, ys = self.oscillation_curve.getData()
        return np.asarray(ts), np.asarray(ys)

"""
Main Application Window
=======================
The primary GUI container holding the header, the diagram canvas, the
companion plots and the transport bar.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the header toggles and menu actions to the store and
   stops the frame tick when the window closes.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QMainWindow, QPushButton, QSplitter, QVBoxLayout, QWidget
)

from wavespacetime.config import ViewConfig
from wavespacetime.controller.animation import AnimationDriver
from wavespacetime.controller.interaction import InteractionController
from wavespacetime.model.state import DisplayToggles, SceneStore
from wavespacetime.model.wave import WaveField
from wavespacetime.view import strings
from wavespacetime.view.canvas import WaveCanvas
from wavespacetime.view.companion_plots import CompanionPlots
from wavespacetime.view.renderer import SceneRenderer
from wavespacetime.view.transport import TransportBar

logger = logging.getLogger(__name__)

PILL_STYLE = """
    QPushButton {{ border-radius: 14px; padding: 6px 12px; font-size: 11px; font-weight: 600;
                  border: 1px solid #e2e8f0; background: white; color: #64748b; }}
    QPushButton:checked {{ background: {bg}; border-color: {border}; color: {fg}; }}
"""


def _legend_entry(color: str, label: str) -> QLabel:
    lbl = QLabel(f'<span style="color:{color}; font-size:14px;">&#9679;</span> {label}')
    lbl.setStyleSheet("color: #64748b;")
    return lbl


class MainWindow(QMainWindow):
    def __init__(
        self,
        store: SceneStore,
        driver: AnimationDriver,
        renderer: SceneRenderer,
        interaction: InteractionController,
        field: WaveField,
        view: ViewConfig | None = None,
    ) -> None:
        super().__init__()
        self.store = store
        self.driver = driver
        self.view = view or ViewConfig()

        self.setWindowTitle(strings.text("window_title"))
        self.resize(1400, 900)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        main_widget.setStyleSheet("background: #f8fafc;")
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(24, 24, 24, 24)
        main_layout.setSpacing(16)

        # --- 1. HEADER: title, legend, toggles ---
        header = QHBoxLayout()
        vbox_title = QVBoxLayout()
        title = QLabel(strings.text("title"))
        title.setStyleSheet("font-size: 22px; font-weight: bold; color: #0f172a;")
        vbox_title.addWidget(title)
        hbox_legend = QHBoxLayout()
        hbox_legend.addWidget(_legend_entry("#f43f5e", strings.text("legend_waveform")))
        hbox_legend.addWidget(_legend_entry("#14b8a6", strings.text("legend_vibration")))
        hbox_legend.addStretch()
        vbox_title.addLayout(hbox_legend)
        header.addLayout(vbox_title, 1)

        self.btn_vibration = QPushButton(strings.text("toggle_vibration"))
        self.btn_vibration.setCheckable(True)
        self.btn_vibration.setStyleSheet(PILL_STYLE.format(bg="#f0fdfa", border="#99f6e4", fg="#0f766e"))
        self.btn_vibration.clicked.connect(self.store.toggle_vibration)
        header.addWidget(self.btn_vibration, 0, Qt.AlignmentFlag.AlignBottom)

        self.btn_history = QPushButton(strings.text("toggle_history"))
        self.btn_history.setCheckable(True)
        self.btn_history.setStyleSheet(PILL_STYLE.format(bg="#eff6ff", border="#bfdbfe", fg="#1d4ed8"))
        self.btn_history.clicked.connect(self.store.toggle_history)
        header.addWidget(self.btn_history, 0, Qt.AlignmentFlag.AlignBottom)

        main_layout.addLayout(header)

        # --- 2. SPLITTER: canvas | companion plots ---
        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.setChildrenCollapsible(False)

        self.canvas = WaveCanvas(store, renderer, interaction, self.view)
        splitter.addWidget(self.canvas)

        self.plots = CompanionPlots(store, field, self.view)
        splitter.addWidget(self.plots)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([1000, 350])

        main_layout.addWidget(splitter, 1)

        # --- 3. TRANSPORT ---
        self.transport = TransportBar(store, driver, self.view)
        main_layout.addWidget(self.transport)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- SIGNAL CONNECTIONS ---
        self.store.toggles_changed.connect(self.on_toggles_changed)
        self.on_toggles_changed(self.store.toggles)

    def _create_actions(self) -> None:
        self.act_plots = QAction(strings.text("action_plots"), self)
        self.act_plots.setCheckable(True)
        self.act_plots.setChecked(True)
        self.act_plots.toggled.connect(self.plots.setVisible)

        self.act_reset_camera = QAction(strings.text("action_reset_camera"), self)
        self.act_reset_camera.setShortcut("Ctrl+R")
        self.act_reset_camera.triggered.connect(self.store.reset_camera)

    def _create_menus(self) -> None:
        view_menu = self.menuBar().addMenu(strings.text("menu_view"))
        view_menu.addAction(self.act_plots)
        view_menu.addSeparator()
        view_menu.addAction(self.act_reset_camera)

    def on_toggles_changed(self, toggles: DisplayToggles) -> None:
        self.btn_history.setChecked(toggles.show_history)
        self.btn_vibration.setChecked(toggles.show_vibration)

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        self.driver.shutdown()
        logger.info("Main window closed.")
        super().closeEvent(event)

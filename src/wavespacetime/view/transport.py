from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton, QSlider, QStyle, QVBoxLayout, QWidget
)

from wavespacetime.config import ViewConfig
from wavespacetime.controller.animation import AnimationDriver
from wavespacetime.model.state import SceneStore
from wavespacetime.view import strings


# Slider resolution in time units
SLIDER_STEP = 0.01


class TransportBar(QFrame):
    """Play/pause, reset, the time slider and the preset jump buttons."""

    def __init__(
        self,
        store: SceneStore,
        driver: AnimationDriver,
        view: ViewConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.driver = driver
        self.view = view or ViewConfig()
        self.setObjectName("TransportBar")
        self.setStyleSheet(
            "#TransportBar { background: white; border: 1px solid #f1f5f9; border-radius: 16px; }"
        )

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(24)

        # --- Play / Reset ---
        hbox_play = QHBoxLayout()
        self.btn_play = QPushButton()
        self.btn_play.setMinimumHeight(40)
        self.btn_play.setMinimumWidth(110)
        self.btn_play.setStyleSheet(
            "QPushButton { background: #0f172a; color: white; border-radius: 12px; font-weight: 600; padding: 0 16px; }"
            "QPushButton:hover { background: #1e293b; }"
        )
        self.btn_play.clicked.connect(self.driver.toggle_play)
        hbox_play.addWidget(self.btn_play)

        self.btn_reset = QPushButton()
        self.btn_reset.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_BrowserReload))
        self.btn_reset.setToolTip(strings.text("reset"))
        self.btn_reset.setMinimumHeight(40)
        self.btn_reset.clicked.connect(self.driver.reset)
        hbox_play.addWidget(self.btn_reset)
        layout.addLayout(hbox_play)

        # --- Slider with readouts ---
        vbox_slider = QVBoxLayout()
        hbox_labels = QHBoxLayout()
        self.lbl_start = QLabel(strings.text("time_watermark", t=0.0))
        self.lbl_time = QLabel()
        self.lbl_time.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_time.setStyleSheet("color: #f43f5e; font-weight: bold; font-family: monospace;")
        self.lbl_end = QLabel(strings.text("time_bound", t=self.store.config.time_extent))
        self.lbl_end.setAlignment(Qt.AlignmentFlag.AlignRight)
        for lbl in (self.lbl_start, self.lbl_end):
            lbl.setStyleSheet("color: #64748b; font-family: monospace;")
        hbox_labels.addWidget(self.lbl_start)
        hbox_labels.addWidget(self.lbl_time, 1)
        hbox_labels.addWidget(self.lbl_end)
        vbox_slider.addLayout(hbox_labels)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, self.time_to_slider(self.store.config.time_extent))
        self.slider.setSingleStep(1)
        self.slider.valueChanged.connect(self.on_slider_changed)
        vbox_slider.addWidget(self.slider)
        layout.addLayout(vbox_slider, 1)

        # --- Presets ---
        hbox_presets = QHBoxLayout()
        self.preset_buttons: list[QPushButton] = []
        for t in self.view.preset_times:
            btn = QPushButton(strings.text("preset", t=t))
            btn.setStyleSheet(
                "QPushButton { background: #f8fafc; border: 1px solid #e2e8f0; border-radius: 8px; "
                "padding: 4px 10px; font-weight: bold; font-family: monospace; color: #475569; }"
                "QPushButton:hover { background: #eef2ff; color: #4f46e5; }"
            )
            btn.clicked.connect(lambda _checked=False, preset=t: self.driver.jump_to(preset))
            hbox_presets.addWidget(btn)
            self.preset_buttons.append(btn)
        layout.addLayout(hbox_presets)

        self.store.time_changed.connect(self.on_time_changed)
        self.store.playing_changed.connect(lambda *_: self.update_play_button())

        self.on_time_changed(self.store.current_time)

    @staticmethod
    def time_to_slider(t: float) -> int:
        return int(round(t / SLIDER_STEP))

    @staticmethod
    def slider_to_time(value: int) -> float:
        return value * SLIDER_STEP

    def on_slider_changed(self, value: int) -> None:
        """User moved the slider: scrubbing always pauses playback."""
        self.driver.scrub_to(self.slider_to_time(value))

    def on_time_changed(self, t: float) -> None:
        self.slider.blockSignals(True)
        self.slider.setValue(self.time_to_slider(t))
        self.slider.blockSignals(False)
        self.lbl_time.setText(strings.text("time_readout", t=t))
        self.update_play_button()

    def update_play_button(self) -> None:
        if self.store.is_playing:
            self.btn_play.setText(strings.text("pause"))
            self.btn_play.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaPause))
        else:
            key = "replay" if self.store.at_end() else "play"
            self.btn_play.setText(strings.text(key))
            self.btn_play.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaPlay))

"""
Scene State (Data Model)
========================
This module defines the state shared by the canvas, the transport bar and the
companion plots.

Why is this file needed?
------------------------
1. State Management: Camera orientation, playback time and display toggles
   live in one place for the whole session.
2. Decoupling: Controllers write to the store; views only listen to its
   signals and read from it.
3. Consistency: Every setter commits the new value before emitting, so a
   redraw triggered by a signal never sees a half-applied change.

Classes:
    PlaybackState: Current time and play flag.
    DisplayToggles: Optional render passes.
    SceneStore: Signal-emitting container for the session.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging

from PySide6.QtCore import QObject, Signal

from wavespacetime.config import WaveConfig
from wavespacetime.model.projection import CameraOrientation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackState:
    current_time: float = 0.0
    is_playing: bool = False


@dataclass(frozen=True)
class DisplayToggles:
    show_history: bool = True
    show_vibration: bool = True


class SceneStore(QObject):
    """Central state store with signals for canvas/panel sync."""
    camera_changed = Signal(object)
    time_changed = Signal(float)
    playing_changed = Signal(bool)
    toggles_changed = Signal(object)
    # Emitted after any of the above; the canvas repaints on it
    changed = Signal()

    def __init__(self, config: WaveConfig, camera: CameraOrientation | None = None) -> None:
        super().__init__()
        self.config = config
        self._initial_camera = camera or CameraOrientation()
        self._camera = self._initial_camera
        self._playback = PlaybackState()
        self._toggles = DisplayToggles()

    # ---- read access ----

    @property
    def camera(self) -> CameraOrientation:
        return self._camera

    @property
    def playback(self) -> PlaybackState:
        return self._playback

    @property
    def toggles(self) -> DisplayToggles:
        return self._toggles

    @property
    def current_time(self) -> float:
        return self._playback.current_time

    @property
    def is_playing(self) -> bool:
        return self._playback.is_playing

    def at_end(self) -> bool:
        return self._playback.current_time >= self.config.time_extent

    # ---- mutations ----

    def clamp_time(self, t: float) -> float:
        return min(max(float(t), 0.0), self.config.time_extent)

    def set_camera(self, camera: CameraOrientation) -> None:
        if camera == self._camera:
            return
        self._camera = camera
        self.camera_changed.emit(self._camera)
        self.changed.emit()

    def set_current_time(self, t: float) -> None:
        clamped = self.clamp_time(t)
        if clamped != t:
            logger.debug(f"Time {t} clamped to {clamped}")
        if clamped == self._playback.current_time:
            return
        self._playback = replace(self._playback, current_time=clamped)
        self.time_changed.emit(clamped)
        self.changed.emit()

    def set_playing(self, playing: bool) -> None:
        if playing == self._playback.is_playing:
            return
        self._playback = replace(self._playback, is_playing=playing)
        self.playing_changed.emit(playing)
        self.changed.emit()

    def set_show_history(self, show: bool) -> None:
        if show == self._toggles.show_history:
            return
        self._toggles = replace(self._toggles, show_history=show)
        self.toggles_changed.emit(self._toggles)
        self.changed.emit()

    def set_show_vibration(self, show: bool) -> None:
        if show == self._toggles.show_vibration:
            return
        self._toggles = replace(self._toggles, show_vibration=show)
        self.toggles_changed.emit(self._toggles)
        self.changed.emit()

    def toggle_history(self) -> None:
        self.set_show_history(not self._toggles.show_history)

    def toggle_vibration(self) -> None:
        self.set_show_vibration(not self._toggles.show_vibration)

    def reset_camera(self) -> None:
        self.set_camera(self._initial_camera)

"""
Playback Driver
===============
Advances the current time once per displayed frame while playing.

Why is this file needed?
------------------------
1. State machine: Idle / Playing transitions for play, pause, reset, scrub
   and preset jumps are decided here and nowhere else.
2. Resource: The recurring frame tick is the only scheduled callback in the
   application. The driver owns it and stops it whenever playback stops or
   the window is torn down.

Classes:
    TickSource: Protocol of a cancellable periodic callback.
    FrameTicker: QTimer-backed tick source paced by the screen refresh rate.
    AnimationDriver: The playback state machine.
"""
from __future__ import annotations

import logging
from typing import Callable, Protocol

from PySide6.QtCore import QObject, QTimer, Qt
from PySide6.QtGui import QGuiApplication

from wavespacetime.model.state import SceneStore

logger = logging.getLogger(__name__)


class TickSource(Protocol):
    def connect(self, callback: Callable[[], None]) -> None: ...
    def start(self) -> None: ...
    def stop(self) -> None: ...
    def is_active(self) -> bool: ...


def screen_refresh_interval_ms(fallback_rate: float = 60.0) -> int:
    """Frame interval of the primary screen in milliseconds."""
    rate = fallback_rate
    app = QGuiApplication.instance()
    if app is not None:
        screen = QGuiApplication.primaryScreen()
        if screen is not None and screen.refreshRate() > 1.0:
            rate = screen.refreshRate()
    return max(1, round(1000.0 / rate))


class FrameTicker(QObject):
    """A precise QTimer firing once per display refresh."""

    def __init__(self, interval_ms: int | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.timer = QTimer(self)
        self.timer.setTimerType(Qt.TimerType.PreciseTimer)
        self.timer.setInterval(interval_ms if interval_ms is not None else screen_refresh_interval_ms())
        logger.debug(f"Frame tick interval: {self.timer.interval()} ms")

    def connect(self, callback: Callable[[], None]) -> None:
        self.timer.timeout.connect(callback)

    def start(self) -> None:
        self.timer.start()

    def stop(self) -> None:
        self.timer.stop()

    def is_active(self) -> bool:
        return self.timer.isActive()


class AnimationDriver:
    """
    Idle <-> Playing state machine over ``store.playback``.

    Args:
        store: Session store holding the current time and play flag.
        ticker: Periodic callback source; ``tick`` is connected to it.
        increment: Time added per tick.
    """

    def __init__(self, store: SceneStore, ticker: TickSource, increment: float = 0.015) -> None:
        self.store = store
        self.ticker = ticker
        self.increment = increment
        self.ticker.connect(self.tick)

    @property
    def time_extent(self) -> float:
        return self.store.config.time_extent

    def play(self) -> None:
        if self.store.is_playing:
            return
        if self.store.at_end():
            # Replay from the start
            self.store.set_current_time(0.0)
        self.store.set_playing(True)
        self.ticker.start()
        logger.info(f"Playback started at t = {self.store.current_time:.3f}")

    def pause(self) -> None:
        self._stop()

    def toggle_play(self) -> None:
        if self.store.is_playing:
            self.pause()
        else:
            self.play()

    def reset(self) -> None:
        self._stop()
        self.store.set_current_time(0.0)
        logger.info("Playback reset.")

    def scrub_to(self, t: float) -> None:
        self._stop()
        self.store.set_current_time(t)
        logger.debug(f"Scrubbed to t = {self.store.current_time:.3f}")

    def jump_to(self, t: float) -> None:
        self.scrub_to(t)

    def tick(self) -> None:
        """Advance one frame. Stops exactly on the upper time bound."""
        if not self.store.is_playing:
            self.ticker.stop()
            return
        new_time = min(self.store.current_time + self.increment, self.time_extent)
        self.store.set_current_time(new_time)
        if new_time >= self.time_extent:
            self._stop()
            logger.info("Reached the end of the time axis.")

    def shutdown(self) -> None:
        """Cancel the tick source; used when the view is torn down."""
        self.ticker.stop()
        self.store.set_playing(False)

    def _stop(self) -> None:
        self.ticker.stop()
        if self.store.is_playing:
            self.store.set_playing(False)
            logger.info(f"Playback stopped at t = {self.store.current_time:.3f}")

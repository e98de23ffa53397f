import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from typing import Callable

import pytest
from PySide6.QtWidgets import QApplication

from wavespacetime.config import ViewConfig, WaveConfig
from wavespacetime.model.projection import CameraOrientation
from wavespacetime.model.state import SceneStore
from wavespacetime.view import strings


class ManualTicker:
    """Tick source driven by the test instead of a timer."""

    def __init__(self) -> None:
        self.callbacks: list[Callable[[], None]] = []
        self.active = False
        self.starts = 0
        self.stops = 0

    def connect(self, callback: Callable[[], None]) -> None:
        self.callbacks.append(callback)

    def start(self) -> None:
        self.active = True
        self.starts += 1

    def stop(self) -> None:
        self.active = False
        self.stops += 1

    def is_active(self) -> bool:
        return self.active

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for callback in list(self.callbacks):
                callback()


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture(autouse=True)
def english():
    strings.set_language("en")
    yield
    strings.set_language("en")


@pytest.fixture
def config() -> WaveConfig:
    return WaveConfig()


@pytest.fixture
def view() -> ViewConfig:
    return ViewConfig()


@pytest.fixture
def store(qapp, config) -> SceneStore:
    return SceneStore(config, CameraOrientation(-60.0, 25.0))


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()

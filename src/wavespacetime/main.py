"""
Application Initialization
==========================
This module wires the session objects together and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Reads the start-up overrides and sets up logging.
2. Instantiates the wave, the projector and the session store (Model).
3. Instantiates the drag controller and the playback driver (Controller).
4. Instantiates the renderer and the Main Window (View), passing the rest in.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

import pyqtgraph as pg

from wavespacetime.application import create_app
from wavespacetime.config import DEFAULT_VIEW, DEFAULT_WAVE, EnvSettings, ViewConfig, WaveConfig
from wavespacetime.controller.animation import AnimationDriver, FrameTicker, screen_refresh_interval_ms
from wavespacetime.controller.interaction import InteractionController
from wavespacetime.logging_config import setup_logging_from_env
from wavespacetime.model.projection import CameraOrientation, Projector
from wavespacetime.model.state import SceneStore
from wavespacetime.model.wave import WaveField
from wavespacetime.view import strings
from wavespacetime.view.main_window import MainWindow
from wavespacetime.view.renderer import SceneRenderer

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything one window needs, built in dependency order."""
    store: SceneStore
    field: WaveField
    renderer: SceneRenderer
    interaction: InteractionController
    driver: AnimationDriver


def build_session(config: WaveConfig = DEFAULT_WAVE, view: ViewConfig = DEFAULT_VIEW) -> Session:
    """Create the model and controller objects. Requires a running QApplication."""
    field = WaveField(config)
    projector = Projector(config, view.scale_divisor)
    store = SceneStore(config, CameraOrientation.from_view(view))

    renderer = SceneRenderer(config, view, field, projector)
    interaction = InteractionController(store, view.drag_sensitivity)
    ticker = FrameTicker(screen_refresh_interval_ms(view.fallback_refresh_rate))
    driver = AnimationDriver(store, ticker, view.time_increment)
    return Session(store, field, renderer, interaction, driver)


def main() -> int:
    env = EnvSettings.from_environ()
    setup_logging_from_env(env)
    strings.set_language(env.language)

    try:
        app = create_app()

        pg.setConfigOption("background", "w")
        pg.setConfigOption("foreground", "k")
        pg.setConfigOption("antialias", True)

        session = build_session()
        window = MainWindow(
            session.store,
            session.driver,
            session.renderer,
            session.interaction,
            session.field,
            DEFAULT_VIEW,
        )
        window.show()
    except Exception:
        logger.exception("Application start-up failed")
        return 1

    logger.info(f"Started with language '{strings.current_language()}'.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

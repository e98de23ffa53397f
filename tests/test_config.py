import io
import logging

import pytest

from wavespacetime.config import DEFAULT_VIEW, EnvSettings, ViewConfig
from wavespacetime.logging_config import level_from_name, setup_logging, setup_logging_from_env
from wavespacetime.main import build_session
from wavespacetime.model.projection import CameraOrientation


def test_env_settings_defaults():
    env = EnvSettings.from_environ({})
    assert env.log_level is None
    assert env.log_file is None
    assert env.language == "en"


def test_env_settings_overrides(tmp_path):
    env = EnvSettings.from_environ({
        "WAVESPACETIME_LOG_LEVEL": "debug",
        "WAVESPACETIME_LOG_FILE": str(tmp_path / "run.log"),
        "WAVESPACETIME_LANG": " ZH ",
    })
    assert env.log_level == "debug"
    assert env.log_file.endswith("run.log")
    assert env.language == "zh"


def test_level_from_name():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("Warning") == logging.WARNING
    assert level_from_name(None) == logging.INFO
    assert level_from_name("nonsense", default=logging.ERROR) == logging.ERROR


@pytest.fixture
def package_logger():
    logger = logging.getLogger("wavespacetime")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_writes_file(tmp_path, package_logger):
    log_file = tmp_path / "wave.log"
    logger = setup_logging(logging.DEBUG, str(log_file), stream=io.StringIO())
    assert logger is package_logger
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.flush()
    assert "Logging initialized at DEBUG" in log_file.read_text(encoding="utf-8")


def test_setup_logging_accepts_level_names(package_logger):
    console = io.StringIO()
    setup_logging("warning", stream=console)
    assert package_logger.level == logging.WARNING
    # the start-up line is below the threshold
    assert console.getvalue() == ""


def test_setup_logging_replaces_handlers(package_logger):
    setup_logging(stream=io.StringIO())
    setup_logging(stream=io.StringIO())
    assert len(package_logger.handlers) == 1


def test_setup_logging_from_env(tmp_path, package_logger):
    log_file = tmp_path / "env.log"
    env = EnvSettings.from_environ({
        "WAVESPACETIME_LOG_LEVEL": "debug",
        "WAVESPACETIME_LOG_FILE": str(log_file),
    })
    setup_logging_from_env(env)
    assert package_logger.level == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in package_logger.handlers)
    logging.getLogger("wavespacetime.model").debug("child record")
    for handler in package_logger.handlers:
        handler.flush()
    assert "child record" in log_file.read_text(encoding="utf-8")


def test_visible_watch_positions_skip_out_of_range():
    view = ViewConfig(watch_positions=(0.0, 1.5, 3.0, 4.5))
    assert view.visible_watch_positions(4.0) == [0.0, 1.5, 3.0]
    assert view.visible_watch_positions(1.0) == [0.0]


def test_initial_camera_comes_from_view_config():
    assert CameraOrientation() == CameraOrientation.from_view(DEFAULT_VIEW)
    custom = ViewConfig(initial_azimuth=15.0, initial_elevation=70.0)
    assert CameraOrientation.from_view(custom) == CameraOrientation(15.0, 70.0)


def test_build_session_uses_view_camera(qapp):
    session = build_session(view=ViewConfig(initial_azimuth=10.0, initial_elevation=40.0))
    assert session.store.camera == CameraOrientation(10.0, 40.0)
    session.store.set_camera(CameraOrientation(0.0, 0.0))
    session.store.reset_camera()
    assert session.store.camera == CameraOrientation(10.0, 40.0)


def test_build_session_wires_store(qapp):
    session = build_session()
    assert session.renderer.field is session.field
    assert session.interaction.store is session.store
    assert session.driver.store is session.store
    session.driver.play()
    assert session.driver.ticker.is_active()
    session.driver.shutdown()
    assert not session.driver.ticker.is_active()

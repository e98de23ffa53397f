"""
Logging Configuration
=====================
Sets up the 'wavespacetime' package logger, either from explicit arguments
(tests, embedding) or from the start-up environment (the entry point).
"""
import logging
import sys
from typing import Optional, TextIO

from wavespacetime.config import EnvSettings

PACKAGE_LOGGER = "wavespacetime"

# Format: Time - Module - Level - Message
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as 'debug' into a logging constant."""
    if not name:
        return default
    return logging.getLevelNamesMapping().get(name.strip().upper(), default)


def _formatted(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'wavespacetime' namespace.

    Args:
        level: Logging level, as a constant (logging.DEBUG) or a name ('debug').
            Unknown names fall back to INFO.
        log_file: Optional path to save logs to a file (overwritten per run).
        stream: Console stream, stdout by default.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = level_from_name(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # A second call replaces the handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_formatted(logging.StreamHandler(stream or sys.stdout), level))
    if log_file:
        logger.addHandler(_formatted(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    destination = f", also writing to {log_file}" if log_file else ""
    logger.info(f"Logging initialized at {logging.getLevelName(level)}{destination}.")
    return logger


def setup_logging_from_env(env: Optional[EnvSettings] = None) -> logging.Logger:
    """Configure logging from WAVESPACETIME_LOG_LEVEL and WAVESPACETIME_LOG_FILE."""
    env = env or EnvSettings.from_environ()
    return setup_logging(level_from_name(env.log_level), env.log_file)

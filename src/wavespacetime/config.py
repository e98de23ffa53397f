"""
Configuration & Constants
=========================
This module serves as the central registry for the physical parameters of the
wave and the constants of the interactive view.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (extents, step sizes, the camera
   scale divisor) from being scattered throughout the renderer and controllers.
2. Environment: It reads the few start-up overrides (log level, log file,
   UI language) in one place.

Exports:
    WaveConfig: Physical parameters of the travelling pulse.
    ViewConfig: Viewport and interaction constants.
    EnvSettings: Start-up overrides read from the environment.
"""
from __future__ import annotations

import math
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class WaveConfig:
    """
    Parameters of a single finite sine pulse launched at x = 0, t = 0.

    The pulse occupies the phase interval [0, pi], so it lasts
    ``pulse_duration`` at any fixed position and travels at
    ``propagation_speed``.
    """
    spatial_extent: float = 4.0   # m
    time_extent: float = 2.5      # s
    propagation_speed: float = 2.0  # m/s
    pulse_duration: float = 2.0   # s
    sample_count: int = 100       # polyline segments along x
    amplitude: float = 1.0

    def __post_init__(self) -> None:
        for name in ("spatial_extent", "time_extent", "propagation_speed", "pulse_duration"):
            value = getattr(self, name)
            if not value > 0.0:
                raise ValueError(f"WaveConfig.{name} must be positive, got {value!r}.")
        if self.sample_count < 1:
            raise ValueError(f"WaveConfig.sample_count must be at least 1, got {self.sample_count!r}.")

    @property
    def angular_frequency(self) -> float:
        return math.pi / self.pulse_duration


@dataclass(frozen=True)
class ViewConfig:
    """
    Constants of the drawing surface and of the interaction.

    ``scale_divisor`` frames the reference extents (4 m x 2.5 s) inside the
    reference 1000 x 600 surface. It has to be re-derived if either changes.
    """
    viewport_width: int = 1000
    viewport_height: int = 600
    scale_divisor: float = 5.0

    drag_sensitivity: float = 0.5   # degrees per pixel
    time_increment: float = 0.015   # time units per displayed frame
    fallback_refresh_rate: float = 60.0  # Hz, when the screen does not report one

    history_step: float = 0.1
    vibration_step: float = 0.05
    watch_positions: tuple[float, ...] = (0.0, 1.0, 2.0, 3.0, 4.0)
    preset_times: tuple[float, ...] = (0.5, 1.0, 1.5, 2.0, 2.5)

    initial_azimuth: float = -60.0
    initial_elevation: float = 25.0

    def visible_watch_positions(self, spatial_extent: float) -> list[float]:
        """Watch positions inside ``[0, spatial_extent]``; the rest are skipped silently."""
        return [wx for wx in self.watch_positions if wx <= spatial_extent]


@dataclass(frozen=True)
class EnvSettings:
    """Start-up overrides. Read once by the entry point."""
    log_level: str | None = None
    log_file: str | None = None
    language: str = "en"

    @classmethod
    def from_environ(cls, environ: dict[str, str] | None = None) -> EnvSettings:
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("WAVESPACETIME_LOG_LEVEL") or None,
            log_file=env.get("WAVESPACETIME_LOG_FILE") or None,
            language=(env.get("WAVESPACETIME_LANG") or "en").strip().lower(),
        )


DEFAULT_WAVE = WaveConfig()
DEFAULT_VIEW = ViewConfig()

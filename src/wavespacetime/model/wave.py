"""Analytic travelling pulse y(t, x)."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from wavespacetime.config import WaveConfig

if TYPE_CHECKING:
    import numpy.typing as npt


class WaveField:
    """
    Half-period sine pulse travelling in +x.

    The phase is ``omega * (t - x / v)``. The displacement is
    ``amplitude * sin(phase)`` for ``phase`` in [0, pi] and zero elsewhere, so
    the leading edge sits at ``x = v * t`` and the trailing edge at
    ``x = v * (t - pulse_duration)``.
    """

    def __init__(self, config: WaveConfig) -> None:
        self.config = config
        self._omega = config.angular_frequency

    def phase(self, t: float, x: float) -> float:
        return self._omega * (t - x / self.config.propagation_speed)

    def displacement(self, t: float, x: float) -> float:
        phase = self.phase(t, x)
        if 0.0 <= phase <= math.pi:
            return self.config.amplitude * math.sin(phase)
        return 0.0

    def displacement_array(
        self,
        t: npt.ArrayLike,
        x: npt.ArrayLike,
    ) -> npt.NDArray[np.float64]:
        """
        Vectorized ``displacement`` with numpy broadcasting.

        Args:
            t: Time value(s).
            x: Position value(s).

        Returns:
            Array of displacements with the broadcast shape of ``t`` and ``x``.
        """
        t_arr = np.asarray(t, dtype=np.float64)
        x_arr = np.asarray(x, dtype=np.float64)
        phase = self._omega * (t_arr - x_arr / self.config.propagation_speed)
        inside = (phase >= 0.0) & (phase <= np.pi)
        return np.where(inside, self.config.amplitude * np.sin(phase), 0.0)

    def snapshot(self, t: float, xs: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Spatial profile at a fixed time."""
        return self.displacement_array(t, xs)

    def oscillation(self, x: float, ts: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Displacement history of a fixed position."""
        return self.displacement_array(ts, x)

    def sample_positions(self) -> npt.NDArray[np.float64]:
        """The ``sample_count + 1`` positions used for every spatial polyline."""
        n = self.config.sample_count
        return np.arange(n + 1, dtype=np.float64) / n * self.config.spatial_extent

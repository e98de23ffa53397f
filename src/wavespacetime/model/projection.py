"""
Oblique Projection
==================
Maps points of the (position, time, displacement) space onto the 2D canvas.

The projection is axonometric: the (x, t) resting plane is rotated by the
azimuth and tilted by the elevation, displacement is lifted straight up.
Parallel lines stay parallel and there is no depth foreshortening.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from wavespacetime.config import DEFAULT_VIEW, ViewConfig, WaveConfig

if TYPE_CHECKING:
    import numpy.typing as npt


ELEVATION_MIN = 0.0
ELEVATION_MAX = 90.0


def clamp_elevation(elevation_deg: float) -> float:
    return max(ELEVATION_MIN, min(ELEVATION_MAX, elevation_deg))


@dataclass(frozen=True)
class CameraOrientation:
    """Viewing direction in degrees. Azimuth wraps through trigonometry only."""
    azimuth_deg: float = DEFAULT_VIEW.initial_azimuth
    elevation_deg: float = DEFAULT_VIEW.initial_elevation

    def __post_init__(self) -> None:
        object.__setattr__(self, "elevation_deg", clamp_elevation(self.elevation_deg))

    @classmethod
    def from_view(cls, view: ViewConfig) -> CameraOrientation:
        """The start-up orientation configured in ``view``."""
        return cls(view.initial_azimuth, view.initial_elevation)

    def rotated(self, d_azimuth: float, d_elevation: float) -> CameraOrientation:
        """Return a new orientation with the deltas applied (elevation clamped)."""
        return CameraOrientation(self.azimuth_deg + d_azimuth, self.elevation_deg + d_elevation)


@dataclass(frozen=True)
class ScreenPoint:
    """Pixel coordinates on the drawing surface (y grows downward)."""
    x: float
    y: float


class Projector:
    """
    Projects 3D diagram coordinates to screen pixels.

    Args:
        config: Wave parameters; the spatial and temporal extents define the
            centre of rotation.
        scale_divisor: ``min(width, height) / scale_divisor`` pixels per unit.
    """

    def __init__(self, config: WaveConfig, scale_divisor: float = 5.0) -> None:
        self.config = config
        self.scale_divisor = scale_divisor

    def scale(self, width: float, height: float) -> float:
        return min(width, height) / self.scale_divisor

    def project(
        self,
        x: float,
        t: float,
        z: float,
        width: float,
        height: float,
        camera: CameraOrientation,
    ) -> ScreenPoint:
        sx, sy = self.project_array(x, t, z, width, height, camera)
        return ScreenPoint(float(sx), float(sy))

    def project_array(
        self,
        x: npt.ArrayLike,
        t: npt.ArrayLike,
        z: npt.ArrayLike,
        width: float,
        height: float,
        camera: CameraOrientation,
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Vectorized ``project``.

        Args:
            x: Position(s).
            t: Time(s).
            z: Displacement(s).
            width: Surface width in pixels.
            height: Surface height in pixels.
            camera: Viewing direction.

        Returns:
            (screen_x, screen_y) arrays with the broadcast shape of the inputs.
        """
        # 1. centre on the middle of the (x, t) plane, z = 0 stays the resting plane
        cx = np.asarray(x, dtype=np.float64) - self.config.spatial_extent / 2
        cy = np.asarray(t, dtype=np.float64) - self.config.time_extent / 2
        cz = np.asarray(z, dtype=np.float64)

        a = math.radians(camera.azimuth_deg)
        e = math.radians(camera.elevation_deg)
        sa, ca = math.sin(a), math.cos(a)
        se, ce = math.sin(e), math.cos(e)

        # 2. planar rotation by azimuth
        rot_x = cx * ca - cy * sa
        rot_y = cx * sa + cy * ca

        # 3. tilt by elevation; time recedes into the screen, z points up
        s = self.scale(width, height)
        screen_x = width / 2 + rot_x * s
        screen_y = height / 2 + (rot_y * se - cz * ce) * s
        screen_x, screen_y = np.broadcast_arrays(screen_x, screen_y)
        return np.array(screen_x, dtype=np.float64), np.array(screen_y, dtype=np.float64)

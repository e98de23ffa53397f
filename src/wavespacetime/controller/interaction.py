"""Pointer drag -> camera orientation."""
from __future__ import annotations

import logging

from wavespacetime.model.state import SceneStore

logger = logging.getLogger(__name__)


class InteractionController:
    """
    Rotates the camera while the pointer is dragged over the canvas.

    Horizontal motion turns the azimuth (dragging right turns the scene to
    the right), vertical motion tilts the elevation, which stays in [0, 90].
    """

    def __init__(self, store: SceneStore, sensitivity: float = 0.5) -> None:
        self.store = store
        self.sensitivity = sensitivity
        self._dragging = False
        self._last_pos: tuple[float, float] = (0.0, 0.0)

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    def drag_start(self, x: float, y: float) -> None:
        self._dragging = True
        self._last_pos = (x, y)

    def drag_move(self, x: float, y: float) -> None:
        if not self._dragging:
            return
        dx = x - self._last_pos[0]
        dy = y - self._last_pos[1]
        camera = self.store.camera.rotated(-dx * self.sensitivity, dy * self.sensitivity)
        self._last_pos = (x, y)
        self.store.set_camera(camera)

    def drag_end(self) -> None:
        if self._dragging:
            camera = self.store.camera
            logger.debug(f"Camera at azimuth {camera.azimuth_deg:.1f}, elevation {camera.elevation_deg:.1f}")
        self._dragging = False

"""
Scene Renderer
==============
Draws one complete frame of the space-time diagram through a QPainter.

The frame is a fixed pipeline; later passes overdraw earlier ones:
    1. dashed grid on the resting plane
    2. axes with arrowheads, tick dots, numbers and axis names
    3. history snapshots (optional)
    4. per-position oscillation traces with live markers (optional)
    5. the current waveform (gradient + glow)
    6. current-time markers
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QLinearGradient, QPainter, QPen, QPolygonF

from wavespacetime.config import ViewConfig, WaveConfig
from wavespacetime.model.projection import CameraOrientation, Projector, ScreenPoint
from wavespacetime.model.state import DisplayToggles, PlaybackState
from wavespacetime.model.wave import WaveField
from wavespacetime.view import strings

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Palette (Tailwind slate / blue / teal / rose)
BACKGROUND = QColor("#ffffff")
GRID = QColor(148, 163, 184, 77)
AXIS = QColor("#334155")
AXIS_Z = QColor("#94a3b8")
TICK = QColor("#64748b")
AXIS_NAME = QColor("#1e293b")
HISTORY = QColor(59, 130, 246)
VIBRATION = QColor("#14b8a6")
VIBRATION_CORE = QColor("#0d9488")
WAVE_START = QColor("#f43f5e")
WAVE_END = QColor("#ef4444")
WAVE_GLOW = QColor(244, 63, 94, 153)
MARKER_LINE = QColor(244, 63, 94, 77)
MARKER_DOT = QColor("#f43f5e")

FONT_FAMILY = "Inter"
ARROW_HEAD = 8.0
TICK_LABEL_OFFSET = 18.0
Z_AXIS_BOTTOM = -0.5
Z_AXIS_TOP = 1.8
EPS = 1e-9


def sample_times(end: float, step: float, include_end: bool = False) -> npt.NDArray[np.float64]:
    """
    Regular samples 0, step, 2*step, ... not exceeding ``end``.

    Counting by index keeps the grid free of accumulated rounding, so e.g.
    ``sample_times(2.5, 0.5)`` always contains 2.5.

    Args:
        end: Upper bound (inclusive).
        step: Spacing of the samples.
        include_end: Append ``end`` itself when it is not on the grid.
    """
    if end < 0.0:
        return np.empty(0, dtype=np.float64)
    n = int(math.floor(end / step + EPS))
    ts = np.arange(n + 1, dtype=np.float64) * step
    if include_end and end - ts[-1] > EPS:
        ts = np.append(ts, end)
    return ts


def _font(pixel_size: int, weight: QFont.Weight) -> QFont:
    font = QFont(FONT_FAMILY)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    font.setPixelSize(pixel_size)
    font.setWeight(weight)
    return font


def _polyline(xs: npt.NDArray[np.float64], ys: npt.NDArray[np.float64]) -> QPolygonF:
    return QPolygonF([QPointF(float(x), float(y)) for x, y in zip(xs, ys)])


def _qpoint(p: ScreenPoint) -> QPointF:
    return QPointF(p.x, p.y)


class SceneRenderer:
    """
    Renders the diagram for a given playback state, camera and toggles.

    Args:
        config: Wave parameters (extents, sampling).
        view: Step sizes, watch positions and scale divisor.
        field: Displacement function; built from ``config`` when omitted.
        projector: 3D -> 2D mapping; built from ``config`` when omitted.
    """

    def __init__(
        self,
        config: WaveConfig,
        view: ViewConfig | None = None,
        field: WaveField | None = None,
        projector: Projector | None = None,
    ) -> None:
        self.config = config
        self.view = view or ViewConfig()
        self.field = field or WaveField(config)
        self.projector = projector or Projector(config, self.view.scale_divisor)

        self._tick_font = _font(12, QFont.Weight.Medium)
        self._name_font = _font(14, QFont.Weight.Bold)

        # per-frame context, set by render()
        self._width = 0.0
        self._height = 0.0
        self._camera = CameraOrientation.from_view(self.view)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def render(
        self,
        painter: QPainter | None,
        width: float,
        height: float,
        playback: PlaybackState,
        camera: CameraOrientation,
        toggles: DisplayToggles,
    ) -> None:
        """Draw a full frame. A missing or inactive painter is a silent no-op."""
        if painter is None or not painter.isActive():
            logger.debug("Drawing surface not ready, frame skipped.")
            return

        self._width = float(width)
        self._height = float(height)
        self._camera = camera
        t_now = playback.current_time

        painter.save()
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
            painter.fillRect(QRectF(0.0, 0.0, self._width, self._height), BACKGROUND)

            self._draw_grid(painter)
            self._draw_axes(painter)
            if toggles.show_history:
                self._draw_history(painter, t_now)
            if toggles.show_vibration:
                self._draw_vibration(painter, t_now)
            self._draw_current_waveform(painter, t_now)
            self._draw_markers(painter, t_now)
        finally:
            painter.restore()

    def project(self, x: float, t: float, z: float) -> ScreenPoint:
        return self.projector.project(x, t, z, self._width, self._height, self._camera)

    def project_polyline(
        self,
        x: npt.ArrayLike,
        t: npt.ArrayLike,
        z: npt.ArrayLike,
    ) -> QPolygonF:
        sx, sy = self.projector.project_array(x, t, z, self._width, self._height, self._camera)
        return _polyline(sx, sy)

    def visible_watch_positions(self) -> list[float]:
        return self.view.visible_watch_positions(self.config.spatial_extent)

    def history_alpha(self, t: float) -> float:
        """Opacity of the snapshot taken at ``t``; older snapshots are fainter."""
        return 0.1 + (t / (self.config.time_extent + 0.1)) * 0.3

    def vibration_markers(self, t_now: float) -> list[tuple[float, float]]:
        """(position, displacement) of the live dot on each vibration trace; empty at t = 0."""
        if t_now <= 0.0:
            return []
        return [(wx, self.field.displacement(t_now, wx)) for wx in self.visible_watch_positions()]

    # ------------------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------------------

    def _draw_grid(self, painter: QPainter) -> None:
        pen = QPen(GRID, 1.0)
        pen.setDashPattern([4.0, 4.0])
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        x_max, t_max = self.config.spatial_extent, self.config.time_extent
        # constant-position lines run along time
        for x in sample_times(x_max, 1.0):
            painter.drawLine(_qpoint(self.project(x, 0.0, 0.0)), _qpoint(self.project(x, t_max, 0.0)))
        # constant-time lines run along position
        for t in sample_times(t_max, 0.5):
            painter.drawLine(_qpoint(self.project(0.0, t, 0.0)), _qpoint(self.project(x_max, t, 0.0)))

    def _draw_axes(self, painter: QPainter) -> None:
        x_max, t_max = self.config.spatial_extent, self.config.time_extent
        origin = self.project(0.0, 0.0, 0.0)
        x_end = self.project(x_max, 0.0, 0.0)
        t_end = self.project(0.0, t_max, 0.0)
        z_end = self.project(0.0, 0.0, Z_AXIS_TOP)
        z_bottom = self.project(0.0, 0.0, Z_AXIS_BOTTOM)

        self._draw_arrow(painter, origin, x_end, AXIS)
        self._draw_arrow(painter, origin, t_end, AXIS)
        self._draw_arrow(painter, z_bottom, z_end, AXIS_Z)

        # ticks
        painter.setFont(self._tick_font)
        for x in sample_times(x_max, 1.0):
            self._draw_tick(painter, self.project(x, 0.0, 0.0), f"{x:g}")
        for t in sample_times(t_max, 0.5):
            self._draw_tick(painter, self.project(0.0, t, 0.0), f"{t:g}")

        # axis names
        painter.setFont(self._name_font)
        painter.setPen(AXIS_NAME)
        self._draw_text(painter, x_end.x, x_end.y + 40.0, strings.text("axis_position"))
        self._draw_text(painter, t_end.x - 50.0, t_end.y, strings.text("axis_time"))
        self._draw_text(painter, z_end.x, z_end.y - 25.0, strings.text("axis_displacement"))

    def _draw_history(self, painter: QPainter, t_now: float) -> None:
        xs = self.field.sample_positions()
        painter.setBrush(Qt.BrushStyle.NoBrush)
        for t in sample_times(t_now, self.view.history_step):
            color = QColor(HISTORY)
            color.setAlphaF(self.history_alpha(t))
            painter.setPen(QPen(color, 1.5))
            painter.drawPolyline(self.project_polyline(xs, t, self.field.snapshot(t, xs)))

    def _draw_vibration(self, painter: QPainter, t_now: float) -> None:
        ts = sample_times(t_now, self.view.vibration_step, include_end=True)
        trace_pen = QPen(VIBRATION, 2.0)
        for wx in self.visible_watch_positions():
            painter.setPen(trace_pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawPolyline(self.project_polyline(wx, ts, self.field.oscillation(wx, ts)))

        for wx, z in self.vibration_markers(t_now):
            p_now = self.project(wx, t_now, z)
            self._draw_glow_dot(painter, p_now, 4.0, VIBRATION, blur=5.0)
            self._fill_circle(painter, p_now, 4.0, QColor("#ffffff"))
            self._fill_circle(painter, p_now, 2.0, VIBRATION_CORE)

    def _draw_current_waveform(self, painter: QPainter, t_now: float) -> None:
        xs = self.field.sample_positions()
        polygon = self.project_polyline(xs, t_now, self.field.snapshot(t_now, xs))

        self._draw_glow_line(painter, polygon, WAVE_GLOW, base_width=4.0, blur=15.0)

        gradient = QLinearGradient(0.0, 0.0, self._width, 0.0)
        gradient.setColorAt(0.0, WAVE_START)
        gradient.setColorAt(1.0, WAVE_END)
        pen = QPen(QBrush(gradient), 4.0)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPolyline(polygon)

    def _draw_markers(self, painter: QPainter, t_now: float) -> None:
        start = self.project(0.0, t_now, 0.0)
        end = self.project(self.config.spatial_extent, t_now, 0.0)
        pen = QPen(MARKER_LINE, 1.0)
        pen.setDashPattern([2.0, 2.0])
        painter.setPen(pen)
        painter.drawLine(_qpoint(start), _qpoint(end))

        self._fill_circle(painter, start, 4.0, MARKER_DOT)

    # ------------------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------------------

    @staticmethod
    def arrow_head(tip: ScreenPoint, angle: float, length: float = ARROW_HEAD) -> list[tuple[float, float]]:
        """Triangle (tip, left, right) for a line arriving at ``tip`` under ``angle`` radians."""
        return [
            (tip.x, tip.y),
            (tip.x - length * math.cos(angle - math.pi / 6), tip.y - length * math.sin(angle - math.pi / 6)),
            (tip.x - length * math.cos(angle + math.pi / 6), tip.y - length * math.sin(angle + math.pi / 6)),
        ]

    def _draw_arrow(self, painter: QPainter, start: ScreenPoint, end: ScreenPoint, color: QColor) -> None:
        pen = QPen(color, 2.0)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.drawLine(_qpoint(start), _qpoint(end))

        angle = math.atan2(end.y - start.y, end.x - start.x)
        head = QPolygonF([QPointF(x, y) for x, y in self.arrow_head(end, angle)])
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(color)
        painter.drawPolygon(head)

    def _draw_tick(self, painter: QPainter, p: ScreenPoint, label: str) -> None:
        painter.setPen(TICK)
        self._draw_text(painter, p.x, p.y + TICK_LABEL_OFFSET, label)
        self._fill_circle(painter, p, 2.0, TICK)

    @staticmethod
    def _draw_text(painter: QPainter, x: float, y: float, label: str) -> None:
        """Text centred horizontally and vertically on (x, y)."""
        rect = QRectF(x - 150.0, y - 30.0, 300.0, 60.0)
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, label)

    @staticmethod
    def _fill_circle(painter: QPainter, p: ScreenPoint, radius: float, color: QColor) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(color)
        painter.drawEllipse(QPointF(p.x, p.y), radius, radius)

    @staticmethod
    def _draw_glow_line(
        painter: QPainter,
        polygon: QPolygonF,
        color: QColor,
        base_width: float,
        blur: float,
        layers: int = 5,
    ) -> None:
        """Approximate a blurred shadow with widening translucent strokes."""
        painter.setBrush(Qt.BrushStyle.NoBrush)
        for i in range(layers, 0, -1):
            glow = QColor(color)
            glow.setAlphaF(color.alphaF() / (layers + 1))
            pen = QPen(glow, base_width + blur * i / layers)
            pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(pen)
            painter.drawPolyline(polygon)

    @staticmethod
    def _draw_glow_dot(
        painter: QPainter,
        p: ScreenPoint,
        radius: float,
        color: QColor,
        blur: float,
        layers: int = 3,
    ) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        for i in range(layers, 0, -1):
            glow = QColor(color)
            glow.setAlphaF(0.35 / layers)
            painter.setBrush(glow)
            r = radius + blur * i / layers
            painter.drawEllipse(QPointF(p.x, p.y), r, r)

from __future__ import annotations

from PySide6.QtCore import QRectF, QSize, Qt
from PySide6.QtGui import QColor, QFont, QImage, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from wavespacetime.config import ViewConfig
from wavespacetime.controller.interaction import InteractionController
from wavespacetime.model.state import SceneStore
from wavespacetime.view import strings
from wavespacetime.view.renderer import SceneRenderer

WATERMARK = QColor(15, 23, 42, 26)
CARD_FILL = QColor(255, 255, 255, 204)
CARD_BORDER = QColor("#f1f5f9")
HINT_TEXT = QColor("#475569")
READOUT_TEXT = QColor("#94a3b8")


class WaveCanvas(QWidget):
    """
    Raster widget showing the diagram.

    The scene is drawn on a fixed logical surface (``view.viewport_width`` x
    ``view.viewport_height``) scaled uniformly into the widget. Dragging with
    the left button rotates the camera; the canvas repaints whenever the store
    reports a change.
    """

    def __init__(
        self,
        store: SceneStore,
        renderer: SceneRenderer,
        interaction: InteractionController,
        view: ViewConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.renderer = renderer
        self.interaction = interaction
        self.view = view or ViewConfig()

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(self.view.viewport_width // 2, self.view.viewport_height // 2)
        self.setCursor(Qt.CursorShape.SizeAllCursor)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)

        self._watermark_font = QFont("monospace")
        self._watermark_font.setStyleHint(QFont.StyleHint.Monospace)
        self._watermark_font.setPixelSize(48)
        self._watermark_font.setBold(True)
        self._hint_font = QFont()
        self._hint_font.setPixelSize(14)
        self._readout_font = QFont()
        self._readout_font.setPixelSize(12)

        self.store.changed.connect(self.update)

    def sizeHint(self) -> QSize:
        return QSize(self.view.viewport_width, self.view.viewport_height)

    # ------------------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------------------

    def surface_transform(self) -> tuple[float, float, float]:
        """(scale, offset_x, offset_y) fitting the logical surface into the widget."""
        vw, vh = self.view.viewport_width, self.view.viewport_height
        w, h = max(1, self.width()), max(1, self.height())
        scale = min(w / vw, h / vh)
        return scale, (w - vw * scale) / 2.0, (h - vh * scale) / 2.0

    def paintEvent(self, event: QPaintEvent) -> None:  # type: ignore[override]
        del event
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor("#ffffff"))
            scale, dx, dy = self.surface_transform()
            painter.translate(dx, dy)
            painter.scale(scale, scale)
            self.render_scene(painter)
            painter.resetTransform()
            self._draw_overlays(painter)
        finally:
            painter.end()

    def render_scene(self, painter: QPainter) -> None:
        self.renderer.render(
            painter,
            self.view.viewport_width,
            self.view.viewport_height,
            self.store.playback,
            self.store.camera,
            self.store.toggles,
        )

    def grab_frame(self) -> QImage:
        """Render the current scene (without overlays) into an image of the logical size."""
        image = QImage(self.view.viewport_width, self.view.viewport_height, QImage.Format.Format_ARGB32)
        image.fill(QColor("#ffffff"))
        painter = QPainter(image)
        try:
            self.render_scene(painter)
        finally:
            painter.end()
        return image

    def _draw_overlays(self, painter: QPainter) -> None:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        # current time watermark
        painter.setFont(self._watermark_font)
        painter.setPen(WATERMARK)
        painter.drawText(
            QRectF(24.0, 24.0, 300.0, 60.0),
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
            strings.text("time_watermark", t=self.store.current_time),
        )

        # drag hint + camera readout card
        camera = self.store.camera
        card = QRectF(self.width() - 236.0, 16.0, 220.0, 56.0)
        painter.setPen(QPen(CARD_BORDER, 1.0))
        painter.setBrush(CARD_FILL)
        painter.drawRoundedRect(card, 12.0, 12.0)

        inner = card.adjusted(12.0, 8.0, -12.0, -8.0)
        painter.setFont(self._hint_font)
        painter.setPen(HINT_TEXT)
        painter.drawText(inner, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop, strings.text("drag_hint"))
        painter.setFont(self._readout_font)
        painter.setPen(READOUT_TEXT)
        painter.drawText(
            inner,
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignBottom,
            strings.text("camera_readout", azim=camera.azimuth_deg, elev=camera.elevation_deg),
        )

    # ------------------------------------------------------------------------------
    # Pointer drag
    # ------------------------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.interaction.drag_start(pos.x(), pos.y())
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        pos = event.position()
        self.interaction.drag_move(pos.x(), pos.y())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.interaction.drag_end()
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:  # type: ignore[override]
        self.interaction.drag_end()
        super().leaveEvent(event)

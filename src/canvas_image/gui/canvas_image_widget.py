"""Widget that displays one image with pan and zoom gestures."""

from __future__ import annotations

import logging
import os
from typing import Optional

from PySide6.QtCore import QEvent, QRectF, Qt, Signal, Slot
from PySide6.QtGui import (
    QImage,
    QMouseEvent,
    QPainter,
    QPaintEvent,
    QResizeEvent,
    QWheelEvent,
)
from PySide6.QtWidgets import QWidget

from ..core.engine import GestureEngine
from ..settings import ViewerSettings
from .image_source import ImageSource
from .input_handler import InputEventHandler
from .render_loop import RenderLoop

_LOGGER = logging.getLogger(__name__)


class CanvasImageWidget(QWidget):
    """Surface hosting the gesture engine, its render loop and image source."""

    zoomChanged = Signal(float)
    imageChanged = Signal()

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        settings: Optional[ViewerSettings] = None,
        image_source: Optional[ImageSource] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or ViewerSettings.defaults()
        self._engine = GestureEngine.from_settings(self._settings)
        self._input = InputEventHandler(self._engine)
        self._render_loop = RenderLoop(
            self, interval_ms=self._settings.render_interval_ms, parent=self
        )
        self._image_source = image_source or ImageSource(self)
        self._image: Optional[QImage] = None

        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, False)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._engine.frame_changed.connect(self._render_loop.request_frame)
        self._engine.zoom_changed.connect(self.zoomChanged.emit)
        self._image_source.imageLoaded.connect(self._on_image_loaded)
        self._image_source.loadFailed.connect(self._on_image_failed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def engine(self) -> GestureEngine:
        return self._engine

    @property
    def render_loop(self) -> RenderLoop:
        return self._render_loop

    def image(self) -> Optional[QImage]:
        return self._image

    def set_source(self, source: str | os.PathLike[str] | None) -> None:
        """Show the image at *source*; ``None`` clears the surface.

        Loading happens on a worker thread.  The previous image stays visible
        until the new one is decoded.
        """
        if source is None:
            self._image_source.clear()
            self.set_image(None)
            return
        self._image_source.request_image(source)

    def set_image(self, image: Optional[QImage]) -> None:
        """Adopt an already decoded image."""
        if image is None or image.isNull():
            self._image = None
            self._engine.on_image_cleared()
        else:
            self._image = image
            self._engine.on_image_loaded(image.width(), image.height())
        self._render_loop.request_frame()
        self.imageChanged.emit()

    def reset_view(self) -> None:
        self._engine.reset_view()

    # ------------------------------------------------------------------
    # Image source slots
    # ------------------------------------------------------------------
    @Slot(str, QImage)
    def _on_image_loaded(self, identifier: str, image: QImage) -> None:
        _LOGGER.debug("Loaded %s", identifier)
        self.set_image(image)

    @Slot(str, str)
    def _on_image_failed(self, identifier: str, message: str) -> None:
        self._image = None
        self._engine.on_image_failed(identifier, message)
        self._render_loop.request_frame()
        self.imageChanged.emit()

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------
    def showEvent(self, event) -> None:  # type: ignore[override]
        super().showEvent(event)
        self._engine.on_resize(self.width(), self.height())
        self._render_loop.start()

    def hideEvent(self, event) -> None:  # type: ignore[override]
        self._render_loop.stop()
        self._engine.cancel_all_contacts()
        super().hideEvent(event)

    def resizeEvent(self, event: QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        size = event.size()
        self._engine.on_resize(size.width(), size.height())

    def paintEvent(self, event: QPaintEvent) -> None:  # type: ignore[override]
        frame = self._engine.current_frame()
        if frame is None or self._image is None:
            return
        painter = QPainter(self)
        try:
            painter.setRenderHint(
                QPainter.RenderHint.SmoothPixmapTransform, self._settings.smooth_scaling
            )
            painter.drawImage(
                QRectF(*frame.dest_rect.as_tuple()),
                self._image,
                QRectF(*frame.source_rect.as_tuple()),
            )
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if self._input.handle_mouse_press(event):
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if self._input.handle_mouse_move(event):
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if self._input.handle_mouse_release(event):
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:  # type: ignore[override]
        if self._input.handle_wheel(event):
            event.accept()
            return
        super().wheelEvent(event)

    def leaveEvent(self, event: QEvent) -> None:  # type: ignore[override]
        self._input.handle_leave()
        super().leaveEvent(event)

    def event(self, event: QEvent) -> bool:  # type: ignore[override]
        etype = event.type()
        if etype in (
            QEvent.Type.TouchBegin,
            QEvent.Type.TouchUpdate,
            QEvent.Type.TouchEnd,
        ):
            self._input.handle_touch(event)
            event.accept()
            return True
        if etype == QEvent.Type.TouchCancel:
            self._input.handle_touch_cancel()
            event.accept()
            return True
        return super().event(event)


__all__ = ["CanvasImageWidget"]

"""Worker that decodes images off the GUI thread."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QObject, QRunnable, Signal
from PySide6.QtGui import QImage

from ..utils import image_loader


class ImageLoadWorkerSignals(QObject):
    """Signals exposed by :class:`ImageLoadWorker`.

    The container is a separate ``QObject`` created on the GUI thread, so the
    slots connected to it run on the GUI thread whichever pool thread emits.
    """

    imageLoaded = Signal(str, QImage)
    """Emitted with the request identifier once the image is decoded."""

    loadFailed = Signal(str, str)
    """Emitted with the request identifier and a readable reason."""


class ImageLoadWorker(QRunnable):
    """Decode one image file into a ``QImage``."""

    def __init__(self, identifier: str) -> None:
        super().__init__()
        self._identifier = identifier
        self.signals = ImageLoadWorkerSignals()

    @property
    def identifier(self) -> str:
        return self._identifier

    def run(self) -> None:  # type: ignore[override]
        try:
            image = image_loader.load_qimage(Path(self._identifier))
        except Exception as exc:  # any decoder failure is reported, not raised
            self.signals.loadFailed.emit(self._identifier, str(exc))
            return
        self.signals.imageLoaded.emit(self._identifier, image)


__all__ = ["ImageLoadWorker", "ImageLoadWorkerSignals"]

"""Asynchronous image requests for the canvas widget."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot
from PySide6.QtGui import QImage

from .image_load_worker import ImageLoadWorker

_LOGGER = logging.getLogger(__name__)


class ImageSource(QObject):
    """Fire-and-forget image loading.

    Only the most recent request is honoured: a result that arrives after a
    newer :meth:`request_image` or :meth:`clear` is dropped, so an old slow
    decode can never replace the image the user asked for last.
    """

    imageLoaded = Signal(str, QImage)
    loadFailed = Signal(str, str)

    def __init__(
        self,
        parent: Optional[QObject] = None,
        *,
        thread_pool: Optional[QThreadPool] = None,
    ) -> None:
        super().__init__(parent)
        self._pool = thread_pool or QThreadPool.globalInstance()
        self._pending: Optional[str] = None

    @property
    def pending(self) -> Optional[str]:
        """Identifier of the request still in flight, if any."""
        return self._pending

    def request_image(self, identifier: str | os.PathLike[str]) -> None:
        key = str(Path(identifier))
        self._pending = key
        worker = ImageLoadWorker(key)
        worker.signals.imageLoaded.connect(self._handle_loaded)
        worker.signals.loadFailed.connect(self._handle_failed)
        _LOGGER.debug("Requesting image %s", key)
        self._pool.start(worker)

    def clear(self) -> None:
        self._pending = None

    @Slot(str, QImage)
    def _handle_loaded(self, identifier: str, image: QImage) -> None:
        if identifier != self._pending:
            _LOGGER.debug("Dropping stale image result for %s", identifier)
            return
        self._pending = None
        self.imageLoaded.emit(identifier, image)

    @Slot(str, str)
    def _handle_failed(self, identifier: str, message: str) -> None:
        if identifier != self._pending:
            return
        self._pending = None
        self.loadFailed.emit(identifier, message)


__all__ = ["ImageSource"]

"""Decode image files into :class:`QImage` with a Pillow fallback."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError
from PIL.ImageQt import ImageQt
from PySide6.QtGui import QImage, QImageReader

from ..errors import ImageLoadError

_LOGGER = logging.getLogger(__name__)


def load_qimage(source: Path) -> QImage:
    """Return the decoded :class:`QImage` for *source*.

    Raises
    ------
    ImageLoadError
        If neither Qt nor Pillow can decode the file.
    """

    reader = QImageReader(str(source))
    # Qt keeps a process-wide decode cache; a viewer that swaps images would
    # only grow it, so it is switched off when the binding exposes the call.
    disable_cache = getattr(reader, "setCacheEnabled", None)
    if callable(disable_cache):
        disable_cache(False)
    reader.setAutoTransform(True)
    image = reader.read()
    if not image.isNull():
        return image
    _LOGGER.debug("QImageReader failed for %s: %s", source, reader.errorString())
    return _load_with_pillow(source)


def _load_with_pillow(source: Path) -> QImage:
    try:
        with Image.open(source) as img:
            img = ImageOps.exif_transpose(img)
            qt_image = ImageQt(img.convert("RGBA"))
    except (OSError, UnidentifiedImageError) as exc:
        raise ImageLoadError(f"Cannot decode {source}: {exc}") from exc
    # ``ImageQt`` shares its buffer with the Pillow image; copy it so the
    # result outlives the ``with`` block.
    image = QImage(qt_image).copy()
    if image.isNull():
        raise ImageLoadError(f"Decoded image for {source} is empty")
    return image

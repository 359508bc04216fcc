"""GUI entry point that opens a single image in a canvas window."""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from .errors import SettingsError
from .gui.canvas_image_widget import CanvasImageWidget
from .settings import load_settings

LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Launch the Qt application and return the exit code."""

    arguments = list(sys.argv if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(arguments)

    try:
        settings = load_settings()
    except SettingsError as exc:
        LOGGER.error("Invalid settings, falling back to defaults: %s", exc)
        settings = None

    window = CanvasImageWidget(settings=settings)
    window.setWindowTitle("canvas-image")
    window.resize(800, 600)
    # The first positional argument after the program name is the image.
    if len(arguments) > 1:
        window.set_source(arguments[1])
    window.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())

"""Custom exception hierarchy for canvas-image."""

from __future__ import annotations


class CanvasImageError(Exception):
    """Base class for all custom errors raised by canvas-image."""


class ImageLoadError(CanvasImageError):
    """Raised when an image cannot be decoded by Qt or Pillow."""


class SettingsError(CanvasImageError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


__all__ = [
    "CanvasImageError",
    "ImageLoadError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
]

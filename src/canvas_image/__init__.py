"""Pan and zoom viewport for a single raster image."""

from __future__ import annotations

from .core.engine import GestureEngine, GestureState, ResizePolicy
from .core.geometry import Frame, Rect, Size
from .core.viewport import ViewportState

__all__ = [
    "Frame",
    "GestureEngine",
    "GestureState",
    "Rect",
    "ResizePolicy",
    "Size",
    "ViewportState",
]

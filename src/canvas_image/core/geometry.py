"""Plain value types and scalar helpers shared by the viewport modules."""

from __future__ import annotations

import math
from dataclasses import dataclass


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Return *value* limited to the ``[minimum, maximum]`` interval."""
    return max(minimum, min(value, maximum))


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(bx - ax, by - ay)


def midpoint(ax: float, ay: float, bx: float, by: float) -> tuple[float, float]:
    return (ax + bx) * 0.5, (ay + by) * 0.5


@dataclass(frozen=True)
class Size:
    """Width and height in pixels."""

    width: float
    height: float

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Rect:
    """Axis aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Frame:
    """Source and destination rectangles for a single blit.

    ``source_rect`` is expressed in image pixels and ``dest_rect`` in surface
    pixels; drawing the former into the latter reproduces the viewport.
    """

    source_rect: Rect
    dest_rect: Rect

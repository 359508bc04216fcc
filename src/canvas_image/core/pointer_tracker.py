"""Bookkeeping for the contacts that currently touch the surface.

The tracker turns a stream of start/move/end notifications into gesture
deltas.  It knows nothing about the viewport: callers decide what a pan or a
pinch ratio means for the image.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .geometry import distance, midpoint

_LOGGER = logging.getLogger(__name__)


@dataclass
class PointerContact:
    """Last known surface-local position of one active pointer."""

    id: int
    x: float
    y: float


@dataclass(frozen=True)
class GestureDelta:
    """Result of a single contact move.

    ``pan_dx``/``pan_dy`` hold the pointer travel reversed (previous minus
    current) and shared between all active contacts, so two fingers dragging
    together pan exactly as fast as one.  ``zoom_ratio`` is only set while
    exactly two contacts are down.
    """

    pan_dx: float
    pan_dy: float
    anchor_x: float
    anchor_y: float
    contact_count: int
    zoom_ratio: Optional[float] = None


class PointerSessionTracker:
    """Track active contacts by id and derive pan/pinch deltas."""

    def __init__(self) -> None:
        self._contacts: dict[int, PointerContact] = {}
        self._previous_distance: float = 0.0

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._contacts)

    def __contains__(self, contact_id: object) -> bool:
        return contact_id in self._contacts

    @property
    def contact_count(self) -> int:
        return len(self._contacts)

    @property
    def contacts(self) -> list[PointerContact]:
        return [PointerContact(c.id, c.x, c.y) for c in self._contacts.values()]

    @property
    def previous_distance(self) -> float:
        return self._previous_distance

    # ------------------------------------------------------------------
    # Event entry points
    # ------------------------------------------------------------------
    def on_contact_start(self, contact_id: int, x: float, y: float) -> None:
        """Register a new contact at ``(x, y)``.

        A repeated start for an id that is already tracked simply moves the
        reference point, which keeps duplicated device events harmless.
        """
        self._contacts[contact_id] = PointerContact(contact_id, float(x), float(y))
        self._sync_reference_distance()

    def on_contact_move(self, contact_id: int, x: float, y: float) -> Optional[GestureDelta]:
        """Move a tracked contact and return the resulting pan/pinch delta.

        Returns ``None`` and changes nothing when *contact_id* is not tracked.
        """
        contact = self._contacts.get(contact_id)
        if contact is None:
            _LOGGER.debug("Ignoring move for untracked contact %s", contact_id)
            return None

        x = float(x)
        y = float(y)
        count = len(self._contacts)
        pan_dx = (contact.x - x) / count
        pan_dy = (contact.y - y) / count

        contact.x = x
        contact.y = y

        zoom_ratio: Optional[float] = None
        anchor_x, anchor_y = x, y
        if count == 2:
            first, second = self._contacts.values()
            current = distance(first.x, first.y, second.x, second.y)
            if self._previous_distance > 0.0:
                zoom_ratio = current / self._previous_distance
            else:
                _LOGGER.debug("Pinch reference distance is zero; ratio forced to 1")
                zoom_ratio = 1.0
            self._previous_distance = current
            anchor_x, anchor_y = midpoint(first.x, first.y, second.x, second.y)

        return GestureDelta(
            pan_dx=pan_dx,
            pan_dy=pan_dy,
            anchor_x=anchor_x,
            anchor_y=anchor_y,
            contact_count=count,
            zoom_ratio=zoom_ratio,
        )

    def on_contact_end(self, contact_id: int) -> bool:
        """Forget *contact_id*; return ``False`` if it was never tracked."""
        if self._contacts.pop(contact_id, None) is None:
            _LOGGER.debug("Ignoring end for untracked contact %s", contact_id)
            return False
        self._sync_reference_distance()
        return True

    def reset(self) -> None:
        self._contacts.clear()
        self._previous_distance = 0.0

    # ------------------------------------------------------------------
    def _sync_reference_distance(self) -> None:
        # The pinch reference must always describe the current pair, whether
        # the pair was formed by a new contact or by a third one lifting.
        if len(self._contacts) == 2:
            first, second = self._contacts.values()
            self._previous_distance = distance(first.x, first.y, second.x, second.y)
        else:
            self._previous_distance = 0.0

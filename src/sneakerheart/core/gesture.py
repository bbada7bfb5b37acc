# -*- coding: utf-8 -*-
"""Horizontal swipe tracking with a threshold-based commit decision."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from sneakerheart.models.interaction import SwipeDirection

logger = logging.getLogger(__name__)


SwipeCallback = Callable[[SwipeDirection], None]

DEFAULT_THRESHOLD = 0.5


@dataclass
class DragState:
    """Ephemeral drag state of a single card."""

    is_dragging: bool = False
    displacement: float = 0.0
    start_x: float = 0.0
    pointer_id: int | None = None


class SwipeTracker:
    """Track one pointer at a time and report a commit when the drag is long enough.

    The threshold is a fraction of the viewport width. Every pointer-up resets
    the drag state, so drags below the threshold simply spring back. A pointer-up
    from a different pointer abandons the drag without a commit.
    """

    def __init__(
        self,
        viewport_width: float,
        threshold: float = DEFAULT_THRESHOLD,
        on_swipe_complete: SwipeCallback | None = None,
    ) -> None:
        self.threshold = float(threshold)
        self.on_swipe_complete = on_swipe_complete
        self._viewport_width = max(1.0, float(viewport_width))
        self._enabled = True
        self._state = DragState()

    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    @viewport_width.setter
    def viewport_width(self, value: float) -> None:
        self._viewport_width = max(1.0, float(value))

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable input. Disabling abandons an in-flight drag without a commit."""
        self._enabled = bool(enabled)
        if not self._enabled and self._state.is_dragging:
            logger.debug("Drag abandoned at displacement %.1f", self._state.displacement)
            self._reset()

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    @property
    def displacement(self) -> float:
        return self._state.displacement

    def begin(self, pointer_id: int, start_x: float) -> bool:
        if not self._enabled or self._state.is_dragging:
            return False
        self._state = DragState(is_dragging=True, displacement=0.0, start_x=float(start_x), pointer_id=pointer_id)
        return True

    def move(self, current_x: float) -> bool:
        """Update the displacement. True means the event was consumed and must not scroll."""
        if not self._state.is_dragging or not self._enabled:
            return False
        delta = float(current_x) - self._state.start_x
        limit = self._viewport_width
        self._state.displacement = max(-limit, min(limit, delta))
        return True

    def end(self, pointer_id: int | None = None) -> SwipeDirection | None:
        """Finish the drag. Returns the committed direction, if any."""
        if not self._state.is_dragging or not self._enabled:
            return None
        if pointer_id is not None and self._state.pointer_id is not None and pointer_id != self._state.pointer_id:
            logger.debug("Pointer %s released while tracking %s: drag abandoned", pointer_id, self._state.pointer_id)
            self._reset()
            return None

        displacement = self._state.displacement
        percent = abs(displacement) / self._viewport_width
        self._reset()

        if percent < self.threshold or displacement == 0:
            return None

        direction = SwipeDirection.RIGHT if displacement > 0 else SwipeDirection.LEFT
        logger.debug("Swipe committed: %s (%.0f%% of viewport)", direction.value, percent * 100)
        if self.on_swipe_complete is not None:
            self.on_swipe_complete(direction)
        return direction

    def _reset(self) -> None:
        self._state = DragState()

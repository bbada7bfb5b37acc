# -*- coding: utf-8 -*-
"""Card interaction state machine shared by swipe gestures and action buttons."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from sneakerheart.core.gesture import DEFAULT_THRESHOLD, SwipeTracker
from sneakerheart.core.overlay import OverlayState, compute_overlay
from sneakerheart.core.sneaker_queue import SneakerQueue
from sneakerheart.models.interaction import SwipeAction, SwipeDirection, UserInteraction
from sneakerheart.models.sneaker import SneakerProfile

logger = logging.getLogger(__name__)


Scheduler = Callable[[int, Callable[[], None]], None]
StateCallback = Callable[["CardState"], None]
OverlayCallback = Callable[[OverlayState], None]
SneakerCallback = Callable[[SneakerProfile | None, int, int], None]
InteractionCallback = Callable[[UserInteraction], None]

DEFAULT_ANIMATION_MS = 500


class CardState(str, Enum):
    IDLE = "idle"
    COMMITTING = "committing"
    EXHAUSTED = "exhausted"


class CardInteraction:
    """Drive one card at a time through IDLE -> COMMITTING -> IDLE/EXHAUSTED.

    `commit()` is the only way into COMMITTING. The tracker's swipe callback and
    the like/dislike buttons both call it, so every swipe gets exactly one
    feedback window and one queue advance. Input is locked while the window is
    open and triggers arriving during it are dropped, not queued.
    """

    def __init__(
        self,
        queue: SneakerQueue,
        schedule: Scheduler,
        *,
        viewport_width: float,
        threshold: float = DEFAULT_THRESHOLD,
        animation_ms: int = DEFAULT_ANIMATION_MS,
    ) -> None:
        self.queue = queue
        self.animation_ms = int(animation_ms)
        self.tracker = SwipeTracker(viewport_width, threshold=threshold, on_swipe_complete=self.commit)
        self._schedule = schedule
        self._committed: SwipeDirection | None = None
        self._state = CardState.EXHAUSTED if queue.is_complete() else CardState.IDLE
        self.tracker.set_enabled(self._state is CardState.IDLE)

        self.state_changed: StateCallback | None = None
        self.overlay_changed: OverlayCallback | None = None
        self.sneaker_changed: SneakerCallback | None = None
        self.swipe_recorded: InteractionCallback | None = None

    @property
    def state(self) -> CardState:
        return self._state

    @property
    def overlay(self) -> OverlayState:
        return compute_overlay(
            is_dragging=self.tracker.is_dragging,
            displacement=self.tracker.displacement,
            viewport_width=self.tracker.viewport_width,
            committed=self._committed,
        )

    @property
    def committed_direction(self) -> SwipeDirection | None:
        return self._committed

    def set_viewport_width(self, width: float) -> None:
        self.tracker.viewport_width = width

    def pointer_down(self, pointer_id: int, x: float) -> bool:
        started = self.tracker.begin(pointer_id, x)
        if started:
            self._emit_overlay()
        return started

    def pointer_move(self, x: float) -> bool:
        consumed = self.tracker.move(x)
        if consumed:
            self._emit_overlay()
        return consumed

    def pointer_up(self, pointer_id: int | None = None) -> SwipeDirection | None:
        was_dragging = self.tracker.is_dragging
        direction = self.tracker.end(pointer_id)
        if was_dragging and direction is None:
            self._emit_overlay()
        return direction

    def cancel_drag(self) -> None:
        """Abandon the current drag, e.g. when the window loses the pointer."""
        if not self.tracker.is_dragging:
            return
        self.tracker.set_enabled(False)
        self.tracker.set_enabled(self._state is CardState.IDLE)
        self._emit_overlay()

    def like(self) -> bool:
        return self.commit(SwipeDirection.RIGHT)

    def dislike(self) -> bool:
        return self.commit(SwipeDirection.LEFT)

    def commit(self, direction: SwipeDirection) -> bool:
        """Open the feedback window for `direction`. False if input is locked."""
        if self._state is not CardState.IDLE:
            logger.debug("Commit %s ignored in state %s", direction.value, self._state.value)
            return False
        self._committed = direction
        self._set_state(CardState.COMMITTING)
        self._emit_overlay()
        self._schedule(self.animation_ms, self._finish_commit)
        return True

    def _finish_commit(self) -> None:
        direction = self._committed
        if self._state is not CardState.COMMITTING or direction is None:
            return
        interaction = self.queue.record_swipe(SwipeAction.from_direction(direction))
        self._committed = None
        if interaction is not None and self.swipe_recorded is not None:
            self.swipe_recorded(interaction)
        self._emit_overlay()

        if self.queue.is_complete():
            self._set_state(CardState.EXHAUSTED)
            logger.info("All sneakers swiped: %s", self.queue.summary())
            for item in self.queue.interactions():
                logger.debug("  #%d %s at %d", item.sneaker_id, item.action.value, item.timestamp_ms)
        else:
            self._set_state(CardState.IDLE)

        if self.sneaker_changed is not None:
            self.sneaker_changed(self.queue.current(), self.queue.current_index(), self.queue.total_count())

    def _set_state(self, state: CardState) -> None:
        if state is self._state:
            return
        logger.debug("Card state %s -> %s", self._state.value, state.value)
        self._state = state
        self.tracker.set_enabled(state is CardState.IDLE)
        if self.state_changed is not None:
            self.state_changed(state)

    def _emit_overlay(self) -> None:
        if self.overlay_changed is not None:
            self.overlay_changed(self.overlay)

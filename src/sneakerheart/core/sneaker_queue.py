# -*- coding: utf-8 -*-
"""Ordered sneaker queue with an append-only interaction log."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from sneakerheart.models.interaction import SwipeAction, UserInteraction
from sneakerheart.models.sneaker import SneakerProfile

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class SneakerQueue:
    """Hold the cursor over the catalog and record one interaction per swipe.

    The cursor only moves forward, one step per recorded swipe. Once every
    sneaker has been swiped the queue stays complete for the rest of the session.
    """

    def __init__(self, sneakers: Sequence[SneakerProfile], clock: Callable[[], int] = _now_ms) -> None:
        self._sneakers = tuple(sneakers)
        self._index = 0
        self._interactions: list[UserInteraction] = []
        self._clock = clock

    def current(self) -> SneakerProfile | None:
        if self._index >= len(self._sneakers):
            return None
        return self._sneakers[self._index]

    def record_swipe(self, action: SwipeAction) -> UserInteraction | None:
        if self.is_complete():
            logger.debug("Swipe %s ignored: queue already complete", action.value)
            return None
        interaction = UserInteraction(sneaker_id=self._index, action=action, timestamp_ms=self._clock())
        self._interactions.append(interaction)
        self._index += 1
        logger.info(
            "Recorded %s for sneaker %d (%d/%d)",
            action.value,
            interaction.sneaker_id,
            self._index,
            len(self._sneakers),
        )
        return interaction

    def is_complete(self) -> bool:
        return self._index >= len(self._sneakers)

    def current_index(self) -> int:
        return self._index

    def total_count(self) -> int:
        return len(self._sneakers)

    def interactions(self) -> tuple[UserInteraction, ...]:
        return tuple(self._interactions)

    def upcoming(self, count: int) -> list[SneakerProfile]:
        """Sneakers after the current one, used for image preloading."""
        start = self._index + 1
        return list(self._sneakers[start:start + max(0, count)])

    def summary(self) -> dict[str, int]:
        likes = sum(1 for item in self._interactions if item.action is SwipeAction.LIKE)
        return {"like": likes, "dislike": len(self._interactions) - likes}

# -*- coding: utf-8 -*-
"""Swipe actions and the interaction log record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SwipeDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class SwipeAction(str, Enum):
    LIKE = "LIKE"
    DISLIKE = "DISLIKE"

    @classmethod
    def from_direction(cls, direction: SwipeDirection) -> "SwipeAction":
        return cls.LIKE if direction is SwipeDirection.RIGHT else cls.DISLIKE


@dataclass(frozen=True)
class UserInteraction:
    """One committed swipe. Records are append-only and never mutated."""

    sneaker_id: int
    action: SwipeAction
    timestamp_ms: int

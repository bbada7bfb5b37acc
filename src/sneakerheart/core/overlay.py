# -*- coding: utf-8 -*-
"""Map drag displacement or a committed swipe to overlay feedback."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sneakerheart.models.interaction import SwipeDirection


DRAG_INTENSITY_CAP = 0.6
DRAG_INTENSITY_GAIN = 2.0


class OverlayKind(str, Enum):
    NONE = "none"
    LIKE = "like"
    DISLIKE = "dislike"


@dataclass(frozen=True)
class OverlayState:
    kind: OverlayKind = OverlayKind.NONE
    intensity: float = 0.0


NO_OVERLAY = OverlayState()


def overlay_for_direction(direction: SwipeDirection) -> OverlayState:
    """Full-intensity feedback shown during the commit animation."""
    kind = OverlayKind.LIKE if direction is SwipeDirection.RIGHT else OverlayKind.DISLIKE
    return OverlayState(kind, 1.0)


def overlay_for_drag(displacement: float, viewport_width: float) -> OverlayState:
    """Linear ramp capped at 60% so the card stays legible mid-drag."""
    if displacement > 0:
        kind = OverlayKind.LIKE
    elif displacement < 0:
        kind = OverlayKind.DISLIKE
    else:
        return NO_OVERLAY
    width = max(1.0, float(viewport_width))
    intensity = min(DRAG_INTENSITY_GAIN * abs(displacement) / width, DRAG_INTENSITY_CAP)
    return OverlayState(kind, intensity)


def compute_overlay(
    *,
    is_dragging: bool,
    displacement: float,
    viewport_width: float,
    committed: SwipeDirection | None = None,
) -> OverlayState:
    if committed is not None:
        return overlay_for_direction(committed)
    if is_dragging:
        return overlay_for_drag(displacement, viewport_width)
    return NO_OVERLAY

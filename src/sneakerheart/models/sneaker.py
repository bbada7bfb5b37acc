# -*- coding: utf-8 -*-
"""Sneaker profile data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SneakerProfile:
    """One card in the swipe queue, loaded once at startup."""

    name: str
    description: str
    purchase_type: str
    availability_type: str
    images: tuple[str, ...]
    info_box_bg: str | None = None

    @property
    def primary_image(self) -> str:
        return self.images[0]

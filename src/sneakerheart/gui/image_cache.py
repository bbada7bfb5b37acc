# -*- coding: utf-8 -*-
"""Pixmap cache with preloading and a drawn placeholder for broken images."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from PyQt6.QtCore import QRect, Qt
from PyQt6.QtGui import QColor, QFont, QPainter, QPixmap

from sneakerheart.constants import IMAGE_UNAVAILABLE
from sneakerheart.core.catalog import resolve_image_path
from sneakerheart.models.sneaker import SneakerProfile

logger = logging.getLogger(__name__)


def placeholder_pixmap(width: int = 600, height: int = 400) -> QPixmap:
    pixmap = QPixmap(width, height)
    pixmap.fill(QColor("#f3f4f6"))
    painter = QPainter(pixmap)
    painter.setPen(QColor("#9ca3af"))
    font = QFont()
    font.setPointSize(16)
    painter.setFont(font)
    painter.drawText(QRect(0, 0, width, height), Qt.AlignmentFlag.AlignCenter, IMAGE_UNAVAILABLE)
    painter.end()
    return pixmap


class ImageCache:
    """Load sneaker images from the assets dir; never fail the card render."""

    def __init__(self, assets_dir: str | Path) -> None:
        self.assets_dir = Path(assets_dir)
        self._pixmaps: dict[str, QPixmap] = {}
        self._failed: set[str] = set()
        self._placeholder: QPixmap | None = None

    def placeholder(self) -> QPixmap:
        if self._placeholder is None:
            self._placeholder = placeholder_pixmap()
        return self._placeholder

    def is_cached(self, ref: str) -> bool:
        return ref in self._pixmaps

    def is_failed(self, ref: str) -> bool:
        return ref in self._failed

    def get(self, ref: str) -> QPixmap:
        cached = self._pixmaps.get(ref)
        if cached is not None:
            return cached
        if ref in self._failed:
            return self.placeholder()

        path = resolve_image_path(ref, self.assets_dir)
        pixmap = QPixmap(str(path)) if path.is_file() else QPixmap()
        if pixmap.isNull():
            logger.warning("Image not available, using placeholder: %s", path)
            self._failed.add(ref)
            return self.placeholder()

        self._pixmaps[ref] = pixmap
        return pixmap

    def preload(self, sneakers: Iterable[SneakerProfile]) -> int:
        """Warm the cache for upcoming cards. Returns how many images loaded."""
        loaded = 0
        for sneaker in sneakers:
            ref = sneaker.primary_image
            if self.is_cached(ref) or self.is_failed(ref):
                continue
            self.get(ref)
            if self.is_cached(ref):
                loaded += 1
        if loaded:
            logger.debug("Preloaded %d image(s)", loaded)
        return loaded

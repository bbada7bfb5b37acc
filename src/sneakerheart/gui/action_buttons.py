# -*- coding: utf-8 -*-
"""Manual like/dislike buttons under the card."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget


class ActionButtonsWidget(QWidget):
    """Round dislike and like buttons. Disabled while a swipe animates."""

    like_requested = pyqtSignal()
    dislike_requested = pyqtSignal()

    def __init__(self, hotkeys: dict[str, str] | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        hotkeys = hotkeys or {}
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 12, 0, 12)
        layout.setSpacing(32)

        self.dislike_button = self._make_button("✕", "dislikeButton", hotkeys.get("dislike", ""), self.dislike_requested.emit)
        self.like_button = self._make_button("♥", "likeButton", hotkeys.get("like", ""), self.like_requested.emit)
        self.dislike_button.setAccessibleName("Dislike")
        self.like_button.setAccessibleName("Like")

        layout.addStretch(1)
        layout.addWidget(self.dislike_button)
        layout.addWidget(self.like_button)
        layout.addStretch(1)

    def _make_button(self, text: str, object_name: str, hotkey: str, handler) -> QPushButton:
        button = QPushButton(text)
        button.setObjectName(object_name)
        button.setFixedSize(64, 64)
        if hotkey:
            button.setToolTip(f"Shortcut: {hotkey}")
        button.clicked.connect(handler)
        return button

    def set_buttons_enabled(self, enabled: bool) -> None:
        self.like_button.setEnabled(enabled)
        self.dislike_button.setEnabled(enabled)

# -*- coding: utf-8 -*-
"""Completion view with the promo code."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from sneakerheart.constants import (
    COMPLETION_BODY,
    COMPLETION_CODE_LABEL,
    COMPLETION_LINK_LABEL,
    COMPLETION_TITLE,
)


class CompletionWidget(QWidget):
    link_requested = pyqtSignal()

    def __init__(self, promo_code: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.title_label = QLabel(COMPLETION_TITLE)
        self.title_label.setObjectName("completionTitle")
        self.code_caption = QLabel(COMPLETION_CODE_LABEL)
        self.code_caption.setObjectName("promoCaption")
        self.code_label = QLabel(promo_code)
        self.code_label.setObjectName("promoCode")
        self.code_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.body_label = QLabel(COMPLETION_BODY)
        self.body_label.setObjectName("completionBody")
        self.body_label.setWordWrap(True)
        self.link_button = QPushButton(COMPLETION_LINK_LABEL)
        self.link_button.setObjectName("linkButton")
        self.link_button.clicked.connect(self.link_requested.emit)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.addStretch(1)
        for widget in (self.title_label, self.code_caption, self.code_label, self.body_label):
            widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(widget)
        layout.addWidget(self.link_button, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)

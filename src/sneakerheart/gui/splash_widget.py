# -*- coding: utf-8 -*-
"""Brand splash shown for a minimum time at startup."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget


class SplashWidget(QWidget):
    finished = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("splash")
        self.logo_label = QLabel("Tinker")
        self.logo_label.setObjectName("splashLogo")
        self.logo_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout = QVBoxLayout(self)
        layout.addWidget(self.logo_label)

    def start(self, min_seconds: float) -> None:
        QTimer.singleShot(max(0, int(min_seconds * 1000)), self.finished.emit)

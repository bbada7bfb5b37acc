# -*- coding: utf-8 -*-
"""Main window: splash, email gate, swipe cards and completion view."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PyQt6.QtCore import Qt, QUrl
from PyQt6.QtGui import QDesktopServices, QKeySequence, QShortcut
from PyQt6.QtWidgets import QLabel, QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from sneakerheart.constants import APP_VERSION, DEFAULT_HOTKEYS
from sneakerheart.core.card_interaction import CardState
from sneakerheart.core.overlay import OverlayState
from sneakerheart.gui.action_buttons import ActionButtonsWidget
from sneakerheart.gui.card_widget import SneakerCardWidget
from sneakerheart.gui.completion_widget import CompletionWidget
from sneakerheart.gui.controller import AppController
from sneakerheart.gui.email_widget import EmailCaptureWidget
from sneakerheart.gui.image_cache import ImageCache
from sneakerheart.gui.splash_widget import SplashWidget
from sneakerheart.models.sneaker import SneakerProfile

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-screen swipe app. Pages are switched in a stacked widget."""

    def __init__(self, settings: dict[str, Any], controller: AppController, assets_dir: str | Path) -> None:
        super().__init__()
        self.settings = settings
        self.controller = controller
        self.images = ImageCache(assets_dir)
        self._preload_ahead = int(settings.get("preload", {}).get("ahead", 2))
        hotkeys = {**DEFAULT_HOTKEYS, **settings.get("hotkeys", {})}

        self.setWindowTitle(f"Sneaker Heart {APP_VERSION}")
        self.resize(480, 860)

        self.splash_widget = SplashWidget()
        self.email_widget = EmailCaptureWidget()
        self.card_widget = SneakerCardWidget(spring_back_ms=int(settings.get("swipe", {}).get("spring_back_ms", 300)))
        self.action_buttons = ActionButtonsWidget(hotkeys=hotkeys)
        self.completion_widget = CompletionWidget(str(settings.get("completion", {}).get("promo_code", "")))

        self.header_label = QLabel("SNEAKER ♥ HEART")
        self.header_label.setObjectName("appTitle")
        self.header_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.position_label = QLabel("")
        self.position_label.setObjectName("mutedText")
        self.position_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.swipe_page = QWidget()
        swipe_layout = QVBoxLayout(self.swipe_page)
        swipe_layout.setContentsMargins(12, 12, 12, 12)
        swipe_layout.setSpacing(6)
        swipe_layout.addWidget(self.header_label)
        swipe_layout.addWidget(self.card_widget, 1)
        swipe_layout.addWidget(self.action_buttons)
        swipe_layout.addWidget(self.position_label)

        self.stack = QStackedWidget()
        for page in (self.splash_widget, self.email_widget, self.swipe_page, self.completion_widget):
            self.stack.addWidget(page)
        self.setCentralWidget(self.stack)

        self.like_shortcut = QShortcut(QKeySequence(hotkeys["like"]), self)
        self.like_shortcut.activated.connect(self._on_like_hotkey)
        self.dislike_shortcut = QShortcut(QKeySequence(hotkeys["dislike"]), self)
        self.dislike_shortcut.activated.connect(self._on_dislike_hotkey)

        self._connect_signals()
        self._apply_styles()

    def _connect_signals(self) -> None:
        self.splash_widget.finished.connect(self._on_splash_finished)

        self.email_widget.submit_requested.connect(self.controller.submit_email)
        self.email_widget.text_edited.connect(self.controller.email_edited)
        self.controller.submission_status_changed.connect(self.email_widget.set_status)
        self.controller.email_gate_passed.connect(self.show_swipe_page)

        self.card_widget.drag_started.connect(self._on_drag_started)
        self.card_widget.drag_moved.connect(self.controller.pointer_move)
        self.card_widget.drag_finished.connect(self.controller.pointer_up)
        self.card_widget.drag_cancelled.connect(self.controller.cancel_drag)
        self.action_buttons.like_requested.connect(self.controller.like)
        self.action_buttons.dislike_requested.connect(self.controller.dislike)

        self.controller.card_feedback.connect(self._on_card_feedback)
        self.controller.card_state_changed.connect(self._on_card_state_changed)
        self.controller.sneaker_changed.connect(self._on_sneaker_changed)
        self.controller.queue_completed.connect(self.show_completion_page)

        self.completion_widget.link_requested.connect(self._open_completion_link)

    def start(self) -> None:
        """Show the splash, then route through the email gate."""
        self.stack.setCurrentWidget(self.splash_widget)
        self.splash_widget.start(float(self.settings.get("splash", {}).get("min_seconds", 2.0)))

    def _on_splash_finished(self) -> None:
        if self.controller.needs_email_capture():
            logger.info("First run on this device: showing email capture")
            self.show_email_page()
        else:
            logger.info("Email already captured: skipping the form")
            self.show_swipe_page()

    def show_email_page(self) -> None:
        self.stack.setCurrentWidget(self.email_widget)
        self.email_widget.email_input.setFocus()

    def show_swipe_page(self) -> None:
        if self.controller.queue.is_complete():
            self.show_completion_page()
            return
        self.stack.setCurrentWidget(self.swipe_page)
        self.controller.set_viewport_width(self.width())
        self.controller.refresh_current_sneaker()
        self.card_widget.setFocus()

    def show_completion_page(self) -> None:
        self.stack.setCurrentWidget(self.completion_widget)

    def _on_drag_started(self, pointer_id: int, x: float) -> None:
        self.controller.set_viewport_width(self.width())
        self.controller.pointer_down(pointer_id, x)

    def _on_like_hotkey(self) -> None:
        if self.stack.currentWidget() is self.swipe_page:
            self.controller.like()

    def _on_dislike_hotkey(self) -> None:
        if self.stack.currentWidget() is self.swipe_page:
            self.controller.dislike()

    def _on_card_feedback(self, displacement: float, overlay: OverlayState) -> None:
        self.card_widget.set_feedback(displacement, overlay)

    def _on_card_state_changed(self, state: str) -> None:
        idle = state == CardState.IDLE.value
        self.action_buttons.set_buttons_enabled(idle)
        self.card_widget.set_input_enabled(idle)

    def _on_sneaker_changed(self, sneaker: SneakerProfile | None, index: int, total: int) -> None:
        if sneaker is None:
            self.show_completion_page()
            return
        self.card_widget.set_sneaker(sneaker, self.images.get(sneaker.primary_image))
        self.position_label.setText(f"{index + 1} / {total}")
        self.images.preload(self.controller.queue.upcoming(self._preload_ahead))

    def _open_completion_link(self) -> None:
        url = str(self.settings.get("completion", {}).get("link_url", ""))
        if url:
            QDesktopServices.openUrl(QUrl(url))

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.controller.set_viewport_width(self.width())

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.controller.shutdown()
        super().closeEvent(event)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QWidget {
                background: #000000;
                color: #f9fafb;
                font-family: "Segoe UI", "Noto Sans", sans-serif;
                font-size: 13px;
            }
            QLabel#appTitle {
                font-size: 22px;
                font-weight: 800;
                color: #ff0000;
                letter-spacing: 2px;
                padding: 8px;
            }
            QLabel#mutedText {
                color: #9ca3af;
            }
            QWidget#splash, QLabel#splashLogo, QLabel#brandBand {
                background: #ff0000;
                color: white;
                font-size: 40px;
                font-weight: 800;
            }
            QWidget#formArea, QWidget#formArea QLabel {
                background: white;
                color: #111827;
            }
            QLabel#formHeadline {
                font-size: 22px;
                font-weight: 700;
            }
            QLineEdit {
                background: white;
                color: #111827;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                padding: 10px 14px;
                font-size: 15px;
            }
            QLineEdit:disabled {
                color: #9ca3af;
            }
            QLabel#errorText {
                color: #dc2626;
            }
            QPushButton#primaryButton {
                background: #ff0000;
                color: white;
                border: none;
                border-radius: 8px;
                padding: 12px;
                font-size: 16px;
                font-weight: 700;
            }
            QPushButton#primaryButton:hover {
                background: #dc2626;
            }
            QPushButton#primaryButton:disabled {
                background: #fca5a5;
            }
            QPushButton#likeButton, QPushButton#dislikeButton {
                color: white;
                border: none;
                border-radius: 32px;
                font-size: 24px;
                font-weight: 700;
            }
            QPushButton#likeButton {
                background: #22c55e;
            }
            QPushButton#dislikeButton {
                background: #ef4444;
            }
            QPushButton#likeButton:disabled, QPushButton#dislikeButton:disabled {
                background: #4b5563;
            }
            QLabel#completionTitle {
                font-size: 30px;
                font-weight: 700;
            }
            QLabel#promoCaption, QLabel#promoCode {
                background: #ff0000;
                font-weight: 700;
            }
            QLabel#promoCode {
                font-size: 26px;
                letter-spacing: 3px;
                padding: 6px;
            }
            QPushButton#linkButton {
                background: transparent;
                color: #ff0000;
                border: 1px solid #ff0000;
                border-radius: 8px;
                padding: 12px 28px;
                font-size: 16px;
                font-weight: 600;
            }
            QPushButton#linkButton:hover {
                background: #ff0000;
                color: black;
            }
            """
        )

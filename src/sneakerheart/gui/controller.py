# -*- coding: utf-8 -*-
"""Application controller tying the swipe loop and the email gate to the GUI."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from sneakerheart.core.card_interaction import CardInteraction, CardState, Scheduler
from sneakerheart.core.email_gate import EmailGate, EmailSink
from sneakerheart.core.overlay import OverlayState
from sneakerheart.core.session_store import SessionStore
from sneakerheart.core.sneaker_queue import SneakerQueue
from sneakerheart.gui.workers import EmailSubmitWorker
from sneakerheart.integrations.supabase_client import SupabaseClient, client_identifier
from sneakerheart.models.interaction import UserInteraction
from sneakerheart.models.session import SubmissionStatus
from sneakerheart.models.sneaker import SneakerProfile

logger = logging.getLogger(__name__)


class AppController(QObject):
    """
    Central controller for application logic.
    Owns the sneaker queue, the card state machine and the email gate.
    """
    sneaker_changed = pyqtSignal(object, int, int)
    card_feedback = pyqtSignal(float, object)
    card_state_changed = pyqtSignal(str)
    swipe_recorded = pyqtSignal(object)
    queue_completed = pyqtSignal()
    submission_status_changed = pyqtSignal(object)
    email_gate_passed = pyqtSignal()

    def __init__(
        self,
        settings: dict[str, Any],
        sneakers: Sequence[SneakerProfile],
        *,
        store: SessionStore | None = None,
        sink: EmailSink | None = None,
        schedule: Scheduler | None = None,
        viewport_width: float = 480.0,
    ) -> None:
        super().__init__()
        self.settings = settings
        swipe = settings.get("swipe", {})

        self.queue = SneakerQueue(sneakers)
        self.card = CardInteraction(
            self.queue,
            schedule or QTimer.singleShot,
            viewport_width=viewport_width,
            threshold=float(swipe.get("threshold", 0.3)),
            animation_ms=int(swipe.get("animation_ms", 500)),
        )
        self.card.overlay_changed = self._on_overlay_changed
        self.card.state_changed = self._on_card_state_changed
        self.card.sneaker_changed = self._on_sneaker_changed
        self.card.swipe_recorded = self._on_swipe_recorded

        self.store = store or SessionStore(settings.get("session", {}).get("flag_file", "session.json"))
        self.gate = EmailGate(sink or SupabaseClient.from_settings(settings), self.store, client_identifier())
        self.gate.status_changed = self.submission_status_changed.emit

        # Worker objects have no Qt parent; the pair list keeps them alive until their thread finishes.
        self._active_jobs: list[tuple[QThread, EmailSubmitWorker]] = []

    # Swipe loop

    def set_viewport_width(self, width: float) -> None:
        self.card.set_viewport_width(width)

    def refresh_current_sneaker(self) -> None:
        self.sneaker_changed.emit(self.queue.current(), self.queue.current_index(), self.queue.total_count())

    def pointer_down(self, pointer_id: int, x: float) -> None:
        self.card.pointer_down(pointer_id, x)

    def pointer_move(self, x: float) -> None:
        self.card.pointer_move(x)

    def pointer_up(self, pointer_id: int) -> None:
        self.card.pointer_up(pointer_id)

    def cancel_drag(self) -> None:
        self.card.cancel_drag()

    def like(self) -> bool:
        return self.card.like()

    def dislike(self) -> bool:
        return self.card.dislike()

    def _on_overlay_changed(self, overlay: OverlayState) -> None:
        self.card_feedback.emit(float(self.card.tracker.displacement), overlay)

    def _on_card_state_changed(self, state: CardState) -> None:
        self.card_state_changed.emit(state.value)
        if state is CardState.EXHAUSTED:
            self.queue_completed.emit()

    def _on_sneaker_changed(self, sneaker: SneakerProfile | None, index: int, total: int) -> None:
        self.sneaker_changed.emit(sneaker, index, total)

    def _on_swipe_recorded(self, interaction: UserInteraction) -> None:
        self.swipe_recorded.emit(interaction)

    # Email gate

    def needs_email_capture(self) -> bool:
        return self.gate.needs_capture()

    def email_edited(self) -> None:
        self.gate.edit()

    def submit_email(self, raw_email: str) -> bool:
        """Validate inline and send on a worker thread. False if nothing was sent."""
        entry = self.gate.begin(raw_email)
        if entry is None:
            return False

        thread = QThread(self)
        worker = EmailSubmitWorker(self.gate, entry)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.finished.connect(self._on_submit_finished)
        worker.error.connect(self._on_submit_failed)

        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        thread.finished.connect(self._release_job)
        thread.finished.connect(worker.deleteLater)
        thread.finished.connect(thread.deleteLater)

        self._active_jobs.append((thread, worker))
        thread.start()
        return True

    def _on_submit_finished(self) -> None:
        if self.gate.finish_success() is not None:
            self.email_gate_passed.emit()

    def _on_submit_failed(self, message: str) -> None:
        self.gate.finish_error(message)

    def submission_status(self) -> SubmissionStatus:
        return self.gate.status

    def _release_job(self) -> None:
        """Drop the finished thread and its worker before Qt deletes them."""
        thread = self.sender()
        self._active_jobs = [job for job in self._active_jobs if job[0] is not thread]

    def shutdown(self) -> None:
        for thread, _worker in self._active_jobs:
            thread.quit()
            thread.wait(2000)
        self._active_jobs = []

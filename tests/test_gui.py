# -*- coding: utf-8 -*-
"""GUI flow tests: email gate, swipe loop and completion view."""

from __future__ import annotations

import gc
import time
from pathlib import Path

import pytest

pytest.importorskip("PyQt6")

from sneakerheart.core.email_gate import EmailGate
from sneakerheart.core.overlay import OverlayKind, OverlayState
from sneakerheart.gui.card_widget import SneakerCardWidget, color_from_token
from sneakerheart.gui.controller import AppController
from sneakerheart.gui.email_widget import EmailCaptureWidget
from sneakerheart.gui.image_cache import ImageCache, placeholder_pixmap
from sneakerheart.gui.main_window import MainWindow
from sneakerheart.gui.workers import EmailSubmitWorker
from sneakerheart.models.session import SUBMITTING, EmailEntry, SubmissionStatus


def _wait_until(qt_app, predicate, timeout: float = 3.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        qt_app.processEvents()
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def window_factory(qt_app, default_config, sneakers, session_store, fake_sink, scheduler, tmp_path: Path):
    default_config["splash"]["min_seconds"] = 0
    created: list[MainWindow] = []

    def _make(sink=fake_sink) -> MainWindow:
        controller = AppController(default_config, sneakers, store=session_store, sink=sink, schedule=scheduler)
        window = MainWindow(settings=default_config, controller=controller, assets_dir=tmp_path)
        created.append(window)
        return window

    yield _make
    for window in created:
        window.close()


def test_color_from_token_extracts_hex() -> None:
    assert color_from_token("bg-[#788d42]") == "#788d42"
    assert color_from_token("#abc") == "#abc"
    assert color_from_token(None) == "#ff0000"
    assert color_from_token("bg-brand-red") == "#ff0000"


def test_first_run_shows_form_then_unlocks_queue(qt_app, window_factory, session_store, fake_sink) -> None:
    window = window_factory()
    window.start()
    assert _wait_until(qt_app, lambda: window.stack.currentWidget() is window.email_widget)

    window.email_widget.email_input.setText("fan@example.com")
    window.email_widget.submit_button.click()
    assert window.email_widget.submit_button.isEnabled() is False

    assert _wait_until(qt_app, lambda: window.stack.currentWidget() is window.swipe_page)
    assert len(fake_sink.entries) == 1
    assert session_store.has_submitted_email() is True
    assert window.controller.queue.current_index() == 0
    assert window.controller.queue.total_count() == 4
    assert window.position_label.text() == "1 / 4"


def test_invalid_email_stays_on_form(qt_app, window_factory, fake_sink) -> None:
    window = window_factory()
    window.show_email_page()
    window.email_widget.email_input.setText("a@b")
    window.email_widget.submit_button.click()
    qt_app.processEvents()

    assert window.stack.currentWidget() is window.email_widget
    assert window.email_widget.error_label.isHidden() is False
    assert window.email_widget.submit_button.isEnabled() is True
    assert fake_sink.entries == []


def test_remote_failure_keeps_form_interactive(qt_app, window_factory, failing_sink, session_store) -> None:
    window = window_factory(sink=failing_sink)
    window.show_email_page()
    window.email_widget.email_input.setText("fan@example.com")
    window.email_widget.submit_button.click()

    assert _wait_until(qt_app, lambda: window.controller.submission_status().is_error)
    assert window.stack.currentWidget() is window.email_widget
    assert window.email_widget.submit_button.isEnabled() is True
    assert session_store.has_submitted_email() is False


def test_returning_user_skips_form(qt_app, window_factory, session_store) -> None:
    session_store.mark_submitted()
    window = window_factory()
    window.start()
    assert _wait_until(qt_app, lambda: window.stack.currentWidget() is window.swipe_page)


def test_four_commits_show_completion(qt_app, window_factory, session_store, scheduler) -> None:
    session_store.mark_submitted()
    window = window_factory()
    window.show_swipe_page()
    controller = window.controller

    assert controller.like() is True
    assert window.action_buttons.like_button.isEnabled() is False
    assert controller.dislike() is False
    scheduler.fire_all()
    assert window.action_buttons.like_button.isEnabled() is True

    window.action_buttons.dislike_button.click()
    scheduler.fire_all()

    window._on_drag_started(0, 100.0)
    controller.pointer_move(100.0 + window.width())
    controller.pointer_up(0)
    scheduler.fire_all()

    controller.like()
    scheduler.fire_all()

    assert controller.queue.is_complete() is True
    assert [item.sneaker_id for item in controller.queue.interactions()] == [0, 1, 2, 3]
    assert window.stack.currentWidget() is window.completion_widget
    assert window.completion_widget.code_label.text() == "SNEAKERS_HEART"


def test_card_widget_tracks_offset_and_springs_back(qt_app) -> None:
    card = SneakerCardWidget(spring_back_ms=0)
    like = OverlayState(OverlayKind.LIKE, 0.4)
    card.set_feedback(120.0, like)
    assert card.offset == 120.0
    assert card.overlay == like
    card.set_feedback(0.0, OverlayState())
    assert card.offset == 0.0
    card.close()


def test_email_widget_disables_while_submitting(qt_app) -> None:
    widget = EmailCaptureWidget()
    widget.set_status(SUBMITTING)
    assert widget.submit_button.isEnabled() is False
    assert widget.email_input.isEnabled() is False
    widget.set_status(SubmissionStatus("error", "boom"))
    assert widget.submit_button.isEnabled() is True
    assert widget.error_label.text() == "boom"
    widget.close()


def test_image_cache_falls_back_to_placeholder(qt_app, tmp_path: Path, sneakers) -> None:
    cache = ImageCache(tmp_path)
    pixmap = cache.get("/info/missing.jpg")
    assert pixmap.isNull() is False
    assert cache.is_failed("/info/missing.jpg") is True
    assert cache.preload(sneakers) == 0


class _BrokenSink:
    def insert_email(self, entry) -> None:
        raise ValueError("unknown url type")


def test_background_submit_survives_garbage_collection(
    qt_app, default_config, sneakers, session_store, fake_sink, scheduler
) -> None:
    controller = AppController(default_config, sneakers, store=session_store, sink=fake_sink, schedule=scheduler)
    passed = []
    controller.email_gate_passed.connect(lambda: passed.append(True))

    assert controller.submit_email("fan@example.com") is True
    gc.collect()

    assert _wait_until(qt_app, lambda: controller.submission_status().kind == "success")
    assert passed == [True]
    assert len(fake_sink.entries) == 1
    assert _wait_until(qt_app, lambda: controller._active_jobs == [])
    controller.shutdown()


def test_unexpected_sink_exception_reenables_form(
    qt_app, default_config, sneakers, session_store, scheduler
) -> None:
    controller = AppController(default_config, sneakers, store=session_store, sink=_BrokenSink(), schedule=scheduler)

    assert controller.submit_email("fan@example.com") is True
    gc.collect()

    assert _wait_until(qt_app, lambda: controller.submission_status().is_error)
    assert session_store.has_submitted_email() is False
    assert controller.submit_email("fan@example.com") is True
    assert _wait_until(qt_app, lambda: controller.submission_status().is_error)
    controller.shutdown()


def test_worker_reports_any_sink_exception(qt_app, session_store) -> None:
    gate = EmailGate(_BrokenSink(), session_store, user_agent="tests/1.0")
    worker = EmailSubmitWorker(gate, EmailEntry("fan@example.com", "2026-01-01T00:00:00.000Z", "tests/1.0"))
    errors: list[str] = []
    finished: list[bool] = []
    worker.error.connect(errors.append)
    worker.finished.connect(lambda: finished.append(True))

    worker.run()

    assert errors == ["unknown url type"]
    assert finished == []


def test_card_paints_current_sneaker(qt_app, sneakers) -> None:
    card = SneakerCardWidget(spring_back_ms=0)
    card.resize(320, 560)
    card.set_sneaker(sneakers[0], placeholder_pixmap())
    card.set_feedback(80.0, OverlayState(OverlayKind.LIKE, 0.3))

    rendered = card.grab()

    assert rendered.isNull() is False
    assert rendered.width() == 320
    card.close()

# -*- coding: utf-8 -*-
"""Tests for the durable email gate flag."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from sneakerheart.constants import SESSION_STORAGE_KEY
from sneakerheart.core.session_store import SessionStore, utc_timestamp


def test_missing_file_means_not_submitted(session_store: SessionStore) -> None:
    assert session_store.read() is None
    assert session_store.has_submitted_email() is False


def test_mark_submitted_round_trips(session_store: SessionStore) -> None:
    moment = datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc)
    session = session_store.mark_submitted(moment)
    assert session.has_submitted_email is True
    assert session.submission_timestamp == "2026-03-01T12:30:00.000Z"
    assert session_store.has_submitted_email() is True

    stored = json.loads(session_store.path.read_text(encoding="utf-8"))
    assert stored[SESSION_STORAGE_KEY] == {
        "hasSubmittedEmail": True,
        "submissionTimestamp": "2026-03-01T12:30:00.000Z",
    }


def test_malformed_json_means_not_submitted(session_store: SessionStore) -> None:
    session_store.path.parent.mkdir(parents=True, exist_ok=True)
    session_store.path.write_text("{not json", encoding="utf-8")
    assert session_store.has_submitted_email() is False


def test_string_encoded_entry_is_accepted(session_store: SessionStore) -> None:
    session_store.path.parent.mkdir(parents=True, exist_ok=True)
    entry = json.dumps({"hasSubmittedEmail": True, "submissionTimestamp": "x"})
    session_store.path.write_text(json.dumps({SESSION_STORAGE_KEY: entry}), encoding="utf-8")
    assert session_store.has_submitted_email() is True


def test_malformed_string_entry_means_not_submitted(session_store: SessionStore) -> None:
    session_store.path.parent.mkdir(parents=True, exist_ok=True)
    session_store.path.write_text(json.dumps({SESSION_STORAGE_KEY: "{oops"}), encoding="utf-8")
    assert session_store.has_submitted_email() is False


def test_non_true_flag_means_not_submitted(session_store: SessionStore) -> None:
    session_store.path.parent.mkdir(parents=True, exist_ok=True)
    session_store.path.write_text(
        json.dumps({SESSION_STORAGE_KEY: {"hasSubmittedEmail": "yes"}}), encoding="utf-8"
    )
    assert session_store.has_submitted_email() is False


def test_directory_in_place_of_file_means_not_submitted(session_store: SessionStore) -> None:
    session_store.path.mkdir(parents=True)
    assert session_store.has_submitted_email() is False


def test_other_keys_are_preserved(session_store: SessionStore) -> None:
    session_store.path.parent.mkdir(parents=True, exist_ok=True)
    session_store.path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    session_store.mark_submitted()
    stored = json.loads(session_store.path.read_text(encoding="utf-8"))
    assert stored["theme"] == "dark"


def test_clear_removes_flag(session_store: SessionStore) -> None:
    assert session_store.clear() is False
    session_store.mark_submitted()
    assert session_store.clear() is True
    assert session_store.has_submitted_email() is False


def test_utc_timestamp_uses_z_suffix() -> None:
    assert utc_timestamp(datetime(2026, 1, 2, 3, 4, 5, 6000, tzinfo=timezone.utc)) == "2026-01-02T03:04:05.006Z"

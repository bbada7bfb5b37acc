# -*- coding: utf-8 -*-
"""One-shot email capture workflow in front of the swipe queue."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from sneakerheart.constants import MSG_SUBMIT_FAILED
from sneakerheart.core.session_store import SessionStore, utc_timestamp
from sneakerheart.core.validation import validate_email
from sneakerheart.models.session import (
    IDLE,
    SUBMITTING,
    SUCCESS,
    VALIDATING,
    EmailEntry,
    SubmissionStatus,
    UserSession,
)

logger = logging.getLogger(__name__)


StatusCallback = Callable[[SubmissionStatus], None]


class EmailSink(Protocol):
    def insert_email(self, entry: EmailEntry) -> None: ...


class EmailGate:
    """Validate, send and remember a single email address.

    The network part (`deliver`) is split out so the GUI can run it on a worker
    thread between `begin` and `finish_success`/`finish_error`. `submit` runs
    the whole sequence inline.
    """

    def __init__(self, sink: EmailSink, store: SessionStore, user_agent: str) -> None:
        self.sink = sink
        self.store = store
        self.user_agent = user_agent
        self._status = IDLE
        self.status_changed: StatusCallback | None = None

    @property
    def status(self) -> SubmissionStatus:
        return self._status

    def needs_capture(self) -> bool:
        return not self.store.has_submitted_email()

    def edit(self) -> None:
        """Typing into the field clears a shown error."""
        if self._status.is_error:
            self._set_status(IDLE)

    def begin(self, raw_email: str) -> EmailEntry | None:
        """Validate and enter `submitting`. None when invalid or already in flight."""
        if self._status.is_submitting:
            logger.debug("Submit ignored: a submission is already in flight")
            return None

        self._set_status(VALIDATING)
        message = validate_email(raw_email)
        if message is not None:
            self._set_status(SubmissionStatus("error", message))
            return None

        self._set_status(SUBMITTING)
        return EmailEntry(email=raw_email.strip(), timestamp=utc_timestamp(), user_agent=self.user_agent)

    def deliver(self, entry: EmailEntry) -> None:
        self.sink.insert_email(entry)

    def finish_success(self) -> UserSession | None:
        try:
            session = self.store.mark_submitted()
        except OSError as exc:
            self.finish_error(exc)
            return None
        self._set_status(SUCCESS)
        return session

    def finish_error(self, exc: BaseException | str) -> None:
        logger.error("Email submission failed: %s", exc)
        self._set_status(SubmissionStatus("error", MSG_SUBMIT_FAILED))

    def submit(self, raw_email: str) -> bool:
        entry = self.begin(raw_email)
        if entry is None:
            return False
        try:
            self.deliver(entry)
        except Exception as exc:
            self.finish_error(exc)
            return False
        return self.finish_success() is not None

    def _set_status(self, status: SubmissionStatus) -> None:
        self._status = status
        if self.status_changed is not None:
            self.status_changed(status)

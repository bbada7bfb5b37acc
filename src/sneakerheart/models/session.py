# -*- coding: utf-8 -*-
"""Email gate session models."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class UserSession:
    """Durable flag written once the email capture succeeded."""

    has_submitted_email: bool
    submission_timestamp: str

    def to_json(self) -> dict[str, object]:
        return {
            "hasSubmittedEmail": self.has_submitted_email,
            "submissionTimestamp": self.submission_timestamp,
        }


@dataclass(frozen=True)
class EmailEntry:
    """Row inserted into the remote email sink."""

    email: str
    timestamp: str
    user_agent: str

    def to_row(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SubmissionStatus:
    """State of the email form: idle, validating, submitting, success or error."""

    kind: str = "idle"
    message: str = ""

    @property
    def is_submitting(self) -> bool:
        return self.kind == "submitting"

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


IDLE = SubmissionStatus("idle")
VALIDATING = SubmissionStatus("validating")
SUBMITTING = SubmissionStatus("submitting")
SUCCESS = SubmissionStatus("success")

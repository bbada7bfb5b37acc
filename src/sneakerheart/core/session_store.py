# -*- coding: utf-8 -*-
"""Device-local storage for the email gate flag."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from sneakerheart.constants import SESSION_STORAGE_KEY
from sneakerheart.models.session import UserSession
from sneakerheart.utils.file_utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)


def utc_timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a 'Z' suffix."""
    value = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SessionStore:
    """Read and write the 'has submitted email' flag in a small JSON file.

    Reading never raises: a missing, unreadable or malformed file means the
    user has not submitted yet.
    """

    def __init__(self, path: str | Path, key: str = SESSION_STORAGE_KEY) -> None:
        self.path = Path(path).expanduser()
        self.key = key

    def _read_document(self) -> dict[str, Any]:
        try:
            return read_json_file(self.path)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Failed to read session storage %s: %s", self.path, exc)
            return {}

    def read(self) -> UserSession | None:
        raw = self._read_document().get(self.key)
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except ValueError:
                logger.warning("Malformed session entry %r in %s", self.key, self.path)
                return None
        if not isinstance(raw, dict):
            return None
        return UserSession(
            has_submitted_email=raw.get("hasSubmittedEmail") is True,
            submission_timestamp=str(raw.get("submissionTimestamp", "")),
        )

    def has_submitted_email(self) -> bool:
        session = self.read()
        return session is not None and session.has_submitted_email

    def mark_submitted(self, moment: datetime | None = None) -> UserSession:
        """Persist the flag. Raises OSError when the file cannot be written."""
        session = UserSession(has_submitted_email=True, submission_timestamp=utc_timestamp(moment))
        document = self._read_document()
        document[self.key] = session.to_json()
        write_json_file(self.path, document)
        logger.info("Email submission flag stored in %s", self.path)
        return session

    def clear(self) -> bool:
        document = self._read_document()
        if self.key not in document:
            return False
        del document[self.key]
        write_json_file(self.path, document)
        return True

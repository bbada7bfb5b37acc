# -*- coding: utf-8 -*-
"""Email address validation for the capture form."""

from __future__ import annotations

import re

from sneakerheart.constants import (
    MAX_EMAIL_LENGTH,
    MSG_EMAIL_INVALID,
    MSG_EMAIL_REQUIRED,
    MSG_EMAIL_TOO_LONG,
)


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(raw: str) -> str | None:
    """Return a user-facing error message, or None when the address is usable.

    Checks run on the trimmed value in a fixed order: empty, too long, format.
    """
    trimmed = raw.strip()

    if not trimmed:
        return MSG_EMAIL_REQUIRED

    if len(trimmed) > MAX_EMAIL_LENGTH:
        return MSG_EMAIL_TOO_LONG

    if not EMAIL_PATTERN.match(trimmed):
        return MSG_EMAIL_INVALID

    return None

# -*- coding: utf-8 -*-
"""Insert captured emails into a hosted Supabase table over its REST API."""

from __future__ import annotations

import json
import logging
import platform
from urllib import error, parse, request

from sneakerheart.constants import APP_NAME, APP_VERSION
from sneakerheart.models.session import EmailEntry

logger = logging.getLogger(__name__)


class EmailSinkError(RuntimeError):
    """Raised for any failed insert: configuration, network, timeout or HTTP error."""


def client_identifier() -> str:
    """Stand-in for a browser user agent."""
    return f"{APP_NAME}/{APP_VERSION} ({platform.system()} {platform.release()}; Python {platform.python_version()})"


class SupabaseClient:
    """Thin PostgREST wrapper with a single insert operation."""

    def __init__(self, url: str = "", anon_key: str = "", table: str = "emails", timeout: float = 10.0) -> None:
        self.url = url.rstrip("/")
        self.anon_key = anon_key
        self.table = table
        self.timeout = float(timeout)

    @classmethod
    def from_settings(cls, settings: dict) -> "SupabaseClient":
        sink = settings.get("email_sink", {})
        anon_key = str(sink.get("anon_key", ""))
        if anon_key == "USE_ENV_FILE":
            anon_key = ""
        return cls(
            url=str(sink.get("url", "")),
            anon_key=anon_key,
            table=str(sink.get("table", "emails")),
            timeout=float(sink.get("timeout_seconds", 10.0)),
        )

    def is_configured(self) -> bool:
        return bool(self.url) and bool(self.anon_key)

    def insert_email(self, entry: EmailEntry) -> None:
        if not self.is_configured():
            raise EmailSinkError("Missing Supabase configuration. Set SUPABASE_URL and SUPABASE_ANON_KEY in .env")

        endpoint = f"{self.url}/rest/v1/{parse.quote(self.table, safe='')}"
        payload = json.dumps(entry.to_row()).encode("utf-8")
        try:
            req = request.Request(
                endpoint,
                data=payload,
                headers={
                    "apikey": self.anon_key,
                    "Authorization": f"Bearer {self.anon_key}",
                    "Content-Type": "application/json",
                    "Prefer": "return=minimal",
                },
                method="POST",
            )
            with request.urlopen(req, timeout=self.timeout) as response:
                status = int(getattr(response, "status", 201))
                if status >= 300:
                    raise EmailSinkError(f"Supabase insert returned HTTP {status}")
        except error.HTTPError as exc:
            body = exc.read().decode("utf-8", errors="ignore")
            raise EmailSinkError(f"Supabase error {exc.code}: {body[:200]}") from exc
        except (error.URLError, TimeoutError, OSError) as exc:
            raise EmailSinkError(f"Supabase request failed: {exc}") from exc
        except ValueError as exc:
            raise EmailSinkError(f"Invalid Supabase URL {self.url!r}: {exc}") from exc
        logger.info("Email stored in table %s", self.table)

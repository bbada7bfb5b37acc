# -*- coding: utf-8 -*-
"""Process-wide logging setup with one log file per app session."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

LOG_LEVEL_ENV = "SNEAKERHEART_LOG_LEVEL"


def level_from_env(name: str = LOG_LEVEL_ENV, default: int = logging.INFO) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def setup_session_logging(base_dir: str | Path, app_name: str) -> Path | None:
    """Configure root logging once per process and open a session log file.

    Returns the session log path, or None when the file could not be opened
    (console logging still works in that case).
    """
    root = logging.getLogger()
    if getattr(root, "_sneakerheart_logging_configured", False):
        return getattr(root, "_sneakerheart_session_log", None)

    level = level_from_env()
    root.setLevel(level)
    formatter = logging.Formatter(
        "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if not any(type(handler) is logging.StreamHandler for handler in root.handlers):
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        root.addHandler(console)

    logs_dir = Path(base_dir) / "logs"
    session_log_path: Path | None = logs_dir / f"{app_name.lower().replace(' ', '-')}-{datetime.now():%Y%m%d-%H%M%S}.log"
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("=== %s starting ===", app_name)
        root.info("Session log: %s", session_log_path)
    except OSError as e:
        root.error("Could not open session log in %s: %s", logs_dir, e)
        session_log_path = None

    root._sneakerheart_logging_configured = True  # type: ignore[attr-defined]
    root._sneakerheart_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path

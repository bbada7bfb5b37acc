# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import copy
import json
import os
import sys
from collections.abc import Callable
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _isolated_sink_env(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "SNEAKERHEART_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


SAMPLE_CATALOG = [
    {
        "name": "Dunk Low",
        "description": "Low top skate classic",
        "purchase_type": "Venta directa",
        "availability_type": "En stock",
        "images": ["/info/dunk-low.jpg"],
        "InfoBox-bg": "bg-[#788d42]",
    },
    {
        "name": "Dunk High",
        "description": "High top with padded collar",
        "purchase_type": "Preventa",
        "availability_type": "Pocas unidades",
        "images": ["/info/dunk-high.jpg", "/info/dunk-high-side.jpg"],
    },
    {
        "name": "Blazer Mid",
        "description": "Retro basketball silhouette",
        "purchase_type": "Venta directa",
        "availability_type": "En stock",
        "images": ["/info/blazer.jpg"],
    },
    {
        "name": "Janoski",
        "description": "Flexible low profile",
        "purchase_type": "Sorteo",
        "availability_type": "Edición limitada",
        "images": ["/info/janoski.jpg"],
    },
]


@pytest.fixture
def catalog_data() -> list[dict]:
    return copy.deepcopy(SAMPLE_CATALOG)


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: list[dict]) -> Path:
    path = tmp_path / "sneakers-data.json"
    path.write_text(json.dumps(catalog_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def sneakers(catalog_data: list[dict]):
    from sneakerheart.core.catalog import validate_catalog

    return validate_catalog(catalog_data)


@pytest.fixture
def default_config() -> dict:
    from sneakerheart.config import get_default_config

    return get_default_config()


@pytest.fixture
def session_store(tmp_path: Path):
    from sneakerheart.core.session_store import SessionStore

    return SessionStore(tmp_path / "storage" / "session.json")


class FakeSink:
    """Email sink that records entries and can be told to fail."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.entries: list = []

    def insert_email(self, entry) -> None:
        from sneakerheart.integrations.supabase_client import EmailSinkError

        if self.fail:
            raise EmailSinkError("service unavailable")
        self.entries.append(entry)


@pytest.fixture
def fake_sink() -> FakeSink:
    return FakeSink()


@pytest.fixture
def failing_sink() -> FakeSink:
    return FakeSink(fail=True)


class FakeScheduler:
    """Collect scheduled callbacks so tests decide when a timer fires."""

    def __init__(self) -> None:
        self.pending: list[tuple[int, Callable[[], None]]] = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.pending.append((delay_ms, callback))

    def fire_all(self) -> int:
        fired = 0
        while self.pending:
            _, callback = self.pending.pop(0)
            callback()
            fired += 1
        return fired


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app

# -*- coding: utf-8 -*-
"""JSON file helpers (UTF-8, atomic writes)."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def ensure_dir(path: str | Path) -> Path:
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_json(path: str | Path) -> Any:
    """Parse a JSON document of any shape."""
    return json.loads(Path(path).read_text(encoding="utf-8"))


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Parse a JSON document that must be an object. Raises ValueError otherwise."""
    data = read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write `data` next to the target and swap it in, so readers never see half a file."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    tmp_path = file_path.with_name(f".{file_path.name}.tmp")
    tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    os.replace(tmp_path, file_path)
    return file_path

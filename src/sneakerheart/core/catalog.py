# -*- coding: utf-8 -*-
"""Load and validate the fixed sneaker catalog."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sneakerheart.constants import DEFAULT_DATA_FILE, EXPECTED_ITEM_COUNT
from sneakerheart.models.sneaker import SneakerProfile
from sneakerheart.utils.file_utils import read_json

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("name", "description", "purchase_type", "availability_type")
COLOR_TOKEN_KEY = "InfoBox-bg"


class CatalogError(ValueError):
    """Raised when the catalog cannot be used. Fatal at startup."""


def default_data_file() -> Path:
    """Return the catalog shipped with the package."""
    return Path(__file__).resolve().parents[1] / "data" / DEFAULT_DATA_FILE


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_catalog(data: Any, expected_count: int = EXPECTED_ITEM_COUNT) -> tuple[SneakerProfile, ...]:
    """Check count and required fields, then build immutable profiles."""
    if not isinstance(data, list) or len(data) != expected_count:
        raise CatalogError(f"Catalog must contain exactly {expected_count} sneakers")

    profiles: list[SneakerProfile] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CatalogError(f"Invalid sneaker data at index {index}: expected an object")
        missing = [field for field in REQUIRED_TEXT_FIELDS if not _is_filled(entry.get(field))]
        images = entry.get("images")
        if not isinstance(images, list) or not images or not all(_is_filled(ref) for ref in images):
            missing.append("images")
        if missing:
            raise CatalogError(
                f"Invalid sneaker data at index {index}: missing required fields ({', '.join(missing)})"
            )

        color = entry.get(COLOR_TOKEN_KEY)
        profiles.append(
            SneakerProfile(
                name=entry["name"],
                description=entry["description"],
                purchase_type=entry["purchase_type"],
                availability_type=entry["availability_type"],
                images=tuple(images),
                info_box_bg=color if _is_filled(color) else None,
            )
        )
    return tuple(profiles)


def load_catalog(
    path: str | Path | None = None,
    expected_count: int = EXPECTED_ITEM_COUNT,
) -> tuple[SneakerProfile, ...]:
    """Read the catalog JSON array from disk and validate it."""
    data_path = Path(path) if path else default_data_file()
    try:
        data = read_json(data_path)
    except (OSError, ValueError) as exc:
        raise CatalogError(f"Cannot read catalog {data_path}: {exc}") from exc

    profiles = validate_catalog(data, expected_count=expected_count)
    logger.info("Catalog loaded from %s. Total sneakers: %d", data_path, len(profiles))
    return profiles


def resolve_image_path(ref: str, assets_dir: str | Path) -> Path:
    """Map a web-style reference such as '/info/a.jpg' to a file below assets_dir."""
    return Path(assets_dir) / ref.lstrip("/")

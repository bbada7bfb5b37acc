# -*- coding: utf-8 -*-
"""Tests for catalog loading and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sneakerheart.core.catalog import (
    CatalogError,
    default_data_file,
    load_catalog,
    resolve_image_path,
    validate_catalog,
)


def test_load_catalog_returns_four_profiles(catalog_file: Path) -> None:
    sneakers = load_catalog(catalog_file)
    assert len(sneakers) == 4
    assert sneakers[0].name == "Dunk Low"


def test_images_are_kept_in_order(catalog_file: Path) -> None:
    sneakers = load_catalog(catalog_file)
    assert sneakers[1].images == ("/info/dunk-high.jpg", "/info/dunk-high-side.jpg")
    assert sneakers[1].primary_image == "/info/dunk-high.jpg"


def test_color_token_is_optional(catalog_file: Path) -> None:
    sneakers = load_catalog(catalog_file)
    assert sneakers[0].info_box_bg == "bg-[#788d42]"
    assert sneakers[1].info_box_bg is None


def test_wrong_count_is_rejected(catalog_data: list[dict]) -> None:
    with pytest.raises(CatalogError, match="exactly 4"):
        validate_catalog(catalog_data[:3])


def test_non_list_is_rejected() -> None:
    with pytest.raises(CatalogError):
        validate_catalog({"sneakers": []})


@pytest.mark.parametrize("field", ["name", "description", "purchase_type", "availability_type"])
def test_missing_required_field_names_index(catalog_data: list[dict], field: str) -> None:
    catalog_data[2][field] = ""
    with pytest.raises(CatalogError, match="index 2"):
        validate_catalog(catalog_data)


def test_empty_image_list_is_rejected(catalog_data: list[dict]) -> None:
    catalog_data[3]["images"] = []
    with pytest.raises(CatalogError, match="images"):
        validate_catalog(catalog_data)


def test_unreadable_file_is_catalog_error(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(broken)


def test_missing_file_is_catalog_error(tmp_path: Path) -> None:
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "nope.json")


def test_expected_count_is_configurable(catalog_data: list[dict], tmp_path: Path) -> None:
    path = tmp_path / "two.json"
    path.write_text(json.dumps(catalog_data[:2]), encoding="utf-8")
    assert len(load_catalog(path, expected_count=2)) == 2


def test_packaged_catalog_is_valid() -> None:
    assert default_data_file().exists()
    assert len(load_catalog()) == 4


def test_profiles_are_immutable(catalog_file: Path) -> None:
    sneaker = load_catalog(catalog_file)[0]
    with pytest.raises(AttributeError):
        sneaker.name = "changed"  # type: ignore[misc]


def test_resolve_image_path_strips_leading_slash(tmp_path: Path) -> None:
    assert resolve_image_path("/info/a.jpg", tmp_path) == tmp_path / "info" / "a.jpg"
    assert resolve_image_path("b.png", tmp_path) == tmp_path / "b.png"

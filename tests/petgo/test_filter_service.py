"""Tests for the category filter applied to map pins."""

from __future__ import annotations

from petgo.schemas.place import Coordinate, PlaceCategory, PlacePin
from petgo.services.filter_service import (
    DEFAULT_ENABLED_CATEGORIES,
    enabled_categories,
    filter_pins,
)
from petgo.services.sample_data import make_sample_pins


def _pin(title: str, category: PlaceCategory) -> PlacePin:
    return PlacePin(
        title=title,
        coordinate=Coordinate(latitude=0.0, longitude=0.0),
        symbol=category.symbol,
        category=category,
    )


def test_empty_enabled_set_hides_everything() -> None:
    assert filter_pins(set(), make_sample_pins()) == []


def test_all_categories_keep_every_pin_in_order() -> None:
    pins = make_sample_pins()

    assert filter_pins(set(PlaceCategory), pins) == pins


def test_single_category_preserves_relative_order() -> None:
    cafe1 = _pin("cafe1", PlaceCategory.CAFE)
    park1 = _pin("park1", PlaceCategory.PARK)
    park2 = _pin("park2", PlaceCategory.PARK)

    assert filter_pins({PlaceCategory.PARK}, [cafe1, park1, park2]) == [park1, park2]


def test_default_toggles_enable_parks_cafes_and_vets() -> None:
    assert enabled_categories() == DEFAULT_ENABLED_CATEGORIES
    assert DEFAULT_ENABLED_CATEGORIES == {
        PlaceCategory.PARK,
        PlaceCategory.CAFE,
        PlaceCategory.VET,
    }


def test_toggles_map_to_categories() -> None:
    enabled = enabled_categories(
        parks=False, cafes=False, hotels=True, beaches=True, vets=False
    )

    assert enabled == {PlaceCategory.HOTEL, PlaceCategory.BEACH}


def test_default_filter_over_sample_pins() -> None:
    visible = filter_pins(DEFAULT_ENABLED_CATEGORIES, make_sample_pins())

    assert len(visible) == 18
    assert {pin.category for pin in visible} == DEFAULT_ENABLED_CATEGORIES

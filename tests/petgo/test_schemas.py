"""Validation rules of the place schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from petgo.schemas.place import Amenity, Coordinate, Place, PlaceCategory


@pytest.mark.parametrize(
    ("latitude", "longitude"),
    [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1), (0.0, -200.0)],
)
def test_coordinate_rejects_out_of_range(latitude: float, longitude: float) -> None:
    with pytest.raises(ValidationError):
        Coordinate(latitude=latitude, longitude=longitude)


def test_place_rejects_bad_rating_and_blank_title() -> None:
    coordinate = Coordinate(latitude=1.0, longitude=1.0)

    with pytest.raises(ValidationError):
        Place(title="Waikiki", category=PlaceCategory.BEACH, rating=5.5, coordinate=coordinate)
    with pytest.raises(ValidationError):
        Place(title="   ", category=PlaceCategory.BEACH, coordinate=coordinate)
    with pytest.raises(ValidationError):
        Place(title="Waikiki", category="Aquarium", coordinate=coordinate)


def test_place_identity_is_excluded_from_equality(cafe: Place) -> None:
    twin = Place(**cafe.model_dump())

    assert twin.id != cafe.id
    assert twin == cafe
    assert twin.dedup_key == ("Central Park Cafe", "5th Ave")


def test_place_is_immutable(cafe: Place) -> None:
    with pytest.raises(ValidationError):
        cafe.title = "Renamed"  # type: ignore[misc]


def test_category_accepts_display_value() -> None:
    place = Place(
        title="Sydney Vet Center",
        category="Vet Clinic",
        coordinate=Coordinate(latitude=-33.8688, longitude=151.2093),
        amenities=["leashFree"],
    )

    assert place.category is PlaceCategory.VET
    assert place.amenities == (Amenity.LEASH_FREE,)


def test_amenity_display_metadata() -> None:
    assert Amenity.LEASH_FREE.label == "Leash-Free Zone"
    assert Amenity.WATER_BOWLS.icon == "drop.fill"

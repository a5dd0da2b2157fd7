"""Unit tests for the place/row conversions."""

from __future__ import annotations

import uuid

from petgo.db.models import FavoritePlace
from petgo.schemas.place import Place, PlaceCategory
from petgo.services.favorites.mapping import place_to_record, record_to_place


def test_place_to_record_copies_scalars_and_generates_id(cafe: Place) -> None:
    record = place_to_record(cafe)

    assert isinstance(record.id, uuid.UUID)
    assert record.title == cafe.title
    assert record.category == "Cafe"
    assert record.address == "5th Ave"
    assert record.rating == 4.5
    assert record.reviews_count == 87
    assert record.latitude == cafe.coordinate.latitude
    assert record.longitude == cafe.coordinate.longitude
    assert record.phone == "(212) 555-0100"
    assert not hasattr(record, "amenities")


def test_place_to_record_ids_are_unique_per_call(cafe: Place) -> None:
    assert place_to_record(cafe).id != place_to_record(cafe).id


def test_place_to_record_accepts_explicit_id(cafe: Place) -> None:
    record_id = uuid.uuid4()

    assert place_to_record(cafe, record_id=record_id).id == record_id


def test_blank_optional_text_is_stored_as_null(vet: Place) -> None:
    record = place_to_record(vet)

    assert record.phone is None
    assert record.hours_text is None
    assert record.distance_text is None


def test_record_to_place_fills_missing_text_and_empty_amenities() -> None:
    record = FavoritePlace(
        id=uuid.uuid4(),
        title="Bondi Beach",
        category="Beach",
        address=None,
        rating=4.9,
        reviews_count=2048,
        latitude=-33.8908,
        longitude=151.2743,
        phone=None,
        hours_text=None,
        distance_text=None,
    )

    place = record_to_place(record)

    assert place.category is PlaceCategory.BEACH
    assert place.address == ""
    assert place.phone == ""
    assert place.amenities == ()
    assert place.coordinate.longitude == 151.2743


def test_round_trip_loses_only_amenities(cafe: Place) -> None:
    restored = record_to_place(place_to_record(cafe))

    assert restored != cafe
    assert restored == cafe.model_copy(update={"amenities": ()})

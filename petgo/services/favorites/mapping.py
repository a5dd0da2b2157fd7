"""Conversions between :class:`Place` and the persisted :class:`FavoritePlace` row.

Both directions are total. The round trip is lossy in two documented ways:

* amenities are never written, so a reloaded place always has ``amenities == ()``;
* optional text columns stored as ``NULL`` come back as empty strings.
"""

from __future__ import annotations

import uuid

from petgo.db.models import FavoritePlace
from petgo.schemas.place import Coordinate, Place, PlaceCategory


def _optional_text(value: str) -> str | None:
    return value if value else None


def place_to_record(place: Place, *, record_id: uuid.UUID | None = None) -> FavoritePlace:
    """Build a new, unsaved row from ``place``.

    A fresh UUID is generated unless ``record_id`` is given. ``place.amenities``
    is dropped here on purpose; the table has no column for it.
    """

    return FavoritePlace(
        id=record_id or uuid.uuid4(),
        title=place.title,
        category=place.category.value,
        address=place.address,
        rating=place.rating,
        reviews_count=place.reviews_count,
        latitude=place.coordinate.latitude,
        longitude=place.coordinate.longitude,
        phone=_optional_text(place.phone),
        hours_text=_optional_text(place.hours_text),
        distance_text=_optional_text(place.distance_text),
    )


def record_to_place(record: FavoritePlace) -> Place:
    """Rebuild an in-memory place from a stored row with no amenities."""

    return Place(
        title=record.title,
        category=PlaceCategory(record.category),
        rating=record.rating,
        reviews_count=record.reviews_count,
        coordinate=Coordinate(latitude=record.latitude, longitude=record.longitude),
        address=record.address or "",
        distance_text=record.distance_text or "",
        hours_text=record.hours_text or "",
        phone=record.phone or "",
        amenities=(),
    )


__all__ = ["place_to_record", "record_to_place"]

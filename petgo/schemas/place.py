"""Pydantic schemas describing places, pins and their enumerations."""

from __future__ import annotations

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaceCategory(str, Enum):
    """Closed set of place types shown on the map."""

    PARK = "Park"
    CAFE = "Cafe"
    HOTEL = "Hotel"
    BEACH = "Beach"
    VET = "Vet Clinic"

    @property
    def symbol(self) -> str:
        """Icon symbol used for map annotations of this category."""

        return _CATEGORY_SYMBOLS[self]


_CATEGORY_SYMBOLS: dict[PlaceCategory, str] = {
    PlaceCategory.PARK: "tree.fill",
    PlaceCategory.CAFE: "cup.and.saucer.fill",
    PlaceCategory.HOTEL: "bed.double.fill",
    PlaceCategory.BEACH: "figure.surfing",
    PlaceCategory.VET: "cross.case.fill",
}


class Amenity(str, Enum):
    """Pet-friendly features a place can advertise."""

    WATER_BOWLS = "waterBowls"
    OUTDOOR_SEATING = "outdoorSeating"
    LEASH_FREE = "leashFree"
    PET_MENU = "petMenu"

    @property
    def icon(self) -> str:
        return _AMENITY_DISPLAY[self][0]

    @property
    def label(self) -> str:
        return _AMENITY_DISPLAY[self][1]


_AMENITY_DISPLAY: dict[Amenity, tuple[str, str]] = {
    Amenity.WATER_BOWLS: ("drop.fill", "Water Bowls"),
    Amenity.OUTDOOR_SEATING: ("sun.max.fill", "Outdoor Seating"),
    Amenity.LEASH_FREE: ("figure.walk", "Leash-Free Zone"),
    Amenity.PET_MENU: ("fork.knife", "Pet Menu"),
}


class Coordinate(BaseModel):
    """WGS84 latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class Place(BaseModel):
    """A place shown on the map, in the details sheet and in favorites.

    Instances are immutable. ``id`` is regenerated for every construction and is
    excluded from equality, so two places built from the same stored row compare
    equal even though their identifiers differ.
    """

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, exclude=True)
    title: str = Field(..., min_length=1)
    category: PlaceCategory
    rating: float = Field(0.0, ge=0.0, le=5.0)
    reviews_count: int = Field(0, ge=0)
    coordinate: Coordinate
    address: str = ""
    distance_text: str = ""
    hours_text: str = ""
    phone: str = ""
    amenities: tuple[Amenity, ...] = ()

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Place title must not be blank")
        return cleaned

    @property
    def dedup_key(self) -> tuple[str, str]:
        """Natural identity of a favorite: the (title, address) pair."""

        return (self.title, self.address)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Place):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash((self.dedup_key, self.category, self.coordinate))


class PlacePin(BaseModel):
    """Map-display projection of a place. Never persisted."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str
    coordinate: Coordinate
    symbol: str
    category: PlaceCategory


__all__ = [
    "Amenity",
    "Coordinate",
    "Place",
    "PlaceCategory",
    "PlacePin",
]

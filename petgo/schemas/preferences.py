"""Schemas for the persisted settings screen state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from petgo.schemas.place import PlaceCategory


class UserPreferences(BaseModel):
    """Category toggles and appearance flag shown on the settings screen."""

    model_config = ConfigDict(frozen=True)

    filter_parks: bool = Field(True, description="Show parks on the map.")
    filter_cafes: bool = Field(True, description="Show cafes on the map.")
    filter_hotels: bool = Field(False, description="Show hotels on the map.")
    filter_beaches: bool = Field(False, description="Show beaches on the map.")
    filter_vets: bool = Field(True, description="Show vet clinics on the map.")
    dark_mode: bool = Field(False, description="Force the dark colour scheme.")

    @property
    def enabled_categories(self) -> frozenset[PlaceCategory]:
        """Categories whose toggle is switched on."""

        return frozenset(
            category
            for category, field_name in CATEGORY_FLAGS.items()
            if getattr(self, field_name)
        )


CATEGORY_FLAGS: dict[PlaceCategory, str] = {
    PlaceCategory.PARK: "filter_parks",
    PlaceCategory.CAFE: "filter_cafes",
    PlaceCategory.HOTEL: "filter_hotels",
    PlaceCategory.BEACH: "filter_beaches",
    PlaceCategory.VET: "filter_vets",
}
"""Maps each category to the preference flag that enables it."""


__all__ = ["CATEGORY_FLAGS", "UserPreferences"]

"""Category filtering for the map pins."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from petgo.schemas.place import PlaceCategory, PlacePin
from petgo.schemas.preferences import UserPreferences

DEFAULT_ENABLED_CATEGORIES: frozenset[PlaceCategory] = frozenset(
    {PlaceCategory.PARK, PlaceCategory.CAFE, PlaceCategory.VET}
)


def enabled_categories(
    *,
    parks: bool = True,
    cafes: bool = True,
    hotels: bool = False,
    beaches: bool = False,
    vets: bool = True,
) -> frozenset[PlaceCategory]:
    """Build the enabled-category set from the five settings toggles."""

    return UserPreferences(
        filter_parks=parks,
        filter_cafes=cafes,
        filter_hotels=hotels,
        filter_beaches=beaches,
        filter_vets=vets,
    ).enabled_categories


def filter_pins(
    enabled: Collection[PlaceCategory],
    pins: Iterable[PlacePin],
) -> list[PlacePin]:
    """Return the pins whose category is enabled, preserving input order."""

    return [pin for pin in pins if pin.category in enabled]


__all__ = ["DEFAULT_ENABLED_CATEGORIES", "enabled_categories", "filter_pins"]

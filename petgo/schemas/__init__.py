from .place import Amenity, Coordinate, Place, PlaceCategory, PlacePin
from .preferences import CATEGORY_FLAGS, UserPreferences

__all__ = [
    "Amenity",
    "CATEGORY_FLAGS",
    "Coordinate",
    "Place",
    "PlaceCategory",
    "PlacePin",
    "UserPreferences",
]

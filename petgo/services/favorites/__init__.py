"""Favorites domain components split by responsibility.

This package isolates database statements from the pure row conversions and the
text search used by the saved-places screen.
"""

from .mapping import place_to_record, record_to_place
from .persistence import FavoritesPersistence
from .search import search_places

__all__ = [
    "FavoritesPersistence",
    "place_to_record",
    "record_to_place",
    "search_places",
]

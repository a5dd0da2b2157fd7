"""Tests for the saved-places text search helper."""

from __future__ import annotations

from petgo.schemas.place import Place
from petgo.services.favorites.search import search_places


def test_blank_query_returns_everything(cafe: Place, vet: Place) -> None:
    assert search_places([cafe, vet], None) == [cafe, vet]
    assert search_places([cafe, vet], "   ") == [cafe, vet]


def test_matches_title_address_or_category(cafe: Place, vet: Place) -> None:
    assert search_places([cafe, vet], "central") == [cafe]
    assert search_places([cafe, vet], "5TH") == [cafe]
    assert search_places([cafe, vet], "vet clinic") == [vet]


def test_non_blank_query_is_matched_as_typed(cafe: Place, vet: Place) -> None:
    assert search_places([cafe, vet], " Cafe") == [cafe]
    assert search_places([cafe, vet], " central") == []


def test_no_match_returns_empty_list(cafe: Place, vet: Place) -> None:
    assert search_places([cafe, vet], "aquarium") == []

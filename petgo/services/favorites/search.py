"""Text search over the cached favorites list."""

from __future__ import annotations

from collections.abc import Iterable

from petgo.schemas.place import Place


def search_places(places: Iterable[Place], query: str | None) -> list[Place]:
    """Return places whose title, address or category contains ``query``.

    Matching is case-insensitive and preserves input order. A blank query
    returns every place. Surrounding whitespace only decides blankness; a
    non-blank query is matched as typed.
    """

    if query is None or not query.strip():
        return list(places)

    needle = query.casefold()
    return [
        place
        for place in places
        if needle in place.title.casefold()
        or needle in place.address.casefold()
        or needle in place.category.value.casefold()
    ]


__all__ = ["search_places"]

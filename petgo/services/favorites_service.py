"""Favorites store keeping an in-memory list in sync with the local database.

Persistence-oriented operations delegated to :class:`FavoritesPersistence`:
* ``fetch_all`` - the query behind :meth:`FavoritesStore.load`.
* ``insert``/``delete_matching`` - staged mutations used by ``add`` and ``remove``.
* ``commit``/``rollback`` - transaction control owned by the store.

Row conversion lives in :mod:`petgo.services.favorites.mapping` and text search
in :mod:`petgo.services.favorites.search`.

Every mutation persists and then reloads the cache, whether or not the commit
succeeded, so ``items`` always reflects what the database actually holds.
Storage errors never propagate; they are logged and returned as a failed
:class:`StoreResult`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from petgo.db.connection import session_scope
from petgo.db.models import FavoritePlace
from petgo.errors import FetchError, PersistError
from petgo.schemas.place import Place
from petgo.services.favorites import FavoritesPersistence, record_to_place, search_places
from petgo.services.types import StoreResult

logger = logging.getLogger(__name__)


class FavoritesStore:
    """CRUD over saved places keyed by their (title, address) pair.

    ``add`` does not check for an existing favorite unless the store was built
    with ``dedupe_on_add=True``; callers that want toggle semantics should use
    :meth:`toggle` or check :meth:`contains` first.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        dedupe_on_add: bool = False,
    ) -> None:
        self._session_factory = session_factory
        self._dedupe_on_add = dedupe_on_add
        self._items: tuple[Place, ...] = ()
        self._lock = threading.RLock()

    @property
    def items(self) -> tuple[Place, ...]:
        """Snapshot of the cached favorites."""

        return self._items

    @property
    def dedupe_on_add(self) -> bool:
        return self._dedupe_on_add

    def load(self) -> StoreResult:
        """Replace the cache with every stored favorite.

        On failure the cache is cleared and the error is logged and returned.
        """

        with self._lock:
            try:
                with session_scope(self._session_factory) as session:
                    records = FavoritesPersistence(session).fetch_all()
                    places = self._records_to_places(records)
            except SQLAlchemyError as exc:
                logger.error(f"Favorites fetch failed: {exc}")
                self._items = ()
                return StoreResult.failure(
                    FetchError("Unable to fetch favorites", cause=exc)
                )

            self._items = tuple(places)
            logger.debug("Loaded %d favorites", len(self._items))
            return StoreResult.success()

    def contains(self, place: Place) -> bool:
        key = place.dedup_key
        return any(item.dedup_key == key for item in self._items)

    def add(self, place: Place) -> StoreResult:
        """Insert ``place`` as a new row, persist and reload."""

        with self._lock:
            if self._dedupe_on_add and self.contains(place):
                logger.debug("Skipping duplicate favorite %r", place.dedup_key)
                return StoreResult.success()

            return self._mutate("add", place, lambda persistence: persistence.insert(place))

    def remove(self, place: Place) -> StoreResult:
        """Delete every row matching ``place``'s (title, address), persist and reload.

        Removing a place that is not stored is a successful no-op.
        """

        with self._lock:
            return self._mutate(
                "remove", place, lambda persistence: persistence.delete_matching(place)
            )

    def toggle(self, place: Place) -> StoreResult:
        with self._lock:
            if self.contains(place):
                return self.remove(place)
            return self.add(place)

    def search(self, query: str | None) -> list[Place]:
        """Filter cached favorites by title, address or category text."""

        return search_places(self._items, query)

    def _mutate(
        self,
        operation: str,
        place: Place,
        stage: Callable[[FavoritesPersistence], object],
    ) -> StoreResult:
        persisted = self._persist(operation, place, stage)
        loaded = self.load()
        if not persisted.ok:
            return persisted
        return loaded

    def _persist(
        self,
        operation: str,
        place: Place,
        stage: Callable[[FavoritesPersistence], object],
    ) -> StoreResult:
        with self._session_factory() as session:
            persistence = FavoritesPersistence(session)
            try:
                stage(persistence)
                persistence.commit()
            except SQLAlchemyError as exc:
                persistence.rollback()
                logger.error(
                    f"Favorites {operation} failed for {place.title!r}: {exc}"
                )
                return StoreResult.failure(
                    PersistError(f"Unable to {operation} favorite", cause=exc)
                )

        logger.info("Favorite %s: %r", operation, place.dedup_key)
        return StoreResult.success()

    @staticmethod
    def _records_to_places(records: Sequence[FavoritePlace]) -> list[Place]:
        places: list[Place] = []
        for record in records:
            try:
                places.append(record_to_place(record))
            except (ValidationError, ValueError) as exc:
                logger.warning(f"Skipping unreadable favorite row {record.id}: {exc}")
        return places


__all__ = ["FavoritesStore"]

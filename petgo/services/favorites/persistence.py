"""Database-oriented helpers for the favorites table."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from petgo.db.models import FavoritePlace
from petgo.schemas.place import Place
from petgo.services.favorites.mapping import place_to_record


class FavoritesPersistence:
    """Encapsulates the SQLAlchemy statements required by the favorites store.

    None of the methods commit. The caller owns the transaction so that a failed
    commit can be told apart from a failed query.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def fetch_all(self) -> Sequence[FavoritePlace]:
        """Return every stored favorite ordered by title, then address."""

        query = select(FavoritePlace).order_by(FavoritePlace.title, FavoritePlace.address)
        return self._session.execute(query).scalars().all()

    def insert(self, place: Place) -> FavoritePlace:
        """Stage a new row for ``place`` without checking for duplicates."""

        record = place_to_record(place)
        self._session.add(record)
        return record

    def delete_matching(self, place: Place) -> int:
        """Stage deletion of every row sharing ``place``'s (title, address) pair.

        An empty address also matches rows whose address is ``NULL``.
        """

        address_clause = FavoritePlace.address == place.address
        if not place.address:
            address_clause = or_(address_clause, FavoritePlace.address.is_(None))

        statement = delete(FavoritePlace).where(
            FavoritePlace.title == place.title,
            address_clause,
        )
        result = self._session.execute(statement)
        return result.rowcount or 0

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()

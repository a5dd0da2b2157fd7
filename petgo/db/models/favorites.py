"""SQLAlchemy ORM model for places the user saved as favorites.

One row per saved place. The stored ``id`` is a fresh UUID generated when the
row is inserted and is never used for lookups: a favorite is identified by its
``(title, address)`` pair, which is deliberately *not* a unique constraint so
that repeated inserts of the same place remain observable.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Float, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


class FavoritePlace(Base):
    """Persisted snapshot of a place's scalar fields."""

    __tablename__ = "favorite_places"
    __table_args__ = (Index("ix_favorite_places_title_address", "title", "address"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        doc="Generated at insert time; stored but not used as a lookup key.",
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        doc="Display value of the place category (e.g. 'Vet Clinic').",
    )
    address: Mapped[str | None] = mapped_column(String(512), nullable=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    reviews_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    hours_text: Mapped[str | None] = mapped_column(String(255), nullable=True)
    distance_text: Mapped[str | None] = mapped_column(String(255), nullable=True)

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Preference(Base):
    """Key/value row backing the settings screen toggles."""

    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)


# Imported late to avoid circular dependency with favorites module.
from .favorites import FavoritePlace  # noqa: E402

__all__ = [
    "Base",
    "FavoritePlace",
    "Preference",
]

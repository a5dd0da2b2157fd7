"""Key/value persistence for the settings screen."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from petgo.db.connection import session_scope
from petgo.db.models import Preference
from petgo.errors import PersistError
from petgo.schemas.place import PlaceCategory
from petgo.schemas.preferences import CATEGORY_FLAGS, UserPreferences
from petgo.services.types import StoreResult

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _encode(value: bool) -> str:
    return "true" if value else "false"


def _decode(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


class PreferencesStore:
    """Reads and writes :class:`UserPreferences` one row per field."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def read(self) -> UserPreferences:
        """Return stored preferences, using defaults for anything missing."""

        try:
            with session_scope(self._session_factory) as session:
                rows = session.execute(select(Preference)).scalars().all()
                stored = {row.key: row.value for row in rows}
        except SQLAlchemyError as exc:
            logger.error(f"Preferences fetch failed, using defaults: {exc}")
            return UserPreferences()

        known = {
            key: _decode(value)
            for key, value in stored.items()
            if key in UserPreferences.model_fields
        }
        return UserPreferences(**known)

    def write(self, preferences: UserPreferences) -> StoreResult:
        with self._session_factory() as session:
            try:
                for key, value in preferences.model_dump().items():
                    session.merge(Preference(key=key, value=_encode(value)))
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error(f"Preferences persist failed: {exc}")
                return StoreResult.failure(
                    PersistError("Unable to save preferences", cause=exc)
                )
        return StoreResult.success()

    def set_category(self, category: PlaceCategory, enabled: bool) -> UserPreferences:
        """Switch one category toggle and return the preferences now in effect."""

        return self._update(**{CATEGORY_FLAGS[category]: enabled})

    def set_dark_mode(self, enabled: bool) -> UserPreferences:
        return self._update(dark_mode=enabled)

    def _update(self, **changes: bool) -> UserPreferences:
        updated = self.read().model_copy(update=changes)
        if not self.write(updated):
            return self.read()
        return updated


__all__ = ["PreferencesStore"]

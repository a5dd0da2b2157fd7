"""Application wiring for the PetGo core.

``PetGoApp.bootstrap`` is the single entry point a host (mobile shell, desktop
prototype or test) uses to obtain ready-to-use stores. Failing to open the
database raises :class:`StoreInitializationError` and must stop the host.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from petgo.db.connection import (
    create_engine,
    create_session_factory,
    init_database,
    sanitize_database_url,
)
from petgo.errors import StoreInitializationError
from petgo.schemas.place import PlacePin
from petgo.services.favorites_service import FavoritesStore
from petgo.services.filter_service import filter_pins
from petgo.services.preferences_service import PreferencesStore
from petgo.services.sample_data import make_sample_pins
from petgo.settings import LOG_FORMAT, AppSettings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(active_settings: AppSettings | None = None) -> None:
    """Install the root logging configuration used across the package."""

    resolved = active_settings or get_settings()
    logging.basicConfig(level=resolved.log_level_numeric, format=LOG_FORMAT)


def _validate_environment(*, active_settings: AppSettings | None = None) -> None:
    """Log warnings for optional configuration that was left unset."""

    resolved = active_settings or get_settings()
    warnings = resolved.optional_config_warnings()

    if warnings:
        logger.warning("=" * 60)
        logger.warning("Environment Configuration Warnings:")
        for warning in warnings:
            logger.warning(f"  • {warning}")
        logger.warning("=" * 60)


def validate_environment() -> None:
    """Public wrapper so host shells can trigger configuration validation."""

    _validate_environment()


@dataclass
class PetGoApp:
    """Explicitly constructed container holding the stores for one process."""

    settings: AppSettings
    engine: Engine
    session_factory: sessionmaker[Session]
    favorites: FavoritesStore
    preferences: PreferencesStore
    pins: list[PlacePin] = field(default_factory=make_sample_pins)

    @classmethod
    def bootstrap(cls, settings: AppSettings | None = None) -> PetGoApp:
        """Open the database, build the stores and load cached favorites."""

        active_settings = settings or get_settings()
        configure_logging(active_settings)
        _validate_environment(active_settings=active_settings)

        url = active_settings.resolved_database_url
        logger.info(
            "Opening %s database at %s",
            active_settings.database_type,
            sanitize_database_url(url),
        )
        try:
            engine = create_engine(active_settings)
        except StoreInitializationError:
            logger.critical("Favorites database could not be opened; aborting startup")
            raise

        try:
            init_database(engine)
        except StoreInitializationError:
            engine.dispose()
            logger.critical("Favorites database could not be initialised; aborting startup")
            raise

        session_factory = create_session_factory(engine)
        favorites = FavoritesStore(
            session_factory,
            dedupe_on_add=active_settings.favorites_dedupe_on_add,
        )
        favorites.load()

        return cls(
            settings=active_settings,
            engine=engine,
            session_factory=session_factory,
            favorites=favorites,
            preferences=PreferencesStore(session_factory),
        )

    def visible_pins(self) -> list[PlacePin]:
        """Pins allowed by the current category toggles, recomputed on every call."""

        return filter_pins(self.preferences.read().enabled_categories, self.pins)

    def close(self) -> None:
        self.engine.dispose()


__all__ = [
    "PetGoApp",
    "configure_logging",
    "validate_environment",
]

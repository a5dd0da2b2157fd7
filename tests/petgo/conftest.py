"""Shared fixtures providing an in-memory favorites database."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from petgo.db.connection import create_engine, create_session_factory, init_database
from petgo.schemas.place import Amenity, Coordinate, Place, PlaceCategory
from petgo.services.favorites_service import FavoritesStore
from petgo.settings import IN_MEMORY_SQLITE_DATABASE_URL, AppSettings


@pytest.fixture
def settings() -> AppSettings:
    """Settings pointing at a throwaway in-memory SQLite database."""

    return AppSettings(database_url=IN_MEMORY_SQLITE_DATABASE_URL)


@pytest.fixture
def engine(settings: AppSettings) -> Iterator[Engine]:
    engine = create_engine(settings)
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)


@pytest.fixture
def store(session_factory: sessionmaker[Session]) -> FavoritesStore:
    favorites = FavoritesStore(session_factory)
    favorites.load()
    return favorites


@pytest.fixture
def cafe() -> Place:
    return Place(
        title="Central Park Cafe",
        category=PlaceCategory.CAFE,
        rating=4.5,
        reviews_count=87,
        coordinate=Coordinate(latitude=40.7812, longitude=-73.9665),
        address="5th Ave",
        distance_text="0.4 miles",
        hours_text="7am - 7pm",
        phone="(212) 555-0100",
        amenities=(Amenity.WATER_BOWLS, Amenity.OUTDOOR_SEATING),
    )


@pytest.fixture
def vet() -> Place:
    return Place(
        title="Toronto Vet",
        category=PlaceCategory.VET,
        rating=4.8,
        reviews_count=12,
        coordinate=Coordinate(latitude=43.6532, longitude=-79.3832),
        address="10 King St W",
    )

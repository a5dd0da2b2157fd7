from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import Engine, create_engine as sa_create_engine, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from petgo.db.models import Base
from petgo.errors import StoreInitializationError
from petgo.settings import AppSettings, get_settings

logger = logging.getLogger(__name__)


def sanitize_database_url(url: str) -> str:
    """Hide the password portion of ``url`` so it can be logged safely."""

    try:
        parsed = make_url(url)
    except ArgumentError:
        return url

    # An unescaped "@" in the password leaves the rest of it in the host.
    if parsed.password is not None and parsed.host and "@" in parsed.host:
        spilled, _, host = parsed.host.rpartition("@")
        parsed = parsed.set(password=f"{parsed.password}@{spilled}", host=host)

    return parsed.render_as_string(hide_password=True)


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""

    parsed = make_url(url)
    database = parsed.database
    if not database or database == ":memory:":
        return
    Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def create_engine(settings: AppSettings | None = None) -> Engine:
    """Create the SQLAlchemy engine for the configured database.

    In-memory SQLite databases are bound to a single shared connection so every
    session sees the same tables. Any failure to build the engine is reported as
    :class:`StoreInitializationError`.
    """

    active_settings = settings or get_settings()
    url = active_settings.resolved_database_url

    kwargs: dict[str, object] = {"echo": active_settings.sql_echo, "future": True}
    try:
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if make_url(url).database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
            else:
                _ensure_sqlite_directory(url)
        engine = sa_create_engine(url, **kwargs)
    except (ArgumentError, SQLAlchemyError, ImportError, OSError) as exc:
        raise StoreInitializationError(
            f"Unable to configure database at {sanitize_database_url(url)}",
            cause=exc,
        ) from exc

    logger.debug("Created engine for %s", sanitize_database_url(url))
    return engine


def init_database(engine: Engine) -> None:
    """Create any missing tables and verify the database is reachable."""

    try:
        Base.metadata.create_all(engine)
        existing = set(inspect(engine).get_table_names())
    except SQLAlchemyError as exc:
        raise StoreInitializationError(
            f"Unable to initialise database at {sanitize_database_url(str(engine.url))}",
            cause=exc,
        ) from exc

    missing = set(Base.metadata.tables) - existing
    if missing:
        raise StoreInitializationError(
            f"Database is missing required tables: {', '.join(sorted(missing))}"
        )
    logger.info("Database ready (%s)", ", ".join(sorted(existing)))


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False, class_=Session)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """Yield a session that is rolled back when the block raises.

    Committing is left to the caller so that persistence failures can be
    reported separately from query failures.
    """

    with factory() as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise


__all__ = [
    "create_engine",
    "create_session_factory",
    "init_database",
    "sanitize_database_url",
    "session_scope",
]

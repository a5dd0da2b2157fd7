"""Exception hierarchy surfaced by the local storage layer."""

from __future__ import annotations


class FavoritesStoreError(Exception):
    """Base class for storage failures reported by the PetGo stores."""

    operation: str = "storage"

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StoreInitializationError(FavoritesStoreError):
    """Raised when the backing database cannot be opened or initialised.

    This is the only storage failure that propagates: the host application must
    stop instead of serving requests against a missing store.
    """

    operation = "initialize"


class FetchError(FavoritesStoreError):
    """Reading rows from the backing database failed."""

    operation = "fetch"


class PersistError(FavoritesStoreError):
    """Committing pending changes to the backing database failed."""

    operation = "persist"


__all__ = [
    "FavoritesStoreError",
    "FetchError",
    "PersistError",
    "StoreInitializationError",
]

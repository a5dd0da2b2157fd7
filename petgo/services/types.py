"""Shared result types returned by the storage services."""

from __future__ import annotations

from dataclasses import dataclass

from petgo.errors import FavoritesStoreError


@dataclass(frozen=True, slots=True)
class StoreResult:
    """Outcome of a store operation.

    Storage failures are recovered inside the stores and reported here so the
    host application decides what, if anything, the user sees.
    """

    ok: bool
    error: FavoritesStoreError | None = None

    @classmethod
    def success(cls) -> StoreResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: FavoritesStoreError) -> StoreResult:
        return cls(ok=False, error=error)

    def __bool__(self) -> bool:
        return self.ok


__all__ = ["StoreResult"]

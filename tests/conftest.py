"""Pytest configuration helpers for the PetGo project.

``pytest`` imports ``tests.conftest`` automatically; importing the package
ensures the repository root is on ``sys.path`` before test modules import
application code.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from tests import _ensure_repo_on_path


def pytest_configure(config: pytest.Config) -> None:
    """Hook executed by pytest prior to running any tests."""

    _ensure_repo_on_path()


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Drop the cached settings so environment tweaks never leak between tests."""

    from petgo.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

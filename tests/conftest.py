"""
Root pytest configuration.

Re-exports the shared database fixtures so every test module can request
``db_session`` (in-memory SQLite) or ``pg_session`` (Testcontainers).
"""

import pytest

from tests.shared.fixtures.database import (
    db_session,
    pg_session,
    postgres_container,
    postgres_url,
    sqlite_engine,
)
from tests.shared.fixtures.factories import TestUserFactory
from userhub.config import get_settings
from userhub.domain.user import User

__all__ = [
    "db_session",
    "pg_session",
    "postgres_container",
    "postgres_url",
    "sqlite_engine",
]


@pytest.fixture
def new_user() -> User:
    """An unsaved, valid user."""
    return TestUserFactory.new()


@pytest.fixture
def stored_user() -> User:
    """A user as returned by storage."""
    return TestUserFactory.stored()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; isolate tests that touch the env."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

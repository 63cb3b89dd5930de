"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from userhub.config import Settings
from userhub.presentation.api.app import API_V1_PREFIX, create_app


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def users_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/users"


@pytest.fixture
def api_settings() -> Settings:
    """Test settings backed by an in-memory SQLite database."""
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        api_debug=True,
        log_level="WARNING",
    )


@pytest.fixture
def app(api_settings):
    return create_app(settings=api_settings)


@pytest.fixture
def test_client(app):
    """Client with the app lifespan running (schema created on startup)."""
    with TestClient(app) as client:
        yield client

"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from provider_schema.app import create_app
from provider_schema.config import Settings, get_settings


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from the host environment and any .env file."""
    for key in ("PROVIDER_SCHEMA_DEBUG", "PROVIDER_SCHEMA_LOG_LEVEL", "PROVIDER_SCHEMA_SCHEMA_PREFIX"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client

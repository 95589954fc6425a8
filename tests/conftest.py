# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from hal_greeting.core.config import Settings
from hal_greeting.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    # keep a developer's .env out of the tests
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client

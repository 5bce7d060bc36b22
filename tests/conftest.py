"""
tests/conftest.py -- Shared test fixtures for PizzaStore tests.

This module provides:
  - make_settings(): Settings with a fixed signing key, no .env lookup
  - dev_settings / prod_settings: Development and Production configurations
  - api_client: Development TestClient plus an admin bearer token
  - prod_client: Production TestClient (no admin bypass, no docs UI)

Design: every client is built through create_app(settings), so tests never
depend on the process environment or the get_settings() cache. Entering the
TestClient context runs the lifespan, which gives each client fresh, empty
stores.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from auth.tokens import create_access_token
from core.config import JwtConfig, Settings

TEST_SECRET = "test-secret-key-that-is-at-least-32-chars"


def make_settings(environment: str) -> Settings:
    """Build Settings without reading .env so local config cannot leak into tests."""
    jwt = JwtConfig(secret_key=TEST_SECRET, issuer="PizzaStoreTests", audience="PizzaStoreTestClients")
    return Settings(_env_file=None, environment=environment, jwt=jwt)


@pytest.fixture(scope="module")
def dev_settings() -> Settings:
    return make_settings("Development")


@pytest.fixture(scope="module")
def prod_settings() -> Settings:
    return make_settings("Production")


@pytest.fixture(scope="module")
def api_client(dev_settings: Settings) -> Generator[tuple[TestClient, str], None, None]:
    """Yield (client, token) for API integration tests in Development mode.

    The token is obtained through the real admin/admin login so the fixture
    also exercises the development bypass end to end.
    """
    app = create_app(dev_settings)
    with TestClient(app, raise_server_exceptions=True) as client:
        resp = client.post("/login", json={"username": "admin", "password": "admin"})
        assert resp.status_code == 200, resp.text
        yield client, resp.text


@pytest.fixture(scope="module")
def prod_client(prod_settings: Settings) -> Generator[tuple[TestClient, str], None, None]:
    """Yield (client, token) for a Production-mode app.

    No login can succeed against an empty store in Production, so the token
    is minted directly with the app's JwtConfig.
    """
    app = create_app(prod_settings)
    token = create_access_token(prod_settings.jwt, subject="ops")
    with TestClient(app, raise_server_exceptions=True) as client:
        yield client, token

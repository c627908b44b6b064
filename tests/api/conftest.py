"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from travelrec.config import Settings
from travelrec.interfaces.api.app import create_app
from travelrec.interfaces.api.middleware.auth import AuthMiddleware
from travelrec.interfaces.api.middleware.cors import CORSMiddleware
from travelrec.main import build_resources

from tests.conftest import TEST_SECRET


@pytest.fixture
def settings() -> Settings:
    return Settings(token_secret=TEST_SECRET, bcrypt_rounds=4, cors_origins="*")


@pytest.fixture
def wiring(world, settings):
    """Resources wired around the seeded in-memory world."""
    return build_resources(world.factory, settings)


@pytest.fixture
def app(wiring):
    """Falcon ASGI app with every route and the real auth middleware."""
    resources, tokens = wiring
    return create_app(resources, middleware=[CORSMiddleware(["*"]), AuthMiddleware(tokens)])


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers(world, wiring):
    """Builds `auth-token` headers for the seeded users."""
    _, tokens = wiring

    def _headers(user) -> dict[str, str]:
        return {"auth-token": tokens.issue(user)}

    return _headers

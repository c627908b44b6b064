"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from travelrec.interfaces.api.resources.health import HealthResource, WelcomeResource


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    app = App()
    health = HealthResource()
    app.add_route("/api", WelcomeResource())
    app.add_route("/api/health", health)
    app.add_route("/api/health/ready", health, suffix="ready")
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /api/health returns 200."""
    result = client.simulate_get("/api/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /api/health/ready returns 200."""
    result = client.simulate_get("/api/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_welcome_text(client: TestClient) -> None:
    result = client.simulate_get("/api")
    assert result.status_code == 200
    assert result.text == "Hello Travelers!"

"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from jenkins_rbac.interfaces.api.resources.health import HealthResource


def _client(jenkins_url: str) -> TestClient:
    app = App()
    health = HealthResource(jenkins_url)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    return _client("https://jenkins.example.com")


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 with a Jenkins URL configured."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"
    assert result.json["jenkins_url"] == "https://jenkins.example.com"


def test_health_not_ready_without_jenkins_url() -> None:
    result = _client("").simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unconfigured"

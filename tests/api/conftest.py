"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from jenkins_rbac.config import Settings
from jenkins_rbac.main import create_jenkins_rbac_app

from tests.conftest import JENKINS_URL


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jenkins_url=JENKINS_URL,
        jenkins_username="admin",
        jenkins_api_token="api-token",
        _env_file=None,
    )


@pytest.fixture
def app(settings, fake_jenkins):
    """Falcon ASGI app wired to the stub Jenkins."""
    return create_jenkins_rbac_app(settings, transport=fake_jenkins.transport())


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)

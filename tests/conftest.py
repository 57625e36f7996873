"""Pytest fixtures for jenkins-rbac tests."""

from __future__ import annotations

import re

import httpx
import pytest

from jenkins_rbac.domain.exceptions import JenkinsRbacError
from jenkins_rbac.domain.value_objects import EndpointVariant, RoleCategory
from jenkins_rbac.infrastructure.jenkins.role_strategy_client import RoleStrategyClient

JENKINS_URL = "https://jenkins.example.com"


# --- Fake gateway ---


class FakeRoleGateway:
    """In-memory role gateway recording every call."""

    def __init__(self) -> None:
        self.listings: dict[RoleCategory, dict[str, list[str]]] = {
            category: {} for category in RoleCategory
        }
        self.calls: list[tuple[str, RoleCategory, str | None, str | None]] = []
        self._failures: dict[tuple[RoleCategory, str], JenkinsRbacError] = {}

    def add_role(self, category: RoleCategory, role_name: str, *holders: str) -> None:
        """Helper to seed a role for tests."""
        self.listings[category][role_name] = list(holders)

    def fail_on(self, category: RoleCategory, role_name: str, error: JenkinsRbacError) -> None:
        """Make assign/unassign of this role raise error."""
        self._failures[(category, role_name)] = error

    async def assign_role(self, category: RoleCategory, role_name: str, user_id: str) -> None:
        self.calls.append(("assign", category, role_name, user_id))
        self._maybe_fail(category, role_name)
        holders = self.listings[category].setdefault(role_name, [])
        if user_id not in holders:
            holders.append(user_id)

    async def unassign_role(self, category: RoleCategory, role_name: str, user_id: str) -> None:
        self.calls.append(("unassign", category, role_name, user_id))
        self._maybe_fail(category, role_name)
        holders = self.listings[category].get(role_name, [])
        if user_id in holders:
            holders.remove(user_id)

    async def get_all_roles(self, category: RoleCategory) -> dict[str, list[str]]:
        self.calls.append(("list", category, None, None))
        return {name: list(holders) for name, holders in self.listings[category].items()}

    def _maybe_fail(self, category: RoleCategory, role_name: str) -> None:
        error = self._failures.get((category, role_name))
        if error:
            raise error


# --- Stub Jenkins server ---

_FIELD = re.compile(rb'name="([^"]+)"\r\n(?:[^\r\n]+\r\n)*\r\n(.*?)\r\n--', re.S)

_CHANGE_ENDPOINTS = ("assignUserRole", "unassignUserRole", "assignRole", "unassignRole")


def multipart_fields(request: httpx.Request) -> dict[str, str]:
    """Decode the plain fields of a multipart/form-data request body."""
    return {k.decode(): v.decode() for k, v in _FIELD.findall(request.content)}


class FakeJenkins:
    """Role-strategy plugin endpoints served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.roles: dict[str, dict[str, list[str]]] = {
            "globalRoles": {},
            "projectRoles": {},
            "slaveRoles": {},
        }
        self.requests: list[httpx.Request] = []
        self.status_overrides: dict[str, int] = {}

    def add_role(self, role_type: str, role_name: str, *holders: str) -> None:
        self.roles[role_type][role_name] = list(holders)

    def snapshot(self) -> dict[str, dict[str, list[str]]]:
        return {t: {n: list(h) for n, h in roles.items()} for t, roles in self.roles.items()}

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        if endpoint in self.status_overrides:
            return httpx.Response(self.status_overrides[endpoint], text="stubbed failure")

        if endpoint == "getAllRoles" and request.method == "GET":
            role_type = request.url.params.get("type")
            if role_type not in self.roles:
                return httpx.Response(400, text=f"Invalid type: {role_type}")
            return httpx.Response(200, json=self.roles[role_type])

        if endpoint in _CHANGE_ENDPOINTS and request.method == "POST":
            fields = multipart_fields(request)
            holders = self.roles.get(fields.get("type", ""), {}).get(fields.get("roleName", ""))
            if holders is None:
                return httpx.Response(400, text="Role not found")
            user = fields.get("user") or fields.get("sid")
            if endpoint.startswith("assign"):
                if user not in holders:
                    holders.append(user)
            elif user in holders:
                holders.remove(user)
            return httpx.Response(200)

        return httpx.Response(404, text="Not Found")


# --- Fixtures ---


@pytest.fixture
def fake_gateway() -> FakeRoleGateway:
    """Fresh in-memory role gateway for each test."""
    return FakeRoleGateway()


@pytest.fixture
def fake_jenkins() -> FakeJenkins:
    """Stub Jenkins with an admin and a developer role in each category."""
    jenkins = FakeJenkins()
    jenkins.add_role("globalRoles", "admin", "root")
    jenkins.add_role("globalRoles", "reader")
    jenkins.add_role("projectRoles", "developer")
    jenkins.add_role("slaveRoles", "agent-operator")
    return jenkins


@pytest.fixture
def make_client(fake_jenkins):
    """Build RoleStrategyClient instances talking to the stub Jenkins."""

    def _make(**kwargs) -> RoleStrategyClient:
        kwargs.setdefault("endpoint_variant", EndpointVariant.USER)
        return RoleStrategyClient(
            JENKINS_URL,
            "admin",
            "api-token",
            transport=fake_jenkins.transport(),
            **kwargs,
        )

    return _make

"""Client lifespan middleware - closes the Jenkins HTTP client on shutdown."""

from typing import Any

from jenkins_rbac.infrastructure.jenkins.role_strategy_client import RoleStrategyClient


class ClientLifespanMiddleware:
    """Middleware that releases the role-strategy client's connections on shutdown."""

    def __init__(self, client: RoleStrategyClient) -> None:
        self._client = client

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close client when ASGI server shuts down."""
        await self._client.aclose()

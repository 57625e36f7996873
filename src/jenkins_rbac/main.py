"""Application entry point and composition root."""

import sys

import httpx
from falcon.asgi import App

from jenkins_rbac.application.use_cases.roles.apply_roles import ApplyRolesUseCase
from jenkins_rbac.application.use_cases.roles.fetch_user_roles import FetchUserRolesUseCase
from jenkins_rbac.application.use_cases.roles.role_resource import JenkinsRoleResource
from jenkins_rbac.config import Settings, get_settings
from jenkins_rbac.infrastructure.jenkins.role_strategy_client import RoleStrategyClient
from jenkins_rbac.interfaces.api.app import create_app
from jenkins_rbac.interfaces.api.middleware.client_lifespan import ClientLifespanMiddleware
from jenkins_rbac.interfaces.api.resources.health import HealthResource
from jenkins_rbac.interfaces.api.resources.roles import UserRolesResource
from jenkins_rbac.logging_config import configure_logging


def main() -> None:
    """CLI entry point."""
    from jenkins_rbac.interfaces.cli.commands import main as cli_main

    sys.exit(cli_main())


def build_role_resource(client: RoleStrategyClient, fail_fast: bool = False) -> JenkinsRoleResource:
    """Wire use cases around a role gateway."""
    return JenkinsRoleResource(
        apply_roles=ApplyRolesUseCase(client, fail_fast=fail_fast),
        fetch_user_roles=FetchUserRolesUseCase(client),
    )


def create_jenkins_rbac_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> App:
    """Composition root - build Falcon app with all dependencies.

    Without a Jenkins URL only the health routes are served and readiness reports 503.
    """
    settings = settings or get_settings()
    if not settings.jenkins_url:
        return create_app(user_roles_resource=None, health_resource=HealthResource())

    client = RoleStrategyClient.from_settings(settings, transport=transport)
    role_resource = build_role_resource(client, fail_fast=settings.fail_fast)

    return create_app(
        user_roles_resource=UserRolesResource(role_resource),
        health_resource=HealthResource(client.base_url),
        middleware=[ClientLifespanMiddleware(client)],
    )


def run_server(settings: Settings | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.debug)
    app = create_jenkins_rbac_app(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)

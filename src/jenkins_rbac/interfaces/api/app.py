"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from jenkins_rbac.interfaces.api.resources.health import HealthResource
from jenkins_rbac.interfaces.api.resources.roles import UserRolesResource

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    user_roles_resource: UserRolesResource | None,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes; roles are only routed when a resource is given."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    if user_roles_resource is not None:
        app.add_route("/v1/users/{user_id}/roles", user_roles_resource)
    return app


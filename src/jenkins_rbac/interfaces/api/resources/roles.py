"""User roles API resources."""

from typing import Any

import falcon.asgi

from jenkins_rbac.application.dto.resource_state import RoleResourceState
from jenkins_rbac.application.use_cases.roles.role_resource import JenkinsRoleResource
from jenkins_rbac.domain.exceptions import (
    JenkinsRbacError,
    RoleApplyError,
    ValidationError,
)

# Resource state keys tolerated next to a flat role block
_STATE_KEYS = ("id", "user_id")


def _role_blocks(body: Any) -> list[dict]:
    """Accept {"role": [blocks]} or a single flat {"global": [...], ...} block."""
    if body is None:
        return []
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    if "role" in body:
        blocks = body["role"]
        if isinstance(blocks, dict):
            return [blocks]
        if not isinstance(blocks, list):
            raise ValidationError("'role' must be a list of role blocks")
        return blocks
    return [{k: v for k, v in body.items() if k not in _STATE_KEYS}]


def _set_error(resp: falcon.asgi.Response, error: JenkinsRbacError) -> None:
    if isinstance(error, ValidationError):
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(error), "kind": error.kind}
        return
    resp.status = falcon.HTTP_502
    resp.media = {"error": str(error), "kind": error.kind}
    if isinstance(error, RoleApplyError):
        resp.media["applied"] = [
            {"category": a.category.value, "role": a.role_name} for a in error.result.applied
        ]
        resp.media["failures"] = [f.to_dict() for f in error.result.failures]


async def _read_body(req: falcon.asgi.Request) -> Any:
    try:
        return await req.get_media(default_when_empty=None)
    except falcon.MediaMalformedError:
        raise ValidationError("Request body is not valid JSON") from None


class UserRolesResource:
    """GET/POST/PUT/DELETE /v1/users/{user_id}/roles - jenkins_role lifecycle."""

    def __init__(self, role_resource: JenkinsRoleResource) -> None:
        self._resource = role_resource

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Import the roles user_id holds on Jenkins."""
        try:
            state = await self._resource.import_state(user_id)
        except JenkinsRbacError as e:
            _set_error(resp, e)
            return
        resp.media = state.to_dict()
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Assign the declared roles to user_id."""
        try:
            blocks = _role_blocks(await _read_body(req))
            state = await self._resource.create(user_id, blocks)
        except JenkinsRbacError as e:
            _set_error(resp, e)
            return
        resp.media = state.to_dict()
        resp.status = falcon.HTTP_201

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Update - roles force replacement, so the state is echoed unchanged."""
        try:
            blocks = _role_blocks(await _read_body(req))
            state = RoleResourceState(id=user_id, user_id=user_id, role=blocks)
            state = await self._resource.update(state)
        except JenkinsRbacError as e:
            _set_error(resp, e)
            return
        resp.media = state.to_dict()
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Unassign the declared roles from user_id."""
        try:
            blocks = _role_blocks(await _read_body(req))
            await self._resource.delete(
                RoleResourceState(id=user_id, user_id=user_id, role=blocks)
            )
        except JenkinsRbacError as e:
            _set_error(resp, e)
            return
        resp.status = falcon.HTTP_204

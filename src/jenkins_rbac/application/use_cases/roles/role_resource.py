"""jenkins_role resource lifecycle - create, read, update, delete, import."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from jenkins_rbac.application.dto.resource_state import RoleResourceState
from jenkins_rbac.application.use_cases.roles.apply_roles import ApplyRolesUseCase
from jenkins_rbac.application.use_cases.roles.fetch_user_roles import FetchUserRolesUseCase
from jenkins_rbac.domain.entities import UserRoles
from jenkins_rbac.domain.exceptions import ValidationError
from jenkins_rbac.domain.value_objects import ApplyMode

logger = logging.getLogger(__name__)


class JenkinsRoleResource:
    """Lifecycle callbacks for a resource declaring the roles of one user.

    Role attributes force replacement, so update never talks to Jenkins.
    """

    def __init__(
        self,
        apply_roles: ApplyRolesUseCase,
        fetch_user_roles: FetchUserRolesUseCase,
    ) -> None:
        self._apply = apply_roles
        self._fetch = fetch_user_roles

    async def create(
        self, user_id: str, blocks: Iterable[Mapping[str, Any]] | None
    ) -> RoleResourceState:
        desired = UserRoles.from_blocks(user_id, blocks)
        await self._apply.execute(user_id, desired, ApplyMode.ASSIGN)
        return RoleResourceState(id=user_id, user_id=user_id, role=[desired.to_block()])

    async def read(self, state: RoleResourceState) -> RoleResourceState:
        """Refresh role blocks from the server."""
        roles = await self._fetch.execute(state.user_id)
        return RoleResourceState.from_user_roles(roles)

    async def update(self, state: RoleResourceState) -> RoleResourceState:
        return state

    async def delete(self, state: RoleResourceState) -> None:
        await self._apply.execute(state.user_id, state.user_roles(), ApplyMode.UNASSIGN)
        logger.info("Removed jenkins_role resource %s", state.id)

    async def import_state(self, user_id: str) -> RoleResourceState:
        if not user_id:
            raise ValidationError("user_id is required")
        roles = await self._fetch.execute(user_id)
        return RoleResourceState.from_user_roles(roles)

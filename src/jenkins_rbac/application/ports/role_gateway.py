"""Role gateway port - role-strategy plugin operations."""

from typing import Protocol

from jenkins_rbac.domain.value_objects import RoleCategory


class RoleGateway(Protocol):
    """Port for assigning roles and listing role holders on a Jenkins server."""

    async def assign_role(self, category: RoleCategory, role_name: str, user_id: str) -> None: ...

    async def unassign_role(self, category: RoleCategory, role_name: str, user_id: str) -> None: ...

    async def get_all_roles(self, category: RoleCategory) -> dict[str, list[str]]: ...

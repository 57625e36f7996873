"""Fetch user roles use case."""

from jenkins_rbac.application.ports import RoleGateway
from jenkins_rbac.domain.entities import UserRoles
from jenkins_rbac.domain.value_objects import RoleCategory


class FetchUserRolesUseCase:
    """List every role per category on the server and keep the ones held by a user."""

    def __init__(self, role_gateway: RoleGateway) -> None:
        self._gateway = role_gateway

    async def execute(self, user_id: str) -> UserRoles:
        """Return the roles user_id holds, in server listing order."""
        roles = UserRoles(user_id=user_id)
        for category in RoleCategory:
            listing = await self._gateway.get_all_roles(category)
            roles.roles_for(category).extend(
                role_name for role_name, holders in listing.items() if user_id in holders
            )
        return roles

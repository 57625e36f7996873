"""Role assignment entity."""

from dataclasses import dataclass

from jenkins_rbac.domain.value_objects import RoleCategory


@dataclass(frozen=True)
class RoleAssignment:
    """One role of one category held by one user."""

    category: RoleCategory
    role_name: str
    user_id: str

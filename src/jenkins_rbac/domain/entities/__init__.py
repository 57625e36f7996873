"""Domain entities."""

from jenkins_rbac.domain.entities.role_assignment import RoleAssignment
from jenkins_rbac.domain.entities.user_roles import UserRoles

__all__ = [
    "RoleAssignment",
    "UserRoles",
]

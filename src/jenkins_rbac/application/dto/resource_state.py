"""Resource state DTO - what the IaC host persists for a jenkins_role resource."""

from dataclasses import dataclass, field
from typing import Any

from jenkins_rbac.domain.entities import UserRoles


@dataclass
class RoleResourceState:
    """State of one jenkins_role resource: id, user_id and role blocks."""

    id: str
    user_id: str
    role: list[dict[str, list[str]]] = field(default_factory=list)

    @classmethod
    def from_user_roles(cls, roles: UserRoles) -> "RoleResourceState":
        return cls(id=roles.user_id, user_id=roles.user_id, role=[roles.to_block()])

    def user_roles(self) -> UserRoles:
        return UserRoles.from_blocks(self.user_id, self.role)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "user_id": self.user_id, "role": self.role}


"""User roles entity - the desired or fetched role set of one user."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from jenkins_rbac.domain.entities.role_assignment import RoleAssignment
from jenkins_rbac.domain.exceptions import ValidationError
from jenkins_rbac.domain.value_objects import RoleCategory


@dataclass
class UserRoles:
    """Role names per category for exactly one user id.

    Duplicates are kept as given; they only produce repeated calls.
    """

    user_id: str
    global_roles: list[str] = field(default_factory=list)
    item_roles: list[str] = field(default_factory=list)
    node_roles: list[str] = field(default_factory=list)

    def roles_for(self, category: RoleCategory) -> list[str]:
        if category is RoleCategory.GLOBAL:
            return self.global_roles
        if category is RoleCategory.ITEM:
            return self.item_roles
        return self.node_roles

    def assignments(self) -> Iterator[RoleAssignment]:
        """Yield one assignment per (category, role name) pair."""
        for category in RoleCategory:
            for role_name in self.roles_for(category):
                yield RoleAssignment(category, role_name, self.user_id)

    @property
    def is_empty(self) -> bool:
        return not (self.global_roles or self.item_roles or self.node_roles)

    def to_block(self) -> dict[str, list[str]]:
        """Single role block as stored in resource state."""
        return {category.value: list(self.roles_for(category)) for category in RoleCategory}

    @classmethod
    def from_blocks(
        cls, user_id: str, blocks: Iterable[Mapping[str, Any]] | None
    ) -> "UserRoles":
        """Build from role blocks, each holding optional global/item/node lists."""
        if not user_id:
            raise ValidationError("user_id is required")
        roles = cls(user_id=user_id)
        for block in blocks or []:
            if not isinstance(block, Mapping):
                raise ValidationError("Each role block must be an object")
            for key, names in block.items():
                category = RoleCategory.parse(key)
                if names is None:
                    continue
                if isinstance(names, str) or not isinstance(names, Iterable):
                    raise ValidationError(f"Roles for {key!r} must be a list of names")
                for name in names:
                    if not isinstance(name, str) or not name:
                        raise ValidationError(f"Invalid role name in {key!r}: {name!r}")
                    roles.roles_for(category).append(name)
        return roles

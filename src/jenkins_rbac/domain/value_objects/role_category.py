"""Role categories of the role-strategy plugin."""

from enum import StrEnum

from jenkins_rbac.domain.exceptions import ValidationError


class RoleCategory(StrEnum):
    """Independent permission namespaces - global, item (project), node (agent)."""

    GLOBAL = "global"
    ITEM = "item"
    NODE = "node"

    @property
    def role_type(self) -> str:
        """Jenkins-side role type token for this category."""
        return _ROLE_TYPES[self]

    @classmethod
    def parse(cls, value: str) -> "RoleCategory":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown role category: {value!r}") from None


_ROLE_TYPES = {
    RoleCategory.GLOBAL: "globalRoles",
    RoleCategory.ITEM: "projectRoles",
    RoleCategory.NODE: "slaveRoles",
}

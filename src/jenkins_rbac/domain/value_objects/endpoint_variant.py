"""Assign/unassign endpoint variants exposed by the role-strategy plugin."""

from enum import StrEnum

from jenkins_rbac.domain.value_objects.apply_mode import ApplyMode


class EndpointVariant(StrEnum):
    """USER targets assignUserRole with a `user` field, SID the legacy assignRole with `sid`."""

    USER = "user"
    SID = "sid"

    @property
    def user_field(self) -> str:
        return self.value

    def endpoint(self, mode: ApplyMode) -> str:
        """Endpoint name under /role-strategy/strategy for the given mode."""
        if self is EndpointVariant.USER:
            return "assignUserRole" if mode is ApplyMode.ASSIGN else "unassignUserRole"
        return "assignRole" if mode is ApplyMode.ASSIGN else "unassignRole"

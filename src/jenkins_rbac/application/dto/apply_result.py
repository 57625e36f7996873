"""DTOs for apply results."""

from dataclasses import dataclass, field

from jenkins_rbac.domain.entities import RoleAssignment
from jenkins_rbac.domain.exceptions import JenkinsRbacError
from jenkins_rbac.domain.value_objects import ApplyMode


@dataclass
class ApplyFailure:
    """A single assign/unassign call that failed."""

    assignment: RoleAssignment
    error: JenkinsRbacError

    def to_dict(self) -> dict:
        return {
            "category": self.assignment.category.value,
            "role": self.assignment.role_name,
            "kind": self.error.kind,
            "error": str(self.error),
        }


@dataclass
class ApplyResult:
    """Outcome of applying a role set."""

    user_id: str
    mode: ApplyMode
    applied: list[RoleAssignment] = field(default_factory=list)
    failures: list[ApplyFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

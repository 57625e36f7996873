"""Apply roles use case."""

import logging

from jenkins_rbac.application.dto.apply_result import ApplyFailure, ApplyResult
from jenkins_rbac.application.ports import RoleGateway
from jenkins_rbac.domain.entities import UserRoles
from jenkins_rbac.domain.exceptions import JenkinsRbacError, RoleApplyError
from jenkins_rbac.domain.value_objects import ApplyMode

logger = logging.getLogger(__name__)


class ApplyRolesUseCase:
    """Assign or unassign every role of a desired role set, one call per role."""

    def __init__(self, role_gateway: RoleGateway, fail_fast: bool = False) -> None:
        self._gateway = role_gateway
        self._fail_fast = fail_fast

    async def execute(
        self,
        user_id: str,
        desired: UserRoles,
        mode: ApplyMode,
    ) -> ApplyResult:
        """Apply desired roles for user_id.

        Every failing call is recorded. With fail_fast the first failure stops
        the run; otherwise all calls are attempted. Raises RoleApplyError when
        anything failed.
        """
        result = ApplyResult(user_id=user_id, mode=mode)
        call = (
            self._gateway.assign_role
            if mode is ApplyMode.ASSIGN
            else self._gateway.unassign_role
        )

        for assignment in desired.assignments():
            try:
                await call(assignment.category, assignment.role_name, user_id)
            except JenkinsRbacError as e:
                logger.warning(
                    "Failed to %s %s role %r for %s: %s",
                    mode, assignment.category, assignment.role_name, user_id, e,
                )
                result.failures.append(ApplyFailure(assignment=assignment, error=e))
                if self._fail_fast:
                    break
                continue
            result.applied.append(assignment)

        if result.failures:
            raise RoleApplyError(result)
        logger.info("%s %d role(s) for %s", mode, len(result.applied), user_id)
        return result

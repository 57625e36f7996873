"""Domain exceptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jenkins_rbac.application.dto.apply_result import ApplyResult


class JenkinsRbacError(Exception):
    """Base exception for jenkins-rbac."""

    kind = "error"


class ConfigurationError(JenkinsRbacError):
    """Client cannot be built from the given settings."""

    kind = "config"


class ValidationError(JenkinsRbacError):
    """Validation failed for input data."""

    kind = "validation"


class TransportError(JenkinsRbacError):
    """Request did not reach Jenkins or no response came back."""

    kind = "network"


class HttpStatusError(JenkinsRbacError):
    """Jenkins answered with a non-success status code."""

    kind = "http_status"

    def __init__(self, status_code: int, url: str, detail: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.detail = detail
        message = f"Jenkins returned HTTP {status_code} for {url}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AuthenticationError(HttpStatusError):
    """Jenkins rejected the credentials (HTTP 401/403)."""

    kind = "auth"


class MalformedResponse(JenkinsRbacError):
    """Response body could not be decoded into a role listing."""

    kind = "malformed_response"


class RoleApplyError(JenkinsRbacError):
    """One or more role assignment calls failed."""

    kind = "apply"

    def __init__(self, result: "ApplyResult") -> None:
        self.result = result
        failed = ", ".join(
            f"{f.assignment.category}/{f.assignment.role_name}" for f in result.failures
        )
        super().__init__(
            f"{len(result.failures)} role {result.mode} call(s) failed for "
            f"{result.user_id}: {failed}"
        )

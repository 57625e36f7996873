"""Application ports - interfaces for external adapters."""

from jenkins_rbac.application.ports.role_gateway import RoleGateway

__all__ = [
    "RoleGateway",
]

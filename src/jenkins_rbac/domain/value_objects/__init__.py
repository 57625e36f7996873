"""Domain value objects."""

from jenkins_rbac.domain.value_objects.apply_mode import ApplyMode
from jenkins_rbac.domain.value_objects.endpoint_variant import EndpointVariant
from jenkins_rbac.domain.value_objects.role_category import RoleCategory

__all__ = [
    "ApplyMode",
    "EndpointVariant",
    "RoleCategory",
]

"""Unit tests for role value objects."""

import pytest

from jenkins_rbac.domain.exceptions import ValidationError
from jenkins_rbac.domain.value_objects import ApplyMode, EndpointVariant, RoleCategory


def test_role_type_translation_is_exact() -> None:
    """Each category maps to exactly one Jenkins role type."""
    assert {c.value: c.role_type for c in RoleCategory} == {
        "global": "globalRoles",
        "item": "projectRoles",
        "node": "slaveRoles",
    }


def test_parse_rejects_unknown_category() -> None:
    with pytest.raises(ValidationError, match="Unknown role category"):
        RoleCategory.parse("project")


def test_parse_accepts_known_category() -> None:
    assert RoleCategory.parse("node") is RoleCategory.NODE


def test_category_order_is_global_item_node() -> None:
    assert list(RoleCategory) == [RoleCategory.GLOBAL, RoleCategory.ITEM, RoleCategory.NODE]


class TestEndpointVariant:
    def test_user_variant_endpoints(self) -> None:
        variant = EndpointVariant.USER
        assert variant.endpoint(ApplyMode.ASSIGN) == "assignUserRole"
        assert variant.endpoint(ApplyMode.UNASSIGN) == "unassignUserRole"
        assert variant.user_field == "user"

    def test_sid_variant_endpoints(self) -> None:
        variant = EndpointVariant.SID
        assert variant.endpoint(ApplyMode.ASSIGN) == "assignRole"
        assert variant.endpoint(ApplyMode.UNASSIGN) == "unassignRole"
        assert variant.user_field == "sid"

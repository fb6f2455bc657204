"""Unit tests for permission levels and access requirement markers."""

import pytest

from resteasy.application.services.authorization_gate import (
    derive_required_permissions,
)
from resteasy.domain.enums.permission_level import AccessRequirement, PermissionLevel


@pytest.mark.unit
class TestPermissionLevel:
    """Test PermissionLevel ordering and parsing."""

    def test_levels_are_ordered(self):
        assert (
            PermissionLevel.NONE
            < PermissionLevel.READ
            < PermissionLevel.WRITE
            < PermissionLevel.ADMIN
        )

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("read", PermissionLevel.READ),
            ("WRITE", PermissionLevel.WRITE),
            (" Admin ", PermissionLevel.ADMIN),
            ("none", PermissionLevel.NONE),
        ],
    )
    def test_parse_is_case_insensitive(self, value, expected):
        assert PermissionLevel.parse(value) is expected

    def test_parse_unknown_level_raises(self):
        with pytest.raises(ValueError, match="Unknown permission level"):
            PermissionLevel.parse("superuser")


@pytest.mark.unit
class TestAccessRequirement:
    """Test marker to level mapping."""

    def test_each_marker_contributes_its_level(self):
        assert AccessRequirement.READ.permission_level is PermissionLevel.READ
        assert AccessRequirement.WRITE.permission_level is PermissionLevel.WRITE
        assert AccessRequirement.ADMIN.permission_level is PermissionLevel.ADMIN

    def test_derive_keeps_declaration_order(self):
        required = derive_required_permissions(
            [AccessRequirement.ADMIN, AccessRequirement.READ]
        )

        assert required == [PermissionLevel.ADMIN, PermissionLevel.READ]

    def test_derive_keeps_duplicates(self):
        required = derive_required_permissions(
            [AccessRequirement.READ, AccessRequirement.READ]
        )

        assert required == [PermissionLevel.READ, PermissionLevel.READ]

    def test_derive_without_markers_is_empty(self):
        assert derive_required_permissions([]) == []

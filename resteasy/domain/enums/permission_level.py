"""Permission levels and access requirement markers.

PermissionLevel is the ordered set of access tiers passed to the
authorization collaborator. The collaborator decides what the levels mean;
the ordering is informational and is not used to imply one level from another.

AccessRequirement is the declarative marker attached to an operation. Each
marker contributes exactly one PermissionLevel to the operation's required
permission list, so an operation declaring READ twice requires [READ, READ].

Usage:
    from resteasy.domain.enums import AccessRequirement, PermissionLevel

    OperationMetadata(
        name="delete_item",
        access_requirements=(AccessRequirement.WRITE, AccessRequirement.ADMIN),
        ...
    )
"""

from enum import Enum, IntEnum


class PermissionLevel(IntEnum):
    """Access tiers understood by the authorization collaborator."""

    NONE = 0
    """No permissions."""

    READ = 1
    """Read permissions."""

    WRITE = 2
    """Write permissions."""

    ADMIN = 3
    """All permissions up to altering clients."""

    @classmethod
    def parse(cls, value: str) -> "PermissionLevel":
        """Parse a level from its name, case-insensitively.

        Args:
            value: Level name (e.g. "read", "ADMIN").

        Returns:
            PermissionLevel: Matching level.

        Raises:
            ValueError: If value names no level.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown permission level: {value!r}") from None


class AccessRequirement(str, Enum):
    """Declarative access marker attached to an operation."""

    READ = "requires_read"
    WRITE = "requires_write"
    ADMIN = "requires_admin"

    @property
    def permission_level(self) -> PermissionLevel:
        """PermissionLevel contributed by this marker."""
        return _REQUIREMENT_LEVELS[self]


_REQUIREMENT_LEVELS: dict[AccessRequirement, PermissionLevel] = {
    AccessRequirement.READ: PermissionLevel.READ,
    AccessRequirement.WRITE: PermissionLevel.WRITE,
    AccessRequirement.ADMIN: PermissionLevel.ADMIN,
}

"""In-memory implementation of AuthorizationProtocol.

Grants are a static table of client key -> permission levels, loaded from
settings at startup. Suitable for development, tests and small deployments;
anything backed by a store implements the same protocol.

Rules:
    - Missing or unknown client key: denied.
    - Every required level must be granted to the key.
    - PermissionLevel.NONE is always satisfied.
    - An empty requirement list is allowed for any known key.
"""

from collections.abc import Iterable, Mapping, Sequence

from resteasy.domain.enums.permission_level import PermissionLevel


class InMemoryAuthorizationAdapter:
    """Static table authorization adapter.

    Attributes:
        _grants: Client key to the set of granted permission levels.
    """

    def __init__(
        self, client_permissions: Mapping[str, Iterable[PermissionLevel]]
    ) -> None:
        """Initialize adapter with a grant table.

        Args:
            client_permissions: Client key to granted permission levels.
        """
        self._grants: dict[str, frozenset[PermissionLevel]] = {
            key: frozenset(levels) for key, levels in client_permissions.items()
        }

    async def authorize(
        self,
        credential: str | None,
        required_permissions: Sequence[PermissionLevel],
    ) -> bool:
        """Check that ``credential`` holds every required level.

        Args:
            credential: Client key, None or empty when absent.
            required_permissions: Levels required by the operation.

        Returns:
            bool: True if allowed, False if denied.
        """
        if not credential:
            return False

        granted = self._grants.get(credential)
        if granted is None:
            return False

        return all(
            level is PermissionLevel.NONE or level in granted
            for level in required_permissions
        )

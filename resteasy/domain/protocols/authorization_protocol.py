"""Authorization protocol (port) for permission-gated operations.

This protocol defines the contract for the authorization collaborator.
Infrastructure adapters implement it to provide the actual decision; the
core never knows how a decision is made.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides ADAPTERS (InMemoryAuthorizationAdapter, or a
  deployment's own adapter)
- Application layer uses the protocol (AuthorizationGate)

Usage:
    from resteasy.domain.protocols import AuthorizationProtocol

    allowed = await authorization.authorize(
        "0123456789abcdef0123456789abcdef",
        [PermissionLevel.READ, PermissionLevel.WRITE],
    )
"""

from collections.abc import Sequence
from typing import Protocol

from resteasy.domain.enums.permission_level import PermissionLevel


class AuthorizationProtocol(Protocol):
    """Protocol for authorization collaborators.

    Implementations:
        - InMemoryAuthorizationAdapter: Static client key table (dev/testing)

    Error Handling:
        Implementations may raise. The AuthorizationGate catches any
        exception and reports it as an internal failure, never as a denial.
    """

    async def authorize(
        self,
        credential: str | None,
        required_permissions: Sequence[PermissionLevel],
    ) -> bool:
        """Decide whether a client may perform an action.

        Args:
            credential: The client's identifying key (may be None or empty).
            required_permissions: Every level the operation requires, one
                entry per declared marker (duplicates preserved).

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

"""Authorization dependency factories.

The in-memory adapter is built from the client_permissions setting, which
maps client keys to permission level names:

    CLIENT_PERMISSIONS='{"0123456789abcdef0123456789abcdef": ["READ", "WRITE"]}'

Deployments with their own authorization store provide a different
AuthorizationProtocol implementation to build_response_pipeline().
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from resteasy.core.config import settings
from resteasy.domain.enums.permission_level import PermissionLevel

if TYPE_CHECKING:
    from resteasy.domain.protocols.authorization_protocol import AuthorizationProtocol


# ============================================================================
# Authorization (In-Memory)
# ============================================================================


@lru_cache()
def get_authorization() -> "AuthorizationProtocol":
    """Get authorization adapter (app-scoped).

    Returns:
        InMemoryAuthorizationAdapter implementing AuthorizationProtocol.

    Raises:
        ValueError: If client_permissions names an unknown permission level.
    """
    from resteasy.infrastructure.authorization.in_memory_adapter import (
        InMemoryAuthorizationAdapter,
    )

    client_permissions = {
        key: [PermissionLevel.parse(name) for name in names]
        for key, names in settings.client_permissions.items()
    }
    return InMemoryAuthorizationAdapter(client_permissions=client_permissions)

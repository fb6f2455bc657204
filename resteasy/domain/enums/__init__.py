"""Domain enums.

Available Enums:
    - PermissionLevel: Ordered access tiers (NONE, READ, WRITE, ADMIN)
    - AccessRequirement: Per-operation access markers
    - DataStatus: Data-layer outcome (SUCCESS, INVALID, ERROR)
    - AuthorizationOutcome: AuthorizationGate decision
"""

from resteasy.domain.enums.authorization_outcome import AuthorizationOutcome
from resteasy.domain.enums.data_status import DataStatus
from resteasy.domain.enums.permission_level import AccessRequirement, PermissionLevel

__all__ = [
    "AccessRequirement",
    "AuthorizationOutcome",
    "DataStatus",
    "PermissionLevel",
]

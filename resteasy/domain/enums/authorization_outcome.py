"""Decision produced by the AuthorizationGate.

INTERNAL_FAILURE is deliberately separate from DENY_UNAUTHORIZED: a broken
authorization backend must surface as a 500, not as a client denial.
"""

from enum import Enum


class AuthorizationOutcome(str, Enum):
    """Result of the transport gate plus authorization decision."""

    ALLOW = "allow"
    DENY_FORBIDDEN = "deny_forbidden"
    DENY_UNAUTHORIZED = "deny_unauthorized"
    INTERNAL_FAILURE = "internal_failure"

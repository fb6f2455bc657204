"""Authorization adapters."""

from resteasy.infrastructure.authorization.in_memory_adapter import (
    InMemoryAuthorizationAdapter,
)

__all__ = ["InMemoryAuthorizationAdapter"]

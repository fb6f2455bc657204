"""Domain entities: handler and operation declarations."""

from resteasy.domain.entities.handler_definition import (
    HandlerDefinition,
    OperationNotRegisteredError,
)
from resteasy.domain.entities.operation_metadata import (
    HTTPMethod,
    OperationMetadata,
    RestInfo,
)

__all__ = [
    "HTTPMethod",
    "HandlerDefinition",
    "OperationMetadata",
    "OperationNotRegisteredError",
    "RestInfo",
]

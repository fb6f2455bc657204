"""Handler definition entity.

A handler groups related operations under one route prefix (the analogue of
a controller). It may name other handlers as "related": their endpoints are
appended when this handler lists its routes.

Related handlers are referenced by name, not by object, so mutually related
handlers can be declared in any order and resolved through the HandlerCatalog
at discovery time.

Usage:
    ITEMS = HandlerDefinition(
        name="items",
        route_prefix="api",
        operations=(list_items, create_item),
        related_handlers=("orders",),
    )
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from resteasy.domain.entities.operation_metadata import OperationMetadata


class OperationNotRegisteredError(LookupError):
    """Raised when a handler has no operation with the requested name."""


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerDefinition:
    """Static metadata for one handler.

    Attributes:
        name: Handler name, unique within a catalog.
        route_prefix: Prefix shared by all operations; None when the handler
            declares no prefix (listed with a warning).
        operations: Declared operations, in listing order.
        related_handlers: Names of handlers whose routes are listed with this
            handler's, in declaration order.
        include_endpoints_param: Query key overriding the configured
            include-endpoints toggle for this handler.

    Raises:
        ValueError: If two operations share a name.
    """

    name: str
    route_prefix: str | None = None
    operations: Sequence[OperationMetadata] = field(default_factory=tuple)
    related_handlers: Sequence[str] = field(default_factory=tuple)
    include_endpoints_param: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "operations", tuple(self.operations))
        object.__setattr__(self, "related_handlers", tuple(self.related_handlers))

        seen: set[str] = set()
        for operation in self.operations:
            if operation.name in seen:
                raise ValueError(
                    f"Duplicate operation '{operation.name}' on handler '{self.name}'"
                )
            seen.add(operation.name)

    def get_operation(self, name: str) -> OperationMetadata:
        """Look up an operation by name.

        Args:
            name: Operation name.

        Returns:
            OperationMetadata: The declared operation.

        Raises:
            OperationNotRegisteredError: If the handler declares no such operation.
        """
        for operation in self.operations:
            if operation.name == name:
                return operation
        raise OperationNotRegisteredError(
            f"Handler '{self.name}' has no operation '{name}'"
        )

    @property
    def public_operations(self) -> tuple[OperationMetadata, ...]:
        """Operations eligible for route listing."""
        return tuple(op for op in self.operations if op.is_public)

"""Handler catalog - registration table for handler metadata.

Handlers are registered once at startup. After that the catalog is only
read, so it is shared across requests without locking.

Usage:
    catalog = HandlerCatalog()
    catalog.register(ITEMS_HANDLER)
    catalog.register(ORDERS_HANDLER)

    items = catalog.get("items")
"""

from collections.abc import Iterable

from resteasy.domain.entities.handler_definition import HandlerDefinition


class HandlerNotRegisteredError(LookupError):
    """Raised when a handler name is not in the catalog."""


class HandlerCatalog:
    """Name-keyed table of HandlerDefinition entries."""

    def __init__(self, handlers: Iterable[HandlerDefinition] = ()) -> None:
        """Initialize catalog, registering any given handlers.

        Args:
            handlers: Handlers to register, in order.
        """
        self._handlers: dict[str, HandlerDefinition] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: HandlerDefinition) -> HandlerDefinition:
        """Register a handler.

        Args:
            handler: Handler definition.

        Returns:
            HandlerDefinition: The registered handler (for declaration chaining).

        Raises:
            ValueError: If a handler with the same name is already registered.
        """
        if handler.name in self._handlers:
            raise ValueError(f"Handler '{handler.name}' is already registered")
        self._handlers[handler.name] = handler
        return handler

    def get(self, name: str) -> HandlerDefinition:
        """Look up a handler by name.

        Raises:
            HandlerNotRegisteredError: If no handler has that name.
        """
        try:
            return self._handlers[name]
        except KeyError:
            raise HandlerNotRegisteredError(
                f"Handler '{name}' is not registered"
            ) from None

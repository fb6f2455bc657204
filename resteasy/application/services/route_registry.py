"""Route registry - endpoint discovery from handler metadata.

Builds the endpoint listing for a handler: its own listed operations,
followed by the operations of each related handler, in declaration order.

Rules:
    - Only public operations with a route and a RestInfo are listed.
    - A missing route prefix or route is a warning, never an error.
    - Related handlers are expanded exactly one level deep: a related
      handler's own related handlers are never visited. This cap is what
      keeps mutually related handlers from recursing forever.
    - A failure while discovering one related handler is logged and that
      handler's items are omitted; everything else is still returned.

Path construction (authority "host:80", marker "~"):
    prefix "api",    route "items"    -> "host:80/api/items"
    prefix "~admin", route "items"    -> "/items"
    prefix "api",    route "~/health" -> "/health"
    no prefix,       route "items"    -> "host:80/items"

Usage:
    registry = RouteRegistry(catalog=catalog, logger=logger)
    items = registry.discover(catalog.get("items"), authority="api.local:443")
"""

from collections.abc import Sequence

from resteasy.application.services.handler_catalog import HandlerCatalog
from resteasy.domain.entities.handler_definition import HandlerDefinition
from resteasy.domain.entities.operation_metadata import OperationMetadata
from resteasy.domain.protocols.logger_protocol import LoggerProtocol
from resteasy.domain.value_objects.endpoint_descriptor import EndpointDescriptor


class RouteRegistry:
    """Discovers endpoint descriptors for handlers in a catalog.

    Dependencies (injected via constructor):
        - HandlerCatalog: Resolves related handler names
        - LoggerProtocol: Warnings for misconfigured routes, errors for
          failed related handlers
    """

    def __init__(
        self,
        catalog: HandlerCatalog,
        logger: LoggerProtocol,
        *,
        absolute_marker: str = "~",
    ) -> None:
        """Initialize registry with dependencies.

        Args:
            catalog: Handler registration table.
            logger: Structured logger.
            absolute_marker: Leading character marking an absolute route.
        """
        self._catalog = catalog
        self._logger = logger
        self._absolute_marker = absolute_marker

    def discover(
        self,
        handler: HandlerDefinition,
        authority: str,
        related_handlers: Sequence[str] | None = None,
        *,
        shallow: bool = False,
    ) -> list[EndpointDescriptor]:
        """List the endpoints of ``handler`` and its related handlers.

        Args:
            handler: Handler whose routes are listed.
            authority: "host:port" of the current request.
            related_handlers: Related handler names; defaults to the ones the
                handler declares.
            shallow: When True, related handlers are not visited.

        Returns:
            list[EndpointDescriptor]: Own descriptors, then each related
            handler's descriptors, in declaration order.
        """
        descriptors = self._describe_operations(handler, authority)

        if shallow:
            return descriptors

        names = handler.related_handlers if related_handlers is None else related_handlers
        for name in names:
            try:
                related = self._catalog.get(name)
                descriptors.extend(self.discover(related, authority, shallow=True))
            except Exception as e:
                self._logger.error(
                    "related_handler_discovery_failed",
                    error=e,
                    handler=handler.name,
                    related_handler=name,
                )

        return descriptors

    def _describe_operations(
        self, handler: HandlerDefinition, authority: str
    ) -> list[EndpointDescriptor]:
        descriptors: list[EndpointDescriptor] = []

        for operation in handler.public_operations:
            if operation.route is None:
                self._logger.warning(
                    "route_missing",
                    handler=handler.name,
                    operation=operation.name,
                )
                continue

            if handler.route_prefix is None:
                self._logger.warning(
                    "route_prefix_missing",
                    handler=handler.name,
                    operation=operation.name,
                )

            # Route metadata alone is not listed
            if operation.rest_info is None:
                continue

            descriptors.append(
                EndpointDescriptor(
                    http_method=operation.rest_info.http_method.value,
                    full_path=self.build_path(
                        authority, handler.route_prefix, operation.route
                    ),
                    description=operation.rest_info.description,
                    required_model_name=(
                        operation.rest_info.model_name
                        if operation.rest_info.requires_model
                        else None
                    ),
                )
            )

        return descriptors

    def build_path(self, authority: str, prefix: str | None, route: str) -> str:
        """Build the full path of a route with this registry's marker."""
        return build_route_path(
            authority, prefix, route, absolute_marker=self._absolute_marker
        )


def build_route_path(
    authority: str,
    prefix: str | None,
    route: str,
    *,
    absolute_marker: str = "~",
) -> str:
    """Build the full path of a route.

    An absolute route, or a route under an absolute prefix, is a complete
    override: the authority and the prefix are dropped. Otherwise the
    non-empty parts are joined with exactly one "/" between them.

    Args:
        authority: "host:port" of the current request ("" for a bare path).
        prefix: Handler route prefix, None when absent.
        route: Operation route fragment.
        absolute_marker: Leading character marking an absolute fragment.

    Returns:
        str: Full path.

    Example:
        >>> build_route_path("host:80", "/api/", "/items/")
        'host:80/api/items'
        >>> build_route_path("host:80", "~admin", "items")
        '/items'
    """
    if route.startswith(absolute_marker):
        return "/" + route[1:].strip("/")

    if prefix is not None and prefix.startswith(absolute_marker):
        return "/" + route.strip("/")

    parts = [authority.rstrip("/")]
    if prefix:
        parts.append(prefix.strip("/"))
    parts.append(route.strip("/"))
    return "/".join(part for part in parts if part)

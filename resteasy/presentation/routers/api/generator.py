"""Route generator for handler definitions.

Generates FastAPI routes from the same HandlerDefinition metadata the route
registry lists, so what a client discovers and what the server routes can
never drift apart.

Functions:
    register_handler_routes: Register every listed operation of a handler
    make_paths_endpoint: Build the route-listing endpoint of a handler

Usage:
    router = APIRouter()
    register_handler_routes(
        router,
        ITEMS,
        {
            "list_items": list_items,
            "paths": make_paths_endpoint(ITEMS),
        },
    )
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from resteasy.application.services.route_registry import build_route_path
from resteasy.core.config import settings
from resteasy.core.container import get_rest_responder
from resteasy.domain.entities.handler_definition import HandlerDefinition
from resteasy.presentation.routers.api.rest_responder import RestResponder
from resteasy.schemas.api_response_schemas import ApiResponse

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"description": "The operation rejected the request data"},
    401: {"description": "Client is not authorized for this operation"},
    403: {"description": "Request was not made over the secure scheme"},
    500: {"description": "The operation failed"},
    501: {"description": "The operation returned an unsupported status"},
}


def register_handler_routes(
    router: APIRouter,
    handler: HandlerDefinition,
    endpoints: Mapping[str, Callable[..., Any]],
    *,
    absolute_marker: str | None = None,
) -> None:
    """Generate FastAPI routes from handler metadata.

    Every public operation with a route and a RestInfo is registered with the
    HTTP method of its RestInfo and the path built from the handler prefix
    and the operation route (absolute markers honored).

    Args:
        router: FastAPI APIRouter to register routes on.
        handler: Handler whose operations are routed.
        endpoints: Operation name to endpoint function.
        absolute_marker: Absolute route marker; defaults to the configured one.

    Raises:
        ValueError: If a routable operation has no endpoint, or an endpoint
            names no routable operation.
    """
    marker = absolute_marker or settings.absolute_route_marker
    routable = [
        operation
        for operation in handler.public_operations
        if operation.route is not None and operation.rest_info is not None
    ]

    unknown = set(endpoints) - {operation.name for operation in routable}
    if unknown:
        raise ValueError(
            f"Handler '{handler.name}' has no routable operations named {sorted(unknown)}"
        )

    for operation in routable:
        # Narrowed by the comprehension above
        assert operation.route is not None and operation.rest_info is not None

        if operation.name not in endpoints:
            raise ValueError(
                f"No endpoint for operation '{operation.name}' of handler '{handler.name}'"
            )

        router.add_api_route(
            path=_route_path(handler.route_prefix, operation.route, marker),
            endpoint=endpoints[operation.name],
            methods=[operation.rest_info.http_method.value],
            response_model=ApiResponse,
            response_model_exclude_none=True,
            tags=[handler.name],
            summary=operation.rest_info.description,
            operation_id=f"{handler.name}_{operation.name}",
            responses=_ERROR_RESPONSES,
        )


def make_paths_endpoint(
    handler: HandlerDefinition,
) -> Callable[..., Awaitable[ApiResponse | JSONResponse]]:
    """Build the route-listing endpoint of ``handler``.

    Args:
        handler: Handler whose routes the endpoint lists.

    Returns:
        Endpoint function suitable for register_handler_routes().
    """

    async def paths(
        request: Request,
        responder: RestResponder = Depends(get_rest_responder),
    ) -> ApiResponse | JSONResponse:
        return responder.paths(request, handler=handler)

    return paths


def _route_path(prefix: str | None, route: str, marker: str) -> str:
    path = build_route_path("", prefix, route, absolute_marker=marker)
    return path if path.startswith("/") else f"/{path}"

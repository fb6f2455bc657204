"""Application service factories.

Wires the response pipeline from settings and the infrastructure
singletons:

    HandlerCatalog        -> RouteRegistry     -> ResponsePipeline
    AuthorizationProtocol -> AuthorizationGate -> ResponsePipeline

Application-scoped components are lru_cache singletons. An application
built over its own catalog uses build_response_pipeline(); the responder of
the running app is stored on app.state and handed to endpoints through
get_rest_responder().
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Request

from resteasy.core.config import settings
from resteasy.core.container.authorization import get_authorization
from resteasy.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from resteasy.application.services.authorization_gate import AuthorizationGate
    from resteasy.application.services.handler_catalog import HandlerCatalog
    from resteasy.application.services.response_pipeline import ResponsePipeline
    from resteasy.application.services.route_registry import RouteRegistry
    from resteasy.domain.protocols.authorization_protocol import AuthorizationProtocol
    from resteasy.presentation.routers.api.rest_responder import RestResponder


# ============================================================================
# Handler Catalog (App-Scoped)
# ============================================================================


@lru_cache()
def get_handler_catalog() -> "HandlerCatalog":
    """Get the application-scoped handler catalog.

    Handlers are registered into it at startup, before the first request.
    """
    from resteasy.application.services.handler_catalog import HandlerCatalog

    return HandlerCatalog()


# ============================================================================
# Pipeline Components
# ============================================================================


def build_authorization_gate(
    authorization: "AuthorizationProtocol",
) -> "AuthorizationGate":
    """Build an authorization gate configured from settings."""
    from resteasy.application.services.authorization_gate import AuthorizationGate

    return AuthorizationGate(
        authorization=authorization,
        logger=get_logger(),
        secure_scheme=settings.secure_scheme,
        insecure_scheme=settings.insecure_scheme,
        credential_length=settings.credential_length,
        credential_log_prefix_length=settings.credential_log_prefix_length,
    )


def build_route_registry(catalog: "HandlerCatalog") -> "RouteRegistry":
    """Build a route registry over ``catalog`` configured from settings."""
    from resteasy.application.services.route_registry import RouteRegistry

    return RouteRegistry(
        catalog=catalog,
        logger=get_logger(),
        absolute_marker=settings.absolute_route_marker,
    )


@lru_cache()
def get_authorization_gate() -> "AuthorizationGate":
    """Get the application-scoped gate over get_authorization()."""
    return build_authorization_gate(get_authorization())


@lru_cache()
def get_route_registry() -> "RouteRegistry":
    """Get the application-scoped registry over get_handler_catalog()."""
    return build_route_registry(get_handler_catalog())


# ============================================================================
# Response Pipeline
# ============================================================================


def build_response_pipeline(
    catalog: "HandlerCatalog",
    *,
    authorization: "AuthorizationProtocol | None" = None,
) -> "ResponsePipeline":
    """Build a response pipeline over ``catalog``.

    Args:
        catalog: Handler catalog used for related handler discovery.
        authorization: Authorization collaborator; the app-scoped gate is
            reused when omitted.

    Returns:
        ResponsePipeline configured from settings.
    """
    from resteasy.application.services.response_pipeline import ResponsePipeline

    gate = (
        get_authorization_gate()
        if authorization is None
        else build_authorization_gate(authorization)
    )
    return ResponsePipeline(
        gate=gate,
        route_registry=build_route_registry(catalog),
        logger=get_logger(),
        include_endpoints_param=settings.include_endpoints_param,
    )


@lru_cache()
def get_response_pipeline() -> "ResponsePipeline":
    """Get the application-scoped response pipeline."""
    from resteasy.application.services.response_pipeline import ResponsePipeline

    return ResponsePipeline(
        gate=get_authorization_gate(),
        route_registry=get_route_registry(),
        logger=get_logger(),
        include_endpoints_param=settings.include_endpoints_param,
    )


# ============================================================================
# Rest Responder (Request-Scoped Access)
# ============================================================================


def get_rest_responder(request: Request) -> "RestResponder":
    """Get the responder of the running application.

    Set by create_app() on app.state; falls back to a responder over the
    application-scoped pipeline.

    Usage:
        @router.get("/items")
        async def list_items(
            request: Request,
            responder: RestResponder = Depends(get_rest_responder),
        ):
            return await responder.respond(request, ...)
    """
    responder = getattr(request.app.state, "rest_responder", None)
    if responder is not None:
        return responder

    from resteasy.presentation.routers.api.rest_responder import RestResponder

    return RestResponder(pipeline=get_response_pipeline())

"""
FastAPI application factory.

create_app() wires the trace middleware, the RFC 9457 exception handlers,
the system routes and the rest responder of a handler catalog. Handler
routers are generated by the embedding service with register_handler_routes()
and passed in.

Usage:
    catalog = HandlerCatalog([ITEMS, ORDERS])
    router = APIRouter()
    register_handler_routes(router, ITEMS, {...})
    register_handler_routes(router, ORDERS, {...})

    app = create_app(catalog=catalog, routers=[router])
"""

from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from resteasy.application.services.handler_catalog import HandlerCatalog
from resteasy.core.config import settings
from resteasy.core.container import (
    build_response_pipeline,
    get_handler_catalog,
    get_logger,
    get_response_pipeline,
)
from resteasy.domain.protocols.authorization_protocol import AuthorizationProtocol
from resteasy.presentation.routers import system_router
from resteasy.presentation.routers.api.errors import register_exception_handlers
from resteasy.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from resteasy.presentation.routers.api.rest_responder import RestResponder


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    get_logger().info(
        "application_started",
        app_name=settings.app_name,
        environment=settings.environment.value,
    )

    yield

    get_logger().info("application_stopped", app_name=settings.app_name)


def create_app(
    catalog: HandlerCatalog | None = None,
    routers: Sequence[APIRouter] = (),
    *,
    authorization: AuthorizationProtocol | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        catalog: Handler catalog used for route discovery. Defaults to the
            application-scoped catalog of the container.
        routers: Handler routers to include.
        authorization: Authorization collaborator; defaults to the in-memory
            adapter built from settings.

    Returns:
        FastAPI: Configured application.
    """
    app = FastAPI(
        title=settings.app_name,
        description="Permission-gated, self-describing HTTP API",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    if catalog is None and authorization is None:
        pipeline = get_response_pipeline()
    else:
        pipeline = build_response_pipeline(
            catalog if catalog is not None else get_handler_catalog(),
            authorization=authorization,
        )
    app.state.rest_responder = RestResponder(pipeline=pipeline)

    # Wire trace middleware (request correlation)
    app.add_middleware(TraceMiddleware)

    # Register global exception handlers (RFC 9457 error responses)
    register_exception_handlers(app)

    app.include_router(system_router)
    for router in routers:
        app.include_router(router)

    return app


app = create_app()

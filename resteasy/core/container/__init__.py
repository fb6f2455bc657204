"""Container module - Centralized dependency injection.

All factories are re-exported here:

    from resteasy.core.container import get_logger, get_response_pipeline

The container is organized into modules by concern:
- infrastructure: Logging
- authorization: In-memory authorization adapter
- services: Handler catalog, pipeline components and the rest responder
"""

from resteasy.core.container.authorization import get_authorization
from resteasy.core.container.infrastructure import get_logger
from resteasy.core.container.services import (
    build_authorization_gate,
    build_response_pipeline,
    build_route_registry,
    get_authorization_gate,
    get_handler_catalog,
    get_response_pipeline,
    get_rest_responder,
    get_route_registry,
)

__all__ = [
    "build_authorization_gate",
    "build_response_pipeline",
    "build_route_registry",
    "get_authorization",
    "get_authorization_gate",
    "get_handler_catalog",
    "get_logger",
    "get_response_pipeline",
    "get_rest_responder",
    "get_route_registry",
]

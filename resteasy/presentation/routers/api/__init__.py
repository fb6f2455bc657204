"""HTTP boundary of the response pipeline.

Exports:
    RestResponder: Handler-facing API converting pipeline results to responses
    build_request_context: FastAPI Request -> RequestContext
    register_handler_routes: Generate FastAPI routes from a HandlerDefinition
    make_paths_endpoint: Route-listing endpoint of a handler
"""

from resteasy.presentation.routers.api.generator import (
    make_paths_endpoint,
    register_handler_routes,
)
from resteasy.presentation.routers.api.request_context import build_request_context
from resteasy.presentation.routers.api.rest_responder import RestResponder

__all__ = [
    "RestResponder",
    "build_request_context",
    "make_paths_endpoint",
    "register_handler_routes",
]

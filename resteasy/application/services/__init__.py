"""Application services.

Exports:
    HandlerCatalog: Handler registration table
    AuthorizationGate: Secure transport check plus authorization delegation
    RouteRegistry: Endpoint discovery from handler metadata
    ResponsePipeline: Permission-gated response construction
"""

from resteasy.application.services.authorization_gate import (
    AuthorizationGate,
    derive_required_permissions,
)
from resteasy.application.services.handler_catalog import (
    HandlerCatalog,
    HandlerNotRegisteredError,
)
from resteasy.application.services.response_pipeline import (
    PipelineErrorMessage,
    ResponsePipeline,
)
from resteasy.application.services.route_registry import (
    RouteRegistry,
    build_route_path,
)

__all__ = [
    "AuthorizationGate",
    "HandlerCatalog",
    "HandlerNotRegisteredError",
    "PipelineErrorMessage",
    "ResponsePipeline",
    "RouteRegistry",
    "build_route_path",
    "derive_required_permissions",
]

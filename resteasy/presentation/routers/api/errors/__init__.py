"""RFC 9457 error responses and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
    ErrorResponseBuilder: Maps ApplicationError to problem-detail responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from resteasy.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from resteasy.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)
from resteasy.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]

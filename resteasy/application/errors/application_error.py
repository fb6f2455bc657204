"""Application layer error types.

The response pipeline returns these inside Failure results; the boundary
adapter maps each code to exactly one HTTP status. The message is safe to
show clients: it never carries exception text.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    These are the only failure signals the core exposes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.UNAUTHORIZED,
        ...     message="Client is not authorized for this operation",
        ... )
    """

    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"
    INTERNAL_ERROR = "internal_error"
    NOT_IMPLEMENTED = "not_implemented"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable, client-safe error message
        details: Additional context as key-value pairs

    Examples:
        >>> # Plain HTTP request
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="Secure transport required",
        ...     details={"reason": "transport_rejected"},
        ... )
    """

    code: ApplicationErrorCode
    message: str
    details: dict[str, str] | None = None

"""Result types for railway-oriented programming.

The response pipeline never raises to select an HTTP status. Every outcome
travels back to the boundary as a Result, and the boundary maps the error
code to a status.

Usage:
    result = await pipeline.execute(...)
    match result:
        case Success(value=envelope):
            return ApiResponse.from_envelope(envelope)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, ...)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]

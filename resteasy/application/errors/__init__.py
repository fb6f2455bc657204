"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
"""

from resteasy.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
]

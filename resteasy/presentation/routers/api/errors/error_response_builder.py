"""Error response builder for RFC 9457 Problem Details.

Converts pipeline failures into problem-detail JSON responses. This is the
single place where an ApplicationErrorCode becomes an HTTP status.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from resteasy.application.errors import ApplicationError, ApplicationErrorCode
from resteasy.core.config import settings
from resteasy.presentation.routers.api.errors.problem_details import ProblemDetails

_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ApplicationErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ApplicationErrorCode.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.NOT_IMPLEMENTED: status.HTTP_501_NOT_IMPLEMENTED,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.FORBIDDEN: "Access Denied",
    ApplicationErrorCode.UNAUTHORIZED: "Authentication Required",
    ApplicationErrorCode.BAD_REQUEST: "Bad Request",
    ApplicationErrorCode.INTERNAL_ERROR: "Internal Server Error",
    ApplicationErrorCode.NOT_IMPLEMENTED: "Not Implemented",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.UNAUTHORIZED,
        ...     message="Client is not authorized for this operation",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        401
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance path)
            trace_id: Request trace ID, None outside a traced request

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(
            ...     ApplicationErrorCode.NOT_IMPLEMENTED
            ... )
            501
        """
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        return _TITLES.get(code, "Internal Server Error")

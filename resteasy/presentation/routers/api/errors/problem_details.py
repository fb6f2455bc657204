"""RFC 9457 Problem Details for HTTP APIs.

Every non-success response of the API carries this body. The detail text is
the client-safe ApplicationError message; exception text never reaches it.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error (request validation failures).

    Attributes:
        field: Dotted location of the invalid value
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Client-safe explanation specific to this occurrence
        instance: Request path of this occurrence
        errors: Optional list of field-specific errors
        trace_id: Request trace ID for correlation with logs

    Examples:
        >>> # Plain HTTP request to a gated operation
        >>> problem = ProblemDetails(
        ...     type="https://resteasy.local/errors/forbidden",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail="Secure transport required",
        ...     instance="/api/items",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://resteasy.local/errors/unauthorized"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Authentication Required"],
    )
    status: int = Field(..., description="HTTP status code", examples=[401])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Client is not authorized for this operation"],
    )
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/items"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )

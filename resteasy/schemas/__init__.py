"""Pydantic response schemas for the HTTP boundary."""

from resteasy.schemas.api_response_schemas import ApiResponse, EndpointItemResponse

__all__ = ["ApiResponse", "EndpointItemResponse"]

"""Response envelope schemas.

Pydantic schemas for the uniform response body every handler returns:
- EndpointItemResponse: one discoverable endpoint
- ApiResponse: optional content plus the endpoint items
- DTO-to-schema conversion methods
"""

from typing import Any

from pydantic import BaseModel, Field

from resteasy.application.dtos.response_envelope import ResponseEnvelope
from resteasy.domain.value_objects.endpoint_descriptor import EndpointDescriptor


class EndpointItemResponse(BaseModel):
    """Single discoverable endpoint.

    Attributes:
        http_method: HTTP verb (e.g. "GET").
        full_path: Full path, qualified with the request authority unless absolute.
        description: Human-readable description.
        required_model_name: Name of the request body model, if one is required.
    """

    http_method: str = Field(..., description="HTTP verb", examples=["GET"])
    full_path: str = Field(
        ...,
        description="Full path of the endpoint",
        examples=["api.example.com:443/api/items"],
    )
    description: str = Field(..., description="Human-readable description")
    required_model_name: str | None = Field(
        None, description="Request body model name, if a model is required"
    )

    @classmethod
    def from_descriptor(cls, descriptor: EndpointDescriptor) -> "EndpointItemResponse":
        """Convert an EndpointDescriptor to a response schema.

        Args:
            descriptor: Discovered endpoint.

        Returns:
            EndpointItemResponse schema.
        """
        return cls(
            http_method=descriptor.http_method,
            full_path=descriptor.full_path,
            description=descriptor.description,
            required_model_name=descriptor.required_model_name,
        )


class ApiResponse(BaseModel):
    """Uniform response envelope.

    Attributes:
        content: Operation payload, omitted when absent.
        endpoint_items: Endpoints of the handler and its related handlers.
    """

    content: Any | None = Field(None, description="Operation payload")
    endpoint_items: list[EndpointItemResponse] = Field(
        default_factory=list,
        description="Endpoints of the handler and its related handlers",
    )

    @classmethod
    def from_envelope(cls, envelope: ResponseEnvelope[Any]) -> "ApiResponse":
        """Convert a ResponseEnvelope DTO to a response schema.

        Args:
            envelope: Pipeline result.

        Returns:
            ApiResponse schema.
        """
        return cls(
            content=envelope.content,
            endpoint_items=[
                EndpointItemResponse.from_descriptor(item)
                for item in envelope.endpoint_items
            ],
        )

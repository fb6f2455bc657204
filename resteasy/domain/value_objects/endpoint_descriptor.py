"""Endpoint descriptor value object.

One entry in a route listing: what a client needs to call an operation.
Descriptors are produced fresh by every discovery pass and never stored.

Usage:
    EndpointDescriptor(
        http_method="POST",
        full_path="api.local:443/api/items",
        description="Create an item",
        required_model_name="ItemCreate",
    )
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class EndpointDescriptor:
    """Externally visible metadata for one operation (value object).

    Attributes:
        http_method: HTTP method name (e.g. "GET").
        full_path: Authority-qualified path, or an absolute path when the
            route was marked absolute.
        description: Human-readable description of the operation.
        required_model_name: Name of the request body model, None when the
            operation takes no body.
    """

    http_method: str
    full_path: str
    description: str
    required_model_name: str | None = None

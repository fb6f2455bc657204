"""Response envelope DTO.

What every pipeline call produces on success: an optional payload and the
endpoint items for the handler (empty when enrichment was switched off).
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from resteasy.domain.value_objects.endpoint_descriptor import EndpointDescriptor

U = TypeVar("U")


@dataclass(frozen=True, slots=True, kw_only=True)
class ResponseEnvelope(Generic[U]):
    """Uniform response envelope.

    Attributes:
        content: Transformed payload, None for listing-only calls or when the
            operation produced nothing.
        endpoint_items: Descriptors for the handler and its related handlers.
    """

    content: U | None = None
    endpoint_items: tuple[EndpointDescriptor, ...] = field(default_factory=tuple)

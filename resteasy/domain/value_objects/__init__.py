"""Domain value objects.

Immutable records exchanged between the pipeline, its collaborators and the
boundary adapter.
"""

from resteasy.domain.value_objects.data_result import DataResult
from resteasy.domain.value_objects.endpoint_descriptor import EndpointDescriptor
from resteasy.domain.value_objects.request_context import RequestContext

__all__ = [
    "DataResult",
    "EndpointDescriptor",
    "RequestContext",
]

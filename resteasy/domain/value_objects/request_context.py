"""Per-request context consumed by the response pipeline.

Everything the pipeline needs from the inbound HTTP request, already
extracted by the boundary adapter so the application layer stays free of
framework types.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestContext:
    """Transport facts about the current request (value object).

    Attributes:
        scheme: URL scheme the request arrived on (e.g. "https").
        authority: "host:port" of the request URL, used to qualify routes.
        credential: Client key from the Authorization header, None if absent.
        query_params: Query string parameters (last value wins).
        trace_id: Request correlation ID, None outside a traced request.
    """

    scheme: str
    authority: str
    credential: str | None = None
    query_params: Mapping[str, str] = field(default_factory=dict)
    trace_id: str | None = None

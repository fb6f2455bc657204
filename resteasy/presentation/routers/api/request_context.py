"""Request context extraction.

Turns a FastAPI Request into the framework-free RequestContext the response
pipeline consumes.

Authority:
    "host:port" of the request URL. When the URL carries no explicit port the
    scheme's default port is used, so endpoint paths always look like
    "api.example.com:443/api/items".
    IPv6 hosts keep their brackets: "[::1]:443".

Credential:
    The raw Authorization header value (the client key), None when absent.
"""

from fastapi import Request

from resteasy.domain.value_objects.request_context import RequestContext
from resteasy.presentation.routers.api.middleware.trace_middleware import get_trace_id

DEFAULT_PORTS: dict[str, int] = {"http": 80, "https": 443}


def build_request_context(request: Request) -> RequestContext:
    """Extract the transport facts of ``request``.

    Args:
        request: Incoming FastAPI request.

    Returns:
        RequestContext: Scheme, authority, credential, query parameters and
        trace ID of the request.
    """
    url = request.url
    scheme = url.scheme.lower()
    host = url.hostname or ""
    # hostname strips the brackets of an IPv6 literal
    if ":" in host:
        host = f"[{host}]"
    port = url.port or DEFAULT_PORTS.get(scheme)
    authority = f"{host}:{port}" if port is not None else host

    return RequestContext(
        scheme=scheme,
        authority=authority,
        credential=request.headers.get("Authorization"),
        query_params=dict(request.query_params),
        trace_id=getattr(request.state, "trace_id", None) or get_trace_id(),
    )

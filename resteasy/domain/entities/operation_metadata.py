"""Operation metadata types.

Every exposed operation is declared once, at startup, as an
OperationMetadata entry on its HandlerDefinition. The entry is the single
source of truth for the operation's route fragment, its client-facing REST
description and its access requirements.

Core types:
    HTTPMethod: HTTP method enum (GET, POST, PUT, PATCH, DELETE)
    RestInfo: Client-facing description (method, description, body model)
    OperationMetadata: Complete operation declaration

Usage:
    from resteasy.domain.entities import HTTPMethod, OperationMetadata, RestInfo
    from resteasy.domain.enums import AccessRequirement

    OperationMetadata(
        name="create_item",
        route="items",
        rest_info=RestInfo(
            http_method=HTTPMethod.POST,
            description="Create an item",
            model_name="ItemCreate",
        ),
        access_requirements=(AccessRequirement.WRITE,),
    )
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from resteasy.domain.enums.permission_level import AccessRequirement


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for exposed operations.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations
        PUT: Idempotent complete replacement
        PATCH: Non-idempotent partial update
        DELETE: Idempotent delete operations
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# =============================================================================
# REST Description
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class RestInfo:
    """Endpoint information relayed to API clients.

    A blank model name means the operation takes no request body.

    Attributes:
        http_method: HTTP method of the endpoint.
        description: Endpoint description.
        model_name: Name of the model expected in the request body.

    Examples:
        >>> RestInfo(http_method=HTTPMethod.GET, description="List items")
        >>> RestInfo(
        ...     http_method=HTTPMethod.POST,
        ...     description="Create an item",
        ...     model_name="ItemCreate",
        ... )
    """

    http_method: HTTPMethod
    description: str
    model_name: str | None = None

    def __post_init__(self) -> None:
        if self.model_name is not None and not self.model_name.strip():
            object.__setattr__(self, "model_name", None)

    @property
    def requires_model(self) -> bool:
        """Whether the endpoint expects a model in the request body."""
        return self.model_name is not None


# =============================================================================
# Operation Metadata
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationMetadata:
    """Declaration of one exposed operation.

    Identity:
        name: Operation name, unique within its handler.

    Routing:
        route: Route fragment relative to the handler's prefix. A leading
            absolute marker ("~" by default) makes it a complete path.
            None means the operation has no route and is never listed.

    Client description:
        rest_info: REST description; operations without one are routable
            but are not listed in endpoint items.

    Access:
        access_requirements: Declared markers, one required permission each.
            Order and duplicates are preserved.
        is_public: Non-public operations are internal and never listed.
    """

    name: str
    route: str | None = None
    rest_info: RestInfo | None = None
    access_requirements: Sequence[AccessRequirement] = field(default_factory=tuple)
    is_public: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "access_requirements", tuple(self.access_requirements)
        )

"""Response pipeline - permission-gated response construction.

Composition root of the core. For one operation call it runs, in order,
each step short-circuiting the rest:

    1. Derive required permissions from the operation's access markers
    2. AuthorizationGate (secure transport + authorization collaborator)
    3. Data closure (awaited exactly once, only when allowed)
    4. DataResult status -> error code mapping
    5. Payload transform (soft fallback to no content)
    6. Route enrichment, unless the include-endpoints toggle opts out

Failures come back as Failure(ApplicationError); nothing is raised to pick an
HTTP status. Unexpected exceptions are logged here, with the operation and
handler named, and surface as INTERNAL_ERROR without exception text.

Error mapping:
    AuthorizationOutcome.DENY_FORBIDDEN    -> FORBIDDEN
    AuthorizationOutcome.DENY_UNAUTHORIZED -> UNAUTHORIZED
    AuthorizationOutcome.INTERNAL_FAILURE  -> INTERNAL_ERROR
    DataStatus.INVALID                     -> BAD_REQUEST
    DataStatus.ERROR                       -> INTERNAL_ERROR
    any other status                       -> NOT_IMPLEMENTED
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from resteasy.application.dtos.response_envelope import ResponseEnvelope
from resteasy.application.errors import ApplicationError, ApplicationErrorCode
from resteasy.application.services.authorization_gate import (
    AuthorizationGate,
    derive_required_permissions,
)
from resteasy.application.services.route_registry import RouteRegistry
from resteasy.core.result import Failure, Result, Success
from resteasy.domain.entities.handler_definition import HandlerDefinition
from resteasy.domain.entities.operation_metadata import OperationMetadata
from resteasy.domain.enums.authorization_outcome import AuthorizationOutcome
from resteasy.domain.enums.data_status import DataStatus
from resteasy.domain.protocols.logger_protocol import LoggerProtocol
from resteasy.domain.value_objects.data_result import DataResult
from resteasy.domain.value_objects.endpoint_descriptor import EndpointDescriptor
from resteasy.domain.value_objects.request_context import RequestContext

T = TypeVar("T")
U = TypeVar("U")

DataExec = Callable[[], Awaitable[DataResult[Any]]]


class PipelineErrorMessage:
    """Client-safe messages for pipeline failures."""

    TRANSPORT_REJECTED = "Secure transport required"
    UNAUTHORIZED = "Client is not authorized for this operation"
    AUTHORIZATION_FAILED = "Authorization could not be completed"
    INVALID_DATA = "The request was invalid"
    DATA_ERROR = "The operation failed"
    UNKNOWN_STATUS = "The operation returned an unsupported status"
    UNEXPECTED = "An unexpected error occurred while creating the response"
    ROUTE_LISTING_FAILED = "Routing information could not be retrieved"


_AUTHORIZATION_FAILURES: dict[AuthorizationOutcome, ApplicationError] = {
    AuthorizationOutcome.DENY_FORBIDDEN: ApplicationError(
        code=ApplicationErrorCode.FORBIDDEN,
        message=PipelineErrorMessage.TRANSPORT_REJECTED,
        details={"reason": "transport_rejected"},
    ),
    AuthorizationOutcome.DENY_UNAUTHORIZED: ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message=PipelineErrorMessage.UNAUTHORIZED,
    ),
    AuthorizationOutcome.INTERNAL_FAILURE: ApplicationError(
        code=ApplicationErrorCode.INTERNAL_ERROR,
        message=PipelineErrorMessage.AUTHORIZATION_FAILED,
    ),
}


class ResponsePipeline:
    """Builds response envelopes for permission-gated operations.

    Dependencies (injected via constructor):
        - AuthorizationGate: Transport and permission decision
        - RouteRegistry: Endpoint discovery for enrichment
        - LoggerProtocol: Rejections and unexpected failures
    """

    def __init__(
        self,
        gate: AuthorizationGate,
        route_registry: RouteRegistry,
        logger: LoggerProtocol,
        *,
        include_endpoints_param: str = "includeEndpoints",
    ) -> None:
        """Initialize pipeline with dependencies.

        Args:
            gate: Authorization gate.
            route_registry: Endpoint discovery.
            logger: Structured logger.
            include_endpoints_param: Default query key of the enrichment
                toggle (handlers may override it).
        """
        self._gate = gate
        self._routes = route_registry
        self._logger = logger
        self._include_endpoints_param = include_endpoints_param

    async def execute(
        self,
        *,
        handler: HandlerDefinition,
        operation: OperationMetadata,
        context: RequestContext,
        data_exec: DataExec,
        transform: Callable[[T], U] | None = None,
        payload_type: type[T] | None = None,
    ) -> Result[ResponseEnvelope[U], ApplicationError]:
        """Run a permission-gated operation and build its envelope.

        Args:
            handler: Handler owning the operation (used for enrichment).
            operation: Operation being executed.
            context: Transport facts of the current request.
            data_exec: Zero-argument coroutine factory producing a DataResult.
            transform: Maps the data payload to the response content.
            payload_type: Expected payload type. A payload of another type
                yields no content instead of an error.

        Returns:
            Success(ResponseEnvelope): Operation allowed and succeeded.
            Failure(ApplicationError): Gate or data layer failure.
        """
        logger = self._logger.bind(
            handler=handler.name,
            operation=operation.name,
            trace_id=context.trace_id,
        )
        required_permissions = derive_required_permissions(
            operation.access_requirements
        )

        try:
            outcome = await self._gate.check(
                context.scheme, context.credential, required_permissions
            )
            if outcome is not AuthorizationOutcome.ALLOW:
                return self._reject(logger, _AUTHORIZATION_FAILURES[outcome])

            result = await data_exec()

            status_error = self._map_status(result.status)
            if status_error is not None:
                return self._reject(logger, status_error)

            content = self._transform_content(result, transform, payload_type)

            endpoint_items: list[EndpointDescriptor] = []
            if self.should_include_endpoints(handler, context.query_params):
                endpoint_items = self._routes.discover(handler, context.authority)
        except Exception as e:
            logger.error("response_pipeline_failed", error=e)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.INTERNAL_ERROR,
                    message=PipelineErrorMessage.UNEXPECTED,
                )
            )

        return Success(
            value=ResponseEnvelope(
                content=content,
                endpoint_items=tuple(endpoint_items),
            )
        )

    async def execute_without_content(
        self,
        *,
        handler: HandlerDefinition,
        operation: OperationMetadata,
        context: RequestContext,
        data_exec: DataExec,
    ) -> Result[ResponseEnvelope[None], ApplicationError]:
        """Run a permission-gated operation whose payload is not returned.

        Same gates as execute(); the envelope carries endpoint items only.
        """
        result = await self.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_exec,
        )
        if isinstance(result, Failure):
            return result
        return Success(
            value=ResponseEnvelope(endpoint_items=result.value.endpoint_items)
        )

    def list_routes(
        self,
        *,
        handler: HandlerDefinition,
        context: RequestContext,
    ) -> Result[ResponseEnvelope[None], ApplicationError]:
        """Build an envelope holding only routing information.

        No authorization and no data access: the listing describes what a
        client may call, each call is still gated individually.

        Args:
            handler: Handler whose routes are listed.
            context: Transport facts of the current request.

        Returns:
            Success(ResponseEnvelope): Endpoint items for handler and related handlers.
            Failure(ApplicationError): INTERNAL_ERROR if discovery raised.
        """
        try:
            endpoint_items = self._routes.discover(handler, context.authority)
        except Exception as e:
            self._logger.error(
                "route_listing_failed",
                error=e,
                handler=handler.name,
                trace_id=context.trace_id,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.INTERNAL_ERROR,
                    message=PipelineErrorMessage.ROUTE_LISTING_FAILED,
                )
            )
        return Success(value=ResponseEnvelope(endpoint_items=tuple(endpoint_items)))

    def should_include_endpoints(
        self, handler: HandlerDefinition, query_params: Mapping[str, str]
    ) -> bool:
        """Evaluate the include-endpoints query toggle.

        Absent toggle means include. A present toggle includes only when its
        value is the literal "true", compared case-insensitively.
        """
        key = handler.include_endpoints_param or self._include_endpoints_param
        if key not in query_params:
            return True
        return query_params[key].strip().lower() == "true"

    @staticmethod
    def _reject(
        logger: LoggerProtocol, error: ApplicationError
    ) -> Failure[ApplicationError]:
        logger.warning(
            "response_rejected",
            error_code=error.code.value,
            details=error.details,
        )
        return Failure(error=error)

    @staticmethod
    def _map_status(status: DataStatus | str) -> ApplicationError | None:
        match status:
            case DataStatus.SUCCESS:
                return None
            case DataStatus.INVALID:
                return ApplicationError(
                    code=ApplicationErrorCode.BAD_REQUEST,
                    message=PipelineErrorMessage.INVALID_DATA,
                )
            case DataStatus.ERROR:
                return ApplicationError(
                    code=ApplicationErrorCode.INTERNAL_ERROR,
                    message=PipelineErrorMessage.DATA_ERROR,
                )
            case _:
                return ApplicationError(
                    code=ApplicationErrorCode.NOT_IMPLEMENTED,
                    message=PipelineErrorMessage.UNKNOWN_STATUS,
                    details={"status": str(status)},
                )

    @staticmethod
    def _transform_content(
        result: DataResult[Any],
        transform: Callable[[T], U] | None,
        payload_type: type[T] | None,
    ) -> U | None:
        # Soft fallback: missing transform, missing value or a payload of an
        # unexpected type all yield no content
        if transform is None or not result.has_value:
            return None
        if payload_type is not None and not isinstance(result.value, payload_type):
            return None
        return transform(result.value)

"""Rest responder - handler-facing API of the response pipeline.

Endpoint functions call the responder instead of the pipeline: it extracts
the RequestContext from the FastAPI request, runs the pipeline and converts
the Result into either an ApiResponse (200) or an RFC 9457 problem detail.

Usage:
    ITEMS = HandlerDefinition(
        name="items",
        route_prefix="api/items",
        operations=(
            OperationMetadata(
                name="list_items",
                route="",
                rest_info=RestInfo(http_method=HTTPMethod.GET, description="List items"),
                access_requirements=(AccessRequirement.READ,),
            ),
        ),
    )

    async def list_items(
        request: Request,
        responder: RestResponder = Depends(get_rest_responder),
    ):
        return await responder.respond(
            request,
            handler=ITEMS,
            operation="list_items",
            data_exec=repository.list_items,
            transform=lambda items: [item.to_dict() for item in items],
        )
"""

from collections.abc import Callable
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from resteasy.application.dtos.response_envelope import ResponseEnvelope
from resteasy.application.errors import ApplicationError
from resteasy.application.services.response_pipeline import DataExec, ResponsePipeline
from resteasy.core.result import Failure, Result, Success
from resteasy.domain.entities.handler_definition import HandlerDefinition
from resteasy.domain.value_objects.request_context import RequestContext
from resteasy.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from resteasy.presentation.routers.api.request_context import build_request_context
from resteasy.schemas.api_response_schemas import ApiResponse


class RestResponder:
    """Converts pipeline results into HTTP responses.

    Dependencies (injected via constructor):
        - ResponsePipeline: Gate, data execution and enrichment
    """

    def __init__(self, pipeline: ResponsePipeline) -> None:
        self._pipeline = pipeline

    async def respond(
        self,
        request: Request,
        *,
        handler: HandlerDefinition,
        operation: str,
        data_exec: DataExec,
        transform: Callable[[Any], Any] | None = None,
        payload_type: type | None = None,
    ) -> ApiResponse | JSONResponse:
        """Run a gated operation and return its content with endpoint items.

        Args:
            request: Incoming FastAPI request.
            handler: Handler owning the operation.
            operation: Operation name within the handler.
            data_exec: Zero-argument coroutine factory producing a DataResult.
            transform: Maps the payload to the response content.
            payload_type: Expected payload type (no content on mismatch).

        Returns:
            ApiResponse on success, problem-detail JSONResponse on failure.

        Raises:
            OperationNotRegisteredError: If ``operation`` is not declared on
                ``handler`` (a programming error, surfaced as a 500).
        """
        context = build_request_context(request)
        result = await self._pipeline.execute(
            handler=handler,
            operation=handler.get_operation(operation),
            context=context,
            data_exec=data_exec,
            transform=transform,
            payload_type=payload_type,
        )
        return self._to_response(result, request, context)

    async def respond_without_content(
        self,
        request: Request,
        *,
        handler: HandlerDefinition,
        operation: str,
        data_exec: DataExec,
    ) -> ApiResponse | JSONResponse:
        """Run a gated operation and return endpoint items only."""
        context = build_request_context(request)
        result = await self._pipeline.execute_without_content(
            handler=handler,
            operation=handler.get_operation(operation),
            context=context,
            data_exec=data_exec,
        )
        return self._to_response(result, request, context)

    def paths(
        self, request: Request, *, handler: HandlerDefinition
    ) -> ApiResponse | JSONResponse:
        """List the routes of ``handler`` and its related handlers.

        Not gated: the listing is what a client uses to discover the API.
        """
        context = build_request_context(request)
        result = self._pipeline.list_routes(handler=handler, context=context)
        return self._to_response(result, request, context)

    @staticmethod
    def _to_response(
        result: Result[ResponseEnvelope[Any], ApplicationError],
        request: Request,
        context: RequestContext,
    ) -> ApiResponse | JSONResponse:
        match result:
            case Success(value=envelope):
                return ApiResponse.from_envelope(envelope)
            case Failure(error=error):
                return ErrorResponseBuilder.from_application_error(
                    error=error,
                    request=request,
                    trace_id=context.trace_id,
                )

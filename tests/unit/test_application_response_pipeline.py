"""Unit tests for ResponsePipeline.

Tests cover:
- Authorization outcome mapping (and that denied calls never touch data)
- DataResult status mapping
- Payload transform with soft fallback
- Include-endpoints toggle (default and per-handler key)
- Unexpected exceptions become INTERNAL_ERROR
- Route-only listing
"""

from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock

import pytest

from resteasy.application.errors import ApplicationErrorCode
from resteasy.application.services.authorization_gate import AuthorizationGate
from resteasy.application.services.handler_catalog import HandlerCatalog
from resteasy.application.services.response_pipeline import ResponsePipeline
from resteasy.application.services.route_registry import RouteRegistry
from resteasy.core.result import Failure, Success
from resteasy.domain.enums.authorization_outcome import AuthorizationOutcome
from resteasy.domain.enums.data_status import DataStatus
from resteasy.domain.enums.permission_level import AccessRequirement, PermissionLevel
from resteasy.domain.value_objects.data_result import DataResult
from resteasy.domain.value_objects.request_context import RequestContext
from tests.conftest import CLIENT_KEY, create_handler, create_operation


@dataclass
class Item:
    name: str


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_gate() -> AsyncMock:
    """Gate that allows by default."""
    gate = AsyncMock(spec=AuthorizationGate)
    gate.check.return_value = AuthorizationOutcome.ALLOW
    return gate


@pytest.fixture
def catalog() -> HandlerCatalog:
    items = create_handler(name="items", related_handlers=("orders",))
    orders = create_handler(
        name="orders",
        route_prefix="api",
        operations=(create_operation(name="list_orders", route="orders"),),
    )
    return HandlerCatalog([items, orders])


@pytest.fixture
def pipeline(
    mock_gate: AsyncMock, catalog: HandlerCatalog, mock_logger: MagicMock
) -> ResponsePipeline:
    return ResponsePipeline(
        gate=mock_gate,
        route_registry=RouteRegistry(catalog=catalog, logger=mock_logger),
        logger=mock_logger,
    )


@pytest.fixture
def handler(catalog: HandlerCatalog):
    return catalog.get("items")


@pytest.fixture
def operation(handler):
    return handler.get_operation("list_items")


@pytest.fixture
def context() -> RequestContext:
    return RequestContext(
        scheme="https",
        authority="api.local:443",
        credential=CLIENT_KEY,
        trace_id="trace-1",
    )


def data_returning(result: DataResult) -> AsyncMock:
    return AsyncMock(return_value=result)


# ============================================================================
# Authorization
# ============================================================================


@pytest.mark.unit
class TestAuthorization:
    """Gate outcomes short-circuit the pipeline."""

    @pytest.mark.parametrize(
        "outcome,code",
        [
            (AuthorizationOutcome.DENY_FORBIDDEN, ApplicationErrorCode.FORBIDDEN),
            (AuthorizationOutcome.DENY_UNAUTHORIZED, ApplicationErrorCode.UNAUTHORIZED),
            (AuthorizationOutcome.INTERNAL_FAILURE, ApplicationErrorCode.INTERNAL_ERROR),
        ],
    )
    async def test_denied_outcomes_map_and_skip_data(
        self, pipeline, mock_gate, handler, operation, context, outcome, code
    ):
        mock_gate.check.return_value = outcome
        data_exec = data_returning(DataResult(status=DataStatus.SUCCESS))

        result = await pipeline.execute(
            handler=handler, operation=operation, context=context, data_exec=data_exec
        )

        assert isinstance(result, Failure)
        assert result.error.code is code
        data_exec.assert_not_awaited()

    async def test_forbidden_carries_transport_reason(
        self, pipeline, mock_gate, handler, operation, context, mock_logger
    ):
        mock_gate.check.return_value = AuthorizationOutcome.DENY_FORBIDDEN

        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(DataResult(status=DataStatus.SUCCESS)),
        )

        assert isinstance(result, Failure)
        assert result.error.details == {"reason": "transport_rejected"}
        mock_logger.warning.assert_called_once_with(
            "response_rejected",
            error_code="forbidden",
            details={"reason": "transport_rejected"},
        )

    async def test_gate_receives_derived_permissions(
        self, pipeline, mock_gate, handler, context
    ):
        operation = create_operation(
            name="purge",
            requirements=(AccessRequirement.WRITE, AccessRequirement.ADMIN),
        )

        await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(DataResult(status=DataStatus.SUCCESS)),
        )

        mock_gate.check.assert_awaited_once_with(
            "https", CLIENT_KEY, [PermissionLevel.WRITE, PermissionLevel.ADMIN]
        )

    async def test_plain_http_never_reaches_data(
        self, catalog, handler, operation, mock_logger
    ):
        authorization = AsyncMock()
        authorization.authorize.return_value = True
        pipeline = ResponsePipeline(
            gate=AuthorizationGate(authorization=authorization, logger=mock_logger),
            route_registry=RouteRegistry(catalog=catalog, logger=mock_logger),
            logger=mock_logger,
        )
        data_exec = data_returning(DataResult(status=DataStatus.SUCCESS, value=1))

        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=RequestContext(
                scheme="http", authority="api.local:80", credential=CLIENT_KEY
            ),
            data_exec=data_exec,
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.FORBIDDEN
        authorization.authorize.assert_not_awaited()
        data_exec.assert_not_awaited()


# ============================================================================
# Data status mapping
# ============================================================================


@pytest.mark.unit
class TestDataStatus:
    """DataResult statuses map to error codes."""

    @pytest.mark.parametrize(
        "status,code",
        [
            (DataStatus.INVALID, ApplicationErrorCode.BAD_REQUEST),
            (DataStatus.ERROR, ApplicationErrorCode.INTERNAL_ERROR),
            ("archived", ApplicationErrorCode.NOT_IMPLEMENTED),
        ],
    )
    async def test_failure_statuses(
        self, pipeline, handler, operation, context, status, code
    ):
        data_exec = data_returning(DataResult(status=status, value=Item("x")))

        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_exec,
            transform=lambda item: item.name,
        )

        assert isinstance(result, Failure)
        assert result.error.code is code
        data_exec.assert_awaited_once()

    async def test_unknown_status_is_named_in_details(
        self, pipeline, handler, operation, context
    ):
        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(DataResult(status="archived")),
        )

        assert isinstance(result, Failure)
        assert result.error.details == {"status": "archived"}

    async def test_unknown_status_is_logged_with_details(
        self, pipeline, handler, operation, context, mock_logger
    ):
        await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(DataResult(status="archived")),
        )

        mock_logger.warning.assert_called_once_with(
            "response_rejected",
            error_code="not_implemented",
            details={"status": "archived"},
        )

    async def test_data_executed_exactly_once(self, pipeline, handler, operation, context):
        data_exec = data_returning(DataResult(status=DataStatus.SUCCESS, value=Item("a")))

        await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_exec,
            transform=lambda item: item.name,
        )

        data_exec.assert_awaited_once_with()


# ============================================================================
# Content
# ============================================================================


@pytest.mark.unit
class TestContent:
    """Transform and soft fallback."""

    async def test_success_transforms_value(self, pipeline, handler, operation, context):
        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(
                DataResult(status=DataStatus.SUCCESS, value=Item("widget"))
            ),
            transform=lambda item: {"name": item.name},
            payload_type=Item,
        )

        assert isinstance(result, Success)
        assert result.value.content == {"name": "widget"}

    async def test_missing_value_yields_no_content(
        self, pipeline, handler, operation, context
    ):
        transform = MagicMock()

        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(DataResult(status=DataStatus.SUCCESS)),
            transform=transform,
        )

        assert isinstance(result, Success)
        assert result.value.content is None
        transform.assert_not_called()

    async def test_payload_type_mismatch_yields_no_content(
        self, pipeline, handler, operation, context
    ):
        transform = MagicMock()

        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(
                DataResult(status=DataStatus.SUCCESS, value="not an item")
            ),
            transform=transform,
            payload_type=Item,
        )

        assert isinstance(result, Success)
        assert result.value.content is None
        transform.assert_not_called()

    async def test_no_transform_yields_no_content(
        self, pipeline, handler, operation, context
    ):
        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(DataResult(status=DataStatus.SUCCESS, value=1)),
        )

        assert isinstance(result, Success)
        assert result.value.content is None

    async def test_without_content_keeps_endpoint_items(
        self, pipeline, handler, operation, context
    ):
        result = await pipeline.execute_without_content(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(
                DataResult(status=DataStatus.SUCCESS, value=Item("ignored"))
            ),
        )

        assert isinstance(result, Success)
        assert result.value.content is None
        assert len(result.value.endpoint_items) == 2

    async def test_without_content_propagates_failure(
        self, pipeline, mock_gate, handler, operation, context
    ):
        mock_gate.check.return_value = AuthorizationOutcome.DENY_UNAUTHORIZED

        result = await pipeline.execute_without_content(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(DataResult(status=DataStatus.SUCCESS)),
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.UNAUTHORIZED


# ============================================================================
# Endpoint enrichment
# ============================================================================


@pytest.mark.unit
class TestEnrichment:
    """Include-endpoints toggle."""

    async def _items(self, pipeline, handler, operation, query_params):
        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=RequestContext(
                scheme="https",
                authority="api.local:443",
                credential=CLIENT_KEY,
                query_params=query_params,
            ),
            data_exec=data_returning(DataResult(status=DataStatus.SUCCESS)),
        )
        assert isinstance(result, Success)
        return [item.full_path for item in result.value.endpoint_items]

    async def test_items_included_by_default(self, pipeline, handler, operation):
        assert await self._items(pipeline, handler, operation, {}) == [
            "api.local:443/api/items",
            "api.local:443/api/orders",
        ]

    @pytest.mark.parametrize("value", ["true", "TRUE", "True"])
    async def test_true_includes(self, pipeline, handler, operation, value):
        items = await self._items(
            pipeline, handler, operation, {"includeEndpoints": value}
        )

        assert len(items) == 2

    @pytest.mark.parametrize("value", ["false", "0", "", "yes"])
    async def test_other_values_exclude(self, pipeline, handler, operation, value):
        items = await self._items(
            pipeline, handler, operation, {"includeEndpoints": value}
        )

        assert items == []

    async def test_handler_key_overrides_default(self, pipeline, operation):
        handler = create_handler(include_endpoints_param="links")

        assert await self._items(
            pipeline, handler, operation, {"includeEndpoints": "false"}
        ) == ["api.local:443/api/items"]
        assert await self._items(pipeline, handler, operation, {"links": "false"}) == []

    async def test_configured_default_key(self, mock_gate, catalog, mock_logger, handler, operation):
        pipeline = ResponsePipeline(
            gate=mock_gate,
            route_registry=RouteRegistry(catalog=catalog, logger=mock_logger),
            logger=mock_logger,
            include_endpoints_param="expand",
        )

        assert await self._items(pipeline, handler, operation, {"expand": "no"}) == []


# ============================================================================
# Unexpected failures
# ============================================================================


@pytest.mark.unit
class TestUnexpectedFailures:
    """Exceptions never escape the pipeline."""

    async def test_data_exception_becomes_internal_error(
        self, pipeline, handler, operation, context, mock_logger
    ):
        data_exec = AsyncMock(side_effect=ConnectionError("db down"))

        result = await pipeline.execute(
            handler=handler, operation=operation, context=context, data_exec=data_exec
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.INTERNAL_ERROR
        assert "db down" not in result.error.message
        mock_logger.bind.assert_called_once_with(
            handler="items", operation="list_items", trace_id="trace-1"
        )
        args, kwargs = mock_logger.error.call_args
        assert args == ("response_pipeline_failed",)
        assert isinstance(kwargs["error"], ConnectionError)

    async def test_transform_exception_becomes_internal_error(
        self, pipeline, handler, operation, context
    ):
        def explode(_value):
            raise KeyError("name")

        result = await pipeline.execute(
            handler=handler,
            operation=operation,
            context=context,
            data_exec=data_returning(DataResult(status=DataStatus.SUCCESS, value={})),
            transform=explode,
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.INTERNAL_ERROR


# ============================================================================
# Route listing
# ============================================================================


@pytest.mark.unit
class TestListRoutes:
    """Route-only envelopes."""

    def test_lists_without_authorization(self, pipeline, mock_gate, handler):
        result = pipeline.list_routes(
            handler=handler,
            context=RequestContext(scheme="http", authority="api.local:80"),
        )

        assert isinstance(result, Success)
        assert result.value.content is None
        assert [item.full_path for item in result.value.endpoint_items] == [
            "api.local:80/api/items",
            "api.local:80/api/orders",
        ]
        mock_gate.check.assert_not_awaited()

    def test_discovery_exception_becomes_internal_error(
        self, mock_gate, mock_logger, handler, context
    ):
        registry = MagicMock(spec=RouteRegistry)
        registry.discover.side_effect = RuntimeError("boom")
        pipeline = ResponsePipeline(
            gate=mock_gate, route_registry=registry, logger=mock_logger
        )

        result = pipeline.list_routes(handler=handler, context=context)

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.INTERNAL_ERROR
        args, kwargs = mock_logger.error.call_args
        assert args == ("route_listing_failed",)
        assert kwargs["handler"] == "items"

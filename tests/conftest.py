"""Pytest configuration and shared test helpers.

Provides:
1. Marker registration (unit, api)
2. Automatic asyncio marker for coroutine tests
3. Factories for handler metadata used across unit and API tests
"""

import inspect
from unittest.mock import MagicMock

import pytest

from resteasy.domain.entities.handler_definition import HandlerDefinition
from resteasy.domain.entities.operation_metadata import (
    HTTPMethod,
    OperationMetadata,
    RestInfo,
)
from resteasy.domain.enums.permission_level import AccessRequirement

# 32 characters: the configured client key length
CLIENT_KEY = "0123456789abcdef0123456789abcdef"


def create_operation(
    name: str = "list_items",
    route: str | None = "items",
    method: HTTPMethod = HTTPMethod.GET,
    description: str | None = "List items",
    model_name: str | None = None,
    requirements: tuple[AccessRequirement, ...] = (AccessRequirement.READ,),
    is_public: bool = True,
) -> OperationMetadata:
    """Helper to create OperationMetadata for testing.

    Args:
        name: Operation name.
        route: Route fragment (None for no route).
        method: HTTP method of the RestInfo.
        description: RestInfo description; None creates no RestInfo.
        model_name: Request model name.
        requirements: Access markers.
        is_public: Whether the operation is listed.

    Returns:
        OperationMetadata instance for testing.
    """
    rest_info = (
        RestInfo(http_method=method, description=description, model_name=model_name)
        if description is not None
        else None
    )
    return OperationMetadata(
        name=name,
        route=route,
        rest_info=rest_info,
        access_requirements=requirements,
        is_public=is_public,
    )


def create_handler(
    name: str = "items",
    route_prefix: str | None = "api",
    operations: tuple[OperationMetadata, ...] | None = None,
    related_handlers: tuple[str, ...] = (),
    include_endpoints_param: str | None = None,
) -> HandlerDefinition:
    """Helper to create a HandlerDefinition for testing.

    Usage:
        # One GET "items" operation requiring READ
        handler = create_handler()

        # Related to another handler
        handler = create_handler(name="a", related_handlers=("b",))
    """
    return HandlerDefinition(
        name=name,
        route_prefix=route_prefix,
        operations=operations if operations is not None else (create_operation(),),
        related_handlers=related_handlers,
        include_endpoints_param=include_endpoints_param,
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind() returns the same mock so bound calls are visible."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)

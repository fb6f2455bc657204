"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer and level selection

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from resteasy.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "resteasy.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_structlog():
    with patch(STRUCTLOG) as mock_structlog:
        mock_structlog.get_logger.return_value = MagicMock()
        yield mock_structlog


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, mock_structlog, level):
        adapter = ConsoleAdapter()

        getattr(adapter, level)("route_prefix_missing", handler="items")

        getattr(mock_structlog.get_logger.return_value, level).assert_called_once_with(
            "route_prefix_missing", handler="items"
        )

    def test_error_includes_exception_details(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.error(
            "response_pipeline_failed",
            error=ValueError("bad payload"),
            operation="list_items",
        )

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "response_pipeline_failed",
            operation="list_items",
            error_type="ValueError",
            error_message="bad payload",
        )

    def test_error_without_exception(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.error("route_listing_failed", handler="items")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "route_listing_failed", handler="items"
        )

    def test_critical_includes_exception_details(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.critical("startup_failed", error=RuntimeError("no config"))

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "startup_failed",
            error_type="RuntimeError",
            error_message="no config",
        )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self, mock_structlog):
        base_logger = mock_structlog.get_logger.return_value
        bound_logger = MagicMock()
        base_logger.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(trace_id="t-1")
        bound.info("pipeline_step")

        assert bound is not adapter
        base_logger.bind.assert_called_once_with(trace_id="t-1")
        bound_logger.info.assert_called_once_with("pipeline_step")
        base_logger.info.assert_not_called()

    def test_with_context_is_alias(self, mock_structlog):
        base_logger = mock_structlog.get_logger.return_value
        adapter = ConsoleAdapter()

        adapter.with_context(handler="items")

        base_logger.bind.assert_called_once_with(handler="items")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test renderer and level selection."""

    def test_json_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer(self, mock_structlog):
        ConsoleAdapter(use_json=False)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value
        mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("nonsense", logging.INFO),
        ],
    )
    def test_level_filter(self, mock_structlog, level, expected):
        ConsoleAdapter(level=level)

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(expected)

"""LoggerProtocol definition for structured logging.

The logger collaborator is fire-and-forget: callers never inspect a return
value and failures of the logger itself are not handled by the core.

Messages are snake_case event names; everything else goes into key-value
context.

Security:
    - NEVER log client keys in full; the AuthorizationGate logs only a
      short prefix of a key seen over an insecure connection.

Usage:
    from resteasy.core.container import get_logger

    logger = get_logger()
    logger.warning("route_prefix_missing", handler="items")

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.error("response_pipeline_failed", error=exc, operation="list_items")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: event name + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name.
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name.
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Used for degraded but non-fatal conditions (missing route metadata,
        a client key sent over plain HTTP).

        Args:
            message: Event name.
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementations include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Args:
            message: Event name.
            error: Optional exception instance.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind().

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from resteasy.core.config import settings

if TYPE_CHECKING:
    from resteasy.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from resteasy.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)

"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from resteasy.domain.protocols import AuthorizationProtocol, LoggerProtocol
"""

from resteasy.domain.protocols.authorization_protocol import AuthorizationProtocol
from resteasy.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AuthorizationProtocol",
    "LoggerProtocol",
]

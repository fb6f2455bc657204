"""Infrastructure layer - adapters implementing domain protocols.

Structure:
- logging/: ConsoleAdapter (structlog) implementing LoggerProtocol
- authorization/: InMemoryAuthorizationAdapter implementing AuthorizationProtocol
"""

"""resteasy - permission-gated, self-describing HTTP API core.

Layers:
- core/: Result types, configuration, container (composition root)
- domain/: Permission levels, operation metadata, protocols (ports)
- application/: AuthorizationGate, RouteRegistry, ResponsePipeline
- infrastructure/: Logging and authorization adapters
- presentation/: FastAPI boundary (responder, route generator, errors)
"""

__version__ = "0.1.0"

"""Application layer - orchestration of the response pipeline.

Structure:
- services/: HandlerCatalog, AuthorizationGate, RouteRegistry, ResponsePipeline
- dtos/: ResponseEnvelope
- errors/: ApplicationError, ApplicationErrorCode

Depends on the domain layer only; infrastructure arrives through protocols.
"""

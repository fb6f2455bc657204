"""Presentation layer - HTTP boundary.

This layer adapts FastAPI requests to the response pipeline and pipeline
results to HTTP responses. It contains NO authorization or discovery logic.

Structure:
- routers/system.py: Root and health endpoints
- routers/api/: Request context, rest responder, route generator,
  trace middleware and RFC 9457 error responses
"""

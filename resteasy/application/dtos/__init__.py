"""Application DTOs."""

from resteasy.application.dtos.response_envelope import ResponseEnvelope

__all__ = ["ResponseEnvelope"]

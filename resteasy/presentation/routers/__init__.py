"""External-facing routers."""

from resteasy.presentation.routers.system import system_router

__all__ = ["system_router"]

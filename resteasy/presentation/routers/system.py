"""System router for non-handler application endpoints.

These endpoints are lightweight and side-effect free to support health
checks and basic diagnostics.
"""

from fastapi import APIRouter

from resteasy.core.config import settings


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Welcome message with API status and version.
    """
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status indicator.
    """
    return {"status": "healthy"}

"""Health check endpoints."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "swapsim"}


@router.get("/health/detailed")
async def detailed_health(request: Request):
    """Detailed health check with configuration info."""
    settings = request.app.state.settings
    provider = request.app.state.provider
    return {
        "status": "healthy",
        "service": "swapsim",
        "version": "0.1.0",
        "rpc_connected": provider.is_initialized,
        "config": settings.get_safe_dict(),
    }

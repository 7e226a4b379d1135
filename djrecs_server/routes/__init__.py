"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .catalog import router as catalog_router
from .profiles import router as profiles_router
from .recommendations import router as recommendations_router
from .root import router as root_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(recommendations_router, prefix="/api/recommendations", tags=["recommendations"])
    app.include_router(catalog_router, prefix="/api/catalog", tags=["catalog"])
    app.include_router(profiles_router, prefix="/api/profiles", tags=["profiles"])

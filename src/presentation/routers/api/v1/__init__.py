"""API v1 routers.

RESTful resource-based endpoints.

Resources:
    /api/v1/app-connections            - App connection discovery and listing
    /api/v1/app-connections/{app}      - Per-provider app connection CRUD
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.app_connections import router as app_connections_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(app_connections_router)

__all__ = [
    "v1_router",
]

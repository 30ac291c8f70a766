"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import CreateAppConnectionRequest, AppConnectionResponse
"""

from src.schemas.app_connection_schemas import (
    AppConnectionListResponse,
    AppConnectionOptionResponse,
    AppConnectionOptionsResponse,
    AppConnectionResponse,
    AppConnectionSingleResponse,
    CreateAppConnectionRequest,
    UpdateAppConnectionRequest,
)

__all__ = [
    "AppConnectionListResponse",
    "AppConnectionOptionResponse",
    "AppConnectionOptionsResponse",
    "AppConnectionResponse",
    "AppConnectionSingleResponse",
    "CreateAppConnectionRequest",
    "UpdateAppConnectionRequest",
]

"""Application services."""

from src.application.services.app_connection_sanitizer import (
    SanitizedAppConnection,
    sanitize_app_connection,
)
from src.application.services.app_connection_service import AppConnectionService

__all__ = [
    "AppConnectionService",
    "SanitizedAppConnection",
    "sanitize_app_connection",
]

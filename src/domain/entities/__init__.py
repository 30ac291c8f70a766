"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.app_connection import AppConnection, AppConnectionRecord

__all__ = [
    "AppConnection",
    "AppConnectionRecord",
]

"""Repository implementations (SQLAlchemy adapters)."""

from src.infrastructure.persistence.repositories.app_connection_repository import (
    AppConnectionRepository,
)

__all__ = [
    "AppConnectionRepository",
]

"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_app_connection_service

The container is organized into modules by concern:
- infrastructure: Core services (db, kms, encryption, logging)
- events: Event bus and subscriptions
- authorization: Casbin RBAC
- repositories: Repository factories
- services: Application service factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_credential_envelope,
    get_database,
    get_db_session,
    get_kms,
    get_logger,
)

# Event bus
from src.core.container.events import get_event_bus

# Authorization
from src.core.container.authorization import (
    get_enforcer,
    get_permission_service,
    init_enforcer,
)

# Repositories
from src.core.container.repositories import get_app_connection_repository

# Services
from src.core.container.services import get_app_connection_service

__all__ = [
    # Infrastructure
    "get_credential_envelope",
    "get_database",
    "get_db_session",
    "get_kms",
    "get_logger",
    # Events
    "get_event_bus",
    # Authorization
    "get_enforcer",
    "get_permission_service",
    "init_enforcer",
    # Repositories
    "get_app_connection_repository",
    # Services
    "get_app_connection_service",
]

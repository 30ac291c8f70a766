"""Application service dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.authorization import get_permission_service
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_credential_envelope, get_logger
from src.core.container.repositories import get_app_connection_repository

if TYPE_CHECKING:
    from src.application.services import AppConnectionService
    from src.infrastructure.persistence.repositories import AppConnectionRepository


async def get_app_connection_service(
    repository: "AppConnectionRepository" = Depends(get_app_connection_repository),
) -> "AppConnectionService":
    """Get AppConnectionService (request-scoped).

    Creates service with:
    - AppConnectionRepository (request-scoped)
    - CasbinPermissionService (app-scoped enforcer)
    - CredentialEnvelope, EventBus, Logger (app-scoped singletons)

    Returns:
        AppConnectionService instance.

    Usage:
        # Presentation Layer (FastAPI Depends)
        service: AppConnectionService = Depends(get_app_connection_service)
    """
    from src.application.services import AppConnectionService

    return AppConnectionService(
        repository=repository,
        permission_service=get_permission_service(),
        encryption=get_credential_envelope(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )

"""Logging event handler for domain events.

Structured logging for every app connection event.

Log Levels:
    - INFO: ATTEMPTED, SUCCEEDED and read (COMPLETED) events
    - WARNING: FAILED events

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - actor_type / actor_id / org_id: who acted and where
    - app / method / name / connection_id: what was touched
    - reason: error code (FAILED events only)

Credentials are never part of events, so they never reach the logs.

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(
    ...     AppConnectionCreationSucceeded,
    ...     logging_handler.handle_app_connection_creation_succeeded,
    ... )
"""

from typing import Any

from src.domain.events.app_connection_events import (
    AppConnectionCreationAttempted,
    AppConnectionCreationFailed,
    AppConnectionCreationSucceeded,
    AppConnectionDeletionAttempted,
    AppConnectionDeletionFailed,
    AppConnectionDeletionSucceeded,
    AppConnectionEvent,
    AppConnectionsListed,
    AppConnectionUpdateAttempted,
    AppConnectionUpdateFailed,
    AppConnectionUpdateSucceeded,
    AppConnectionViewed,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


def _base_fields(event: AppConnectionEvent) -> dict[str, Any]:
    return {
        "event_id": str(event.event_id),
        "occurred_at": event.occurred_at.isoformat(),
        "actor_type": event.actor_type,
        "actor_id": str(event.actor_id),
        "org_id": str(event.org_id),
        "app": event.app,
    }


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    # =========================================================================
    # Reads
    # =========================================================================

    async def handle_app_connection_list_completed(
        self,
        event: AppConnectionsListed,
    ) -> None:
        """Log connection listing (INFO level)."""
        self._logger.info(
            "app_connections_listed",
            **_base_fields(event),
            count=event.count,
        )

    async def handle_app_connection_view_completed(
        self,
        event: AppConnectionViewed,
    ) -> None:
        """Log single connection read (INFO level)."""
        self._logger.info(
            "app_connection_viewed",
            **_base_fields(event),
            connection_id=str(event.connection_id),
            name=event.name,
            method=event.method,
        )

    # =========================================================================
    # Creation
    # =========================================================================

    async def handle_app_connection_creation_attempted(
        self,
        event: AppConnectionCreationAttempted,
    ) -> None:
        """Log connection creation attempt (INFO level)."""
        self._logger.info(
            "app_connection_creation_attempted",
            **_base_fields(event),
            name=event.name,
            method=event.method,
        )

    async def handle_app_connection_creation_succeeded(
        self,
        event: AppConnectionCreationSucceeded,
    ) -> None:
        """Log successful connection creation (INFO level)."""
        self._logger.info(
            "app_connection_created",
            **_base_fields(event),
            connection_id=str(event.connection_id),
            name=event.name,
            method=event.method,
        )

    async def handle_app_connection_creation_failed(
        self,
        event: AppConnectionCreationFailed,
    ) -> None:
        """Log failed connection creation (WARNING level)."""
        self._logger.warning(
            "app_connection_creation_failed",
            **_base_fields(event),
            name=event.name,
            method=event.method,
            reason=event.reason,
        )

    # =========================================================================
    # Update
    # =========================================================================

    async def handle_app_connection_update_attempted(
        self,
        event: AppConnectionUpdateAttempted,
    ) -> None:
        """Log connection update attempt (INFO level)."""
        self._logger.info(
            "app_connection_update_attempted",
            **_base_fields(event),
            connection_id=str(event.connection_id),
            updated_fields=list(event.updated_fields),
        )

    async def handle_app_connection_update_succeeded(
        self,
        event: AppConnectionUpdateSucceeded,
    ) -> None:
        """Log successful connection update (INFO level)."""
        self._logger.info(
            "app_connection_updated",
            **_base_fields(event),
            connection_id=str(event.connection_id),
            name=event.name,
            method=event.method,
            updated_fields=list(event.updated_fields),
            credentials_rotated=event.credentials_rotated,
        )

    async def handle_app_connection_update_failed(
        self,
        event: AppConnectionUpdateFailed,
    ) -> None:
        """Log failed connection update (WARNING level)."""
        self._logger.warning(
            "app_connection_update_failed",
            **_base_fields(event),
            connection_id=str(event.connection_id),
            reason=event.reason,
        )

    # =========================================================================
    # Deletion
    # =========================================================================

    async def handle_app_connection_deletion_attempted(
        self,
        event: AppConnectionDeletionAttempted,
    ) -> None:
        """Log connection deletion attempt (INFO level)."""
        self._logger.info(
            "app_connection_deletion_attempted",
            **_base_fields(event),
            connection_id=str(event.connection_id),
        )

    async def handle_app_connection_deletion_succeeded(
        self,
        event: AppConnectionDeletionSucceeded,
    ) -> None:
        """Log successful connection deletion (INFO level)."""
        self._logger.info(
            "app_connection_deleted",
            **_base_fields(event),
            connection_id=str(event.connection_id),
            name=event.name,
            method=event.method,
        )

    async def handle_app_connection_deletion_failed(
        self,
        event: AppConnectionDeletionFailed,
    ) -> None:
        """Log failed connection deletion (WARNING level)."""
        self._logger.warning(
            "app_connection_deletion_failed",
            **_base_fields(event),
            connection_id=str(event.connection_id),
            reason=event.reason,
        )

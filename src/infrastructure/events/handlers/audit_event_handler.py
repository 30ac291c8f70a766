"""Audit event handler for domain events.

Records one immutable audit entry per app connection event.

Event -> Audit Action Mapping:
    - AppConnectionsListed -> APP_CONNECTIONS_LISTED
    - AppConnectionViewed -> APP_CONNECTION_VIEWED
    - AppConnectionCreationAttempted -> APP_CONNECTION_CREATION_ATTEMPTED
    - AppConnectionCreationSucceeded -> APP_CONNECTION_CREATED
    - AppConnectionCreationFailed -> APP_CONNECTION_CREATION_FAILED
    - AppConnectionUpdateAttempted -> APP_CONNECTION_UPDATE_ATTEMPTED
    - AppConnectionUpdateSucceeded -> APP_CONNECTION_UPDATED
    - AppConnectionUpdateFailed -> APP_CONNECTION_UPDATE_FAILED
    - AppConnectionDeletionAttempted -> APP_CONNECTION_DELETION_ATTEMPTED
    - AppConnectionDeletionSucceeded -> APP_CONNECTION_DELETED
    - AppConnectionDeletionFailed -> APP_CONNECTION_DELETION_FAILED

Session Lifecycle:
    Each record is written in its own short-lived session from Database, so
    a failed audit write can never roll back the caller's transaction.
    Failures are logged and swallowed by the fail-open event bus contract.
"""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from src.core.result import Failure
from src.domain.enums.audit_action import AuditAction
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
from src.domain.protocols.audit_protocol import AuditProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.audit.postgres_adapter import PostgresAuditAdapter
from src.infrastructure.persistence.database import Database

RESOURCE_TYPE = "app_connection"


class AuditEventHandler:
    """Event handler for audit trail recording.

    Attributes:
        _database: Database providing a session per audit record.
        _logger: Logger for audit write failures.
        _audit_factory: Builds the audit adapter from a session.
    """

    def __init__(
        self,
        database: Database,
        logger: LoggerProtocol,
        audit_factory: Callable[[Any], AuditProtocol] = PostgresAuditAdapter,
    ) -> None:
        """Initialize audit handler.

        Args:
            database: Database instance from container.
            logger: Logger for audit write failures.
            audit_factory: Session -> AuditProtocol. Tests pass a factory
                returning a mock.
        """
        self._database = database
        self._logger = logger
        self._audit_factory = audit_factory

    async def _create_audit_record(
        self,
        event: AppConnectionEvent,
        action: AuditAction,
        resource_id: UUID | None = None,
        **context: Any,
    ) -> None:
        context = {
            "event_id": str(event.event_id),
            "app": event.app,
            **context,
        }
        async with self._database.get_session() as session:
            audit = self._audit_factory(session)
            result = await audit.record(
                action=action,
                actor_type=event.actor_type,
                actor_id=event.actor_id,
                org_id=event.org_id,
                resource_type=RESOURCE_TYPE,
                resource_id=resource_id,
                context=context,
            )

        if isinstance(result, Failure):
            self._logger.error(
                "audit_record_failed",
                action=action.value,
                event_id=str(event.event_id),
                error_code=result.error.code.value,
                error_message=result.error.message,
            )

    # =========================================================================
    # Reads
    # =========================================================================

    async def handle_app_connection_list_completed(
        self,
        event: AppConnectionsListed,
    ) -> None:
        """Record connection listing audit.

        Audit Record:
            - action: APP_CONNECTIONS_LISTED
            - resource_id: None (collection read)
            - context: {count, connection_ids}
        """
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTIONS_LISTED,
            count=event.count,
            connection_ids=[str(i) for i in event.connection_ids],
        )

    async def handle_app_connection_view_completed(
        self,
        event: AppConnectionViewed,
    ) -> None:
        """Record single connection read audit."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_VIEWED,
            resource_id=event.connection_id,
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
        """Record connection creation attempt audit (ATTEMPT).

        Audit Record:
            - action: APP_CONNECTION_CREATION_ATTEMPTED
            - resource_id: None (connection not created yet)
            - context: {name, method}
        """
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_CREATION_ATTEMPTED,
            name=event.name,
            method=event.method,
        )

    async def handle_app_connection_creation_succeeded(
        self,
        event: AppConnectionCreationSucceeded,
    ) -> None:
        """Record successful connection creation audit (SUCCESS)."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_CREATED,
            resource_id=event.connection_id,
            name=event.name,
            method=event.method,
        )

    async def handle_app_connection_creation_failed(
        self,
        event: AppConnectionCreationFailed,
    ) -> None:
        """Record failed connection creation audit (FAILURE)."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_CREATION_FAILED,
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
        """Record connection update attempt audit (ATTEMPT)."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_UPDATE_ATTEMPTED,
            resource_id=event.connection_id,
            updated_fields=list(event.updated_fields),
        )

    async def handle_app_connection_update_succeeded(
        self,
        event: AppConnectionUpdateSucceeded,
    ) -> None:
        """Record successful connection update audit (SUCCESS)."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_UPDATED,
            resource_id=event.connection_id,
            name=event.name,
            method=event.method,
            updated_fields=list(event.updated_fields),
            credentials_rotated=event.credentials_rotated,
        )

    async def handle_app_connection_update_failed(
        self,
        event: AppConnectionUpdateFailed,
    ) -> None:
        """Record failed connection update audit (FAILURE)."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_UPDATE_FAILED,
            resource_id=event.connection_id,
            reason=event.reason,
        )

    # =========================================================================
    # Deletion
    # =========================================================================

    async def handle_app_connection_deletion_attempted(
        self,
        event: AppConnectionDeletionAttempted,
    ) -> None:
        """Record connection deletion attempt audit (ATTEMPT)."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_DELETION_ATTEMPTED,
            resource_id=event.connection_id,
        )

    async def handle_app_connection_deletion_succeeded(
        self,
        event: AppConnectionDeletionSucceeded,
    ) -> None:
        """Record successful connection deletion audit (SUCCESS)."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_DELETED,
            resource_id=event.connection_id,
            name=event.name,
            method=event.method,
        )

    async def handle_app_connection_deletion_failed(
        self,
        event: AppConnectionDeletionFailed,
    ) -> None:
        """Record failed connection deletion audit (FAILURE)."""
        await self._create_audit_record(
            event,
            AuditAction.APP_CONNECTION_DELETION_FAILED,
            resource_id=event.connection_id,
            reason=event.reason,
        )

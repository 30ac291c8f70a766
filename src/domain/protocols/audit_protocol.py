"""Audit trail protocol (port).

Infrastructure adapters implement this protocol to persist immutable audit
entries (PostgresAuditAdapter). The application layer never calls it
directly: AuditEventHandler translates domain events into audit records.

Usage:
    result = await audit.record(
        action=AuditAction.APP_CONNECTION_CREATED,
        actor_type="user",
        actor_id=actor_id,
        org_id=org_id,
        resource_type="app_connection",
        resource_id=connection_id,
        context={"app": "aws", "method": "assume-role"},
    )
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.enums import AuditAction
from src.domain.errors import AuditError


class AuditProtocol(Protocol):
    """Protocol for audit trail sinks.

    Records are append-only. Implementations MUST return Result types and
    never raise: storage failures are wrapped in Failure(AuditError).
    """

    async def record(
        self,
        *,
        action: AuditAction,
        actor_type: str,
        actor_id: UUID,
        org_id: UUID,
        resource_type: str,
        resource_id: UUID | None = None,
        context: dict[str, Any] | None = None,
    ) -> Result[None, AuditError]:
        """Record an immutable audit entry.

        Args:
            action: What happened.
            actor_type: Kind of actor ("user", "service", "identity").
            actor_id: Who performed the action.
            org_id: Organization the action was scoped to.
            resource_type: What was affected ("app_connection").
            resource_id: Specific resource identifier, when there is one.
            context: Additional JSON-serializable context. Never secrets.

        Returns:
            Success(None) if recorded, Failure(AuditError) otherwise.
        """
        ...

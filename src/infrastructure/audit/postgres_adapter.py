"""PostgreSQL implementation of AuditProtocol.

Immutable audit logging:
- Database RULES block UPDATE/DELETE operations (see migration)
- Async SQLAlchemy for database operations
- Result types for error handling (no exceptions)

Usage:
    from src.infrastructure.audit.postgres_adapter import PostgresAuditAdapter

    async with database.get_session() as session:
        adapter = PostgresAuditAdapter(session)
        result = await adapter.record(
            action=AuditAction.APP_CONNECTION_DELETED,
            actor_type="user",
            actor_id=actor_id,
            org_id=org_id,
            resource_type="app_connection",
            resource_id=connection_id,
            context={"app": "github"},
        )
"""

from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.errors import AuditError
from src.infrastructure.persistence.models.audit_log import AuditLogModel


class PostgresAuditAdapter:
    """PostgreSQL implementation of AuditProtocol.

    Stateless; all state lives in the database.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Thread Safety:
        NOT thread-safe (uses the provided session).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

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

        Returns:
            Success(None) if recorded.
            Failure(AuditError) if the database operation failed.

        Note:
            - Timestamp is set by the database (created_at)
            - Committed immediately for durability
        """
        try:
            audit_log = AuditLogModel(
                action=action.value,
                actor_type=actor_type,
                actor_id=actor_id,
                org_id=org_id,
                resource_type=resource_type,
                resource_id=resource_id,
                context=context,
            )

            self.session.add(audit_log)
            await self.session.commit()

            return Success(value=None)

        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=AuditError(
                    message=f"Failed to record audit log: {e}",
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    details={
                        "action": action.value,
                        "resource_type": resource_type,
                        "error_type": type(e).__name__,
                    },
                )
            )

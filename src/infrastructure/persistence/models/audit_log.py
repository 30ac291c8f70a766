"""Audit log database model.

CRITICAL: This table is IMMUTABLE. Records cannot be modified or deleted.
Immutability is enforced by PostgreSQL RULES in the migration.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class AuditLogModel(BaseModel):
    """Audit log model - IMMUTABLE (cannot be updated or deleted).

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when logged (from BaseModel)
        action: What happened (e.g., "app_connection_created")
        actor_type: Kind of actor ("user", "service", "identity")
        actor_id: Who performed the action
        org_id: Organization the action was scoped to
        resource_type: What was affected ("app_connection")
        resource_id: Specific resource identifier (optional)
        context: Additional event context (JSON, never secrets)

    Note:
        Inherits from BaseModel (NOT BaseMutableModel) because audit logs
        have no updated_at.
    """

    __tablename__ = "audit_logs"

    action: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Audit action type (e.g., app_connection_created)",
    )

    actor_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Kind of actor: user, service, identity",
    )

    actor_id: Mapped[UUID] = mapped_column(
        nullable=False,
        index=True,
        comment="Actor who performed the action",
    )

    org_id: Mapped[UUID] = mapped_column(
        nullable=False,
        index=True,
        comment="Organization the action was scoped to",
    )

    resource_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Type of resource affected",
    )

    resource_id: Mapped[UUID | None] = mapped_column(
        nullable=True,
        comment="Specific resource identifier (if applicable)",
    )

    context: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
        comment="Additional event context",
    )

    __table_args__ = (
        # "What did org X do to resource Y"
        Index("idx_audit_org_resource", "org_id", "resource_type", "resource_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<AuditLogModel("
            f"id={self.id}, "
            f"action={self.action!r}, "
            f"actor_id={self.actor_id}, "
            f"created_at={self.created_at}"
            f")>"
        )

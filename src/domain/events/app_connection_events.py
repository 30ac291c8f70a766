"""App connection domain events.

Pattern: 3 events per mutating workflow (ATTEMPTED -> SUCCEEDED/FAILED)
- *Attempted: Operation initiated (before authorization and storage)
- *Succeeded: Operation completed successfully (after commit)
- *Failed: Operation failed (error result or unexpected exception)

Read workflows emit a single event once data is returned:
- AppConnectionsListed
- AppConnectionViewed

Handlers:
- LoggingEventHandler: ALL events
- AuditEventHandler: ALL events

Every event carries the acting identity (actor_type, actor_id) and the
organization the operation was scoped to. Credentials are NEVER included.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class AppConnectionEvent(DomainEvent):
    """Common fields of all app connection events.

    Attributes:
        actor_type: Kind of actor ("user", "service", "identity").
        actor_id: Actor identifier.
        org_id: Organization the operation was scoped to.
        app: Provider value ("aws", "github"). None when listing every app.
    """

    actor_type: str
    actor_id: UUID
    org_id: UUID
    app: str | None = None


# ═══════════════════════════════════════════════════════════════
# Reads
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class AppConnectionsListed(AppConnectionEvent):
    """Connections of an organization were listed.

    Attributes:
        count: Number of connections returned.
        connection_ids: Identifiers of the connections returned.
    """

    count: int
    connection_ids: tuple[UUID, ...] = ()


@dataclass(frozen=True, kw_only=True)
class AppConnectionViewed(AppConnectionEvent):
    """A single connection was read (by id or by name)."""

    connection_id: UUID
    name: str
    method: str


# ═══════════════════════════════════════════════════════════════
# Creation
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class AppConnectionCreationAttempted(AppConnectionEvent):
    """Connection creation initiated."""

    name: str
    method: str


@dataclass(frozen=True, kw_only=True)
class AppConnectionCreationSucceeded(AppConnectionEvent):
    """Connection created and persisted."""

    connection_id: UUID
    name: str
    method: str


@dataclass(frozen=True, kw_only=True)
class AppConnectionCreationFailed(AppConnectionEvent):
    """Connection creation failed.

    Attributes:
        reason: Error code value or exception type name.
    """

    name: str
    method: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Update
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class AppConnectionUpdateAttempted(AppConnectionEvent):
    """Connection update initiated.

    Attributes:
        connection_id: Connection being updated.
        updated_fields: Names of the fields supplied by the caller.
    """

    connection_id: UUID
    updated_fields: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class AppConnectionUpdateSucceeded(AppConnectionEvent):
    """Connection updated.

    Attributes:
        credentials_rotated: True when new credentials were encrypted.
    """

    connection_id: UUID
    name: str
    method: str
    updated_fields: tuple[str, ...] = ()
    credentials_rotated: bool = False


@dataclass(frozen=True, kw_only=True)
class AppConnectionUpdateFailed(AppConnectionEvent):
    """Connection update failed."""

    connection_id: UUID
    reason: str


# ═══════════════════════════════════════════════════════════════
# Deletion
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class AppConnectionDeletionAttempted(AppConnectionEvent):
    """Connection deletion initiated."""

    connection_id: UUID


@dataclass(frozen=True, kw_only=True)
class AppConnectionDeletionSucceeded(AppConnectionEvent):
    """Connection removed (hard delete)."""

    connection_id: UUID
    name: str
    method: str


@dataclass(frozen=True, kw_only=True)
class AppConnectionDeletionFailed(AppConnectionEvent):
    """Connection deletion failed."""

    connection_id: UUID
    reason: str

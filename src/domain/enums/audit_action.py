"""Audit action types for app connection activity.

Every read and write on an app connection is recorded in the audit trail.
Writes follow the ATTEMPTED -> (SUCCEEDED | FAILED) pattern; reads are
recorded once, after the data was returned.

Extensibility:
    New actions can be added to the enum without database schema changes.
    Action-specific context is stored in the JSON context column.

Usage:
    from src.domain.enums import AuditAction

    await audit.record(
        action=AuditAction.APP_CONNECTION_CREATED,
        actor_type="user",
        actor_id=actor_id,
        org_id=org_id,
        resource_type="app_connection",
        resource_id=connection_id,
        context={"app": "aws", "method": "assume-role"},
    )
"""

from enum import Enum


class AuditAction(str, Enum):
    """Audit action types for app connection activity.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are snake_case strings for consistency.
    """

    # =========================================================================
    # Reads
    # =========================================================================

    APP_CONNECTIONS_LISTED = "app_connections_listed"
    """Connections of an organization were listed.

    Context should include:
        - app: Provider filter (None for all providers)
        - count: Number of connections returned
        - connection_ids: Ids of returned connections
    """

    APP_CONNECTION_VIEWED = "app_connection_viewed"
    """A single connection was read (by id or by name).

    Context should include:
        - app, method, name
    """

    # =========================================================================
    # Create
    # =========================================================================

    APP_CONNECTION_CREATION_ATTEMPTED = "app_connection_creation_attempted"
    """Actor attempted to create a connection.

    Context should include:
        - app, method, name
    """

    APP_CONNECTION_CREATED = "app_connection_created"
    """Connection was created (SUCCESS)."""

    APP_CONNECTION_CREATION_FAILED = "app_connection_creation_failed"
    """Connection creation failed.

    Context should include:
        - reason: Error message
    """

    # =========================================================================
    # Update
    # =========================================================================

    APP_CONNECTION_UPDATE_ATTEMPTED = "app_connection_update_attempted"
    """Actor attempted to update a connection.

    Context should include:
        - name: New name (if changing)
        - credentials_changed: Whether credentials were supplied
    """

    APP_CONNECTION_UPDATED = "app_connection_updated"
    """Connection was updated (SUCCESS)."""

    APP_CONNECTION_UPDATE_FAILED = "app_connection_update_failed"
    """Connection update failed."""

    # =========================================================================
    # Delete
    # =========================================================================

    APP_CONNECTION_DELETION_ATTEMPTED = "app_connection_deletion_attempted"
    """Actor attempted to delete a connection."""

    APP_CONNECTION_DELETED = "app_connection_deleted"
    """Connection was deleted (SUCCESS). Deletion is final."""

    APP_CONNECTION_DELETION_FAILED = "app_connection_deletion_failed"
    """Connection deletion failed."""

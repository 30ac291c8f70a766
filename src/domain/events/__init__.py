"""Domain events module.

Usage:
    >>> from src.domain.events import AppConnectionCreationSucceeded
    >>>
    >>> event = AppConnectionCreationSucceeded(
    ...     actor_type="user",
    ...     actor_id=user_id,
    ...     org_id=org_id,
    ...     app="aws",
    ...     connection_id=connection.id,
    ...     name=connection.name,
    ...     method=connection.method,
    ... )
    >>> await event_bus.publish(event)
"""

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
from src.domain.events.base_event import DomainEvent

__all__ = [
    # Base
    "DomainEvent",
    "AppConnectionEvent",
    # Reads
    "AppConnectionsListed",
    "AppConnectionViewed",
    # Creation
    "AppConnectionCreationAttempted",
    "AppConnectionCreationSucceeded",
    "AppConnectionCreationFailed",
    # Update
    "AppConnectionUpdateAttempted",
    "AppConnectionUpdateSucceeded",
    "AppConnectionUpdateFailed",
    # Deletion
    "AppConnectionDeletionAttempted",
    "AppConnectionDeletionSucceeded",
    "AppConnectionDeletionFailed",
]

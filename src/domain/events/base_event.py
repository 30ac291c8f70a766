"""Base domain event class.

Domain events represent "things that happened" in the business domain and
are always named in past tense (AppConnectionCreationSucceeded,
AppConnectionViewed).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class AppConnectionViewed(DomainEvent):
    ...     connection_id: UUID
    >>>
    >>> event = AppConnectionViewed(connection_id=uuid7())
    >>> print(event.event_id)  # Auto-generated UUID
    >>> print(event.occurred_at)  # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (AppConnectionCreationSucceeded)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)
        5. Never carry credentials or ciphertext

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            if not provided. Used for tracking and audit correlation.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Notes:
        - Succeeded/Failed events are published after the operation settles
        - Attempted events are published before the operation starts
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

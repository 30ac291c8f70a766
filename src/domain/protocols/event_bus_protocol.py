"""Event bus protocol (port) for domain events.

The domain defines the interface; infrastructure provides the adapter
(InMemoryEventBus). The container wires handlers at startup.

Usage:
    >>> from src.core.container import get_event_bus
    >>>
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(AppConnectionViewed(...))
    >>>
    >>> async def log_viewed(event: AppConnectionViewed) -> None:
    ...     logger.info("app_connection_viewed", connection_id=str(event.connection_id))
    >>>
    >>> event_bus.subscribe(AppConnectionViewed, log_viewed)
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[Any], Awaitable[None]]
"""Async event handler: accepts one event, returns None, side-effects only."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must NOT reach the publisher.
        2. **Async support**: All handlers are async.
        3. **Exact type routing**: Handlers registered for an event type only
           receive events of that exact type.
        4. **No ordering guarantees**: Handlers execute concurrently.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for a specific event type.

        Args:
            event_type: Class of event to handle. No inheritance matching.
            handler: Async function called with the event instance.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Executes all handlers registered for type(event) concurrently.
        Handler exceptions are logged but NOT propagated to the publisher.
        No handlers registered is a no-op.

        Args:
            event: Domain event to publish.
        """
        ...

"""Infrastructure event implementations.

This module exports the in-memory event bus implementation and event handlers
for infrastructure integration (logging, audit).

Event Bus:
    - InMemoryEventBus: Production event bus with fail-open behavior

Event Handlers:
    - LoggingEventHandler: Structured logging for all domain events
    - AuditEventHandler: Audit trail creation for compliance

Usage:
    >>> from src.infrastructure.events import InMemoryEventBus
    >>> from src.infrastructure.events.handlers import (
    ...     LoggingEventHandler,
    ...     AuditEventHandler,
    ... )
    >>>
    >>> # Create event bus
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>>
    >>> # Wire up handlers
    >>> logging_handler = LoggingEventHandler(logger=logger)
    >>> audit_handler = AuditEventHandler(database=database, logger=logger)
    >>>
    >>> event_bus.subscribe(AppConnectionViewed, logging_handler.handle_app_connection_view_completed)
    >>> event_bus.subscribe(AppConnectionViewed, audit_handler.handle_app_connection_view_completed)

"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]

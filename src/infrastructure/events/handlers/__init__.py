"""Domain event handlers (logging, audit)."""

from src.infrastructure.events.handlers.audit_event_handler import AuditEventHandler
from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = [
    "AuditEventHandler",
    "LoggingEventHandler",
]

# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing.
Configures all event handlers and subscriptions at startup using
registry-driven auto-wiring.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns correct adapter based on EVENT_BUS_TYPE environment variable:
        - 'in-memory': InMemoryEventBus (single process)

    Event handlers are AUTOMATICALLY registered using EVENT_REGISTRY.
    For each registered event this factory:
        1. Computes the handler method name (handle_{workflow_name}_{phase})
        2. Subscribes the logging and audit handlers according to the
           metadata.requires_* flags

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        RuntimeError: In strict mode, if a required handler method is missing.
        ValueError: If EVENT_BUS_TYPE is unsupported.

    Usage:
        # Application Layer (direct use)
        event_bus = get_event_bus()
        await event_bus.publish(AppConnectionCreationSucceeded(...))
    """
    import os

    from src.core.config import get_settings
    from src.core.container.infrastructure import get_database, get_logger
    from src.domain.events.registry import EVENT_REGISTRY
    from src.infrastructure.events.handlers.audit_event_handler import AuditEventHandler
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    settings = get_settings()
    logger = get_logger()

    event_bus_type = os.getenv("EVENT_BUS_TYPE", "in-memory")

    if event_bus_type == "in-memory":
        event_bus = InMemoryEventBus(logger=logger)
    else:
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
        )

    handlers = {
        "logging": LoggingEventHandler(logger=logger),
        "audit": AuditEventHandler(database=get_database(), logger=logger),
    }

    # =========================================================================
    # REGISTRY-DRIVEN AUTO-WIRING
    # =========================================================================
    # Strict mode: fail at startup if a handler method is missing.
    # Graceful mode: skip the missing handler and log a warning.
    for metadata in EVENT_REGISTRY:
        event_class = metadata.event_class
        method_name = metadata.handler_method_name

        required = {
            "logging": metadata.requires_logging,
            "audit": metadata.requires_audit,
        }
        for kind, handler in handlers.items():
            if not required[kind]:
                continue

            handler_method = getattr(handler, method_name, None)
            if handler_method is None:
                if settings.events_strict_mode:
                    raise RuntimeError(
                        f"EVENTS_STRICT_MODE: Missing required {kind} handler\n"
                        f"Event: {event_class.__name__}\n"
                        f"Expected method: {type(handler).__name__}.{method_name}"
                    )
                logger.warning(
                    "event_handler_missing",
                    handler_kind=kind,
                    event_class=event_class.__name__,
                    handler_method=method_name,
                )
                continue

            event_bus.subscribe(event_class, handler_method)

    return event_bus

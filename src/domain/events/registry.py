"""Domain Events Registry - Single Source of Truth.

Catalogs every app connection domain event with its metadata. Used for:
- Container wiring (automated subscription)
- Validation tests (verify no drift between events, handlers and audit actions)

Adding new events:
1. Define event dataclass in app_connection_events.py
2. Add entry to EVENT_REGISTRY below
3. Run tests - they'll tell you what's missing:
   - Handler methods needed (handle_{workflow_name}_{phase})
   - AuditAction enums needed
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum

from src.domain.events.app_connection_events import (
    AppConnectionCreationAttempted,
    AppConnectionCreationFailed,
    AppConnectionCreationSucceeded,
    AppConnectionDeletionAttempted,
    AppConnectionDeletionFailed,
    AppConnectionDeletionSucceeded,
    AppConnectionsListed,
    AppConnectionUpdateAttempted,
    AppConnectionUpdateFailed,
    AppConnectionUpdateSucceeded,
    AppConnectionViewed,
)
from src.domain.events.base_event import DomainEvent


class WorkflowPhase(Enum):
    """Workflow phases.

    Mutations follow ATTEMPTED -> SUCCEEDED/FAILED. Reads emit a single
    COMPLETED event.
    """

    ATTEMPTED = "attempted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    COMPLETED = "completed"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        workflow_name: Name of workflow (e.g., "app_connection_creation").
        phase: Workflow phase.
        audit_action_name: AuditAction member recorded for this event.
        requires_logging: LoggingEventHandler handles this event.
        requires_audit: AuditEventHandler handles this event.
    """

    event_class: type[DomainEvent]
    workflow_name: str
    phase: WorkflowPhase
    audit_action_name: str
    requires_logging: bool = True
    requires_audit: bool = True

    @property
    def handler_method_name(self) -> str:
        """Name of the handler method subscribed to this event."""
        return f"handle_{self.workflow_name}_{self.phase.value}"


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    # Reads
    EventMetadata(
        event_class=AppConnectionsListed,
        workflow_name="app_connection_list",
        phase=WorkflowPhase.COMPLETED,
        audit_action_name="APP_CONNECTIONS_LISTED",
    ),
    EventMetadata(
        event_class=AppConnectionViewed,
        workflow_name="app_connection_view",
        phase=WorkflowPhase.COMPLETED,
        audit_action_name="APP_CONNECTION_VIEWED",
    ),
    # Creation
    EventMetadata(
        event_class=AppConnectionCreationAttempted,
        workflow_name="app_connection_creation",
        phase=WorkflowPhase.ATTEMPTED,
        audit_action_name="APP_CONNECTION_CREATION_ATTEMPTED",
    ),
    EventMetadata(
        event_class=AppConnectionCreationSucceeded,
        workflow_name="app_connection_creation",
        phase=WorkflowPhase.SUCCEEDED,
        audit_action_name="APP_CONNECTION_CREATED",
    ),
    EventMetadata(
        event_class=AppConnectionCreationFailed,
        workflow_name="app_connection_creation",
        phase=WorkflowPhase.FAILED,
        audit_action_name="APP_CONNECTION_CREATION_FAILED",
    ),
    # Update
    EventMetadata(
        event_class=AppConnectionUpdateAttempted,
        workflow_name="app_connection_update",
        phase=WorkflowPhase.ATTEMPTED,
        audit_action_name="APP_CONNECTION_UPDATE_ATTEMPTED",
    ),
    EventMetadata(
        event_class=AppConnectionUpdateSucceeded,
        workflow_name="app_connection_update",
        phase=WorkflowPhase.SUCCEEDED,
        audit_action_name="APP_CONNECTION_UPDATED",
    ),
    EventMetadata(
        event_class=AppConnectionUpdateFailed,
        workflow_name="app_connection_update",
        phase=WorkflowPhase.FAILED,
        audit_action_name="APP_CONNECTION_UPDATE_FAILED",
    ),
    # Deletion
    EventMetadata(
        event_class=AppConnectionDeletionAttempted,
        workflow_name="app_connection_deletion",
        phase=WorkflowPhase.ATTEMPTED,
        audit_action_name="APP_CONNECTION_DELETION_ATTEMPTED",
    ),
    EventMetadata(
        event_class=AppConnectionDeletionSucceeded,
        workflow_name="app_connection_deletion",
        phase=WorkflowPhase.SUCCEEDED,
        audit_action_name="APP_CONNECTION_DELETED",
    ),
    EventMetadata(
        event_class=AppConnectionDeletionFailed,
        workflow_name="app_connection_deletion",
        phase=WorkflowPhase.FAILED,
        audit_action_name="APP_CONNECTION_DELETION_FAILED",
    ),
]


def get_all_events() -> list[type[DomainEvent]]:
    """Get all registered event classes."""
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_workflow_events(workflow_name: str) -> dict[WorkflowPhase, type[DomainEvent]]:
    """Get all events for a workflow, keyed by phase."""
    return {
        meta.phase: meta.event_class
        for meta in EVENT_REGISTRY
        if meta.workflow_name == workflow_name
    }


def get_expected_audit_actions() -> dict[type[DomainEvent], str]:
    """Get mapping of event to expected AuditAction member name."""
    return {
        meta.event_class: meta.audit_action_name
        for meta in EVENT_REGISTRY
        if meta.requires_audit
    }


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dict with counts by phase and handler requirements.
    """
    return {
        "total_events": len(EVENT_REGISTRY),
        "by_phase": dict(Counter(meta.phase.value for meta in EVENT_REGISTRY)),
        "requiring_logging": sum(1 for m in EVENT_REGISTRY if m.requires_logging),
        "requiring_audit": sum(1 for m in EVENT_REGISTRY if m.requires_audit),
        "total_workflows": len({m.workflow_name for m in EVENT_REGISTRY}),
    }

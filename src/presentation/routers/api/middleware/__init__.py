"""API middleware and request dependencies."""

from src.presentation.routers.api.middleware.actor_dependencies import (
    CurrentActor,
    get_current_actor,
)
from src.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = [
    "CurrentActor",
    "TraceMiddleware",
    "get_current_actor",
    "get_trace_id",
]

"""External-facing routers.

system_router holds non-versioned endpoints (root, health, config).
Versioned endpoints live under api/v1.
"""

from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.system import system_router

__all__ = ["system_router", "v1_router"]

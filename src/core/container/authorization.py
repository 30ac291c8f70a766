"""Authorization dependency factories.

Casbin RBAC enforcement with organization domains.
Enforcer is initialized at application startup.
"""

from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from casbin import AsyncEnforcer

    from src.domain.protocols.permission_protocol import PermissionServiceProtocol


# Module-level state for enforcer singleton
_enforcer: "AsyncEnforcer | None" = None


# ============================================================================
# Authorization (Casbin RBAC)
# ============================================================================


async def init_enforcer() -> "AsyncEnforcer":
    """Initialize Casbin AsyncEnforcer at application startup.

    Creates enforcer with:
    - Model config from settings.casbin_model_path, or the bundled
      infrastructure/authorization/model.conf
    - PostgreSQL adapter for persistent policy storage

    MUST be called during FastAPI lifespan startup.
    Enforcer is app-scoped singleton (stored in _enforcer module variable).

    Returns:
        Initialized AsyncEnforcer instance.

    Raises:
        RuntimeError: If enforcer is already initialized.
    """
    global _enforcer

    if _enforcer is not None:
        raise RuntimeError("Enforcer already initialized")

    import casbin
    from casbin_async_sqlalchemy_adapter import Adapter as CasbinSQLAdapter

    from src.core.container.infrastructure import get_logger
    from src.infrastructure.authorization.casbin_adapter import MODEL_PATH

    model_path = settings.casbin_model_path or str(MODEL_PATH)

    # Create PostgreSQL adapter for policy storage
    adapter = CasbinSQLAdapter(settings.database_url)

    # Create async enforcer
    _enforcer = casbin.AsyncEnforcer(model_path, adapter)

    # Load policies from database
    await _enforcer.load_policy()

    get_logger().info(
        "casbin_enforcer_initialized",
        model_path=model_path,
    )

    return _enforcer


def get_enforcer() -> "AsyncEnforcer":
    """Get Casbin AsyncEnforcer singleton.

    MUST be called after init_enforcer() during startup.

    Returns:
        The initialized enforcer.

    Raises:
        RuntimeError: If called before init_enforcer().
    """
    if _enforcer is None:
        raise RuntimeError(
            "Enforcer not initialized. Call init_enforcer() during startup."
        )
    return _enforcer


def get_permission_service() -> "PermissionServiceProtocol":
    """Get permission service.

    Creates CasbinPermissionService with:
    - App-scoped enforcer (pre-initialized at startup)
    - App-scoped logger

    Returns:
        CasbinPermissionService implementing PermissionServiceProtocol.
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.authorization.casbin_adapter import (
        CasbinPermissionService,
    )

    return CasbinPermissionService(enforcer=get_enforcer(), logger=get_logger())

"""Authorization infrastructure (Casbin)."""

from src.infrastructure.authorization.casbin_adapter import (
    MODEL_PATH,
    CasbinOrgPermission,
    CasbinPermissionService,
    build_subject,
)

__all__ = [
    "MODEL_PATH",
    "CasbinOrgPermission",
    "CasbinPermissionService",
    "build_subject",
]

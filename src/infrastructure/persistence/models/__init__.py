"""Database models.

All models must be imported here so Alembic autogenerate sees them.
"""

from src.infrastructure.persistence.models.app_connection import AppConnectionModel
from src.infrastructure.persistence.models.audit_log import AuditLogModel
from src.infrastructure.persistence.models.casbin_rule import CasbinRule

__all__ = [
    "AppConnectionModel",
    "AuditLogModel",
    "CasbinRule",
]

"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import AuditError, AppConnectionErrorMessage
"""

from src.domain.errors.app_connection_error import AppConnectionErrorMessage
from src.domain.errors.audit_error import AuditError

__all__ = [
    "AppConnectionErrorMessage",
    "AuditError",
]

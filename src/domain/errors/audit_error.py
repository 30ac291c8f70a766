"""Audit trail error types.

Used when an audit record cannot be written.

Usage:
    from src.domain.errors import AuditError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=AuditError(
        code=ErrorCode.AUDIT_RECORD_FAILED,
        message="Failed to record audit entry: database connection lost",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditError(DomainError):
    """Audit sink failure (database error, connection loss, etc.).

    Attributes:
        code: ErrorCode enum (AUDIT_RECORD_FAILED).
        message: Human-readable message.
        details: Additional context.
    """

    pass

"""Application layer error types.

Application-level errors wrap domain errors for the presentation layer.
The presentation layer turns them into RFC 9457 Problem Details.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    to_application_error: DomainError -> ApplicationError mapping
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Could not find App Connection with ID ...",
        ... )
    """

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        domain_error: Original domain error (if error originated from domain layer).
        details: Additional context as key-value pairs.
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


def to_application_error(error: DomainError) -> ApplicationError:
    """Wrap a domain error by kind.

    ValidationError -> BAD_REQUEST, NotFoundError -> NOT_FOUND,
    AuthorizationError -> FORBIDDEN, ConflictError -> CONFLICT,
    anything else (DecryptionError, EncryptionError) -> INTERNAL_ERROR.
    """
    match error:
        case ValidationError():
            code = ApplicationErrorCode.BAD_REQUEST
        case NotFoundError():
            code = ApplicationErrorCode.NOT_FOUND
        case AuthorizationError():
            code = ApplicationErrorCode.FORBIDDEN
        case ConflictError():
            code = ApplicationErrorCode.CONFLICT
        case _:
            code = ApplicationErrorCode.INTERNAL_ERROR

    details = dict(error.details or {})
    if isinstance(error, ValidationError) and error.field:
        details["field"] = error.field
    details["error_code"] = error.code.value

    return ApplicationError(
        code=code,
        message=error.message,
        domain_error=error,
        details=details,
    )

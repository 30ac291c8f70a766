"""Map application errors to RFC 9457 responses.

Exports:
    ErrorResponseBuilder: ApplicationError -> JSONResponse
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.errors import ValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    problem_response,
)

# code -> (status, title)
_PROBLEMS: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.BAD_REQUEST: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    ApplicationErrorCode.UNAUTHORIZED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ApplicationErrorCode.FORBIDDEN: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    ApplicationErrorCode.INTERNAL_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
    ),
}

_FALLBACK = _PROBLEMS[ApplicationErrorCode.INTERNAL_ERROR]


class ErrorResponseBuilder:
    """Build Problem Details responses from service failures.

    A ValidationError carrying a field (``name``, ``method``, ``app``,
    ``credentials...``) is surfaced as a single entry in ``errors``.

    Example:
        >>> ErrorResponseBuilder.from_application_error(
        ...     error=to_application_error(domain_error),
        ...     request=request,
        ...     trace_id=get_trace_id(),
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        status_code, title = _PROBLEMS.get(error.code, _FALLBACK)

        errors = None
        cause = error.domain_error
        if isinstance(cause, ValidationError) and cause.field:
            errors = [
                ErrorDetail(field=cause.field, code=cause.code.value, message=cause.message)
            ]

        return problem_response(
            request,
            status_code=status_code,
            title=title,
            slug=error.code.value,
            detail=error.message,
            errors=errors,
            trace_id=trace_id,
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """HTTP status for an application error code (500 when unmapped)."""
        return _PROBLEMS.get(code, _FALLBACK)[0]

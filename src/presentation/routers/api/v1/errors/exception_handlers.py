"""Global exception handlers.

Every error leaving the API is an RFC 9457 body, including framework errors
raised before a route runs (401 from the actor dependency, 422 from request
parsing) and anything unexpected (500, details logged but never returned).
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    problem_response,
)

# status -> (title, type slug)
STATUS_PROBLEMS: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad_request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not_found"),
    405: ("Method Not Allowed", "method_not_allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported_media_type"),
    422: ("Validation Failed", "validation_failed"),
    500: ("Internal Server Error", "internal_error"),
    503: ("Service Unavailable", "service_unavailable"),
}


def _field_errors(exc: RequestValidationError) -> list[ErrorDetail]:
    """Flatten pydantic errors; ("body", "credentials", "role") -> "credentials.role"."""
    details = []
    for error in exc.errors():
        parts = [str(part) for part in error.get("loc", ()) if part != "body"]
        details.append(
            ErrorDetail(
                field=".".join(parts) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )
    return details


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render HTTPException as Problem Details, keeping its headers."""
    assert isinstance(exc, HTTPException)
    title, slug = STATUS_PROBLEMS.get(exc.status_code, ("Error", "error"))

    return problem_response(
        request,
        status_code=exc.status_code,
        title=title,
        slug=slug,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render request parsing failures as a 422 with per-field errors.

    Example:
        POST /api/v1/app-connections/aws with ``{"name": "Prod AWS", ...}``
        answers 422 with
        ``errors=[{"field": "name", "code": "string_pattern_mismatch", ...}]``.
    """
    assert isinstance(exc, RequestValidationError)

    return problem_response(
        request,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        title="Validation Failed",
        slug="validation_failed",
        detail="Request validation failed. Check 'errors' for details.",
        errors=_field_errors(exc),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and answer 500 without internals."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )

    return problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        slug="internal_error",
        detail="An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the three handlers on an application."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

"""RFC 9457 Problem Details for HTTP APIs.

This module implements RFC 9457 (Problem Details for HTTP APIs) using Pydantic
models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
    problem_response: Render ProblemDetails as a JSONResponse
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.core.config import settings


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(
        ...     field="credentials.role",
        ...     code="app_connection_credentials_invalid",
        ...     message="Field required",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Could not find App Connection with ID ...",
        ...     instance="/api/v1/app-connections/aws/0192...",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/bad_request"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Bad Request"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=['An App Connection with the name "prod-aws" already exists.'],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/app-connections/aws"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )


def problem_response(
    request: Request,
    *,
    status_code: int,
    title: str,
    slug: str,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    trace_id: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render a ProblemDetails body for the current request.

    Args:
        request: Request being answered; its path becomes ``instance``.
        status_code: HTTP status.
        title: Short summary of the problem type.
        slug: Last segment of the ``type`` URL.
        detail: Occurrence-specific explanation.
        errors: Field-level errors, if any.
        trace_id: Trace ID; falls back to ``request.state.trace_id``.
        headers: Extra response headers.

    Returns:
        JSONResponse with ``None`` fields omitted.
    """
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        trace_id=trace_id or getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )

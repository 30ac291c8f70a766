"""App connections resource router.

Endpoints:
    GET    /api/v1/app-connections/options                - Providers and methods
    GET    /api/v1/app-connections                        - All connections of the org
    GET    /api/v1/app-connections/{app}                  - Connections of one app
    GET    /api/v1/app-connections/{app}/{id}             - Connection by ID
    GET    /api/v1/app-connections/{app}/name/{name}      - Connection by name
    POST   /api/v1/app-connections/{app}                  - Create connection
    PATCH  /api/v1/app-connections/{app}/{id}             - Update connection
    DELETE /api/v1/app-connections/{app}/{id}             - Delete connection

Read and delete responses are sanitized (secret credential fields removed).
Create and update echo the full credentials back to the caller who just
supplied them.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands import CreateAppConnection, UpdateAppConnection
from src.application.errors import to_application_error
from src.application.services import AppConnectionService, sanitize_app_connection
from src.core.container import get_app_connection_service
from src.core.errors import DomainError
from src.core.result import Failure, Success
from src.domain.connections import APP_DISPLAY_NAMES
from src.domain.entities import AppConnection
from src.domain.enums import AppConnectionApp
from src.presentation.routers.api.middleware import CurrentActor, get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.app_connection_schemas import (
    AppConnectionListResponse,
    AppConnectionOptionResponse,
    AppConnectionOptionsResponse,
    AppConnectionResponse,
    AppConnectionSingleResponse,
    CreateAppConnectionRequest,
    UpdateAppConnectionRequest,
)

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"description": "Invalid request", "model": ProblemDetails},
    401: {"description": "Authentication required", "model": ProblemDetails},
    403: {"description": "Access denied", "model": ProblemDetails},
    404: {"description": "Connection not found", "model": ProblemDetails},
}


def _error_response(error: DomainError, request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=to_application_error(error),
        request=request,
        trace_id=get_trace_id(),
    )


def _sanitized(connection: AppConnection) -> AppConnectionResponse:
    return AppConnectionResponse.from_sanitized(sanitize_app_connection(connection))


router = APIRouter(prefix="/app-connections", tags=["App Connections"])


@router.get(
    "/options",
    response_model=AppConnectionOptionsResponse,
    responses={401: _ERROR_RESPONSES[401]},
    summary="List app connection options",
    description="Every provider that can be connected and its authentication methods.",
)
async def list_app_connection_options(
    actor: CurrentActor,
    service: AppConnectionService = Depends(get_app_connection_service),
) -> AppConnectionOptionsResponse:
    """List connectable providers.

    GET /api/v1/app-connections/options → 200 OK
    """
    return AppConnectionOptionsResponse(
        app_connection_options=[
            AppConnectionOptionResponse.from_option(option)
            for option in service.list_connection_options()
        ]
    )


@router.get(
    "",
    response_model=AppConnectionListResponse,
    responses={401: _ERROR_RESPONSES[401], 403: _ERROR_RESPONSES[403]},
    summary="List app connections",
    description="All connections of the caller's organization, sanitized.",
)
async def list_app_connections(
    request: Request,
    actor: CurrentActor,
    service: AppConnectionService = Depends(get_app_connection_service),
) -> AppConnectionListResponse | JSONResponse:
    """List every connection of the organization.

    GET /api/v1/app-connections → 200 OK
    """
    match await service.list_by_org(actor):
        case Failure(error=error):
            return _error_response(error, request)
        case Success(value=connections):
            return AppConnectionListResponse(
                app_connections=[_sanitized(c) for c in connections]
            )


def build_app_router(app: AppConnectionApp) -> APIRouter:
    """Build the CRUD router of one provider.

    Every provider exposes the same endpoints under /app-connections/{app}.
    The app bound here is checked against stored rows by the service, so a
    GitHub connection cannot be read or deleted through the AWS routes.

    Args:
        app: Provider served by the router.

    Returns:
        APIRouter with prefix /{app}.
    """
    display_name = APP_DISPLAY_NAMES[app]
    app_router = APIRouter(prefix=f"/{app.value}")

    @app_router.get(
        "",
        response_model=AppConnectionListResponse,
        responses={401: _ERROR_RESPONSES[401], 403: _ERROR_RESPONSES[403]},
        summary=f"List {display_name} connections",
    )
    async def list_connections(
        request: Request,
        actor: CurrentActor,
        service: AppConnectionService = Depends(get_app_connection_service),
    ) -> AppConnectionListResponse | JSONResponse:
        match await service.list_by_org(actor, app):
            case Failure(error=error):
                return _error_response(error, request)
            case Success(value=connections):
                return AppConnectionListResponse(
                    app_connections=[_sanitized(c) for c in connections]
                )

    @app_router.get(
        "/name/{connection_name}",
        response_model=AppConnectionSingleResponse,
        responses=_ERROR_RESPONSES,
        summary=f"Get {display_name} connection by name",
    )
    async def get_connection_by_name(
        request: Request,
        connection_name: str,
        actor: CurrentActor,
        service: AppConnectionService = Depends(get_app_connection_service),
    ) -> AppConnectionSingleResponse | JSONResponse:
        match await service.find_by_name(app, connection_name, actor):
            case Failure(error=error):
                return _error_response(error, request)
            case Success(value=connection):
                return AppConnectionSingleResponse(app_connection=_sanitized(connection))

    @app_router.get(
        "/{connection_id}",
        response_model=AppConnectionSingleResponse,
        responses=_ERROR_RESPONSES,
        summary=f"Get {display_name} connection",
    )
    async def get_connection(
        request: Request,
        connection_id: UUID,
        actor: CurrentActor,
        service: AppConnectionService = Depends(get_app_connection_service),
    ) -> AppConnectionSingleResponse | JSONResponse:
        match await service.find_by_id(app, connection_id, actor):
            case Failure(error=error):
                return _error_response(error, request)
            case Success(value=connection):
                return AppConnectionSingleResponse(app_connection=_sanitized(connection))

    @app_router.post(
        "",
        response_model=AppConnectionSingleResponse,
        responses={
            400: _ERROR_RESPONSES[400],
            401: _ERROR_RESPONSES[401],
            403: _ERROR_RESPONSES[403],
        },
        summary=f"Create {display_name} connection",
    )
    async def create_connection(
        request: Request,
        data: CreateAppConnectionRequest,
        actor: CurrentActor,
        service: AppConnectionService = Depends(get_app_connection_service),
    ) -> AppConnectionSingleResponse | JSONResponse:
        command = CreateAppConnection(
            app=app,
            method=data.method,
            name=data.name,
            credentials=data.credentials,
            description=data.description,
        )
        match await service.create(command, actor):
            case Failure(error=error):
                return _error_response(error, request)
            case Success(value=connection):
                return AppConnectionSingleResponse(
                    app_connection=AppConnectionResponse.from_connection(connection)
                )

    @app_router.patch(
        "/{connection_id}",
        response_model=AppConnectionSingleResponse,
        responses=_ERROR_RESPONSES,
        summary=f"Update {display_name} connection",
    )
    async def update_connection(
        request: Request,
        connection_id: UUID,
        data: UpdateAppConnectionRequest,
        actor: CurrentActor,
        service: AppConnectionService = Depends(get_app_connection_service),
    ) -> AppConnectionSingleResponse | JSONResponse:
        command = UpdateAppConnection(
            app=app,
            connection_id=connection_id,
            name=data.name,
            description=data.description,
            credentials=data.credentials,
            clear_description=data.clears_description,
        )
        match await service.update(command, actor):
            case Failure(error=error):
                return _error_response(error, request)
            case Success(value=connection):
                return AppConnectionSingleResponse(
                    app_connection=AppConnectionResponse.from_connection(connection)
                )

    @app_router.delete(
        "/{connection_id}",
        response_model=AppConnectionSingleResponse,
        responses=_ERROR_RESPONSES,
        summary=f"Delete {display_name} connection",
    )
    async def delete_connection(
        request: Request,
        connection_id: UUID,
        actor: CurrentActor,
        service: AppConnectionService = Depends(get_app_connection_service),
    ) -> AppConnectionSingleResponse | JSONResponse:
        match await service.delete(app, connection_id, actor):
            case Failure(error=error):
                return _error_response(error, request)
            case Success(value=connection):
                return AppConnectionSingleResponse(app_connection=_sanitized(connection))

    return app_router


for _app in AppConnectionApp:
    router.include_router(
        build_app_router(_app),
        tags=[f"{APP_DISPLAY_NAMES[_app]} Connections"],
    )

"""App connection service.

Owns the authorization-gated lifecycle of app connections: list, view,
create, update and delete. Every operation resolves permissions through
PermissionServiceProtocol, keeps credentials encrypted at rest through
CredentialEncryptionProtocol, and returns a Result.

Permission scope:
    Operations on an existing row evaluate permissions in the row's
    org_id. The actor's org_id is only used where no row exists yet
    (list, find_by_name, create).

Events:
    Writes follow the 3-state pattern (Attempted -> Succeeded/Failed).
    Reads publish a single completion event. Handlers (logging, audit)
    are fail-open; the service never depends on their outcome.

Reference:
    - src/domain/events/registry.py
    - src/domain/connections/registry.py
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands import CreateAppConnection, UpdateAppConnection
from src.core.enums import ErrorCode
from src.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.connections import (
    AppConnectionOption,
    list_connection_options,
    validate_credentials,
    validate_variant_credentials,
)
from src.domain.entities import AppConnection, AppConnectionRecord
from src.domain.enums import (
    AppConnectionApp,
    OrgPermissionAction,
    OrgPermissionSubject,
)
from src.domain.errors import AppConnectionErrorMessage
from src.domain.events import (
    AppConnectionCreationAttempted,
    AppConnectionCreationFailed,
    AppConnectionCreationSucceeded,
    AppConnectionDeletionAttempted,
    AppConnectionDeletionFailed,
    AppConnectionDeletionSucceeded,
    AppConnectionsListed,
    AppConnectionUpdateAttempted,
    AppConnectionUpdateFailed,
    AppConnectionUpdateSucceeded,
    AppConnectionViewed,
)
from src.domain.protocols import (
    AppConnectionRepository,
    CredentialEncryptionProtocol,
    DecryptionError,
    EventBusProtocol,
    LoggerProtocol,
    PermissionServiceProtocol,
)
from src.domain.value_objects import EncryptedCredentials, OrgServiceActor

RESOURCE_TYPE = "app_connection"


class AppConnectionService:
    """Lifecycle of app connections.

    Dependencies (injected via constructor):
        - AppConnectionRepository: Persistence
        - PermissionServiceProtocol: Organization RBAC
        - CredentialEncryptionProtocol: Org-scoped envelope encryption
        - EventBusProtocol: Domain events (logging, audit)
        - LoggerProtocol: Integrity alerts

    Returns:
        Every public operation returns Result[..., DomainError]. Failures
        are ValidationError (400), NotFoundError (404),
        AuthorizationError (403) or EncryptionError/DecryptionError (500).
    """

    def __init__(
        self,
        repository: AppConnectionRepository,
        permission_service: PermissionServiceProtocol,
        encryption: CredentialEncryptionProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            repository: App connection repository.
            permission_service: Permission resolution.
            encryption: Credential encryption.
            event_bus: Event bus for publishing events.
            logger: Structured logger.
        """
        self._repository = repository
        self._permission_service = permission_service
        self._encryption = encryption
        self._event_bus = event_bus
        self._logger = logger

    # =========================================================================
    # Reads
    # =========================================================================

    async def list_by_org(
        self,
        actor: OrgServiceActor,
        app: AppConnectionApp | None = None,
    ) -> Result[list[AppConnection], DomainError]:
        """List the connections of the actor's organization.

        Args:
            actor: Calling actor. Read permission in actor.org_id required.
            app: Restrict to one provider when given.

        Returns:
            Success(list[AppConnection]) with decrypted credentials (empty
            list when the org has none).
            Failure(AuthorizationError) without Read permission.
            Failure(DecryptionError) if any stored row fails to decrypt.
        """
        match await self._ensure_can(actor, actor.org_id, OrgPermissionAction.READ):
            case Failure(error=error):
                return Failure(error=error)

        records = await self._repository.find(actor.org_id, app)

        connections: list[AppConnection] = []
        for record in records:
            match await self._decrypt(record):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=connection):
                    connections.append(connection)

        await self._event_bus.publish(
            AppConnectionsListed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                **self._event_fields(actor, actor.org_id, app),
                count=len(connections),
                connection_ids=tuple(c.id for c in connections),
            )
        )
        return Success(value=connections)

    async def find_by_id(
        self,
        app: AppConnectionApp,
        connection_id: UUID,
        actor: OrgServiceActor,
    ) -> Result[AppConnection, DomainError]:
        """Get one connection by ID.

        Args:
            app: Provider the caller expects the connection to target.
            connection_id: Connection ID.
            actor: Calling actor.

        Returns:
            Success(AppConnection) with decrypted credentials.
            Failure(NotFoundError) if no row has this ID.
            Failure(AuthorizationError) without Read in the row's org.
            Failure(ValidationError) if the row is for another app.
            Failure(DecryptionError) if stored credentials are unreadable.
        """
        record = await self._repository.find_by_id(connection_id)
        if record is None:
            return Failure(error=self._not_found_by_id(connection_id))

        return await self._view(
            record,
            app,
            actor,
            mismatch_message=AppConnectionErrorMessage.APP_MISMATCH_BY_ID.format(
                id=connection_id, app=app.value
            ),
        )

    async def find_by_name(
        self,
        app: AppConnectionApp,
        name: str,
        actor: OrgServiceActor,
    ) -> Result[AppConnection, DomainError]:
        """Get one connection by name within the actor's organization.

        Same contract as find_by_id, keyed by (actor.org_id, name).
        """
        record = await self._repository.find_by_name(actor.org_id, name)
        if record is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.APP_CONNECTION_NOT_FOUND,
                    message=AppConnectionErrorMessage.NOT_FOUND_BY_NAME.format(
                        name=name
                    ),
                    resource_type=RESOURCE_TYPE,
                    resource_id=name,
                )
            )

        return await self._view(
            record,
            app,
            actor,
            mismatch_message=AppConnectionErrorMessage.APP_MISMATCH_BY_NAME.format(
                name=name, app=app.value
            ),
        )

    def list_connection_options(self) -> list[AppConnectionOption]:
        """Every provider and its methods. No permission check."""
        return list_connection_options()

    # =========================================================================
    # Writes
    # =========================================================================

    async def create(
        self,
        data: CreateAppConnection,
        actor: OrgServiceActor,
    ) -> Result[AppConnection, DomainError]:
        """Create a connection in the actor's organization.

        Flow:
            1. Emit AppConnectionCreationAttempted
            2. Require Create in actor.org_id
            3. Validate credentials against (app, method)
            4. Reject a name already used in the org
            5. Encrypt under actor.org_id and persist
            6. Emit AppConnectionCreationSucceeded/Failed

        Args:
            data: CreateAppConnection command.
            actor: Calling actor.

        Returns:
            Success(AppConnection) carrying the plaintext credentials.
            Failure(DomainError) otherwise.

        Raises:
            Exception: Unexpected storage errors propagate after
                AppConnectionCreationFailed is emitted.
        """
        fields = self._event_fields(actor, actor.org_id, data.app)

        await self._event_bus.publish(
            AppConnectionCreationAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                **fields,
                name=data.name,
                method=data.method,
            )
        )

        try:
            result = await self._create(data, actor)
        except Exception as e:
            await self._event_bus.publish(
                AppConnectionCreationFailed(
                    event_id=uuid7(),
                    occurred_at=datetime.now(UTC),
                    **fields,
                    name=data.name,
                    method=data.method,
                    reason=type(e).__name__,
                )
            )
            raise

        match result:
            case Success(value=connection):
                await self._event_bus.publish(
                    AppConnectionCreationSucceeded(
                        event_id=uuid7(),
                        occurred_at=datetime.now(UTC),
                        **fields,
                        connection_id=connection.id,
                        name=connection.name,
                        method=connection.method,
                    )
                )
            case Failure(error=error):
                await self._event_bus.publish(
                    AppConnectionCreationFailed(
                        event_id=uuid7(),
                        occurred_at=datetime.now(UTC),
                        **fields,
                        name=data.name,
                        method=data.method,
                        reason=error.code.value,
                    )
                )
        return result

    async def update(
        self,
        data: UpdateAppConnection,
        actor: OrgServiceActor,
    ) -> Result[AppConnection, DomainError]:
        """Update name, description and/or credentials of a connection.

        app and method are never changed. Without new credentials the stored
        ciphertext is left untouched and decrypted fresh for the result.

        Args:
            data: UpdateAppConnection command.
            actor: Calling actor.

        Returns:
            Success(AppConnection) with the merged state.
            Failure(DomainError) otherwise.

        Raises:
            Exception: Unexpected storage errors propagate after
                AppConnectionUpdateFailed is emitted.
        """
        fields = self._event_fields(actor, actor.org_id, data.app)

        await self._event_bus.publish(
            AppConnectionUpdateAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                **fields,
                connection_id=data.connection_id,
                updated_fields=data.updated_fields,
            )
        )

        try:
            result = await self._update(data, actor)
        except Exception as e:
            await self._emit_update_failed(data, fields, type(e).__name__)
            raise

        match result:
            case Success(value=connection):
                await self._event_bus.publish(
                    AppConnectionUpdateSucceeded(
                        event_id=uuid7(),
                        occurred_at=datetime.now(UTC),
                        **self._event_fields(actor, connection.org_id, data.app),
                        connection_id=connection.id,
                        name=connection.name,
                        method=connection.method,
                        updated_fields=data.updated_fields,
                        credentials_rotated=data.credentials is not None,
                    )
                )
            case Failure(error=error):
                await self._emit_update_failed(data, fields, error.code.value)
        return result

    async def delete(
        self,
        app: AppConnectionApp,
        connection_id: UUID,
        actor: OrgServiceActor,
    ) -> Result[AppConnection, DomainError]:
        """Hard delete a connection.

        The row is removed, then its credentials are decrypted; the result
        is its last state. Undecryptable credentials still remove the row
        and return DecryptionError (AppConnectionDeletionFailed is emitted).
        A row for another app is left in place (ValidationError).

        Raises:
            Exception: Unexpected storage errors propagate after
                AppConnectionDeletionFailed is emitted.
        """
        fields = self._event_fields(actor, actor.org_id, app)

        await self._event_bus.publish(
            AppConnectionDeletionAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                **fields,
                connection_id=connection_id,
            )
        )

        try:
            result = await self._delete(app, connection_id, actor)
        except Exception as e:
            await self._emit_deletion_failed(connection_id, fields, type(e).__name__)
            raise

        match result:
            case Success(value=connection):
                await self._event_bus.publish(
                    AppConnectionDeletionSucceeded(
                        event_id=uuid7(),
                        occurred_at=datetime.now(UTC),
                        **self._event_fields(actor, connection.org_id, app),
                        connection_id=connection.id,
                        name=connection.name,
                        method=connection.method,
                    )
                )
            case Failure(error=error):
                await self._emit_deletion_failed(
                    connection_id, fields, error.code.value
                )
        return result

    # =========================================================================
    # Operation bodies
    # =========================================================================

    async def _create(
        self,
        data: CreateAppConnection,
        actor: OrgServiceActor,
    ) -> Result[AppConnection, DomainError]:
        match await self._ensure_can(actor, actor.org_id, OrgPermissionAction.CREATE):
            case Failure(error=error):
                return Failure(error=error)

        match validate_variant_credentials(data.app, data.method, data.credentials):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=validated):
                credentials = validated.credentials

        if await self._repository.find_by_name(actor.org_id, data.name) is not None:
            return Failure(error=self._name_taken(data.name))

        match await self._encryption.encrypt(actor.org_id, credentials):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=blob):
                pass

        match await self._repository.create(
            org_id=actor.org_id,
            name=data.name,
            app=data.app,
            method=validated.variant.method.value,
            encrypted_credentials=EncryptedCredentials(ciphertext=blob),
            description=data.description,
        ):
            case Failure(error=error):
                return Failure(error=self._translate_write_error(error, data.name))
            case Success(value=record):
                return Success(value=record.to_connection(credentials))

    async def _update(
        self,
        data: UpdateAppConnection,
        actor: OrgServiceActor,
    ) -> Result[AppConnection, DomainError]:
        record = await self._repository.find_by_id(data.connection_id)
        if record is None:
            return Failure(error=self._not_found_by_id(data.connection_id))

        match await self._ensure_can(actor, record.org_id, OrgPermissionAction.EDIT):
            case Failure(error=error):
                return Failure(error=error)

        if not record.is_for_app(data.app):
            return Failure(
                error=self._app_mismatch(
                    AppConnectionErrorMessage.APP_MISMATCH_BY_ID.format(
                        id=data.connection_id, app=data.app.value
                    )
                )
            )

        if data.name is not None and data.name != record.name:
            if (
                await self._repository.find_by_name(record.org_id, data.name)
                is not None
            ):
                return Failure(error=self._name_taken(data.name))

        credentials: dict[str, Any] | None = None
        encrypted: EncryptedCredentials | None = None
        if data.credentials is not None:
            match validate_credentials(record.app, record.method, data.credentials):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=credentials):
                    pass
            match await self._encryption.encrypt(record.org_id, credentials):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=blob):
                    encrypted = EncryptedCredentials(ciphertext=blob)

        match await self._repository.update_by_id(
            data.connection_id,
            name=data.name,
            description=data.description,
            encrypted_credentials=encrypted,
            clear_description=data.clear_description,
        ):
            case Failure(error=error):
                return Failure(
                    error=self._translate_write_error(error, data.name or record.name)
                )
            case Success(value=updated):
                pass

        if credentials is not None:
            return Success(value=updated.to_connection(credentials))
        return await self._decrypt(updated)

    async def _delete(
        self,
        app: AppConnectionApp,
        connection_id: UUID,
        actor: OrgServiceActor,
    ) -> Result[AppConnection, DomainError]:
        record = await self._repository.find_by_id(connection_id)
        if record is None:
            return Failure(error=self._not_found_by_id(connection_id))

        match await self._ensure_can(actor, record.org_id, OrgPermissionAction.DELETE):
            case Failure(error=error):
                return Failure(error=error)

        if not record.is_for_app(app):
            return Failure(
                error=self._app_mismatch(
                    AppConnectionErrorMessage.APP_MISMATCH_BY_ID.format(
                        id=connection_id, app=app.value
                    )
                )
            )

        deleted = await self._repository.delete_by_id(connection_id)
        if deleted is None:
            return Failure(error=self._not_found_by_id(connection_id))

        # The row is gone even when its credentials cannot be read back.
        return await self._decrypt(deleted)

    async def _view(
        self,
        record: AppConnectionRecord,
        app: AppConnectionApp,
        actor: OrgServiceActor,
        *,
        mismatch_message: str,
    ) -> Result[AppConnection, DomainError]:
        match await self._ensure_can(actor, record.org_id, OrgPermissionAction.READ):
            case Failure(error=error):
                return Failure(error=error)

        if not record.is_for_app(app):
            return Failure(error=self._app_mismatch(mismatch_message))

        match await self._decrypt(record):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=connection):
                pass

        await self._event_bus.publish(
            AppConnectionViewed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                **self._event_fields(actor, record.org_id, record.app),
                connection_id=record.id,
                name=record.name,
                method=record.method,
            )
        )
        return Success(value=connection)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _ensure_can(
        self,
        actor: OrgServiceActor,
        target_org_id: UUID,
        action: OrgPermissionAction,
    ) -> Result[None, DomainError]:
        permission = await self._permission_service.get_org_permission(
            actor_type=actor.type,
            actor_id=actor.id,
            actor_org_id=actor.org_id,
            actor_auth_method=actor.auth_method,
            target_org_id=target_org_id,
        )
        return permission.ensure_can(action, OrgPermissionSubject.APP_CONNECTIONS)

    async def _decrypt(
        self,
        record: AppConnectionRecord,
    ) -> Result[AppConnection, DomainError]:
        """Decrypt a row and re-validate it against its (app, method).

        Anything that does not validate is corrupt data: it is reported as
        DecryptionError and never coerced into the expected shape.
        """
        match await self._encryption.decrypt(
            record.org_id, record.encrypted_credentials.ciphertext
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=raw):
                pass

        match validate_credentials(record.app, record.method, raw):
            case Failure(error=error):
                self._logger.error(
                    "app_connection_credentials_corrupted",
                    connection_id=str(record.id),
                    org_id=str(record.org_id),
                    app=record.app.value,
                    method=record.method,
                    field=error.field,
                )
                return Failure(
                    error=DecryptionError(
                        code=ErrorCode.DECRYPTION_FAILED,
                        message=AppConnectionErrorMessage.STORED_CREDENTIALS_INVALID.format(
                            id=record.id,
                            app=record.app.value,
                            method=record.method,
                        ),
                    )
                )
            case Success(value=credentials):
                return Success(value=record.to_connection(credentials))

    async def _emit_update_failed(
        self,
        data: UpdateAppConnection,
        fields: dict[str, Any],
        reason: str,
    ) -> None:
        await self._event_bus.publish(
            AppConnectionUpdateFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                **fields,
                connection_id=data.connection_id,
                reason=reason,
            )
        )

    async def _emit_deletion_failed(
        self,
        connection_id: UUID,
        fields: dict[str, Any],
        reason: str,
    ) -> None:
        await self._event_bus.publish(
            AppConnectionDeletionFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                **fields,
                connection_id=connection_id,
                reason=reason,
            )
        )

    @staticmethod
    def _event_fields(
        actor: OrgServiceActor,
        org_id: UUID,
        app: AppConnectionApp | None,
    ) -> dict[str, Any]:
        return {
            "actor_type": actor.type.value,
            "actor_id": actor.id,
            "org_id": org_id,
            "app": app.value if app is not None else None,
        }

    @staticmethod
    def _not_found_by_id(connection_id: UUID) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.APP_CONNECTION_NOT_FOUND,
            message=AppConnectionErrorMessage.NOT_FOUND_BY_ID.format(id=connection_id),
            resource_type=RESOURCE_TYPE,
            resource_id=str(connection_id),
        )

    @staticmethod
    def _app_mismatch(message: str) -> ValidationError:
        return ValidationError(
            code=ErrorCode.APP_CONNECTION_APP_MISMATCH,
            message=message,
            field="app",
        )

    @staticmethod
    def _name_taken(name: str) -> ValidationError:
        return ValidationError(
            code=ErrorCode.APP_CONNECTION_NAME_ALREADY_EXISTS,
            message=AppConnectionErrorMessage.NAME_ALREADY_EXISTS.format(name=name),
            field="name",
        )

    @classmethod
    def _translate_write_error(cls, error: DomainError, name: str) -> DomainError:
        # Unique constraint race: same client-facing error as the pre-check.
        if isinstance(error, ConflictError):
            return cls._name_taken(name)
        return error

"""AppConnectionRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain AppConnectionRecord entities and AppConnectionModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import AppConnectionRecord
from src.domain.enums import AppConnectionApp
from src.domain.errors import AppConnectionErrorMessage
from src.domain.value_objects import EncryptedCredentials
from src.infrastructure.persistence.models.app_connection import AppConnectionModel


class AppConnectionRepository:
    """SQLAlchemy implementation of AppConnectionRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural
    typing).

    Each write commits immediately and refreshes the row so server-side
    defaults (created_at, updated_at) are populated. A violation of
    uq_app_connections_org_name rolls the session back and is returned as
    Failure(ConflictError).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AppConnectionRepository(session)
        ...     record = await repo.find_by_id(connection_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(
        self,
        org_id: UUID,
        app: AppConnectionApp | None = None,
    ) -> list[AppConnectionRecord]:
        """Find connections of an organization, oldest first.

        Args:
            org_id: Owning organization.
            app: Restrict to one provider when given.

        Returns:
            List of connections (empty if none found).
        """
        stmt = select(AppConnectionModel).where(AppConnectionModel.org_id == org_id)
        if app is not None:
            stmt = stmt.where(AppConnectionModel.app == app.value)
        stmt = stmt.order_by(AppConnectionModel.created_at, AppConnectionModel.id)

        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_by_id(self, connection_id: UUID) -> AppConnectionRecord | None:
        """Find connection by ID (any organization)."""
        model = await self._get_model(connection_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def find_by_name(
        self,
        org_id: UUID,
        name: str,
    ) -> AppConnectionRecord | None:
        """Find connection by name within an organization."""
        stmt = select(AppConnectionModel).where(
            AppConnectionModel.org_id == org_id,
            AppConnectionModel.name == name,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None
        return self._to_domain(model)

    async def create(
        self,
        *,
        org_id: UUID,
        name: str,
        app: AppConnectionApp,
        method: str,
        encrypted_credentials: EncryptedCredentials,
        description: str | None = None,
    ) -> Result[AppConnectionRecord, ConflictError]:
        """Insert a new connection.

        Returns:
            Success(record) with generated id and timestamps.
            Failure(ConflictError) if the name is taken in org_id.
        """
        model = AppConnectionModel(
            org_id=org_id,
            name=name,
            description=description,
            app=app.value,
            method=method,
            encrypted_credentials=encrypted_credentials.ciphertext,
            version=1,
        )
        self.session.add(model)

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(error=self._name_conflict(name))

        await self.session.refresh(model)
        return Success(value=self._to_domain(model))

    async def update_by_id(
        self,
        connection_id: UUID,
        *,
        name: str | None = None,
        description: str | None = None,
        encrypted_credentials: EncryptedCredentials | None = None,
        clear_description: bool = False,
    ) -> Result[AppConnectionRecord, ConflictError | NotFoundError]:
        """Partially update a connection.

        Only non-None arguments are written; clear_description writes NULL.
        Replacing credentials bumps version.

        Returns:
            Success(record) with the updated row.
            Failure(ConflictError) if the new name is taken in the org.
            Failure(NotFoundError) if the row no longer exists.
        """
        model = await self._get_model(connection_id)
        if model is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.APP_CONNECTION_NOT_FOUND,
                    message=AppConnectionErrorMessage.NOT_FOUND_BY_ID.format(
                        id=connection_id
                    ),
                    resource_type="app_connection",
                    resource_id=str(connection_id),
                )
            )

        if name is not None:
            model.name = name
        if clear_description:
            model.description = None
        elif description is not None:
            model.description = description
        if encrypted_credentials is not None:
            model.encrypted_credentials = encrypted_credentials.ciphertext
            model.version = model.version + 1

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(error=self._name_conflict(name or ""))

        await self.session.refresh(model)
        return Success(value=self._to_domain(model))

    async def delete_by_id(self, connection_id: UUID) -> AppConnectionRecord | None:
        """Hard delete a connection.

        Returns:
            The deleted row, or None if it did not exist.
        """
        model = await self._get_model(connection_id)
        if model is None:
            return None

        record = self._to_domain(model)
        await self.session.delete(model)
        await self.session.commit()
        return record

    async def _get_model(self, connection_id: UUID) -> AppConnectionModel | None:
        stmt = select(AppConnectionModel).where(AppConnectionModel.id == connection_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _name_conflict(name: str) -> ConflictError:
        return ConflictError(
            code=ErrorCode.APP_CONNECTION_NAME_ALREADY_EXISTS,
            message=AppConnectionErrorMessage.NAME_ALREADY_EXISTS.format(name=name),
            resource_type="app_connection",
            conflicting_field="name",
        )

    def _to_domain(self, model: AppConnectionModel) -> AppConnectionRecord:
        """Convert database model to domain entity."""
        return AppConnectionRecord(
            id=model.id,
            org_id=model.org_id,
            name=model.name,
            description=model.description,
            app=AppConnectionApp(model.app),
            method=model.method,
            encrypted_credentials=EncryptedCredentials(
                ciphertext=model.encrypted_credentials
            ),
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

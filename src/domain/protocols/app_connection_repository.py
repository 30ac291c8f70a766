"""AppConnectionRepository protocol for app connection persistence.

Port (interface) for hexagonal architecture. Infrastructure layer
implements this protocol (SQLAlchemy, in-memory fakes in tests).
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import ConflictError, NotFoundError
from src.core.result import Result
from src.domain.entities import AppConnectionRecord
from src.domain.enums import AppConnectionApp
from src.domain.value_objects import EncryptedCredentials


class AppConnectionRepository(Protocol):
    """App connection repository protocol (port).

    Methods:
        find: All connections of an org, optionally one app
        find_by_id: Retrieve connection by ID
        find_by_name: Retrieve connection by (org, name)
        create: Insert connection
        update_by_id: Partial update (name, description, credentials)
        delete_by_id: Hard delete

    Writes return Failure(ConflictError) when the (org_id, name) unique
    constraint is violated. Other storage exceptions propagate.
    """

    async def find(
        self,
        org_id: UUID,
        app: AppConnectionApp | None = None,
    ) -> list[AppConnectionRecord]:
        """Find connections of an organization.

        Args:
            org_id: Owning organization.
            app: Restrict to one provider when given.

        Returns:
            List ordered by creation time (empty if none found).
        """
        ...

    async def find_by_id(self, connection_id: UUID) -> AppConnectionRecord | None:
        """Find connection by ID, regardless of organization."""
        ...

    async def find_by_name(
        self,
        org_id: UUID,
        name: str,
    ) -> AppConnectionRecord | None:
        """Find connection by name within an organization."""
        ...

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
            Success(record) with server-assigned id and timestamps.
            Failure(ConflictError) if the name is taken in org_id.
        """
        ...

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

        Only arguments that are not None are written; clear_description
        sets description to NULL. app, method and org_id cannot be changed.
        Replacing credentials increments version.

        Returns:
            Success(record) with the updated row.
            Failure(ConflictError) if the new name is taken in the org.
            Failure(NotFoundError) if the row no longer exists.
        """
        ...

    async def delete_by_id(self, connection_id: UUID) -> AppConnectionRecord | None:
        """Delete a connection.

        Returns:
            The deleted row, or None if it did not exist.
        """
        ...

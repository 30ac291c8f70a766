"""AppConnection domain entities.

An app connection is a named, organization-owned record of how to
authenticate against a third-party provider. Two shapes exist:

    - AppConnectionRecord: what is persisted. Credentials are an opaque
      encrypted blob.
    - AppConnection: what the service hands back after decryption.
      Credentials are a plain dict in the wire shape of the variant.

Neither shape is ever returned over HTTP without going through the
sanitizer (src/application/services/app_connection_sanitizer.py), except
create and update which echo the caller's own input.

Reference:
    - src/domain/connections/registry.py (variant shapes)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from src.domain.enums import AppConnectionApp
from src.domain.value_objects import EncryptedCredentials


@dataclass(kw_only=True)
class AppConnectionRecord:
    """Persisted app connection.

    Attributes:
        id: Unique identifier (server assigned).
        org_id: Owning organization. Immutable after creation.
        name: Slug-like name, unique within the organization.
        description: Optional free text.
        app: Provider the connection targets. Immutable after creation.
        method: Authentication method value. Immutable after creation.
        encrypted_credentials: Envelope-encrypted credentials.
        version: Incremented on every credential change.
        created_at: Creation timestamp (server assigned).
        updated_at: Last modification timestamp (server assigned).

    Example:
        >>> record = AppConnectionRecord(
        ...     id=uuid7(),
        ...     org_id=org_id,
        ...     name="prod-aws",
        ...     app=AppConnectionApp.AWS,
        ...     method="assume-role",
        ...     encrypted_credentials=EncryptedCredentials(ciphertext=blob),
        ...     created_at=now,
        ...     updated_at=now,
        ... )
    """

    id: UUID
    org_id: UUID
    name: str
    app: AppConnectionApp
    method: str
    encrypted_credentials: EncryptedCredentials
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    version: int = 1

    def is_for_app(self, app: AppConnectionApp) -> bool:
        """Check whether this connection targets app."""
        return self.app == app

    def to_connection(self, credentials: dict[str, Any]) -> "AppConnection":
        """Build the decrypted view of this record.

        Args:
            credentials: Decrypted and re-validated credentials.

        Returns:
            AppConnection carrying every column except the ciphertext.
        """
        return AppConnection(
            id=self.id,
            org_id=self.org_id,
            name=self.name,
            description=self.description,
            app=self.app,
            method=self.method,
            credentials=credentials,
            version=self.version,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(kw_only=True)
class AppConnection:
    """Decrypted app connection.

    Same fields as AppConnectionRecord but with plaintext credentials.
    ``credentials`` is excluded from repr so it never lands in logs.
    """

    id: UUID
    org_id: UUID
    name: str
    app: AppConnectionApp
    method: str
    created_at: datetime
    updated_at: datetime
    credentials: dict[str, Any] = field(default_factory=dict, repr=False)
    description: str | None = None
    version: int = 1

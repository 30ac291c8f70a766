"""Client-facing view of an app connection.

Secrets never leave the service boundary in API responses: the sanitizer
drops every credential field the variant registry marks secret.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from src.domain.connections import redact_credentials
from src.domain.entities import AppConnection


@dataclass(frozen=True, kw_only=True)
class SanitizedAppConnection:
    """App connection with secret credential fields removed."""

    id: UUID
    org_id: UUID
    name: str
    description: str | None
    app: str
    method: str
    version: int
    created_at: datetime
    updated_at: datetime
    credentials: dict[str, Any] = field(default_factory=dict)


def sanitize_app_connection(connection: AppConnection) -> SanitizedAppConnection:
    """Redact a decrypted connection for display.

    Args:
        connection: Decrypted connection.

    Returns:
        SanitizedAppConnection carrying only non-secret credential fields.

    Raises:
        UnknownConnectionVariantError: If the connection's (app, method) is
            not registered.
    """
    return SanitizedAppConnection(
        id=connection.id,
        org_id=connection.org_id,
        name=connection.name,
        description=connection.description,
        app=connection.app.value,
        method=connection.method,
        version=connection.version,
        created_at=connection.created_at,
        updated_at=connection.updated_at,
        credentials=redact_credentials(
            connection.app, connection.method, connection.credentials
        ),
    )

"""App connection request and response schemas.

Pydantic schemas for app connection API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- Service-result-to-schema conversion methods

Names are slugs: lowercase letters and digits, optionally separated by
single "-" or "_", at most 32 characters.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.services import SanitizedAppConnection
from src.domain.connections import AppConnectionOption
from src.domain.entities import AppConnection

NAME_PATTERN = r"^[a-z0-9]+(?:[_-][a-z0-9]+)*$"
NAME_MAX_LENGTH = 32
DESCRIPTION_MAX_LENGTH = 256


# =============================================================================
# Request Schemas
# =============================================================================


class CreateAppConnectionRequest(BaseModel):
    """Request to create an app connection.

    The app comes from the route (/app-connections/aws, ...). Credentials
    are validated against the (app, method) schema by the service, so a
    method/credentials mismatch is a 400, not a 422.

    Attributes:
        name: Slug-like name, unique within the organization.
        method: Authentication method of the app.
        credentials: Credential fields for the method.
        description: Optional free text.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        pattern=NAME_PATTERN,
        description="Connection name (slug)",
        examples=["prod-aws"],
    )
    method: str = Field(
        ...,
        description="Authentication method",
        examples=["assume-role"],
    )
    credentials: dict[str, Any] = Field(
        ...,
        description="Credential fields of the method",
        examples=[{"role": "arn:aws:iam::123456789012:role/deploy"}],
    )
    description: str | None = Field(
        None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Optional description",
    )


class UpdateAppConnectionRequest(BaseModel):
    """Request to update an app connection.

    All fields are optional. app and method cannot be changed; if a client
    sends them they are ignored. An omitted description is kept, while an
    explicit ``"description": null`` removes it.
    """

    name: str | None = Field(
        None,
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        pattern=NAME_PATTERN,
        description="New connection name (slug)",
    )
    credentials: dict[str, Any] | None = Field(
        None,
        description="Replacement credentials for the stored method",
    )
    description: str | None = Field(
        None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="New description (null removes it)",
    )

    @property
    def clears_description(self) -> bool:
        """True when the body sent ``description`` as null."""
        return "description" in self.model_fields_set and self.description is None


# =============================================================================
# Response Schemas
# =============================================================================


class AppConnectionResponse(BaseModel):
    """Single app connection.

    credentials holds either the non-secret fields only (read and delete
    endpoints) or the full plaintext (create and update responses).
    """

    id: UUID = Field(..., description="Connection unique identifier")
    org_id: UUID = Field(..., description="Owning organization")
    name: str = Field(..., description="Connection name")
    description: str | None = Field(None, description="Description")
    app: str = Field(..., description="Provider", examples=["aws"])
    method: str = Field(..., description="Authentication method")
    credentials: dict[str, Any] = Field(
        default_factory=dict, description="Credential fields"
    )
    version: int = Field(..., description="Credential version")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_sanitized(
        cls, connection: SanitizedAppConnection
    ) -> "AppConnectionResponse":
        """Build from a sanitized connection (secret fields removed)."""
        return cls(
            id=connection.id,
            org_id=connection.org_id,
            name=connection.name,
            description=connection.description,
            app=connection.app,
            method=connection.method,
            credentials=connection.credentials,
            version=connection.version,
            created_at=connection.created_at,
            updated_at=connection.updated_at,
        )

    @classmethod
    def from_connection(cls, connection: AppConnection) -> "AppConnectionResponse":
        """Build from a decrypted connection, credentials included."""
        return cls(
            id=connection.id,
            org_id=connection.org_id,
            name=connection.name,
            description=connection.description,
            app=connection.app.value,
            method=connection.method,
            credentials=connection.credentials,
            version=connection.version,
            created_at=connection.created_at,
            updated_at=connection.updated_at,
        )


class AppConnectionSingleResponse(BaseModel):
    """Envelope for one connection."""

    app_connection: AppConnectionResponse


class AppConnectionListResponse(BaseModel):
    """Envelope for a list of connections."""

    app_connections: list[AppConnectionResponse] = Field(default_factory=list)


class AppConnectionOptionResponse(BaseModel):
    """One provider and the methods it supports."""

    app: str = Field(..., examples=["aws"])
    name: str = Field(..., description="Display name", examples=["AWS"])
    methods: list[str] = Field(..., examples=[["assume-role", "access-token"]])

    @classmethod
    def from_option(cls, option: AppConnectionOption) -> "AppConnectionOptionResponse":
        """Convert a registry option to its response shape."""
        return cls(
            app=option.app.value,
            name=option.display_name,
            methods=list(option.methods),
        )


class AppConnectionOptionsResponse(BaseModel):
    """Every provider that can be connected."""

    app_connection_options: list[AppConnectionOptionResponse]

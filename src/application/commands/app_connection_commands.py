"""App connection commands (write operations).

Commands represent caller intent to change app connection state.
All commands are immutable (frozen=True) and keyword-only (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- AppConnectionService executes business logic and returns Result types
- Credentials are excluded from repr so commands are safe to log
"""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from src.domain.enums import AppConnectionApp


@dataclass(frozen=True, kw_only=True)
class CreateAppConnection:
    """Create a connection in the actor's organization.

    Attributes:
        app: Provider the connection targets.
        method: Authentication method value ("assume-role", "oauth", ...).
        name: Slug-like name, unique within the organization.
        credentials: Raw credentials, validated against (app, method).
        description: Optional free text.

    Example:
        >>> command = CreateAppConnection(
        ...     app=AppConnectionApp.AWS,
        ...     method="assume-role",
        ...     name="prod-aws",
        ...     credentials={"role": "arn:aws:iam::123456789012:role/deploy"},
        ... )
        >>> result = await service.create(command, actor)
    """

    app: AppConnectionApp
    method: str
    name: str
    credentials: dict[str, Any] = field(repr=False)
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateAppConnection:
    """Update name, description and/or credentials of a connection.

    app identifies the route the request came through; it is checked
    against the stored row and never written. method cannot be changed.

    Attributes:
        app: Provider the caller expects the connection to target.
        connection_id: Connection to update.
        name: New name, or None to keep.
        description: New description, or None to keep.
        clear_description: Remove the stored description. Takes precedence
            over description.
        credentials: Replacement credentials, or None to keep the stored
            ciphertext untouched.
    """

    app: AppConnectionApp
    connection_id: UUID
    name: str | None = None
    description: str | None = None
    credentials: dict[str, Any] | None = field(default=None, repr=False)
    clear_description: bool = False

    @property
    def updated_fields(self) -> tuple[str, ...]:
        """Names of the fields supplied by the caller."""
        supplied = {
            "name": self.name is not None,
            "description": self.clear_description or self.description is not None,
            "credentials": self.credentials is not None,
        }
        return tuple(key for key, given in supplied.items() if given)

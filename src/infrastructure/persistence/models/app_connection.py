"""App connection database model.

Security:
    - encrypted_credentials: envelope-encrypted blob, the only persisted
      form of credentials
    - Never contains plaintext secrets in any column
"""

from uuid import UUID

from sqlalchemy import Index, Integer, LargeBinary, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class AppConnectionModel(BaseMutableModel):
    """App connection model.

    Fields:
        id: UUID v7 primary key (from BaseMutableModel)
        created_at / updated_at: Managed by the database
        org_id: Owning organization
        name: Unique within org_id
        description: Optional free text
        app: Provider ("aws", "github")
        method: Provider authentication method ("assume-role", "oauth", ...)
        encrypted_credentials: Envelope-encrypted credential blob
        version: Incremented on every credential change

    Indexes:
        - uq_app_connections_org_name: (org_id, name) unique
        - idx_app_connections_org_app: (org_id, app) for per-app listing
    """

    __tablename__ = "app_connections"

    org_id: Mapped[UUID] = mapped_column(
        nullable=False,
        index=True,
        comment="Owning organization",
    )

    name: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Slug-like name, unique within the organization",
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    app: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Provider: aws, github",
    )

    method: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Authentication method of the provider",
    )

    encrypted_credentials: Mapped[bytes] = mapped_column(
        LargeBinary,
        nullable=False,
        comment="Envelope-encrypted credential blob",
    )

    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default="1",
    )

    __table_args__ = (
        UniqueConstraint("org_id", "name", name="uq_app_connections_org_name"),
        Index("idx_app_connections_org_app", "org_id", "app"),
    )

    def __repr__(self) -> str:
        return (
            f"<AppConnectionModel("
            f"id={self.id}, "
            f"org_id={self.org_id}, "
            f"name={self.name!r}, "
            f"app={self.app!r}, "
            f"method={self.method!r}"
            f")>"
        )

"""Casbin rule database model for RBAC policy storage.

The table structure matches what casbin-async-sqlalchemy-adapter expects.
The model uses organization domains (see authorization/model.conf):

    ptype='p': v0=role,    v1=org domain ("*" = all orgs), v2=object, v3=action
    ptype='g': v0=subject, v1=role,                        v2=org domain
"""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class CasbinRule(BaseModel):
    """Casbin rule model.

    Note:
        Uses Integer ID (not UUID) to match Casbin adapter expectations.
        The id column overrides the UUID from BaseModel.

    Policy Examples:
        ptype='p', v0='admin', v1='*', v2='app-connections', v3='delete'
            admin of any org can delete that org's app connections
        ptype='g', v0='user:0192...', v1='member', v2='<org_id>'
            the user is a member of <org_id>

    Seeding:
        Default role policies are seeded via rbac_seeder.py after migrations.
        Membership rules are written when actors join an organization.
    """

    __tablename__ = "casbin_rule"

    id: Mapped[int] = mapped_column(  # type: ignore[assignment]
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False,
    )

    ptype: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v0: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v3: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v4: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v5: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_casbin_rule_ptype", "ptype"),
        Index("idx_casbin_rule_v0_v2", "v0", "v2"),
    )

    def __repr__(self) -> str:
        return (
            f"<CasbinRule(ptype={self.ptype}, "
            f"v0={self.v0}, v1={self.v1}, v2={self.v2}, "
            f"v3={self.v3}, v4={self.v4}, v5={self.v5})>"
        )

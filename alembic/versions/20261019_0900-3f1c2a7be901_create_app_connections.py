"""create app_connections, audit_logs and casbin_rule

Revision ID: 3f1c2a7be901
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7be901"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create app_connections, audit_logs (immutable) and casbin_rule."""
    op.create_table(
        "app_connections",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "org_id",
            sa.Uuid(),
            nullable=False,
            comment="Owning organization",
        ),
        sa.Column(
            "name",
            sa.String(length=32),
            nullable=False,
            comment="Slug-like name, unique within the organization",
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "app",
            sa.String(length=32),
            nullable=False,
            comment="Provider: aws, github",
        ),
        sa.Column(
            "method",
            sa.String(length=32),
            nullable=False,
            comment="Authentication method of the provider",
        ),
        sa.Column(
            "encrypted_credentials",
            sa.LargeBinary(),
            nullable=False,
            comment="Envelope-encrypted credential blob",
        ),
        sa.Column(
            "version",
            sa.Integer(),
            server_default="1",
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("org_id", "name", name="uq_app_connections_org_name"),
    )
    op.create_index(
        op.f("ix_app_connections_org_id"), "app_connections", ["org_id"]
    )
    op.create_index(
        "idx_app_connections_org_app", "app_connections", ["org_id", "app"]
    )

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "action",
            sa.String(length=100),
            nullable=False,
            comment="Audit action type (e.g., app_connection_created)",
        ),
        sa.Column(
            "actor_type",
            sa.String(length=32),
            nullable=False,
            comment="Kind of actor: user, service, identity",
        ),
        sa.Column(
            "actor_id",
            sa.Uuid(),
            nullable=False,
            comment="Actor who performed the action",
        ),
        sa.Column(
            "org_id",
            sa.Uuid(),
            nullable=False,
            comment="Organization the action was scoped to",
        ),
        sa.Column(
            "resource_type",
            sa.String(length=100),
            nullable=False,
            comment="Type of resource affected",
        ),
        sa.Column(
            "resource_id",
            sa.Uuid(),
            nullable=True,
            comment="Specific resource identifier (if applicable)",
        ),
        sa.Column(
            "context",
            sa.JSON(),
            nullable=True,
            comment="Additional event context",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_audit_logs_action"), "audit_logs", ["action"])
    op.create_index(op.f("ix_audit_logs_actor_id"), "audit_logs", ["actor_id"])
    op.create_index(op.f("ix_audit_logs_org_id"), "audit_logs", ["org_id"])
    op.create_index(
        "idx_audit_org_resource",
        "audit_logs",
        ["org_id", "resource_type", "resource_id"],
    )

    # Audit logs are append-only
    op.execute(
        "CREATE RULE audit_logs_no_update AS ON UPDATE TO audit_logs DO INSTEAD NOTHING"
    )
    op.execute(
        "CREATE RULE audit_logs_no_delete AS ON DELETE TO audit_logs DO INSTEAD NOTHING"
    )

    op.create_table(
        "casbin_rule",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("ptype", sa.String(length=255), nullable=True),
        sa.Column("v0", sa.String(length=255), nullable=True),
        sa.Column("v1", sa.String(length=255), nullable=True),
        sa.Column("v2", sa.String(length=255), nullable=True),
        sa.Column("v3", sa.String(length=255), nullable=True),
        sa.Column("v4", sa.String(length=255), nullable=True),
        sa.Column("v5", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_casbin_rule_ptype", "casbin_rule", ["ptype"])
    op.create_index("idx_casbin_rule_v0_v2", "casbin_rule", ["v0", "v2"])


def downgrade() -> None:
    """Drop casbin_rule, audit_logs and app_connections."""
    op.drop_index("idx_casbin_rule_v0_v2", table_name="casbin_rule")
    op.drop_index("idx_casbin_rule_ptype", table_name="casbin_rule")
    op.drop_table("casbin_rule")

    op.execute("DROP RULE IF EXISTS audit_logs_no_delete ON audit_logs")
    op.execute("DROP RULE IF EXISTS audit_logs_no_update ON audit_logs")
    op.drop_index("idx_audit_org_resource", table_name="audit_logs")
    op.drop_index(op.f("ix_audit_logs_org_id"), table_name="audit_logs")
    op.drop_index(op.f("ix_audit_logs_actor_id"), table_name="audit_logs")
    op.drop_index(op.f("ix_audit_logs_action"), table_name="audit_logs")
    op.drop_table("audit_logs")

    op.drop_index("idx_app_connections_org_app", table_name="app_connections")
    op.drop_index(op.f("ix_app_connections_org_id"), table_name="app_connections")
    op.drop_table("app_connections")

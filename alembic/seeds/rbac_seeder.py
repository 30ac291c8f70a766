"""RBAC policy seeder for Casbin authorization.

Seeds the default organization roles into the casbin_rule table. Policies
use the "*" domain so they apply inside every organization; membership
rules (g, <subject>, <role>, <org_id>) are written when actors join an
organization and are not seeded here.

Idempotent via existence checks - safe to run on every migration.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger(__name__)

ALL_ORGS = "*"
APP_CONNECTIONS = "app-connections"


async def seed_rbac_policies(session: AsyncSession) -> None:
    """Seed default RBAC policies.

    Seeds:
        - admin: read, create, edit, delete app connections
        - member: read app connections

    Args:
        session: Async database session.
    """
    # Format: (ptype, role, domain, object, action)
    policies: list[tuple[str, str, str, str, str]] = [
        ("p", "admin", ALL_ORGS, APP_CONNECTIONS, "read"),
        ("p", "admin", ALL_ORGS, APP_CONNECTIONS, "create"),
        ("p", "admin", ALL_ORGS, APP_CONNECTIONS, "edit"),
        ("p", "admin", ALL_ORGS, APP_CONNECTIONS, "delete"),
        ("p", "member", ALL_ORGS, APP_CONNECTIONS, "read"),
    ]

    seeded_count = 0
    skipped_count = 0

    for ptype, v0, v1, v2, v3 in policies:
        params = {"ptype": ptype, "v0": v0, "v1": v1, "v2": v2, "v3": v3}

        result = await session.execute(
            text("""
                SELECT 1 FROM casbin_rule
                WHERE ptype = :ptype AND v0 = :v0 AND v1 = :v1
                  AND v2 = :v2 AND v3 = :v3
                LIMIT 1
            """),
            params,
        )

        if result.fetchone() is not None:
            skipped_count += 1
            continue

        await session.execute(
            text("""
                INSERT INTO casbin_rule (ptype, v0, v1, v2, v3)
                VALUES (:ptype, :v0, :v1, :v2, :v3)
            """),
            params,
        )
        seeded_count += 1

    logger.info(
        "rbac_seeding_complete",
        seeded=seeded_count,
        skipped=skipped_count,
        total=len(policies),
    )

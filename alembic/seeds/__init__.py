"""Idempotent bootstrap data, applied after ``alembic upgrade``."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from seeds.rbac_seeder import seed_rbac_policies

logger = structlog.get_logger(__name__)

SEEDERS = (seed_rbac_policies,)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run every seeder against one session; the caller commits."""
    for seeder in SEEDERS:
        logger.info("seeder_started", seeder=seeder.__name__)
        await seeder(session)

    logger.info("seeding_completed", seeders=len(SEEDERS))


__all__ = ["run_all_seeders", "seed_rbac_policies"]

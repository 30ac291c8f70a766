"""Alembic migration environment (async SQLAlchemy).

The database URL comes from Settings, never from alembic.ini. After an
online ``alembic upgrade`` the RBAC seeder runs so a fresh database has the
default organization roles. Pass ``-x seed=false`` to skip it, or
``-x seed=true`` to force it for other commands.
"""

import asyncio
import sys
from logging.config import fileConfig
from pathlib import Path

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_engine_from_config

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence import BaseModel

# Registers every table on BaseModel.metadata for autogenerate.
from src.infrastructure.persistence.models import (  # noqa: F401
    AppConnectionModel,
    AuditLogModel,
    CasbinRule,
)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)

target_metadata = BaseModel.metadata

TRUTHY = {"1", "true", "yes", "y"}


def _seed_flag() -> bool | None:
    """Read ``-x seed=...``; None when not given."""
    value = context.get_x_argument(as_dictionary=True).get("seed")
    if value is None:
        return None
    return value.strip().lower() in TRUTHY


def _should_seed() -> bool:
    flag = _seed_flag()
    if flag is not None:
        return flag
    cmd_opts = getattr(config, "cmd_opts", None)
    return getattr(cmd_opts, "cmd", None) == "upgrade" and not getattr(
        cmd_opts, "sql", False
    )


def run_migrations_offline() -> None:
    """Emit migration SQL without a database connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_sync_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def _seed(engine: AsyncEngine) -> None:
    """Run the idempotent seeders in one transaction."""
    seeds_dir = str(Path(__file__).parent)
    if seeds_dir not in sys.path:
        sys.path.insert(0, seeds_dir)

    from seeds import run_all_seeders

    async with AsyncSession(engine, expire_on_commit=False) as session:
        await run_all_seeders(session)
        await session.commit()


async def run_migrations_online() -> None:
    """Apply migrations over an async engine, then seed if requested."""
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync_migrations)

        if _should_seed():
            await _seed(engine)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())

"""Alembic env.py for the villa schema, run through an async engine.

The database URL comes from sqlalchemy.url when the caller sets it (the
alembic.ini value or a programmatic Config), otherwise from the application
Settings (DATABASE_URL env var or .env).

SQLite cannot ALTER most column or constraint definitions in place, so
migrations against it run in batch mode (copy-and-move tables).
"""

import asyncio
from logging.config import fileConfig
from typing import Any

from sqlalchemy.engine import Connection, make_url
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# Registering the ORM models populates Base.metadata for autogenerate.
from src.infrastructure.database import Base, settings  # noqa: E402
import src.infrastructure.persistence.models  # noqa: E402, F401

target_metadata = Base.metadata

database_url = config.get_main_option("sqlalchemy.url") or settings.database_url


def _migration_options() -> dict[str, Any]:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": make_url(database_url).get_backend_name() == "sqlite",
    }


def run_migrations_offline() -> None:
    """Emit migration SQL to stdout without connecting."""
    context.configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_migration_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def apply_migrations(connection: Connection) -> None:
    context.configure(connection=connection, **_migration_options())
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(database_url, echo=settings.echo_sql)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(apply_migrations)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())

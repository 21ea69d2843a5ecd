"""Alembic environment - runs the BeaverNet schema migrations on an async engine.

URL precedence:
    1. `alembic -x url=...` on the command line
    2. DATABASE_URL (or .env), read through beavernet.config.Settings so the
       postgresql:// -> postgresql+asyncpg:// rewrite happens in one place
    3. sqlalchemy.url in alembic.ini (local docker-compose)

SQLite URLs migrate in batch mode; ALTER support there is partial.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

import beavernet.models  # noqa: F401  (registers every table on Base.metadata)
from beavernet.config import Settings
from beavernet.db.base import Base

alembic_config = context.config
if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)


def migration_url() -> str:
    override = context.get_x_argument(as_dictionary=True).get("url")
    if override:
        return override
    settings = Settings()
    if "database_url" in settings.model_fields_set:
        return settings.database_url
    return alembic_config.get_main_option("sqlalchemy.url")


def _configure(batch: bool, **options) -> None:
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=batch,
        **options,
    )


def _migrate(connection) -> None:
    _configure(connection.dialect.name == "sqlite", connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def migrate_online(url: str) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


def migrate_offline(url: str) -> None:
    """Emit the SQL script instead of connecting."""
    _configure(
        url.startswith("sqlite"),
        url=url, literal_binds=True, dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


url = migration_url()
if context.is_offline_mode():
    migrate_offline(url)
else:
    asyncio.run(migrate_online(url))

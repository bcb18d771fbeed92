import asyncio
from logging.config import fileConfig

from sqlalchemy import pool, engine_from_config
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config
from sqlmodel import SQLModel

from alembic import context

from recruitai.core.config import get_settings
from recruitai.database.sqlmodel_engine import to_async_url

# Import ALL models for autogenerate to detect schema changes
from recruitai.infrastructure.persistence.models import (  # noqa: F401
    InterviewTable,
    InterviewTemplateTable,
    JobMatchTable,
    JobTable,
    MatchingConfigTable,
    ResumeTable,
)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Settings win over the placeholder URL in alembic.ini
if not config.get_main_option("sqlalchemy.url", "").startswith("postgresql"):
    config.set_main_option("sqlalchemy.url", to_async_url(get_settings().get_postgres_url()))

target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Configures the context with just a URL; calls to context.execute()
    emit the given string to the script output.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_sync_migrations() -> None:
    """Run migrations in synchronous 'online' mode.

    Used when Alembic is invoked from inside a running event loop.
    """
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        do_run_migrations(connection)

    connectable.dispose()


async def run_async_migrations() -> None:
    """Run migrations in async 'online' mode (command line)."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    url = config.get_main_option("sqlalchemy.url")

    if url and "asyncpg" in url:
        try:
            asyncio.get_running_loop()
            run_sync_migrations()
        except RuntimeError:
            asyncio.run(run_async_migrations())
    else:
        run_sync_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

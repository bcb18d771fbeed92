"""
Async PostgreSQL engine for the recruitment tables.

One process-wide ``SQLModelDatabaseManager`` owns the asyncpg engine and hands
out sessions that commit on success and roll back on error. Repositories use
``get_session``; the application lifespan calls ``init_sqlmodel_database`` and
``shutdown_sqlmodel_database``.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.sql import text
from sqlmodel import SQLModel

from recruitai.core.config import Settings

logger = structlog.get_logger(__name__)

ASYNC_DRIVER_PREFIXES = {
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


def to_async_url(url: str) -> str:
    """Rewrite a plain PostgreSQL URL to use the asyncpg driver."""
    for prefix, replacement in ASYNC_DRIVER_PREFIXES.items():
        if url.startswith(prefix):
            return replacement + url[len(prefix):]
    return url


def _redact(url: str) -> str:
    """Hide credentials; keep host and database name."""
    return "***@" + url.split("@", 1)[1] if "@" in url else url


class SQLModelDatabaseManager:
    """Owns the async engine and session factory for the recruitment database."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker[AsyncSession]] = None

    async def initialize(self) -> None:
        if self.engine is not None:
            logger.warning("Database engine already initialized")
            return

        url = to_async_url(self.settings.get_postgres_url())
        engine = create_async_engine(
            url,
            pool_size=self.settings.DB_POOL_SIZE,
            max_overflow=self.settings.DB_POOL_SIZE * 2,
            pool_recycle=3600,
            pool_pre_ping=True,
            connect_args={"server_settings": {"application_name": "recruitai"}},
        )
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Database connection check failed", url=_redact(url), error=str(e))
            await engine.dispose()
            raise

        self.engine = engine
        self._sessions = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
        logger.info("Database engine initialized", url=_redact(url))

    async def create_tables(self) -> None:
        """Create the recruitment tables directly; deployed environments run Alembic instead."""
        if self.engine is None:
            raise RuntimeError("Database manager not initialized")

        # Registers every table on SQLModel.metadata
        import recruitai.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Recruitment tables created", tables=sorted(SQLModel.metadata.tables))

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits when the block exits cleanly and rolls back otherwise."""
        if self._sessions is None:
            raise RuntimeError("Database manager not initialized")

        async with self._sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> Dict[str, Any]:
        if self.engine is None:
            return {"status": "unhealthy", "error": "Database manager not initialized"}

        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return {"status": "unhealthy", "error": str(e)}

        pool = self.engine.pool
        return {"status": "healthy", "pool_size": pool.size(), "checked_out": pool.checkedout()}

    async def shutdown(self) -> None:
        if self.engine is None:
            return
        try:
            await self.engine.dispose()
            logger.info("Database engine disposed")
        finally:
            self.engine = None
            self._sessions = None


_sqlmodel_db_manager: Optional[SQLModelDatabaseManager] = None


def get_sqlmodel_db_manager(settings: Optional[Settings] = None) -> SQLModelDatabaseManager:
    """Return the process-wide manager, creating it from settings on first use."""
    global _sqlmodel_db_manager

    if _sqlmodel_db_manager is None:
        if settings is None:
            from recruitai.core.config import get_settings
            settings = get_settings()
        _sqlmodel_db_manager = SQLModelDatabaseManager(settings)

    return _sqlmodel_db_manager


async def init_sqlmodel_database(settings: Optional[Settings] = None) -> SQLModelDatabaseManager:
    db_manager = get_sqlmodel_db_manager(settings)
    await db_manager.initialize()
    return db_manager


async def shutdown_sqlmodel_database() -> None:
    global _sqlmodel_db_manager
    if _sqlmodel_db_manager is not None:
        await _sqlmodel_db_manager.shutdown()
        _sqlmodel_db_manager = None

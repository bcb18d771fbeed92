"""Tests for the database manager that do not need a running PostgreSQL."""

import pytest

from recruitai.core.config import Settings
from recruitai.database.sqlmodel_engine import SQLModelDatabaseManager, _redact, to_async_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgresql://u:p@db:5432/recruitai", "postgresql+asyncpg://u:p@db:5432/recruitai"),
        ("postgres://u:p@db/recruitai", "postgresql+asyncpg://u:p@db/recruitai"),
        ("postgresql+asyncpg://u:p@db/recruitai", "postgresql+asyncpg://u:p@db/recruitai"),
    ],
)
def test_to_async_url(url, expected):
    assert to_async_url(url) == expected


def test_redact_hides_credentials():
    assert _redact("postgresql+asyncpg://user:secret@db:5432/recruitai") == "***@db:5432/recruitai"


@pytest.mark.asyncio
async def test_uninitialized_manager():
    manager = SQLModelDatabaseManager(Settings(SECRET_KEY="k" * 32))

    assert (await manager.health_check())["status"] == "unhealthy"
    with pytest.raises(RuntimeError):
        async with manager.get_session():
            pass
    with pytest.raises(RuntimeError):
        await manager.create_tables()
    await manager.shutdown()

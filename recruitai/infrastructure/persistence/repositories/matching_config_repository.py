"""PostgreSQL implementation of IMatchingConfigRepository (one row per tenant)."""

from __future__ import annotations

from typing import Optional

import structlog
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from recruitai.domain.entities.matching_config import MatchingConfig
from recruitai.domain.repositories.matching_config_repository import IMatchingConfigRepository
from recruitai.domain.value_objects import TenantId
from recruitai.infrastructure.persistence.mappers.matching_config_mapper import MatchingConfigMapper
from recruitai.infrastructure.persistence.models.matching_config_table import MatchingConfigTable
from recruitai.infrastructure.persistence.repositories.base import SQLModelRepository

logger = structlog.get_logger(__name__)


class PostgresMatchingConfigRepository(SQLModelRepository, IMatchingConfigRepository):

    async def get_by_tenant(self, tenant_id: TenantId) -> Optional[MatchingConfig]:
        async with self.db_manager.get_session() as session:
            stmt = select(MatchingConfigTable).where(MatchingConfigTable.tenant_id == tenant_id.value)
            result = await session.execute(stmt)
            row = result.scalars().first()
            return MatchingConfigMapper.to_domain(row) if row else None

    async def _upsert(self, config: MatchingConfig) -> MatchingConfig:
        async with self.db_manager.get_session() as session:
            stmt = select(MatchingConfigTable).where(MatchingConfigTable.tenant_id == config.tenant_id.value)
            result = await session.execute(stmt)
            existing_row = result.scalars().first()
            if existing_row:
                MatchingConfigMapper.update_table_from_domain(existing_row, config)
                config.id = MatchingConfigMapper.to_domain(existing_row).id
            else:
                session.add(MatchingConfigMapper.to_table(config))
        return config

    async def save(self, config: MatchingConfig) -> MatchingConfig:
        """Upsert keyed by tenant; a concurrent first insert is retried as an update."""
        try:
            return await self._upsert(config)
        except IntegrityError:
            logger.info("Matching config created concurrently, retrying as update", tenant_id=str(config.tenant_id))
            return await self._upsert(config)


__all__ = ["PostgresMatchingConfigRepository"]

"""Application service for per-tenant matching configuration."""

from __future__ import annotations

from typing import Any, Dict

import structlog

from recruitai.domain.entities.matching_config import MatchingConfig, validate_matching_config
from recruitai.domain.exceptions import MatchingConfigValidationError
from recruitai.domain.repositories.matching_config_repository import IMatchingConfigRepository
from recruitai.domain.value_objects import TenantId

logger = structlog.get_logger(__name__)


class MatchingConfigService:
    """Reads, lazily creates and validates tenant matching configuration."""

    def __init__(self, repository: IMatchingConfigRepository) -> None:
        self._repository = repository

    async def get_or_create(self, tenant_id: TenantId) -> MatchingConfig:
        """Return the tenant's configuration, persisting defaults on first access."""
        config = await self._repository.get_by_tenant(tenant_id)
        if config is not None:
            return config

        logger.info("Creating default matching config", tenant_id=str(tenant_id))
        return await self.save(MatchingConfig.default_for(tenant_id))

    async def save(self, config: MatchingConfig) -> MatchingConfig:
        result = validate_matching_config(config)
        if not result.is_valid:
            logger.warning(
                "Matching config rejected",
                tenant_id=str(config.tenant_id),
                errors=result.errors,
            )
            raise MatchingConfigValidationError(result.errors)
        return await self._repository.save(config)

    async def update(self, tenant_id: TenantId, changes: Dict[str, Any]) -> MatchingConfig:
        """Merge a partial update into the tenant configuration and save it."""
        config = await self.get_or_create(tenant_id)
        config.apply_changes(changes)
        saved = await self.save(config)
        logger.info("Matching config updated", tenant_id=str(tenant_id))
        return saved


__all__ = ["MatchingConfigService"]

"""Domain repository contract for per-tenant matching configuration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from recruitai.domain.entities.matching_config import MatchingConfig
from recruitai.domain.value_objects import TenantId


class IMatchingConfigRepository(ABC):
    """At most one configuration exists per tenant."""

    @abstractmethod
    async def get_by_tenant(self, tenant_id: TenantId) -> Optional[MatchingConfig]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, config: MatchingConfig) -> MatchingConfig:
        """Persist a configuration. Callers validate before saving."""
        raise NotImplementedError


__all__ = ["IMatchingConfigRepository"]

"""
Mapper between MatchingConfig domain entities and MatchingConfigTable persistence models.
"""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any, Dict

from recruitai.domain.entities.matching_config import MatchingConfig, MatchingThresholds, MatchingWeights
from recruitai.domain.value_objects import MatchingConfigId, TenantId
from recruitai.infrastructure.persistence.models.matching_config_table import MatchingConfigTable


def _known(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in (data or {}).items() if k in names}


class MatchingConfigMapper:

    @staticmethod
    def to_domain(table: MatchingConfigTable) -> MatchingConfig:
        return MatchingConfig(
            id=MatchingConfigId(table.id),
            tenant_id=TenantId(table.tenant_id),
            thresholds=MatchingThresholds(**_known(MatchingThresholds, table.thresholds)),
            weights=MatchingWeights(**_known(MatchingWeights, table.weights)),
            auto_matching_enabled=table.auto_matching_enabled,
            ai_enabled=table.ai_enabled,
            notify_on_strong_match=table.notify_on_strong_match,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def _values(entity: MatchingConfig) -> Dict[str, Any]:
        return {
            "tenant_id": entity.tenant_id.value,
            "thresholds": asdict(entity.thresholds),
            "weights": asdict(entity.weights),
            "auto_matching_enabled": entity.auto_matching_enabled,
            "ai_enabled": entity.ai_enabled,
            "notify_on_strong_match": entity.notify_on_strong_match,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    @staticmethod
    def to_table(entity: MatchingConfig) -> MatchingConfigTable:
        return MatchingConfigTable(id=entity.id.value, **MatchingConfigMapper._values(entity))

    @staticmethod
    def update_table_from_domain(table: MatchingConfigTable, entity: MatchingConfig) -> MatchingConfigTable:
        for key, value in MatchingConfigMapper._values(entity).items():
            if key not in ("created_at", "tenant_id"):
                setattr(table, key, value)
        return table


__all__ = ["MatchingConfigMapper"]

"""SQLModel table for per-tenant matching configuration (one row per tenant)."""

from typing import Any, Dict
from uuid import UUID

from sqlalchemy import Boolean, Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field

from recruitai.infrastructure.persistence.models.base import TenantModel, create_tenant_id_column


class MatchingConfigTable(TenantModel, table=True):
    __tablename__ = "matching_configs"

    tenant_id: UUID = Field(
        sa_column=create_tenant_id_column(unique=True),
        description="Owning tenant; unique"
    )
    thresholds: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict)
    )
    weights: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict)
    )
    auto_matching_enabled: bool = Field(default=True, sa_column=Column(Boolean, nullable=False, default=True))
    ai_enabled: bool = Field(default=True, sa_column=Column(Boolean, nullable=False, default=True))
    notify_on_strong_match: bool = Field(default=True, sa_column=Column(Boolean, nullable=False, default=True))


__all__ = ["MatchingConfigTable"]

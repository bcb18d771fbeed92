"""SQLModel table for candidate resumes."""

from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import Column, Index, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlmodel import Field

from recruitai.infrastructure.persistence.models.base import (
    TenantModel,
    create_tenant_id_column,
    create_uuid_column,
)


class ResumeTable(TenantModel, table=True):
    __tablename__ = "resumes"

    tenant_id: UUID = Field(
        sa_column=create_tenant_id_column(),
        description="Tenant identifier for multi-tenant isolation"
    )

    __table_args__ = (
        Index("idx_resumes_tenant_status", "tenant_id", "status"),
        Index("idx_resumes_tenant_email", "tenant_id", "candidate_email"),
    )

    # Denormalized for lookups; the full record lives in candidate_info
    candidate_email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    candidate_info: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict)
    )
    parsed_data: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict)
    )
    analysis: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict)
    )
    status: str = Field(default="new", sa_column=Column(String(20), nullable=False, default="new"))
    source: str = Field(default="paste", sa_column=Column(String(20), nullable=False, default="paste"))
    uploaded_by: Optional[UUID] = Field(default=None, sa_column=create_uuid_column())
    tags: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list)
    )


__all__ = ["ResumeTable"]

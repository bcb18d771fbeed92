"""SQLModel table for job postings; nested requirement data lives in JSONB."""

from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy import Column, Index, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field

from recruitai.infrastructure.persistence.models.base import (
    TenantModel,
    create_tenant_id_column,
    create_uuid_column,
)


class JobTable(TenantModel, table=True):
    __tablename__ = "jobs"

    tenant_id: UUID = Field(
        sa_column=create_tenant_id_column(),
        description="Tenant identifier for multi-tenant isolation"
    )

    __table_args__ = (
        Index("idx_jobs_tenant_status", "tenant_id", "status"),
        Index("idx_jobs_tenant_created", "tenant_id", "created_at"),
    )

    title: str = Field(sa_column=Column(String(200), nullable=False))
    description: str = Field(sa_column=Column(Text, nullable=False))
    recruiter_id: Optional[UUID] = Field(default=None, sa_column=create_uuid_column())
    requirements: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict),
        description="skills, experience range, education, certifications, languages"
    )
    location: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict)
    )
    employment_type: str = Field(
        default="full-time",
        sa_column=Column(String(20), nullable=False, default="full-time")
    )
    salary_range: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSONB, nullable=True))
    department: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))
    status: str = Field(
        default="draft",
        sa_column=Column(String(20), nullable=False, default="draft")
    )


__all__ = ["JobTable"]

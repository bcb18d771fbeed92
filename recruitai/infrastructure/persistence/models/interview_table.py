"""SQLModel tables for interviews and interview templates."""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field

from recruitai.infrastructure.persistence.models.base import (
    TenantModel,
    create_tenant_id_column,
    create_uuid_column,
)


class InterviewTable(TenantModel, table=True):
    __tablename__ = "interviews"

    tenant_id: UUID = Field(
        sa_column=create_tenant_id_column(),
        description="Tenant identifier for multi-tenant isolation"
    )

    __table_args__ = (
        Index("idx_interviews_tenant_status", "tenant_id", "status"),
        Index("idx_interviews_tenant_candidate", "tenant_id", "candidate_id"),
    )

    access_token: str = Field(sa_column=Column(String(128), nullable=False, unique=True, index=True))
    candidate_id: UUID = Field(sa_column=create_uuid_column(nullable=False, index=False))
    job_id: Optional[UUID] = Field(default=None, sa_column=create_uuid_column(index=False))
    job_match_id: Optional[UUID] = Field(default=None, sa_column=create_uuid_column())
    template_id: Optional[UUID] = Field(default=None, sa_column=create_uuid_column(index=False))
    invited_by: Optional[UUID] = Field(default=None, sa_column=create_uuid_column(index=False))
    candidate_name: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    candidate_email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    status: str = Field(default="invited", sa_column=Column(String(20), nullable=False, default="invited"))

    questions: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSONB, nullable=False, default=list)
    )
    overall_score: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    assessment: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSONB, nullable=True))
    feedback: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSONB, nullable=True))

    invitation_sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )
    started_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
    expires_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))


class InterviewTemplateTable(TenantModel, table=True):
    __tablename__ = "interview_templates"

    tenant_id: Optional[UUID] = Field(
        default=None,
        sa_column=create_tenant_id_column(nullable=True),
        description="Owning tenant; NULL for global templates"
    )

    name: str = Field(sa_column=Column(String(200), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    category: str = Field(default="general", sa_column=Column(String(50), nullable=False, default="general"))
    questions: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSONB, nullable=False, default=list)
    )
    passing_score: int = Field(default=70, sa_column=Column(Integer, nullable=False, default=70))
    is_global: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    is_active: bool = Field(default=True, sa_column=Column(Boolean, nullable=False, default=True))
    usage_count: int = Field(default=0, sa_column=Column(Integer, nullable=False, default=0))
    created_by: Optional[UUID] = Field(default=None, sa_column=create_uuid_column(index=False))


__all__ = ["InterviewTable", "InterviewTemplateTable"]

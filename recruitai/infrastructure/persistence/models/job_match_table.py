"""SQLModel table for job/candidate match records."""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlmodel import Field

from recruitai.infrastructure.persistence.models.base import (
    TenantModel,
    create_tenant_id_column,
    create_uuid_column,
)


class JobMatchTable(TenantModel, table=True):
    __tablename__ = "job_matches"

    tenant_id: UUID = Field(
        sa_column=create_tenant_id_column(),
        description="Tenant identifier for multi-tenant isolation"
    )

    __table_args__ = (
        Index("idx_job_matches_job_score", "tenant_id", "job_id", "match_score"),
        Index("idx_job_matches_candidate", "tenant_id", "candidate_id"),
    )

    job_id: UUID = Field(sa_column=create_uuid_column(nullable=False))
    candidate_id: UUID = Field(sa_column=create_uuid_column(nullable=False))
    match_score: int = Field(sa_column=Column(Integer, nullable=False))
    match_details: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict)
    )
    ai_recommendation: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict)
    )
    skill_gaps: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list)
    )
    strengths: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list)
    )

    # Recruiter review
    review_status: str = Field(
        default="pending",
        sa_column=Column(String(20), nullable=False, default="pending", index=True)
    )
    review_notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    reviewed_by: Optional[UUID] = Field(default=None, sa_column=create_uuid_column(index=False))
    reviewed_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True)
    )

    interview_scheduled: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False)
    )
    interview_id: Optional[UUID] = Field(default=None, sa_column=create_uuid_column(index=False))


__all__ = ["JobMatchTable"]

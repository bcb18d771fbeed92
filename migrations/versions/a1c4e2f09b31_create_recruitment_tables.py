"""create recruitment tables

Revision ID: a1c4e2f09b31
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "a1c4e2f09b31"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _jsonb(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, postgresql.JSONB(astext_type=sa.Text()), nullable=nullable)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "jobs",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("recruiter_id", sa.UUID(), nullable=True),
        _jsonb("requirements"),
        _jsonb("location"),
        sa.Column("employment_type", sa.String(length=20), nullable=False),
        _jsonb("salary_range", nullable=True),
        sa.Column("department", sa.String(length=100), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("jobs", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_jobs_tenant_id"), ["tenant_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_jobs_recruiter_id"), ["recruiter_id"], unique=False)
        batch_op.create_index("idx_jobs_tenant_status", ["tenant_id", "status"], unique=False)
        batch_op.create_index("idx_jobs_tenant_created", ["tenant_id", "created_at"], unique=False)

    op.create_table(
        "resumes",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("candidate_email", sa.String(length=255), nullable=True),
        _jsonb("candidate_info"),
        _jsonb("parsed_data"),
        _jsonb("analysis"),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("source", sa.String(length=20), nullable=False),
        sa.Column("uploaded_by", sa.UUID(), nullable=True),
        sa.Column("tags", postgresql.ARRAY(sa.String()), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("resumes", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_resumes_tenant_id"), ["tenant_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_resumes_uploaded_by"), ["uploaded_by"], unique=False)
        batch_op.create_index("idx_resumes_tenant_status", ["tenant_id", "status"], unique=False)
        batch_op.create_index("idx_resumes_tenant_email", ["tenant_id", "candidate_email"], unique=False)

    op.create_table(
        "job_matches",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("job_id", sa.UUID(), nullable=False),
        sa.Column("candidate_id", sa.UUID(), nullable=False),
        sa.Column("match_score", sa.Integer(), nullable=False),
        _jsonb("match_details"),
        _jsonb("ai_recommendation"),
        sa.Column("skill_gaps", postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column("strengths", postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column("review_status", sa.String(length=20), nullable=False),
        sa.Column("review_notes", sa.Text(), nullable=True),
        sa.Column("reviewed_by", sa.UUID(), nullable=True),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("interview_scheduled", sa.Boolean(), nullable=False),
        sa.Column("interview_id", sa.UUID(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("job_matches", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_job_matches_tenant_id"), ["tenant_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_job_matches_job_id"), ["job_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_job_matches_candidate_id"), ["candidate_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_job_matches_review_status"), ["review_status"], unique=False)
        batch_op.create_index(
            "idx_job_matches_job_score", ["tenant_id", "job_id", "match_score"], unique=False
        )
        batch_op.create_index("idx_job_matches_candidate", ["tenant_id", "candidate_id"], unique=False)

    op.create_table(
        "matching_configs",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        _jsonb("thresholds"),
        _jsonb("weights"),
        sa.Column("auto_matching_enabled", sa.Boolean(), nullable=False),
        sa.Column("ai_enabled", sa.Boolean(), nullable=False),
        sa.Column("notify_on_strong_match", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("matching_configs", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_matching_configs_tenant_id"), ["tenant_id"], unique=True)

    op.create_table(
        "interviews",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("access_token", sa.String(length=128), nullable=False),
        sa.Column("candidate_id", sa.UUID(), nullable=False),
        sa.Column("job_id", sa.UUID(), nullable=True),
        sa.Column("job_match_id", sa.UUID(), nullable=True),
        sa.Column("template_id", sa.UUID(), nullable=True),
        sa.Column("invited_by", sa.UUID(), nullable=True),
        sa.Column("candidate_name", sa.String(length=200), nullable=True),
        sa.Column("candidate_email", sa.String(length=255), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        _jsonb("questions"),
        sa.Column("overall_score", sa.Integer(), nullable=True),
        _jsonb("assessment", nullable=True),
        _jsonb("feedback", nullable=True),
        sa.Column("invitation_sent_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("interviews", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_interviews_tenant_id"), ["tenant_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_interviews_access_token"), ["access_token"], unique=True)
        batch_op.create_index(batch_op.f("ix_interviews_job_match_id"), ["job_match_id"], unique=False)
        batch_op.create_index("idx_interviews_tenant_status", ["tenant_id", "status"], unique=False)
        batch_op.create_index("idx_interviews_tenant_candidate", ["tenant_id", "candidate_id"], unique=False)

    op.create_table(
        "interview_templates",
        *_timestamps(),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.UUID(), nullable=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=50), nullable=False),
        _jsonb("questions"),
        sa.Column("passing_score", sa.Integer(), nullable=False),
        sa.Column("is_global", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("usage_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("created_by", sa.UUID(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("interview_templates", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_interview_templates_tenant_id"), ["tenant_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("interview_templates")
    op.drop_table("interviews")
    op.drop_table("matching_configs")
    op.drop_table("job_matches")
    op.drop_table("resumes")
    op.drop_table("jobs")

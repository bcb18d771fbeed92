"""
SQLModel base classes shared by every table: UUID primary key, tenant column
factory and timezone-aware timestamps.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_tenant_id_column(nullable: bool = False, unique: bool = False) -> Column:
    """Create a fresh tenant_id Column instance for each table."""
    return Column(PostgreSQLUUID(as_uuid=True), nullable=nullable, index=True, unique=unique)


def create_uuid_column(nullable: bool = True, index: bool = True) -> Column:
    return Column(PostgreSQLUUID(as_uuid=True), nullable=nullable, index=index)


class TimestampedModel(SQLModel):
    """Base model with creation and update timestamps (stored with time zone)."""

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
        description="Record creation timestamp"
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
        description="Record last update timestamp"
    )


class TenantModel(TimestampedModel):
    """Base model with UUID primary key; subclasses declare their own tenant_id column."""

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique identifier"
    )

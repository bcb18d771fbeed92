"""Domain value objects used across aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID, uuid4


def _coerce_uuid(value: Any, *, field_name: str) -> UUID:
    """Convert strings to UUID instances while validating type."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        return UUID(value)
    raise TypeError(f"{field_name} must be a UUID-compatible value")


@dataclass(frozen=True)
class _EntityId:
    """Shared behaviour for UUID-backed identifiers."""

    value: UUID

    _field_name = "id"

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name=self._field_name))

    @classmethod
    def generate(cls):
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, init=False)
class TenantId(_EntityId):
    """Strongly-typed tenant identifier used for multi-tenant isolation."""

    _field_name = "tenant_id"


@dataclass(frozen=True, init=False)
class UserId(_EntityId):
    """Identifier of the authenticated user (recruiter or admin)."""

    _field_name = "user_id"


@dataclass(frozen=True, init=False)
class JobId(_EntityId):
    """Aggregate identifier for Job domain entities."""

    _field_name = "job_id"


@dataclass(frozen=True, init=False)
class ResumeId(_EntityId):
    """Aggregate identifier for Resume (candidate profile) entities."""

    _field_name = "resume_id"


@dataclass(frozen=True, init=False)
class MatchId(_EntityId):
    """Aggregate identifier for JobMatch entities."""

    _field_name = "match_id"


@dataclass(frozen=True, init=False)
class InterviewId(_EntityId):
    """Aggregate identifier for Interview entities."""

    _field_name = "interview_id"


@dataclass(frozen=True, init=False)
class TemplateId(_EntityId):
    """Aggregate identifier for InterviewTemplate entities."""

    _field_name = "template_id"


@dataclass(frozen=True, init=False)
class MatchingConfigId(_EntityId):
    """Aggregate identifier for MatchingConfig entities."""

    _field_name = "matching_config_id"

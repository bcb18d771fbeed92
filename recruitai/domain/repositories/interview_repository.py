"""Domain repository contracts for interviews and interview templates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from recruitai.domain.entities.interview import Interview, InterviewStatus
from recruitai.domain.entities.interview_template import InterviewTemplate
from recruitai.domain.value_objects import InterviewId, ResumeId, TemplateId, TenantId, UserId


class IInterviewRepository(ABC):
    """Domain-facing abstraction for interview persistence operations."""

    @abstractmethod
    async def get_by_id(self, interview_id: InterviewId, tenant_id: TenantId) -> Optional[Interview]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_access_token(self, access_token: str) -> Optional[Interview]:
        """Load an interview by its candidate access token (no tenant scope)."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, interview: Interview) -> Interview:
        raise NotImplementedError

    @abstractmethod
    async def list_by_tenant(
        self,
        tenant_id: TenantId,
        status: Optional[InterviewStatus] = None,
        candidate_id: Optional[ResumeId] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[Interview]:
        raise NotImplementedError

    @abstractmethod
    async def count_by_status(
        self,
        tenant_id: TenantId,
        invited_by: Optional[UserId] = None
    ) -> Dict[InterviewStatus, int]:
        """Interview counts grouped by status; statuses with no interviews are absent."""
        raise NotImplementedError


class IInterviewTemplateRepository(ABC):
    """Lookup of interview templates owned by a tenant or shared globally."""

    @abstractmethod
    async def get_by_id(self, template_id: TemplateId) -> Optional[InterviewTemplate]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, template: InterviewTemplate) -> InterviewTemplate:
        raise NotImplementedError

    @abstractmethod
    async def list_available(self, tenant_id: TenantId) -> List[InterviewTemplate]:
        """Active templates owned by the tenant plus active global templates."""
        raise NotImplementedError


__all__ = ["IInterviewRepository", "IInterviewTemplateRepository"]

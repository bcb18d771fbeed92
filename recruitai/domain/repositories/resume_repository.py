"""Domain repository contracts for resume aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from recruitai.domain.entities.resume import Resume, ResumeStatus
from recruitai.domain.value_objects import ResumeId, TenantId, UserId


class IResumeRepository(ABC):
    """Domain-facing abstraction for resume persistence operations."""

    @abstractmethod
    async def get_by_id(self, resume_id: ResumeId, tenant_id: TenantId) -> Optional[Resume]:
        """Load a resume by identifier within tenant scope."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, resume: Resume) -> Resume:
        raise NotImplementedError

    @abstractmethod
    async def update_status(
        self,
        resume_id: ResumeId,
        tenant_id: TenantId,
        status: ResumeStatus
    ) -> bool:
        """Atomically set the status of a single resume; False when not found."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_tenant(
        self,
        tenant_id: TenantId,
        status: Optional[ResumeStatus] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[Resume]:
        raise NotImplementedError

    @abstractmethod
    async def count_by_tenant(self, tenant_id: TenantId, status: Optional[ResumeStatus] = None) -> int:
        raise NotImplementedError

    @abstractmethod
    async def count_by_uploader(self, tenant_id: TenantId, uploaded_by: UserId) -> int:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, resume_id: ResumeId, tenant_id: TenantId) -> bool:
        raise NotImplementedError


__all__ = ["IResumeRepository"]

"""Domain repository contracts for job aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from recruitai.domain.entities.job import Job, JobStatus
from recruitai.domain.value_objects import JobId, TenantId, UserId


class IJobRepository(ABC):
    """Domain-facing abstraction for job persistence operations."""

    @abstractmethod
    async def get_by_id(self, job_id: JobId, tenant_id: TenantId) -> Optional[Job]:
        """Load a job by identifier within tenant scope."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, job: Job) -> Job:
        """Persist a new or updated job aggregate."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_tenant(
        self,
        tenant_id: TenantId,
        status: Optional[JobStatus] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[Job]:
        """List jobs for a tenant, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def count_by_tenant(self, tenant_id: TenantId, status: Optional[JobStatus] = None) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_by_recruiter(self, tenant_id: TenantId, recruiter_id: UserId) -> List[Job]:
        """All jobs the recruiter posted within the tenant, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, job_id: JobId, tenant_id: TenantId) -> bool:
        """Delete a job; returns False when nothing matched."""
        raise NotImplementedError


__all__ = ["IJobRepository"]

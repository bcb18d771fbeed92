"""Domain repository contracts for job match records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from recruitai.domain.entities.job_match import JobMatch, ReviewStatus
from recruitai.domain.value_objects import JobId, MatchId, TenantId


class IMatchRepository(ABC):
    """Domain-facing abstraction for job match persistence operations."""

    @abstractmethod
    async def get_by_id(self, match_id: MatchId, tenant_id: TenantId) -> Optional[JobMatch]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, match: JobMatch) -> JobMatch:
        """Insert or update a match. Several matches may exist for one job/candidate pair."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_job(
        self,
        job_id: JobId,
        tenant_id: TenantId,
        review_status: Optional[ReviewStatus] = None
    ) -> List[JobMatch]:
        """List matches for a job ordered by match score, highest first."""
        raise NotImplementedError

    @abstractmethod
    async def count_by_tenant(self, tenant_id: TenantId) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_top_by_tenant(self, tenant_id: TenantId, limit: int = 5) -> List[JobMatch]:
        """Highest-scoring matches across the tenant."""
        raise NotImplementedError

    @abstractmethod
    async def count_by_jobs(self, tenant_id: TenantId, job_ids: Sequence[JobId]) -> Dict[JobId, int]:
        """Match counts per job; jobs without matches are absent from the result."""
        raise NotImplementedError


__all__ = ["IMatchRepository"]

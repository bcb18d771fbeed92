"""PostgreSQL implementation of IMatchRepository using JobMatchMapper."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from sqlalchemy import desc, func
from sqlmodel import select

from recruitai.domain.entities.job_match import JobMatch, ReviewStatus
from recruitai.domain.repositories.match_repository import IMatchRepository
from recruitai.domain.value_objects import JobId, MatchId, TenantId
from recruitai.infrastructure.persistence.mappers.job_match_mapper import JobMatchMapper
from recruitai.infrastructure.persistence.models.job_match_table import JobMatchTable
from recruitai.infrastructure.persistence.repositories.base import SQLModelRepository


class PostgresMatchRepository(SQLModelRepository, IMatchRepository):

    async def get_by_id(self, match_id: MatchId, tenant_id: TenantId) -> Optional[JobMatch]:
        async with self.db_manager.get_session() as session:
            stmt = select(JobMatchTable).where(
                JobMatchTable.id == match_id.value,
                JobMatchTable.tenant_id == tenant_id.value,
            )
            result = await session.execute(stmt)
            row = result.scalars().first()
            return JobMatchMapper.to_domain(row) if row else None

    async def save(self, match: JobMatch) -> JobMatch:
        async with self.db_manager.get_session() as session:
            existing_row = await session.get(JobMatchTable, match.id.value)
            if existing_row:
                JobMatchMapper.update_table_from_domain(existing_row, match)
            else:
                session.add(JobMatchMapper.to_table(match))
        return match

    async def list_by_job(
        self,
        job_id: JobId,
        tenant_id: TenantId,
        review_status: Optional[ReviewStatus] = None
    ) -> List[JobMatch]:
        async with self.db_manager.get_session() as session:
            stmt = select(JobMatchTable).where(
                JobMatchTable.job_id == job_id.value,
                JobMatchTable.tenant_id == tenant_id.value,
            )
            if review_status:
                stmt = stmt.where(JobMatchTable.review_status == review_status.value)
            stmt = stmt.order_by(desc(JobMatchTable.match_score), desc(JobMatchTable.created_at))
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [JobMatchMapper.to_domain(row) for row in rows]

    async def count_by_tenant(self, tenant_id: TenantId) -> int:
        async with self.db_manager.get_session() as session:
            stmt = select(func.count()).select_from(JobMatchTable).where(
                JobMatchTable.tenant_id == tenant_id.value
            )
            result = await session.execute(stmt)
            return int(result.scalar_one())

    async def list_top_by_tenant(self, tenant_id: TenantId, limit: int = 5) -> List[JobMatch]:
        async with self.db_manager.get_session() as session:
            stmt = (
                select(JobMatchTable)
                .where(JobMatchTable.tenant_id == tenant_id.value)
                .order_by(desc(JobMatchTable.match_score), desc(JobMatchTable.created_at))
                .limit(limit)
            )
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [JobMatchMapper.to_domain(row) for row in rows]

    async def count_by_jobs(self, tenant_id: TenantId, job_ids: Sequence[JobId]) -> Dict[JobId, int]:
        if not job_ids:
            return {}
        async with self.db_manager.get_session() as session:
            stmt = (
                select(JobMatchTable.job_id, func.count())
                .where(
                    JobMatchTable.tenant_id == tenant_id.value,
                    JobMatchTable.job_id.in_([job_id.value for job_id in job_ids]),
                )
                .group_by(JobMatchTable.job_id)
            )
            result = await session.execute(stmt)
            return {JobId(job_id): int(count) for job_id, count in result.all()}


__all__ = ["PostgresMatchRepository"]

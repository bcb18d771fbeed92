"""PostgreSQL implementation of IJobRepository using JobMapper."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, desc, func
from sqlmodel import select

from recruitai.domain.entities.job import Job, JobStatus
from recruitai.domain.repositories.job_repository import IJobRepository
from recruitai.domain.value_objects import JobId, TenantId, UserId
from recruitai.infrastructure.persistence.mappers.job_mapper import JobMapper
from recruitai.infrastructure.persistence.models.job_table import JobTable
from recruitai.infrastructure.persistence.repositories.base import SQLModelRepository


class PostgresJobRepository(SQLModelRepository, IJobRepository):
    """PostgreSQL adapter implementation of IJobRepository."""

    async def get_by_id(self, job_id: JobId, tenant_id: TenantId) -> Optional[Job]:
        async with self.db_manager.get_session() as session:
            stmt = select(JobTable).where(
                JobTable.id == job_id.value,
                JobTable.tenant_id == tenant_id.value,
            )
            result = await session.execute(stmt)
            row = result.scalars().first()
            return JobMapper.to_domain(row) if row else None

    async def save(self, job: Job) -> Job:
        async with self.db_manager.get_session() as session:
            existing_row = await session.get(JobTable, job.id.value)
            if existing_row:
                JobMapper.update_table_from_domain(existing_row, job)
            else:
                session.add(JobMapper.to_table(job))
        return job

    async def list_by_tenant(
        self,
        tenant_id: TenantId,
        status: Optional[JobStatus] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[Job]:
        async with self.db_manager.get_session() as session:
            stmt = select(JobTable).where(JobTable.tenant_id == tenant_id.value)
            if status:
                stmt = stmt.where(JobTable.status == status.value)
            stmt = stmt.order_by(desc(JobTable.created_at)).offset(offset).limit(limit)
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [JobMapper.to_domain(row) for row in rows]

    async def count_by_tenant(self, tenant_id: TenantId, status: Optional[JobStatus] = None) -> int:
        async with self.db_manager.get_session() as session:
            stmt = select(func.count()).select_from(JobTable).where(JobTable.tenant_id == tenant_id.value)
            if status:
                stmt = stmt.where(JobTable.status == status.value)
            result = await session.execute(stmt)
            return int(result.scalar_one())

    async def list_by_recruiter(self, tenant_id: TenantId, recruiter_id: UserId) -> List[Job]:
        async with self.db_manager.get_session() as session:
            stmt = (
                select(JobTable)
                .where(
                    JobTable.tenant_id == tenant_id.value,
                    JobTable.recruiter_id == recruiter_id.value,
                )
                .order_by(desc(JobTable.created_at))
            )
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [JobMapper.to_domain(row) for row in rows]

    async def delete(self, job_id: JobId, tenant_id: TenantId) -> bool:
        async with self.db_manager.get_session() as session:
            result = await session.execute(
                delete(JobTable).where(
                    JobTable.id == job_id.value,
                    JobTable.tenant_id == tenant_id.value,
                )
            )
            return result.rowcount > 0


__all__ = ["PostgresJobRepository"]

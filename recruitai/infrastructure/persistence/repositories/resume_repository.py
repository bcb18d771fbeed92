"""PostgreSQL implementation of IResumeRepository using ResumeMapper."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, desc, func, update
from sqlmodel import select

from recruitai.domain.entities.resume import Resume, ResumeStatus
from recruitai.domain.repositories.resume_repository import IResumeRepository
from recruitai.domain.value_objects import ResumeId, TenantId, UserId
from recruitai.infrastructure.persistence.mappers.resume_mapper import ResumeMapper
from recruitai.infrastructure.persistence.models.base import utcnow
from recruitai.infrastructure.persistence.models.resume_table import ResumeTable
from recruitai.infrastructure.persistence.repositories.base import SQLModelRepository


class PostgresResumeRepository(SQLModelRepository, IResumeRepository):
    """PostgreSQL adapter implementation of IResumeRepository."""

    async def get_by_id(self, resume_id: ResumeId, tenant_id: TenantId) -> Optional[Resume]:
        async with self.db_manager.get_session() as session:
            stmt = select(ResumeTable).where(
                ResumeTable.id == resume_id.value,
                ResumeTable.tenant_id == tenant_id.value,
            )
            result = await session.execute(stmt)
            row = result.scalars().first()
            return ResumeMapper.to_domain(row) if row else None

    async def save(self, resume: Resume) -> Resume:
        async with self.db_manager.get_session() as session:
            existing_row = await session.get(ResumeTable, resume.id.value)
            if existing_row:
                ResumeMapper.update_table_from_domain(existing_row, resume)
            else:
                session.add(ResumeMapper.to_table(resume))
        return resume

    async def update_status(self, resume_id: ResumeId, tenant_id: TenantId, status: ResumeStatus) -> bool:
        # Single UPDATE so concurrent matches cannot overwrite other resume fields
        async with self.db_manager.get_session() as session:
            result = await session.execute(
                update(ResumeTable)
                .where(
                    ResumeTable.id == resume_id.value,
                    ResumeTable.tenant_id == tenant_id.value,
                )
                .values(status=status.value, updated_at=utcnow())
            )
            return result.rowcount > 0

    async def list_by_tenant(
        self,
        tenant_id: TenantId,
        status: Optional[ResumeStatus] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[Resume]:
        async with self.db_manager.get_session() as session:
            stmt = select(ResumeTable).where(ResumeTable.tenant_id == tenant_id.value)
            if status:
                stmt = stmt.where(ResumeTable.status == status.value)
            stmt = stmt.order_by(desc(ResumeTable.created_at)).offset(offset).limit(limit)
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [ResumeMapper.to_domain(row) for row in rows]

    async def count_by_tenant(self, tenant_id: TenantId, status: Optional[ResumeStatus] = None) -> int:
        async with self.db_manager.get_session() as session:
            stmt = select(func.count()).select_from(ResumeTable).where(ResumeTable.tenant_id == tenant_id.value)
            if status:
                stmt = stmt.where(ResumeTable.status == status.value)
            result = await session.execute(stmt)
            return int(result.scalar_one())

    async def count_by_uploader(self, tenant_id: TenantId, uploaded_by: UserId) -> int:
        async with self.db_manager.get_session() as session:
            stmt = select(func.count()).select_from(ResumeTable).where(
                ResumeTable.tenant_id == tenant_id.value,
                ResumeTable.uploaded_by == uploaded_by.value,
            )
            result = await session.execute(stmt)
            return int(result.scalar_one())

    async def delete(self, resume_id: ResumeId, tenant_id: TenantId) -> bool:
        async with self.db_manager.get_session() as session:
            result = await session.execute(
                delete(ResumeTable).where(
                    ResumeTable.id == resume_id.value,
                    ResumeTable.tenant_id == tenant_id.value,
                )
            )
            return result.rowcount > 0


__all__ = ["PostgresResumeRepository"]

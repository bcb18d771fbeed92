"""PostgreSQL implementations of the interview and interview template repositories."""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import desc, func, or_
from sqlmodel import select

from recruitai.domain.entities.interview import Interview, InterviewStatus
from recruitai.domain.entities.interview_template import InterviewTemplate
from recruitai.domain.repositories.interview_repository import (
    IInterviewRepository,
    IInterviewTemplateRepository,
)
from recruitai.domain.value_objects import InterviewId, ResumeId, TemplateId, TenantId, UserId
from recruitai.infrastructure.persistence.mappers.interview_mapper import (
    InterviewMapper,
    InterviewTemplateMapper,
)
from recruitai.infrastructure.persistence.models.interview_table import InterviewTable, InterviewTemplateTable
from recruitai.infrastructure.persistence.repositories.base import SQLModelRepository


class PostgresInterviewRepository(SQLModelRepository, IInterviewRepository):
    """PostgreSQL adapter implementation of IInterviewRepository."""

    async def get_by_id(self, interview_id: InterviewId, tenant_id: TenantId) -> Optional[Interview]:
        async with self.db_manager.get_session() as session:
            stmt = select(InterviewTable).where(
                InterviewTable.id == interview_id.value,
                InterviewTable.tenant_id == tenant_id.value,
            )
            result = await session.execute(stmt)
            row = result.scalars().first()
            return InterviewMapper.to_domain(row) if row else None

    async def get_by_access_token(self, access_token: str) -> Optional[Interview]:
        async with self.db_manager.get_session() as session:
            stmt = select(InterviewTable).where(InterviewTable.access_token == access_token)
            result = await session.execute(stmt)
            row = result.scalars().first()
            return InterviewMapper.to_domain(row) if row else None

    async def save(self, interview: Interview) -> Interview:
        async with self.db_manager.get_session() as session:
            existing_row = await session.get(InterviewTable, interview.id.value)
            if existing_row:
                InterviewMapper.update_table_from_domain(existing_row, interview)
            else:
                session.add(InterviewMapper.to_table(interview))
        return interview

    async def list_by_tenant(
        self,
        tenant_id: TenantId,
        status: Optional[InterviewStatus] = None,
        candidate_id: Optional[ResumeId] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[Interview]:
        async with self.db_manager.get_session() as session:
            stmt = select(InterviewTable).where(InterviewTable.tenant_id == tenant_id.value)
            if status:
                stmt = stmt.where(InterviewTable.status == status.value)
            if candidate_id:
                stmt = stmt.where(InterviewTable.candidate_id == candidate_id.value)
            stmt = stmt.order_by(desc(InterviewTable.created_at)).offset(offset).limit(limit)
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [InterviewMapper.to_domain(row) for row in rows]

    async def count_by_status(
        self,
        tenant_id: TenantId,
        invited_by: Optional[UserId] = None
    ) -> Dict[InterviewStatus, int]:
        async with self.db_manager.get_session() as session:
            stmt = (
                select(InterviewTable.status, func.count())
                .where(InterviewTable.tenant_id == tenant_id.value)
                .group_by(InterviewTable.status)
            )
            if invited_by:
                stmt = stmt.where(InterviewTable.invited_by == invited_by.value)
            result = await session.execute(stmt)
            return {InterviewStatus(status): int(count) for status, count in result.all()}


class PostgresInterviewTemplateRepository(SQLModelRepository, IInterviewTemplateRepository):

    async def get_by_id(self, template_id: TemplateId) -> Optional[InterviewTemplate]:
        async with self.db_manager.get_session() as session:
            row = await session.get(InterviewTemplateTable, template_id.value)
            return InterviewTemplateMapper.to_domain(row) if row else None

    async def save(self, template: InterviewTemplate) -> InterviewTemplate:
        async with self.db_manager.get_session() as session:
            existing_row = await session.get(InterviewTemplateTable, template.id.value)
            if existing_row:
                InterviewTemplateMapper.update_table_from_domain(existing_row, template)
            else:
                session.add(InterviewTemplateMapper.to_table(template))
        return template

    async def list_available(self, tenant_id: TenantId) -> List[InterviewTemplate]:
        async with self.db_manager.get_session() as session:
            stmt = (
                select(InterviewTemplateTable)
                .where(
                    InterviewTemplateTable.is_active == True,  # noqa: E712
                    or_(
                        InterviewTemplateTable.is_global == True,  # noqa: E712
                        InterviewTemplateTable.tenant_id == tenant_id.value,
                    ),
                )
                .order_by(InterviewTemplateTable.name)
            )
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [InterviewTemplateMapper.to_domain(row) for row in rows]


__all__ = ["PostgresInterviewRepository", "PostgresInterviewTemplateRepository"]

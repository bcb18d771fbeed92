"""Application service for job posting CRUD."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import structlog

from recruitai.domain.entities.job import (
    EmploymentType,
    Job,
    JobLocation,
    JobRequirements,
    JobStatus,
    SalaryRange,
)
from recruitai.domain.exceptions import JobNotFoundError, ValidationError
from recruitai.domain.value_objects import JobId, TenantId, UserId

if TYPE_CHECKING:
    from recruitai.application.dependencies.resume_dependencies import JobDependencies


logger = structlog.get_logger(__name__)

_UPDATABLE_FIELDS = (
    "title",
    "description",
    "requirements",
    "location",
    "employment_type",
    "salary_range",
    "department",
    "status",
)


class JobApplicationService:
    """Tenant-scoped job management."""

    def __init__(self, dependencies: JobDependencies) -> None:
        self._deps = dependencies

    async def create_job(
        self,
        *,
        tenant_id: str,
        recruiter_id: str,
        title: str,
        description: str,
        requirements: Optional[JobRequirements] = None,
        location: Optional[JobLocation] = None,
        employment_type: EmploymentType = EmploymentType.FULL_TIME,
        salary_range: Optional[SalaryRange] = None,
        department: Optional[str] = None,
        status: JobStatus = JobStatus.DRAFT,
    ) -> Job:
        try:
            job = Job(
                id=JobId.generate(),
                tenant_id=TenantId(tenant_id),
                recruiter_id=UserId(recruiter_id),
                title=title,
                description=description,
                requirements=requirements or JobRequirements(),
                location=location or JobLocation(),
                employment_type=employment_type,
                salary_range=salary_range,
                department=department,
                status=status,
            )
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        saved = await self._deps.job_repository.save(job)
        logger.info("Job created", tenant_id=tenant_id, job_id=str(saved.id), title=title)
        return saved

    async def get_job(self, *, tenant_id: str, job_id: str) -> Job:
        job = await self._deps.job_repository.get_by_id(JobId(job_id), TenantId(tenant_id))
        if job is None:
            raise JobNotFoundError(f"Job {job_id} not found")
        return job

    async def list_jobs(
        self,
        *,
        tenant_id: str,
        status: Optional[JobStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Job], int]:
        tenant = TenantId(tenant_id)
        jobs = await self._deps.job_repository.list_by_tenant(tenant, status=status, limit=limit, offset=offset)
        total = await self._deps.job_repository.count_by_tenant(tenant, status=status)
        return jobs, total

    async def update_job(self, *, tenant_id: str, job_id: str, changes: Dict[str, Any]) -> Job:
        job = await self.get_job(tenant_id=tenant_id, job_id=job_id)
        for key, value in changes.items():
            if key not in _UPDATABLE_FIELDS:
                raise ValidationError(f"Field '{key}' cannot be updated")
            if value is not None:
                setattr(job, key, value)
        if not job.title.strip() or not job.description.strip():
            raise ValidationError("Job title and description cannot be empty")
        job.touch()
        saved = await self._deps.job_repository.save(job)
        logger.info("Job updated", tenant_id=tenant_id, job_id=job_id, fields=sorted(changes))
        return saved

    async def delete_job(self, *, tenant_id: str, job_id: str) -> None:
        deleted = await self._deps.job_repository.delete(JobId(job_id), TenantId(tenant_id))
        if not deleted:
            raise JobNotFoundError(f"Job {job_id} not found")
        logger.info("Job deleted", tenant_id=tenant_id, job_id=job_id)


__all__ = ["JobApplicationService"]

"""
Job posting endpoints (tenant scoped, recruiter roles).
"""

from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, HTTPException, Query, status

from recruitai.api.dependencies import JobServiceDep, map_domain_exception_to_http
from recruitai.api.schemas.base import MessageResponse, PaginatedResponse
from recruitai.api.schemas.job_schemas import (
    JobCreateRequest,
    JobResponse,
    JobUpdateRequest,
)
from recruitai.core.dependencies import RecruiterCaller
from recruitai.domain.entities.job import JobLocation, JobStatus, SalaryRange
from recruitai.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=PaginatedResponse)
async def list_jobs(
    caller: RecruiterCaller,
    job_service: JobServiceDep,
    status_filter: Optional[JobStatus] = Query(None, alias="status", description="Filter by job status"),
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=100),
) -> PaginatedResponse:
    try:
        jobs, total = await job_service.list_jobs(
            tenant_id=str(caller.tenant_id),
            status=status_filter,
            limit=size,
            offset=(page - 1) * size,
        )
        return PaginatedResponse.create(
            items=[JobResponse.from_domain(job) for job in jobs],
            total=total,
            page=page,
            size=size,
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: JobCreateRequest,
    caller: RecruiterCaller,
    job_service: JobServiceDep,
) -> JobResponse:
    """Create a job posting; the caller becomes its recruiter."""
    try:
        job = await job_service.create_job(
            tenant_id=str(caller.tenant_id),
            recruiter_id=str(caller.user_id),
            title=request.title,
            description=request.description,
            requirements=request.requirements.to_domain(),
            location=JobLocation(**request.location.model_dump()),
            employment_type=request.employment_type,
            salary_range=SalaryRange(**request.salary_range.model_dump()) if request.salary_range else None,
            department=request.department,
            status=request.status,
        )
        return JobResponse.from_domain(job)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: UUID, caller: RecruiterCaller, job_service: JobServiceDep) -> JobResponse:
    try:
        job = await job_service.get_job(tenant_id=str(caller.tenant_id), job_id=str(job_id))
        return JobResponse.from_domain(job)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: UUID,
    request: JobUpdateRequest,
    caller: RecruiterCaller,
    job_service: JobServiceDep,
) -> JobResponse:
    changes = request.to_changes()
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")
    try:
        job = await job_service.update_job(
            tenant_id=str(caller.tenant_id),
            job_id=str(job_id),
            changes=changes,
        )
        return JobResponse.from_domain(job)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(job_id: UUID, caller: RecruiterCaller, job_service: JobServiceDep) -> MessageResponse:
    try:
        await job_service.delete_job(tenant_id=str(caller.tenant_id), job_id=str(job_id))
        return MessageResponse(message="Job deleted")
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)

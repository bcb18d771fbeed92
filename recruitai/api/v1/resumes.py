"""
Resume endpoints: pasted-text ingestion, listing and status management.
"""

from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Query, status

from recruitai.api.dependencies import ResumeServiceDep, map_domain_exception_to_http
from recruitai.api.schemas.base import MessageResponse, PaginatedResponse
from recruitai.api.schemas.resume_schemas import (
    ResumePasteRequest,
    ResumeResponse,
    ResumeStatusUpdate,
)
from recruitai.core.dependencies import RecruiterCaller
from recruitai.domain.entities.resume import ResumeStatus
from recruitai.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get("", response_model=PaginatedResponse)
async def list_resumes(
    caller: RecruiterCaller,
    resume_service: ResumeServiceDep,
    status_filter: Optional[ResumeStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=100),
) -> PaginatedResponse:
    try:
        resumes, total = await resume_service.list_resumes(
            tenant_id=str(caller.tenant_id),
            status=status_filter,
            limit=size,
            offset=(page - 1) * size,
        )
        return PaginatedResponse.create(
            items=[ResumeResponse.from_domain(r) for r in resumes],
            total=total,
            page=page,
            size=size,
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/paste", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume_from_text(
    request: ResumePasteRequest,
    caller: RecruiterCaller,
    resume_service: ResumeServiceDep,
) -> ResumeResponse:
    """
    Create a resume from pasted text.

    Known skills, e-mail and phone number are extracted from the text; when
    AI is configured the resume is also analysed for experience and level.
    """
    try:
        resume = await resume_service.create_from_text(
            tenant_id=str(caller.tenant_id),
            uploaded_by=str(caller.user_id),
            resume_text=request.resume_text,
            candidate_name=request.candidate_name,
            candidate_email=request.candidate_email,
            candidate_phone=request.candidate_phone,
            skills=request.skills,
            experience_years=request.experience_years,
            tags=request.tags,
        )
        return ResumeResponse.from_domain(resume)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(resume_id: UUID, caller: RecruiterCaller, resume_service: ResumeServiceDep) -> ResumeResponse:
    try:
        resume = await resume_service.get_resume(tenant_id=str(caller.tenant_id), resume_id=str(resume_id))
        return ResumeResponse.from_domain(resume)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/{resume_id}/status", response_model=ResumeResponse)
async def update_resume_status(
    resume_id: UUID,
    request: ResumeStatusUpdate,
    caller: RecruiterCaller,
    resume_service: ResumeServiceDep,
) -> ResumeResponse:
    try:
        resume = await resume_service.update_status(
            tenant_id=str(caller.tenant_id),
            resume_id=str(resume_id),
            status=request.status,
        )
        return ResumeResponse.from_domain(resume)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/{resume_id}", response_model=MessageResponse)
async def delete_resume(resume_id: UUID, caller: RecruiterCaller, resume_service: ResumeServiceDep) -> MessageResponse:
    try:
        await resume_service.delete_resume(tenant_id=str(caller.tenant_id), resume_id=str(resume_id))
        return MessageResponse(message="Resume deleted")
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)

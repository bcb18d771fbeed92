"""
Recruiter-facing interview endpoints: invitations, listing, cancellation
and feedback.
"""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Query, status

from recruitai.api.dependencies import InterviewServiceDep, map_domain_exception_to_http
from recruitai.api.schemas.interview_schemas import (
    InterviewFeedbackRequest,
    InterviewInviteRequest,
    InterviewResponse,
)
from recruitai.core.config import get_settings
from recruitai.core.dependencies import RecruiterCaller
from recruitai.domain.entities.interview import InterviewStatus
from recruitai.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.post("/invite", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
async def invite_candidate(
    request: InterviewInviteRequest,
    caller: RecruiterCaller,
    interview_service: InterviewServiceDep,
) -> InterviewResponse:
    """Create an interview for a match and e-mail the candidate their link."""
    try:
        interview = await interview_service.invite(
            tenant_id=str(caller.tenant_id),
            match_id=request.match_id,
            invited_by=str(caller.user_id),
            template_id=request.template_id,
            expires_in_days=request.expires_in_days,
        )
        return InterviewResponse.from_domain(
            interview, interview_link=get_settings().interview_link(interview.access_token)
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("", response_model=List[InterviewResponse])
async def list_interviews(
    caller: RecruiterCaller,
    interview_service: InterviewServiceDep,
    status_filter: Optional[InterviewStatus] = Query(None, alias="status"),
    candidate_id: Optional[UUID] = Query(None),
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=100),
) -> List[InterviewResponse]:
    try:
        interviews = await interview_service.list_interviews(
            tenant_id=str(caller.tenant_id),
            status=status_filter,
            candidate_id=str(candidate_id) if candidate_id else None,
            limit=size,
            offset=(page - 1) * size,
        )
        return [InterviewResponse.from_domain(i) for i in interviews]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/{interview_id}", response_model=InterviewResponse)
async def get_interview(
    interview_id: UUID,
    caller: RecruiterCaller,
    interview_service: InterviewServiceDep,
) -> InterviewResponse:
    try:
        interview = await interview_service.get_interview(
            tenant_id=str(caller.tenant_id), interview_id=str(interview_id)
        )
        return InterviewResponse.from_domain(interview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/{interview_id}/cancel", response_model=InterviewResponse)
async def cancel_interview(
    interview_id: UUID,
    caller: RecruiterCaller,
    interview_service: InterviewServiceDep,
) -> InterviewResponse:
    try:
        interview = await interview_service.cancel_interview(
            tenant_id=str(caller.tenant_id), interview_id=str(interview_id)
        )
        return InterviewResponse.from_domain(interview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/{interview_id}/feedback", response_model=InterviewResponse)
async def submit_feedback(
    interview_id: UUID,
    request: InterviewFeedbackRequest,
    caller: RecruiterCaller,
    interview_service: InterviewServiceDep,
) -> InterviewResponse:
    try:
        interview = await interview_service.submit_feedback(
            tenant_id=str(caller.tenant_id),
            interview_id=str(interview_id),
            rating=request.rating,
            comments=request.comments,
        )
        return InterviewResponse.from_domain(interview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)

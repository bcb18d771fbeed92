"""
Candidate matching endpoints and per-tenant matching configuration.
"""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, HTTPException, Query

from recruitai.api.dependencies import (
    MatchingConfigServiceDep,
    MatchingServiceDep,
    map_domain_exception_to_http,
)
from recruitai.api.schemas.matching_schemas import (
    MatchBatchResponse,
    MatchFailureSchema,
    MatchingConfigResponse,
    MatchingConfigUpdate,
    MatchRequest,
    MatchResponse,
    MatchReviewRequest,
)
from recruitai.core.dependencies import AdminCaller, RecruiterCaller
from recruitai.domain.entities.job_match import ReviewStatus
from recruitai.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(tags=["matching"])


@router.post("/match", response_model=MatchBatchResponse)
async def match_candidates(
    request: MatchRequest,
    caller: RecruiterCaller,
    matching_service: MatchingServiceDep,
) -> MatchBatchResponse:
    """
    Score resumes against a job.

    Resumes that cannot be matched are reported in ``failed``; the request
    itself only fails when the job does not exist.
    """
    try:
        result = await matching_service.match_candidates(
            tenant_id=str(caller.tenant_id),
            job_id=request.job_id,
            resume_ids=request.resume_ids,
            requested_by=str(caller.user_id),
        )
        return MatchBatchResponse(
            count=result.count,
            matches=[MatchResponse.from_domain(m) for m in result.matches],
            failed=[MatchFailureSchema(resume_id=str(f.item), reason=f.reason) for f in result.failed],
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid identifier: {e}")
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/matches/job/{job_id}", response_model=List[MatchResponse])
async def list_job_matches(
    job_id: UUID,
    caller: RecruiterCaller,
    matching_service: MatchingServiceDep,
    review_status: Optional[ReviewStatus] = Query(None, description="Filter by recruiter review status"),
) -> List[MatchResponse]:
    try:
        matches = await matching_service.list_matches(
            tenant_id=str(caller.tenant_id),
            job_id=str(job_id),
            review_status=review_status,
        )
        return [MatchResponse.from_domain(m) for m in matches]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/matches/{match_id}", response_model=MatchResponse)
async def get_match(match_id: UUID, caller: RecruiterCaller, matching_service: MatchingServiceDep) -> MatchResponse:
    try:
        match = await matching_service.get_match(tenant_id=str(caller.tenant_id), match_id=str(match_id))
        return MatchResponse.from_domain(match)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/matches/{match_id}/review", response_model=MatchResponse)
async def review_match(
    match_id: UUID,
    request: MatchReviewRequest,
    caller: RecruiterCaller,
    matching_service: MatchingServiceDep,
) -> MatchResponse:
    try:
        match = await matching_service.review_match(
            tenant_id=str(caller.tenant_id),
            match_id=str(match_id),
            reviewer_id=str(caller.user_id),
            status=request.status,
            notes=request.notes,
        )
        return MatchResponse.from_domain(match)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/matching-config", response_model=MatchingConfigResponse)
async def get_matching_config(
    caller: RecruiterCaller,
    config_service: MatchingConfigServiceDep,
) -> MatchingConfigResponse:
    try:
        config = await config_service.get_or_create(caller.tenant_id)
        return MatchingConfigResponse.from_domain(config)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/matching-config", response_model=MatchingConfigResponse)
async def update_matching_config(
    request: MatchingConfigUpdate,
    caller: AdminCaller,
    config_service: MatchingConfigServiceDep,
) -> MatchingConfigResponse:
    """Merge a partial update; rejected with 400 when the weights stop summing to 1."""
    try:
        config = await config_service.update(caller.tenant_id, request.to_changes())
        return MatchingConfigResponse.from_domain(config)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)

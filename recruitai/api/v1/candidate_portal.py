"""
Candidate portal endpoints.

These routes are addressed by the interview access token and require no
authentication; responses never carry scores or AI analysis.
"""

import structlog
from fastapi import APIRouter

from recruitai.api.dependencies import InterviewServiceDep, map_domain_exception_to_http
from recruitai.api.schemas.interview_schemas import (
    AnswerAcceptedResponse,
    AnswerSubmission,
    CandidateDetailsRequest,
    CandidateInterviewView,
    CandidateStatusResponse,
)
from recruitai.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(tags=["candidate-portal"])


async def _candidate_view(interview_service, interview) -> CandidateInterviewView:
    job = await interview_service.job_context(interview)
    return CandidateInterviewView.from_domain(interview, job_title=job.title if job else None)


@router.get("/interview/{token}", response_model=CandidateInterviewView)
async def get_interview_by_token(token: str, interview_service: InterviewServiceDep) -> CandidateInterviewView:
    """Load the interview for the candidate; 410 once the link has expired."""
    try:
        interview = await interview_service.get_for_candidate(token)
        return await _candidate_view(interview_service, interview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/interview/{token}/details", response_model=CandidateInterviewView)
async def update_candidate_details(
    token: str,
    request: CandidateDetailsRequest,
    interview_service: InterviewServiceDep,
) -> CandidateInterviewView:
    try:
        interview = await interview_service.update_candidate_details(
            token, name=request.name, email=request.email
        )
        return await _candidate_view(interview_service, interview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/interview/{token}/start", response_model=CandidateInterviewView)
async def start_interview(token: str, interview_service: InterviewServiceDep) -> CandidateInterviewView:
    try:
        interview = await interview_service.start(token)
        return await _candidate_view(interview_service, interview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/interview/{token}/answer", response_model=AnswerAcceptedResponse)
async def submit_answer(
    token: str,
    request: AnswerSubmission,
    interview_service: InterviewServiceDep,
) -> AnswerAcceptedResponse:
    try:
        result = await interview_service.submit_answer(
            token,
            question_id=request.question_id,
            answer=request.answer,
            time_spent=request.time_spent,
        )
        return AnswerAcceptedResponse(
            question_id=result.question.question_id,
            answered_at=result.question.answered_at,
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/interview/{token}/complete", response_model=CandidateStatusResponse)
async def complete_interview(token: str, interview_service: InterviewServiceDep) -> CandidateStatusResponse:
    try:
        interview = await interview_service.complete(token)
        return _status(interview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/status/{token}", response_model=CandidateStatusResponse)
async def get_interview_status(token: str, interview_service: InterviewServiceDep) -> CandidateStatusResponse:
    try:
        interview = await interview_service.get_status(token)
        return _status(interview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


def _status(interview) -> CandidateStatusResponse:
    return CandidateStatusResponse(
        status=interview.status,
        answered_questions=len(interview.answered_questions()),
        total_questions=len(interview.questions),
        expires_at=interview.expires_at,
        completed_at=interview.completed_at,
    )

"""Application layer orchestrator for interview invitations and candidate sessions."""

from __future__ import annotations

import asyncio
import secrets
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

import structlog

from recruitai.application.notifications import notify_safely
from recruitai.domain.entities.interview import (
    AnswerAnalysis,
    Interview,
    InterviewAssessment,
    InterviewQuestion,
    InterviewStatus,
)
from recruitai.domain.entities.job import Job
from recruitai.domain.entities.resume import ResumeStatus
from recruitai.domain.exceptions import (
    AIAnalysisError,
    InterviewExpiredError,
    InterviewNotFoundError,
    MatchNotFoundError,
    ResumeNotFoundError,
    TemplateNotFoundError,
)
from recruitai.domain.services.interview_scoring_service import (
    empty_assessment,
    fallback_answer_analysis,
    fallback_assessment,
    overall_score,
)
from recruitai.domain.value_objects import InterviewId, MatchId, ResumeId, TemplateId, TenantId, UserId

if TYPE_CHECKING:
    from recruitai.application.dependencies.interview_dependencies import InterviewDependencies


logger = structlog.get_logger(__name__)


@dataclass
class AnswerResult:
    question: InterviewQuestion
    analysis: AnswerAnalysis


class InterviewApplicationService:
    """Coordinates the interview lifecycle from invitation to completion.

    Recruiter-facing operations are tenant scoped. Candidate-facing operations
    are addressed by the interview access token alone.
    """

    def __init__(self, dependencies: InterviewDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    # ------------------------------------------------------------------
    # Recruiter operations
    # ------------------------------------------------------------------

    async def invite(
        self,
        *,
        tenant_id: str,
        match_id: str,
        invited_by: str,
        template_id: Optional[str] = None,
        expires_in_days: Optional[int] = None,
    ) -> Interview:
        """Create an interview for a matched candidate and e-mail the access link.

        Raises:
            MatchNotFoundError: match is not in the caller's tenant
            ResumeNotFoundError: the matched resume no longer exists
            TemplateNotFoundError: template missing, inactive or owned by another tenant
        """
        tenant = TenantId(tenant_id)
        match = await self._deps.match_repository.get_by_id(MatchId(match_id), tenant)
        if match is None:
            raise MatchNotFoundError(f"Match {match_id} not found")

        resume = await self._deps.resume_repository.get_by_id(match.candidate_id, tenant)
        if resume is None:
            raise ResumeNotFoundError(f"Resume {match.candidate_id} not found")

        questions: List[InterviewQuestion] = []
        template = None
        if template_id:
            template = await self._deps.template_repository.get_by_id(TemplateId(template_id))
            if template is None or not template.is_available_to(tenant):
                raise TemplateNotFoundError(f"Interview template {template_id} not found")
            questions = template.to_interview_questions()

        now = self._deps.clock()
        settings = self._deps.settings
        interview = Interview.invite(
            tenant_id=tenant,
            candidate_id=resume.id,
            access_token=secrets.token_hex(settings.token_bytes),
            expires_in_days=expires_in_days or settings.default_expiry_days,
            questions=questions,
            now=now,
            invited_by=UserId(invited_by),
            job_id=match.job_id,
            job_match_id=match.id,
            template_id=template.id if template else None,
            candidate_name=resume.candidate_info.name,
            candidate_email=resume.candidate_info.email,
        )
        interview = await self._deps.interview_repository.save(interview)

        match.link_interview(interview.id)
        await self._deps.match_repository.save(match)

        if template is not None:
            template.record_usage()
            await self._deps.template_repository.save(template)

        self._logger.info(
            "Interview invitation created",
            tenant_id=tenant_id,
            interview_id=str(interview.id),
            match_id=match_id,
            question_count=len(questions),
        )

        if interview.candidate_email:
            link = settings.interview_link(interview.access_token)
            job = await self._deps.job_repository.get_by_id(match.job_id, tenant)
            position = job.title if job else "the position"
            await notify_safely(
                self._deps.notification_service,
                lambda service: service.send_email(
                    to=interview.candidate_email,
                    subject=f"Interview invitation: {position}",
                    body=(
                        f"Hello {interview.candidate_name or 'there'},\n\n"
                        f"You have been invited to an online interview for {position}.\n"
                        f"Start here: {link}\n\n"
                        f"This link expires on {interview.expires_at:%Y-%m-%d %H:%M} UTC."
                    ),
                ),
                event="interview_invitation",
                interview_id=str(interview.id),
            )

        return interview

    async def get_interview(self, *, tenant_id: str, interview_id: str) -> Interview:
        interview = await self._deps.interview_repository.get_by_id(
            InterviewId(interview_id), TenantId(tenant_id)
        )
        if interview is None:
            raise InterviewNotFoundError(f"Interview {interview_id} not found")
        return interview

    async def list_interviews(
        self,
        *,
        tenant_id: str,
        status: Optional[InterviewStatus] = None,
        candidate_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Interview]:
        return await self._deps.interview_repository.list_by_tenant(
            TenantId(tenant_id),
            status=status,
            candidate_id=ResumeId(candidate_id) if candidate_id else None,
            limit=limit,
            offset=offset,
        )

    async def cancel_interview(self, *, tenant_id: str, interview_id: str) -> Interview:
        interview = await self.get_interview(tenant_id=tenant_id, interview_id=interview_id)
        interview.cancel(self._deps.clock())
        saved = await self._deps.interview_repository.save(interview)
        self._logger.info("Interview cancelled", tenant_id=tenant_id, interview_id=interview_id)
        return saved

    async def submit_feedback(
        self,
        *,
        tenant_id: str,
        interview_id: str,
        rating: int,
        comments: Optional[str] = None,
    ) -> Interview:
        """Store recruiter feedback and forward it to the candidate."""
        interview = await self.get_interview(tenant_id=tenant_id, interview_id=interview_id)
        interview.add_feedback(rating, comments, self._deps.clock())
        saved = await self._deps.interview_repository.save(interview)

        if saved.candidate_email:
            await notify_safely(
                self._deps.notification_service,
                lambda service: service.send_email(
                    to=saved.candidate_email,
                    subject="Feedback on your interview",
                    body=(
                        f"Hello {saved.candidate_name or 'there'},\n\n"
                        f"Rating: {rating}/5\n\n{comments or ''}"
                    ),
                ),
                event="interview_feedback",
                interview_id=interview_id,
            )
        return saved

    # ------------------------------------------------------------------
    # Candidate operations (token addressed)
    # ------------------------------------------------------------------

    async def _load_by_token(self, access_token: str) -> Interview:
        interview = await self._deps.interview_repository.get_by_access_token(access_token)
        if interview is None:
            raise InterviewNotFoundError("Interview not found")
        return interview

    async def get_for_candidate(self, access_token: str) -> Interview:
        """Load an interview for the candidate portal.

        Raises:
            InterviewNotFoundError: unknown token
            InterviewExpiredError: expired status or past the expiry time
        """
        interview = await self._load_by_token(access_token)
        interview.ensure_accessible(self._deps.clock())
        return interview

    async def get_status(self, access_token: str) -> Interview:
        return await self._load_by_token(access_token)

    async def update_candidate_details(
        self,
        access_token: str,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Interview:
        interview = await self.get_for_candidate(access_token)
        interview.update_candidate_details(name, email, self._deps.clock())
        return await self._deps.interview_repository.save(interview)

    async def start(self, access_token: str) -> Interview:
        """Start the interview; a late start persists the ``expired`` status before raising."""
        interview = await self._load_by_token(access_token)
        try:
            interview.start(self._deps.clock())
        except InterviewExpiredError:
            await self._deps.interview_repository.save(interview)
            self._logger.info("Interview expired on start", interview_id=str(interview.id))
            raise
        saved = await self._deps.interview_repository.save(interview)
        self._logger.info("Interview started", interview_id=str(interview.id))
        return saved

    async def submit_answer(
        self,
        access_token: str,
        *,
        question_id: str,
        answer: str,
        time_spent: Optional[int] = None,
    ) -> AnswerResult:
        interview = await self._load_by_token(access_token)
        interview.ensure_in_progress("answer")
        question = interview.get_question(question_id)

        job = await self.job_context(interview)
        analysis = await self._analyze_answer(interview, question, answer, job)

        question = interview.record_answer(
            question_id,
            answer,
            analysis,
            self._deps.clock(),
            time_spent=time_spent,
        )
        await self._deps.interview_repository.save(interview)
        return AnswerResult(question=question, analysis=analysis)

    async def complete(self, access_token: str) -> Interview:
        """Finish the interview, score it and move the candidate to ``interviewing``."""
        interview = await self._load_by_token(access_token)
        interview.ensure_in_progress("complete")

        answered = interview.answered_questions()
        score = overall_score(interview.questions)
        if not answered:
            assessment = empty_assessment()
        else:
            job = await self.job_context(interview)
            assessment = await self._assess(interview, answered, job, score)

        interview.complete(score, assessment, self._deps.clock())
        saved = await self._deps.interview_repository.save(interview)

        await self._deps.resume_repository.update_status(
            interview.candidate_id, interview.tenant_id, ResumeStatus.INTERVIEWING
        )

        self._logger.info(
            "Interview completed",
            interview_id=str(interview.id),
            overall_score=score,
            recommendation=assessment.recommendation.value,
        )

        if interview.invited_by is not None:
            await notify_safely(
                self._deps.notification_service,
                lambda service: service.send_push_notification(
                    user_id=str(interview.invited_by),
                    title="Interview completed",
                    message=f"{interview.candidate_name or 'A candidate'} completed their interview",
                    data={"interview_id": str(interview.id), "overall_score": score},
                ),
                event="interview_completed",
                interview_id=str(interview.id),
            )
        return saved

    # ------------------------------------------------------------------
    # AI helpers
    # ------------------------------------------------------------------

    async def job_context(self, interview: Interview) -> Optional[Job]:
        if interview.job_id is None:
            return None
        return await self._deps.job_repository.get_by_id(interview.job_id, interview.tenant_id)

    async def _analyze_answer(
        self,
        interview: Interview,
        question: InterviewQuestion,
        answer: str,
        job: Optional[Job],
    ) -> AnswerAnalysis:
        analyzer = self._deps.interview_analyzer
        if analyzer is None:
            return fallback_answer_analysis()
        try:
            return await asyncio.wait_for(
                analyzer.analyze_answer(question, answer, job),
                timeout=self._deps.settings.ai_timeout_seconds,
            )
        except (AIAnalysisError, asyncio.TimeoutError) as exc:
            self._logger.warning(
                "AI answer analysis failed, using fallback",
                interview_id=str(interview.id),
                question_id=question.question_id,
                error=str(exc) or type(exc).__name__,
            )
            return fallback_answer_analysis()

    async def _assess(
        self,
        interview: Interview,
        answered: List[InterviewQuestion],
        job: Optional[Job],
        score: Optional[int],
    ) -> InterviewAssessment:
        analyzer = self._deps.interview_analyzer
        if analyzer is None:
            return fallback_assessment(score or 0)
        try:
            return await asyncio.wait_for(
                analyzer.analyze_overall(answered, job),
                timeout=self._deps.settings.ai_timeout_seconds,
            )
        except (AIAnalysisError, asyncio.TimeoutError) as exc:
            self._logger.warning(
                "AI interview assessment failed, using fallback",
                interview_id=str(interview.id),
                error=str(exc) or type(exc).__name__,
            )
            return fallback_assessment(score or 0)


__all__ = ["AnswerResult", "InterviewApplicationService"]

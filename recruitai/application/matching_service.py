"""Application layer orchestrator for job/candidate matching following hexagonal architecture."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence

import structlog

from recruitai.application.batch import BatchFailure, map_with_failures
from recruitai.application.matching_config_service import MatchingConfigService
from recruitai.application.notifications import notify_safely
from recruitai.domain.entities.job import Job
from recruitai.domain.entities.job_match import JobMatch, MatchAnalysis, ReviewStatus
from recruitai.domain.entities.matching_config import MatchingConfig
from recruitai.domain.entities.resume import Resume, ResumeStatus
from recruitai.domain.exceptions import (
    AIAnalysisError,
    JobNotFoundError,
    MatchNotFoundError,
    ResumeNotFoundError,
)
from recruitai.domain.services.scoring_service import calculate_basic_match
from recruitai.domain.value_objects import JobId, MatchId, ResumeId, TenantId, UserId

if TYPE_CHECKING:
    from recruitai.application.dependencies.matching_dependencies import MatchingDependencies


logger = structlog.get_logger(__name__)


@dataclass
class MatchBatchResult:
    """Matches created in one run plus the resume ids that could not be matched."""

    matches: List[JobMatch] = field(default_factory=list)
    failed: List[BatchFailure[str]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.matches)


class MatchingApplicationService:
    """Coordinates candidate matching across AI analysis, scoring and persistence.

    For each resume the service tries the AI match analyzer once (bounded by a
    timeout) and falls back to the deterministic basic match on any analyzer
    failure. Tenant weights and thresholds then decide the stored score,
    auto-rejection and the resume status transition.
    """

    def __init__(self, dependencies: MatchingDependencies) -> None:
        self._deps = dependencies
        self._config_service = MatchingConfigService(dependencies.matching_config_repository)
        self._logger = structlog.get_logger(__name__)

    async def match_candidates(
        self,
        *,
        tenant_id: str,
        job_id: str,
        resume_ids: Sequence[str],
        requested_by: Optional[str] = None,
    ) -> MatchBatchResult:
        """Score each resume against the job and persist one JobMatch per success.

        Raises:
            JobNotFoundError: when the job does not exist in the tenant. Per-resume
                problems never raise; they are reported in ``failed``.
        """
        tenant = TenantId(tenant_id)
        job = await self._deps.job_repository.get_by_id(JobId(job_id), tenant)
        if job is None:
            raise JobNotFoundError(f"Job {job_id} not found")

        config = await self._config_service.get_or_create(tenant)

        self._logger.info(
            "Matching candidates",
            tenant_id=tenant_id,
            job_id=job_id,
            resume_count=len(resume_ids),
            ai_enabled=config.ai_enabled,
        )

        async def _match_one(resume_id: str) -> JobMatch:
            return await self._match_resume(
                tenant=tenant,
                job=job,
                resume_id=resume_id,
                config=config,
                requested_by=requested_by,
            )

        batch = await map_with_failures(resume_ids, _match_one, operation="match_candidate")

        self._logger.info(
            "Matching completed",
            tenant_id=tenant_id,
            job_id=job_id,
            matched=len(batch.succeeded),
            failed=len(batch.failed),
        )
        return MatchBatchResult(matches=batch.succeeded, failed=batch.failed)

    async def _match_resume(
        self,
        *,
        tenant: TenantId,
        job: Job,
        resume_id: str,
        config: MatchingConfig,
        requested_by: Optional[str],
    ) -> JobMatch:
        resume = await self._deps.resume_repository.get_by_id(ResumeId(resume_id), tenant)
        if resume is None:
            raise ResumeNotFoundError(f"Resume {resume_id} not found")

        analysis = await self._analyze(job, resume, config)
        outcome = self._deps.matching_service.evaluate(analysis, config)

        match = JobMatch.from_analysis(
            tenant_id=tenant,
            job_id=job.id,
            candidate_id=resume.id,
            analysis=analysis,
            match_score=outcome.match_score,
        )
        if outcome.auto_reject:
            match.auto_reject()

        match = await self._deps.match_repository.save(match)

        if outcome.meets_minimum:
            # The match is already stored at this point
            try:
                await self._deps.resume_repository.update_status(resume.id, tenant, ResumeStatus.MATCHED)
            except Exception as e:
                self._logger.error(
                    "Resume status update failed after match was saved",
                    tenant_id=str(tenant),
                    resume_id=resume_id,
                    match_id=str(match.id),
                    error=str(e),
                )

        if outcome.is_strong and config.notify_on_strong_match and requested_by:
            await notify_safely(
                self._deps.notification_service,
                lambda service: service.send_push_notification(
                    user_id=requested_by,
                    title="Strong candidate match",
                    message=(
                        f"{resume.candidate_name or 'A candidate'} scored "
                        f"{match.match_score} for {job.title}"
                    ),
                    data={"match_id": str(match.id), "job_id": str(job.id)},
                ),
                event="strong_match",
                tenant_id=str(tenant),
                match_id=str(match.id),
            )

        self._logger.debug(
            "Candidate matched",
            job_id=str(job.id),
            resume_id=resume_id,
            match_score=match.match_score,
            auto_rejected=outcome.auto_reject,
            used_fallback=analysis.used_fallback,
        )
        return match

    async def _analyze(self, job: Job, resume: Resume, config: MatchingConfig) -> MatchAnalysis:
        analyzer = self._deps.match_analyzer
        if not config.ai_enabled or analyzer is None:
            return calculate_basic_match(job, resume)

        try:
            return await asyncio.wait_for(
                analyzer.analyze(job, resume),
                timeout=self._deps.ai_timeout_seconds,
            )
        except (AIAnalysisError, asyncio.TimeoutError) as exc:
            self._logger.warning(
                "AI match analysis failed, using basic match",
                job_id=str(job.id),
                resume_id=str(resume.id),
                error=str(exc) or type(exc).__name__,
            )
            return calculate_basic_match(job, resume)

    async def list_matches(
        self,
        *,
        tenant_id: str,
        job_id: str,
        review_status: Optional[ReviewStatus] = None,
    ) -> List[JobMatch]:
        """List a job's matches, highest score first."""
        tenant = TenantId(tenant_id)
        job = await self._deps.job_repository.get_by_id(JobId(job_id), tenant)
        if job is None:
            raise JobNotFoundError(f"Job {job_id} not found")
        matches = await self._deps.match_repository.list_by_job(job.id, tenant, review_status)
        return sorted(matches, key=lambda m: m.match_score, reverse=True)

    async def get_match(self, *, tenant_id: str, match_id: str) -> JobMatch:
        match = await self._deps.match_repository.get_by_id(MatchId(match_id), TenantId(tenant_id))
        if match is None:
            raise MatchNotFoundError(f"Match {match_id} not found")
        return match

    async def review_match(
        self,
        *,
        tenant_id: str,
        match_id: str,
        reviewer_id: str,
        status: ReviewStatus,
        notes: Optional[str] = None,
    ) -> JobMatch:
        match = await self.get_match(tenant_id=tenant_id, match_id=match_id)
        match.review(status, UserId(reviewer_id), notes)
        saved = await self._deps.match_repository.save(match)
        self._logger.info(
            "Match reviewed",
            tenant_id=tenant_id,
            match_id=match_id,
            status=status.value,
        )
        return saved


__all__ = ["MatchBatchResult", "MatchingApplicationService"]

"""Recruiter dashboard figures built from the tenant's jobs, resumes, matches and interviews."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Dict, List, Optional

import structlog

from recruitai.domain.entities.job import JobStatus
from recruitai.domain.entities.job_match import JobMatch, MatchDecision
from recruitai.domain.value_objects import TenantId, UserId

if TYPE_CHECKING:
    from recruitai.application.dependencies.analytics_dependencies import AnalyticsDependencies


logger = structlog.get_logger(__name__)

TOP_MATCH_LIMIT = 5


@dataclass
class RecruiterOverview:
    my_jobs: int
    my_resumes: int
    matches: int
    my_interviews: int


@dataclass
class JobPerformance:
    job_id: str
    title: str
    status: JobStatus
    match_count: int
    created_at: datetime


@dataclass
class TopMatch:
    match_id: str
    job_id: str
    job_title: Optional[str]
    candidate_id: str
    candidate_name: Optional[str]
    match_score: int
    decision: MatchDecision


@dataclass
class RecruiterAnalytics:
    overview: RecruiterOverview
    jobs_performance: List[JobPerformance] = field(default_factory=list)
    interview_stats: Dict[str, int] = field(default_factory=dict)
    top_matches: List[TopMatch] = field(default_factory=list)


class AnalyticsApplicationService:
    """
    Read-only aggregates for the recruiter dashboard.

    Jobs, resumes and interviews are counted for the calling recruiter;
    matches and the top-match list cover the whole tenant, since matches
    carry no owner of their own.
    """

    def __init__(self, dependencies: AnalyticsDependencies) -> None:
        self._deps = dependencies

    async def get_recruiter_analytics(self, *, tenant_id: str, recruiter_id: str) -> RecruiterAnalytics:
        tenant = TenantId(tenant_id)
        recruiter = UserId(recruiter_id)

        jobs, my_resumes, match_total, interview_counts, top = await asyncio.gather(
            self._deps.job_repository.list_by_recruiter(tenant, recruiter),
            self._deps.resume_repository.count_by_uploader(tenant, recruiter),
            self._deps.match_repository.count_by_tenant(tenant),
            self._deps.interview_repository.count_by_status(tenant, invited_by=recruiter),
            self._deps.match_repository.list_top_by_tenant(tenant, limit=TOP_MATCH_LIMIT),
        )

        match_counts = await self._deps.match_repository.count_by_jobs(tenant, [job.id for job in jobs])
        performance = [
            JobPerformance(
                job_id=str(job.id),
                title=job.title,
                status=job.status,
                match_count=match_counts.get(job.id, 0),
                created_at=job.created_at,
            )
            for job in jobs
        ]
        performance.sort(key=lambda p: p.match_count, reverse=True)

        analytics = RecruiterAnalytics(
            overview=RecruiterOverview(
                my_jobs=len(jobs),
                my_resumes=my_resumes,
                matches=match_total,
                my_interviews=sum(interview_counts.values()),
            ),
            jobs_performance=performance,
            interview_stats={status.value: count for status, count in interview_counts.items()},
            top_matches=[await self._describe(tenant, match) for match in top],
        )
        logger.info(
            "Recruiter analytics computed",
            tenant_id=tenant_id,
            recruiter_id=recruiter_id,
            jobs=analytics.overview.my_jobs,
            matches=analytics.overview.matches,
        )
        return analytics

    async def _describe(self, tenant: TenantId, match: JobMatch) -> TopMatch:
        # Job or resume may have been deleted since the match was made
        job = await self._deps.job_repository.get_by_id(match.job_id, tenant)
        resume = await self._deps.resume_repository.get_by_id(match.candidate_id, tenant)
        return TopMatch(
            match_id=str(match.id),
            job_id=str(match.job_id),
            job_title=job.title if job else None,
            candidate_id=str(match.candidate_id),
            candidate_name=resume.candidate_name if resume else None,
            match_score=match.match_score,
            decision=match.ai_recommendation.decision,
        )


__all__ = [
    "AnalyticsApplicationService",
    "JobPerformance",
    "RecruiterAnalytics",
    "RecruiterOverview",
    "TopMatch",
]

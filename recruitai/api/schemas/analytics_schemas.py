"""Recruiter analytics API schemas."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from recruitai.application.analytics_service import JobPerformance, RecruiterAnalytics, TopMatch
from recruitai.domain.entities.job import JobStatus
from recruitai.domain.entities.job_match import MatchDecision


class RecruiterOverviewSchema(BaseModel):
    my_jobs: int
    my_resumes: int
    matches: int
    my_interviews: int


class JobPerformanceSchema(BaseModel):
    job_id: str
    title: str
    status: JobStatus
    match_count: int
    created_at: datetime

    @classmethod
    def from_domain(cls, performance: JobPerformance) -> "JobPerformanceSchema":
        return cls(
            job_id=performance.job_id,
            title=performance.title,
            status=performance.status,
            match_count=performance.match_count,
            created_at=performance.created_at,
        )


class TopMatchSchema(BaseModel):
    match_id: str
    job_id: str
    job_title: Optional[str] = None
    candidate_id: str
    candidate_name: Optional[str] = None
    match_score: int
    decision: MatchDecision

    @classmethod
    def from_domain(cls, match: TopMatch) -> "TopMatchSchema":
        return cls(
            match_id=match.match_id,
            job_id=match.job_id,
            job_title=match.job_title,
            candidate_id=match.candidate_id,
            candidate_name=match.candidate_name,
            match_score=match.match_score,
            decision=match.decision,
        )


class RecruiterAnalyticsResponse(BaseModel):
    overview: RecruiterOverviewSchema
    jobs_performance: List[JobPerformanceSchema] = Field(default_factory=list)
    interview_stats: Dict[str, int] = Field(default_factory=dict)
    top_matches: List[TopMatchSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, analytics: RecruiterAnalytics) -> "RecruiterAnalyticsResponse":
        overview = analytics.overview
        return cls(
            overview=RecruiterOverviewSchema(
                my_jobs=overview.my_jobs,
                my_resumes=overview.my_resumes,
                matches=overview.matches,
                my_interviews=overview.my_interviews,
            ),
            jobs_performance=[JobPerformanceSchema.from_domain(p) for p in analytics.jobs_performance],
            interview_stats=dict(analytics.interview_stats),
            top_matches=[TopMatchSchema.from_domain(m) for m in analytics.top_matches],
        )

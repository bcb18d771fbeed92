"""Job/candidate match records and the analysis that produces them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from recruitai.domain.value_objects import InterviewId, JobId, MatchId, ResumeId, TenantId, UserId


class MatchDecision(str, Enum):
    """Categorical recommendation attached to a match."""

    STRONG_MATCH = "strong_match"
    GOOD_MATCH = "good_match"
    POTENTIAL_MATCH = "potential_match"
    WEAK_MATCH = "weak_match"
    NO_MATCH = "no_match"


class ReviewStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    MAYBE = "maybe"


AUTO_REJECT_NOTE = "Auto-rejected: Below minimum threshold"


@dataclass
class FactorScore:
    """A single scored dimension with a short explanation."""

    score: float
    analysis: str = ""


@dataclass
class SkillMatch:
    score: float
    matched: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


@dataclass
class MatchAnalysis:
    """Per-dimension analysis of how well a resume fits a job."""

    overall_score: float
    skill_match: SkillMatch
    experience_match: FactorScore
    education_match: FactorScore
    culture_fit: FactorScore
    recommendation: MatchDecision
    reasoning: str
    confidence: float
    used_fallback: bool = False


@dataclass
class MatchDetails:
    skill_match: SkillMatch
    experience_match: FactorScore
    education_match: FactorScore
    culture_fit: FactorScore
    overall_fit: int = 0


@dataclass
class AIRecommendation:
    decision: MatchDecision
    reasoning: str = ""
    confidence: float = 0.0
    used_fallback: bool = False


@dataclass
class RecruiterReview:
    status: ReviewStatus = ReviewStatus.PENDING
    notes: Optional[str] = None
    reviewed_by: Optional[UserId] = None
    reviewed_at: Optional[datetime] = None


@dataclass
class JobMatch:
    """Aggregate root recording one scoring of a candidate against a job."""

    id: MatchId
    tenant_id: TenantId
    job_id: JobId
    candidate_id: ResumeId
    match_score: int
    match_details: MatchDetails
    ai_recommendation: AIRecommendation
    skill_gaps: List[str] = field(default_factory=list)
    strengths: List[str] = field(default_factory=list)
    recruiter_review: RecruiterReview = field(default_factory=RecruiterReview)
    interview_scheduled: bool = False
    interview_id: Optional[InterviewId] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.match_score < 0 or self.match_score > 100:
            raise ValueError("match_score must be between 0 and 100")

    @classmethod
    def from_analysis(
        cls,
        *,
        tenant_id: TenantId,
        job_id: JobId,
        candidate_id: ResumeId,
        analysis: MatchAnalysis,
        match_score: int,
    ) -> "JobMatch":
        return cls(
            id=MatchId.generate(),
            tenant_id=tenant_id,
            job_id=job_id,
            candidate_id=candidate_id,
            match_score=match_score,
            match_details=MatchDetails(
                skill_match=analysis.skill_match,
                experience_match=analysis.experience_match,
                education_match=analysis.education_match,
                culture_fit=analysis.culture_fit,
                overall_fit=match_score,
            ),
            ai_recommendation=AIRecommendation(
                decision=analysis.recommendation,
                reasoning=analysis.reasoning,
                confidence=analysis.confidence,
                used_fallback=analysis.used_fallback,
            ),
            skill_gaps=list(analysis.skill_match.missing),
            strengths=list(analysis.skill_match.matched),
        )

    @property
    def is_auto_rejected(self) -> bool:
        return (
            self.recruiter_review.status == ReviewStatus.REJECTED
            and self.recruiter_review.reviewed_by is None
            and self.recruiter_review.notes == AUTO_REJECT_NOTE
        )

    def auto_reject(self) -> None:
        """Reject without a human reviewer; the AI decision is left untouched."""
        self.recruiter_review = RecruiterReview(status=ReviewStatus.REJECTED, notes=AUTO_REJECT_NOTE)
        self.updated_at = datetime.now(timezone.utc)

    def review(self, status: ReviewStatus, reviewer: UserId, notes: Optional[str] = None) -> None:
        now = datetime.now(timezone.utc)
        self.recruiter_review = RecruiterReview(
            status=status,
            notes=notes,
            reviewed_by=reviewer,
            reviewed_at=now,
        )
        self.updated_at = now

    def link_interview(self, interview_id: InterviewId) -> None:
        self.interview_scheduled = True
        self.interview_id = interview_id
        self.updated_at = datetime.now(timezone.utc)

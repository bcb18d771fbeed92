"""Matching and matching-configuration API schemas."""

from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from recruitai.domain.entities.job_match import JobMatch, MatchDecision, ReviewStatus
from recruitai.domain.entities.matching_config import MatchingConfig


class MatchRequest(BaseModel):
    job_id: str
    resume_ids: List[str] = Field(..., min_length=1, description="Resumes to score against the job")


class FactorSchema(BaseModel):
    score: float
    analysis: str = ""


class SkillMatchSchema(BaseModel):
    score: float
    matched: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)


class MatchDetailsSchema(BaseModel):
    skill_match: SkillMatchSchema
    experience_match: FactorSchema
    education_match: FactorSchema
    culture_fit: FactorSchema
    overall_fit: int = 0


class AIRecommendationSchema(BaseModel):
    decision: MatchDecision
    reasoning: str = ""
    confidence: float = 0.0
    used_fallback: bool = False


class RecruiterReviewSchema(BaseModel):
    status: ReviewStatus
    notes: Optional[str] = None
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None


class MatchResponse(BaseModel):
    id: str
    job_id: str
    candidate_id: str
    match_score: int
    match_details: MatchDetailsSchema
    ai_recommendation: AIRecommendationSchema
    skill_gaps: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    recruiter_review: RecruiterReviewSchema
    interview_scheduled: bool = False
    interview_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, match: JobMatch) -> "MatchResponse":
        details = match.match_details
        review = match.recruiter_review
        return cls(
            id=str(match.id),
            job_id=str(match.job_id),
            candidate_id=str(match.candidate_id),
            match_score=match.match_score,
            match_details=MatchDetailsSchema(
                skill_match=SkillMatchSchema(
                    score=details.skill_match.score,
                    matched=details.skill_match.matched,
                    missing=details.skill_match.missing,
                ),
                experience_match=FactorSchema(**asdict(details.experience_match)),
                education_match=FactorSchema(**asdict(details.education_match)),
                culture_fit=FactorSchema(**asdict(details.culture_fit)),
                overall_fit=details.overall_fit,
            ),
            ai_recommendation=AIRecommendationSchema(
                decision=match.ai_recommendation.decision,
                reasoning=match.ai_recommendation.reasoning,
                confidence=match.ai_recommendation.confidence,
                used_fallback=match.ai_recommendation.used_fallback,
            ),
            skill_gaps=match.skill_gaps,
            strengths=match.strengths,
            recruiter_review=RecruiterReviewSchema(
                status=review.status,
                notes=review.notes,
                reviewed_by=str(review.reviewed_by) if review.reviewed_by else None,
                reviewed_at=review.reviewed_at,
            ),
            interview_scheduled=match.interview_scheduled,
            interview_id=str(match.interview_id) if match.interview_id else None,
            created_at=match.created_at,
        )


class MatchFailureSchema(BaseModel):
    resume_id: str
    reason: str


class MatchBatchResponse(BaseModel):
    success: bool = True
    count: int
    matches: List[MatchResponse]
    failed: List[MatchFailureSchema] = Field(default_factory=list)


class MatchReviewRequest(BaseModel):
    status: ReviewStatus
    notes: Optional[str] = Field(default=None, max_length=2000)


class MatchingConfigResponse(BaseModel):
    tenant_id: str
    thresholds: Dict[str, float]
    weights: Dict[str, float]
    auto_matching_enabled: bool
    ai_enabled: bool
    notify_on_strong_match: bool
    updated_at: datetime

    @classmethod
    def from_domain(cls, config: MatchingConfig) -> "MatchingConfigResponse":
        return cls(
            tenant_id=str(config.tenant_id),
            thresholds=asdict(config.thresholds),
            weights=asdict(config.weights),
            auto_matching_enabled=config.auto_matching_enabled,
            ai_enabled=config.ai_enabled,
            notify_on_strong_match=config.notify_on_strong_match,
            updated_at=config.updated_at,
        )


class MatchingConfigUpdate(BaseModel):
    """Partial update; weights are validated as a whole after merging."""

    model_config = ConfigDict(allow_inf_nan=False)

    thresholds: Optional[Dict[str, float]] = None
    weights: Optional[Dict[str, float]] = None
    auto_matching_enabled: Optional[bool] = None
    ai_enabled: Optional[bool] = None
    notify_on_strong_match: Optional[bool] = None

    def to_changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

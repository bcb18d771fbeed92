"""
Mapper between JobMatch domain entities and JobMatchTable persistence models.
"""

from __future__ import annotations

from typing import Any, Dict

from recruitai.domain.entities.job_match import (
    AIRecommendation,
    FactorScore,
    JobMatch,
    MatchDecision,
    MatchDetails,
    RecruiterReview,
    ReviewStatus,
    SkillMatch,
)
from recruitai.domain.value_objects import InterviewId, JobId, MatchId, ResumeId, TenantId, UserId
from recruitai.infrastructure.persistence.models.job_match_table import JobMatchTable


def _factor_to_json(factor: FactorScore) -> Dict[str, Any]:
    return {"score": factor.score, "analysis": factor.analysis}


def _factor_from_json(data: Dict[str, Any]) -> FactorScore:
    return FactorScore(score=data.get("score", 0), analysis=data.get("analysis", ""))


def _overall_fit(details: Dict[str, Any], match_score: int) -> int:
    value = details.get("overall_fit")
    # Older rows hold reasoning text here instead of a score
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value)
    return match_score


class JobMatchMapper:
    """Maps between JobMatch domain entities and JobMatchTable persistence models."""

    @staticmethod
    def to_domain(table: JobMatchTable) -> JobMatch:
        details = table.match_details or {}
        skill = details.get("skill_match") or {}
        recommendation = table.ai_recommendation or {}

        return JobMatch(
            id=MatchId(table.id),
            tenant_id=TenantId(table.tenant_id),
            job_id=JobId(table.job_id),
            candidate_id=ResumeId(table.candidate_id),
            match_score=table.match_score,
            match_details=MatchDetails(
                skill_match=SkillMatch(
                    score=skill.get("score", 0),
                    matched=list(skill.get("matched", [])),
                    missing=list(skill.get("missing", [])),
                ),
                experience_match=_factor_from_json(details.get("experience_match") or {}),
                education_match=_factor_from_json(details.get("education_match") or {}),
                culture_fit=_factor_from_json(details.get("culture_fit") or {}),
                overall_fit=_overall_fit(details, table.match_score),
            ),
            ai_recommendation=AIRecommendation(
                decision=MatchDecision(recommendation.get("decision", MatchDecision.NO_MATCH.value)),
                reasoning=recommendation.get("reasoning", ""),
                confidence=recommendation.get("confidence", 0.0),
                used_fallback=recommendation.get("used_fallback", False),
            ),
            skill_gaps=list(table.skill_gaps or []),
            strengths=list(table.strengths or []),
            recruiter_review=RecruiterReview(
                status=ReviewStatus(table.review_status),
                notes=table.review_notes,
                reviewed_by=UserId(table.reviewed_by) if table.reviewed_by else None,
                reviewed_at=table.reviewed_at,
            ),
            interview_scheduled=table.interview_scheduled,
            interview_id=InterviewId(table.interview_id) if table.interview_id else None,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def _values(entity: JobMatch) -> Dict[str, Any]:
        details = entity.match_details
        review = entity.recruiter_review
        return {
            "tenant_id": entity.tenant_id.value,
            "job_id": entity.job_id.value,
            "candidate_id": entity.candidate_id.value,
            "match_score": entity.match_score,
            "match_details": {
                "skill_match": {
                    "score": details.skill_match.score,
                    "matched": list(details.skill_match.matched),
                    "missing": list(details.skill_match.missing),
                },
                "experience_match": _factor_to_json(details.experience_match),
                "education_match": _factor_to_json(details.education_match),
                "culture_fit": _factor_to_json(details.culture_fit),
                "overall_fit": details.overall_fit,
            },
            "ai_recommendation": {
                "decision": entity.ai_recommendation.decision.value,
                "reasoning": entity.ai_recommendation.reasoning,
                "confidence": entity.ai_recommendation.confidence,
                "used_fallback": entity.ai_recommendation.used_fallback,
            },
            "skill_gaps": list(entity.skill_gaps),
            "strengths": list(entity.strengths),
            "review_status": review.status.value,
            "review_notes": review.notes,
            "reviewed_by": review.reviewed_by.value if review.reviewed_by else None,
            "reviewed_at": review.reviewed_at,
            "interview_scheduled": entity.interview_scheduled,
            "interview_id": entity.interview_id.value if entity.interview_id else None,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    @staticmethod
    def to_table(entity: JobMatch) -> JobMatchTable:
        return JobMatchTable(id=entity.id.value, **JobMatchMapper._values(entity))

    @staticmethod
    def update_table_from_domain(table: JobMatchTable, entity: JobMatch) -> JobMatchTable:
        for key, value in JobMatchMapper._values(entity).items():
            if key != "created_at":
                setattr(table, key, value)
        return table


__all__ = ["JobMatchMapper"]

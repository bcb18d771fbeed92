"""Pure domain services."""

from .interview_scoring_service import (
    empty_assessment,
    fallback_answer_analysis,
    fallback_assessment,
    overall_score,
)
from .matching_service import IMatchingService, MatchingService, MatchOutcome
from .resume_extraction import extract_basic_info
from .scoring_service import (
    SkillScore,
    calculate_basic_match,
    experience_score,
    round_half_up,
    skill_score,
)

__all__ = [
    "IMatchingService",
    "MatchingService",
    "MatchOutcome",
    "SkillScore",
    "calculate_basic_match",
    "experience_score",
    "round_half_up",
    "skill_score",
    "empty_assessment",
    "fallback_answer_analysis",
    "fallback_assessment",
    "overall_score",
    "extract_basic_info",
]

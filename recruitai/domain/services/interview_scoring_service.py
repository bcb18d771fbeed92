"""Interview scoring rules: overall score and the deterministic fallbacks."""

from __future__ import annotations

from typing import List, Optional, Sequence

from recruitai.domain.entities.interview import (
    AnswerAnalysis,
    HiringRecommendation,
    InterviewAssessment,
    InterviewQuestion,
    Sentiment,
)
from recruitai.domain.services.scoring_service import round_half_up

FALLBACK_ANSWER_SCORE = 70
FALLBACK_ANSWER_CONFIDENCE = 0.3
FALLBACK_ASSESSMENT_CONFIDENCE = 0.5
PASSING_MEAN_SCORE = 70


def answered(questions: Sequence[InterviewQuestion]) -> List[InterviewQuestion]:
    return [q for q in questions if q.is_answered]


def overall_score(questions: Sequence[InterviewQuestion]) -> Optional[int]:
    """
    Rounded mean of the AI scores of answered questions.

    Unanswered questions are excluded from the denominator. An answered
    question without a score counts as 0. Returns None when nothing was
    answered.
    """
    scored = answered(questions)
    if not scored:
        return None
    total = sum(q.ai_score or 0 for q in scored)
    return round_half_up(total / len(scored))


def fallback_answer_analysis() -> AnswerAnalysis:
    return AnswerAnalysis(
        score=FALLBACK_ANSWER_SCORE,
        strengths=["Provided a response"],
        weaknesses=["Could not perform detailed analysis"],
        key_points=[],
        sentiment=Sentiment.NEUTRAL,
        confidence=FALLBACK_ANSWER_CONFIDENCE,
        feedback="Response recorded",
        used_fallback=True,
    )


def empty_assessment() -> InterviewAssessment:
    """Assessment for an interview completed without any answers."""
    return InterviewAssessment(
        technical_score=0,
        communication_score=0,
        problem_solving_score=0,
        culture_fit_score=0,
        strengths=[],
        concerns=["No questions answered"],
        key_insights=[],
        recommendation=HiringRecommendation.NO,
        confidence=0,
    )


def fallback_assessment(mean_score: int) -> InterviewAssessment:
    """Derive every sub-score from the overall mean when AI assessment fails."""
    return InterviewAssessment(
        technical_score=mean_score,
        communication_score=mean_score,
        problem_solving_score=mean_score,
        culture_fit_score=mean_score,
        strengths=["Completed the interview"],
        concerns=[],
        key_insights=[],
        recommendation=(
            HiringRecommendation.YES if mean_score >= PASSING_MEAN_SCORE else HiringRecommendation.MAYBE
        ),
        confidence=FALLBACK_ASSESSMENT_CONFIDENCE,
        used_fallback=True,
    )

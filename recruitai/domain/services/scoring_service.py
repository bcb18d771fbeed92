"""Deterministic scoring primitives used when AI analysis is unavailable.

Every function here is pure: the same job and resume always produce the same
result, which makes the fallback path reproducible and easy to test.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from recruitai.domain.entities.job import ExperienceRequirement, Job
from recruitai.domain.entities.job_match import FactorScore, MatchAnalysis, MatchDecision, SkillMatch
from recruitai.domain.entities.resume import Resume

NO_REQUIREMENT_SCORE = 50.0
UNDER_EXPERIENCE_FACTOR = 0.7
OVER_EXPERIENCE_PENALTY_PER_YEAR = 5
OVER_EXPERIENCE_FLOOR = 70.0
DEFAULT_MAX_YEARS = 100.0

BASIC_SKILL_WEIGHT = 0.6
BASIC_EXPERIENCE_WEIGHT = 0.4
PLACEHOLDER_EDUCATION_SCORE = 70
PLACEHOLDER_CULTURE_FIT_SCORE = 60
BASIC_CONFIDENCE = 0.5


@dataclass
class SkillScore:
    score: float
    matched: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def skill_score(required: Iterable[str], candidate: Iterable[str]) -> SkillScore:
    """
    Score candidate skills against required skills.

    Matching is case-insensitive substring overlap in either direction, so
    "react" matches "React.js" and vice versa. Matched and missing skills are
    reported in their original spelling from the requirement list.
    """
    required_list = [s for s in required if s]
    if not required_list:
        return SkillScore(score=NO_REQUIREMENT_SCORE)

    candidate_lower = [s.lower() for s in candidate if s]
    matched: List[str] = []
    missing: List[str] = []

    for skill in required_list:
        needle = skill.lower()
        if any(needle in have or have in needle for have in candidate_lower):
            matched.append(skill)
        else:
            missing.append(skill)

    return SkillScore(
        score=len(matched) / len(required_list) * 100,
        matched=matched,
        missing=missing,
    )


def experience_score(required: Optional[ExperienceRequirement], actual_years: Optional[float]) -> float:
    """
    Score actual experience against a required range.

    - no requirement, or no (or zero) experience recorded: 50
    - below the minimum: proportional, scaled by 0.7, floored at 0
    - above the maximum: 100 minus 5 per excess year, floored at 70
    - within the range: 100

    A missing or zero maximum means ``DEFAULT_MAX_YEARS``.
    """
    if required is None or not actual_years:
        return NO_REQUIREMENT_SCORE

    min_years = required.min or 0
    max_years = required.max or DEFAULT_MAX_YEARS

    if actual_years < min_years:
        return max(0.0, actual_years / min_years * 100 * UNDER_EXPERIENCE_FACTOR)
    if actual_years > max_years:
        excess = actual_years - max_years
        return max(OVER_EXPERIENCE_FLOOR, 100 - excess * OVER_EXPERIENCE_PENALTY_PER_YEAR)
    return 100.0


def recommendation_for(score: float) -> MatchDecision:
    if score >= 80:
        return MatchDecision.STRONG_MATCH
    if score >= 60:
        return MatchDecision.GOOD_MATCH
    if score >= 40:
        return MatchDecision.POTENTIAL_MATCH
    return MatchDecision.WEAK_MATCH


def calculate_basic_match(job: Job, resume: Resume) -> MatchAnalysis:
    """
    Algorithmic match used as the AI fallback.

    Combines skill (60%) and experience (40%) scores with fixed weights;
    tenant weights are not consulted here. Education and culture fit are not
    analysed and carry fixed placeholder scores.
    """
    skills = skill_score(job.required_skills, resume.skills)
    experience = experience_score(job.experience_in_years(), resume.experience_years)
    overall = skills.score * BASIC_SKILL_WEIGHT + experience * BASIC_EXPERIENCE_WEIGHT

    return MatchAnalysis(
        overall_score=round_half_up(overall),
        skill_match=SkillMatch(
            score=round_half_up(skills.score),
            matched=skills.matched,
            missing=skills.missing,
        ),
        experience_match=FactorScore(
            score=round_half_up(experience),
            analysis="Basic experience comparison",
        ),
        education_match=FactorScore(
            score=PLACEHOLDER_EDUCATION_SCORE,
            analysis="Education match not analyzed",
        ),
        culture_fit=FactorScore(
            score=PLACEHOLDER_CULTURE_FIT_SCORE,
            analysis="Culture fit not analyzed",
        ),
        recommendation=recommendation_for(overall),
        reasoning="Basic algorithmic matching",
        confidence=BASIC_CONFIDENCE,
        used_fallback=True,
    )

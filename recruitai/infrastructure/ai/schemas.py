"""Strict response schemas for AI analyzer output.

The model is asked for camelCase JSON; anything that does not validate here is
treated as an analysis failure by the analyzers.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class _AIResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SkillMatchResponse(_AIResponse):
    score: float = Field(ge=0, le=100)
    matched: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)


class FactorResponse(_AIResponse):
    score: float = Field(ge=0, le=100)
    analysis: str = ""


class MatchAnalysisResponse(_AIResponse):
    overall_score: float = Field(alias="overallScore", ge=0, le=100)
    skill_match: SkillMatchResponse = Field(alias="skillMatch")
    experience_match: FactorResponse = Field(alias="experienceMatch")
    education_match: FactorResponse = Field(alias="educationMatch")
    culture_fit: FactorResponse = Field(alias="cultureFit")
    recommendation: Literal["strong_match", "good_match", "potential_match", "weak_match", "no_match"]
    reasoning: str = ""
    confidence: float = Field(ge=0, le=1)


class ResumeAnalysisResponse(_AIResponse):
    extracted_skills: List[str] = Field(default_factory=list, alias="extractedSkills")
    experience_years: Optional[float] = Field(default=None, alias="experienceYears", ge=0)
    key_strengths: List[str] = Field(default_factory=list, alias="keyStrengths")
    education_level: Optional[str] = Field(default=None, alias="educationLevel")
    career_level: Optional[Literal["entry", "mid", "senior", "executive"]] = Field(
        default=None, alias="careerLevel"
    )


class AnswerAnalysisResponse(_AIResponse):
    score: float = Field(ge=0, le=100)
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    key_points: List[str] = Field(default_factory=list, alias="keyPoints")
    sentiment: Literal["positive", "neutral", "negative"] = "neutral"
    confidence: float = Field(ge=0, le=1)
    feedback: str = ""


class InterviewAssessmentResponse(_AIResponse):
    technical_score: float = Field(alias="technicalScore", ge=0, le=100)
    communication_score: float = Field(alias="communicationScore", ge=0, le=100)
    problem_solving_score: float = Field(alias="problemSolvingScore", ge=0, le=100)
    culture_fit_score: float = Field(alias="cultureFitScore", ge=0, le=100)
    strengths: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)
    key_insights: List[str] = Field(default_factory=list, alias="keyInsights")
    recommendation: Literal["strong_yes", "yes", "maybe", "no", "strong_no"]
    confidence: float = Field(ge=0, le=1)

"""Domain entities exposed for application layer use."""

from .interview import (
    AnswerAnalysis,
    HiringRecommendation,
    Interview,
    InterviewAssessment,
    InterviewFeedback,
    InterviewQuestion,
    InterviewStatus,
    QuestionType,
    Sentiment,
)
from .interview_template import InterviewTemplate, TemplateQuestion
from .job import (
    EmploymentType,
    ExperienceRequirement,
    ExperienceUnit,
    Job,
    JobLocation,
    JobRequirements,
    JobStatus,
    LocationType,
    SalaryRange,
)
from .job_match import (
    AIRecommendation,
    FactorScore,
    JobMatch,
    MatchAnalysis,
    MatchDecision,
    MatchDetails,
    RecruiterReview,
    ReviewStatus,
    SkillMatch,
)
from .matching_config import (
    ConfigValidationResult,
    MatchingConfig,
    MatchingThresholds,
    MatchingWeights,
    validate_matching_config,
)
from .resume import (
    CandidateInfo,
    CareerLevel,
    ParsedResumeData,
    ProcessingStatus,
    Resume,
    ResumeAnalysis,
    ResumeSource,
    ResumeStatus,
)
from .user import CallerIdentity, UserRole

__all__ = [
    # Interview
    "AnswerAnalysis",
    "HiringRecommendation",
    "Interview",
    "InterviewAssessment",
    "InterviewFeedback",
    "InterviewQuestion",
    "InterviewStatus",
    "QuestionType",
    "Sentiment",
    "InterviewTemplate",
    "TemplateQuestion",
    # Job
    "EmploymentType",
    "ExperienceRequirement",
    "ExperienceUnit",
    "Job",
    "JobLocation",
    "JobRequirements",
    "JobStatus",
    "LocationType",
    "SalaryRange",
    # Matching
    "AIRecommendation",
    "FactorScore",
    "JobMatch",
    "MatchAnalysis",
    "MatchDecision",
    "MatchDetails",
    "RecruiterReview",
    "ReviewStatus",
    "SkillMatch",
    "ConfigValidationResult",
    "MatchingConfig",
    "MatchingThresholds",
    "MatchingWeights",
    "validate_matching_config",
    # Resume
    "CandidateInfo",
    "CareerLevel",
    "ParsedResumeData",
    "ProcessingStatus",
    "Resume",
    "ResumeAnalysis",
    "ResumeSource",
    "ResumeStatus",
    # Users
    "CallerIdentity",
    "UserRole",
]

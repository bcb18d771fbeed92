"""Domain repository abstractions."""

from .interview_repository import IInterviewRepository, IInterviewTemplateRepository
from .job_repository import IJobRepository
from .match_repository import IMatchRepository
from .matching_config_repository import IMatchingConfigRepository
from .resume_repository import IResumeRepository

__all__ = [
    "IInterviewRepository",
    "IInterviewTemplateRepository",
    "IJobRepository",
    "IMatchRepository",
    "IMatchingConfigRepository",
    "IResumeRepository",
]

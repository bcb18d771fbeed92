"""PostgreSQL repository adapters."""

from recruitai.infrastructure.persistence.repositories.interview_repository import (
    PostgresInterviewRepository,
    PostgresInterviewTemplateRepository,
)
from recruitai.infrastructure.persistence.repositories.job_repository import PostgresJobRepository
from recruitai.infrastructure.persistence.repositories.match_repository import PostgresMatchRepository
from recruitai.infrastructure.persistence.repositories.matching_config_repository import (
    PostgresMatchingConfigRepository,
)
from recruitai.infrastructure.persistence.repositories.resume_repository import PostgresResumeRepository

__all__ = [
    "PostgresInterviewRepository",
    "PostgresInterviewTemplateRepository",
    "PostgresJobRepository",
    "PostgresMatchRepository",
    "PostgresMatchingConfigRepository",
    "PostgresResumeRepository",
]

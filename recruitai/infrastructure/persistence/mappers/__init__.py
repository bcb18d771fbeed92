"""Mappers between domain entities and SQLModel tables."""

from recruitai.infrastructure.persistence.mappers.interview_mapper import (
    InterviewMapper,
    InterviewTemplateMapper,
)
from recruitai.infrastructure.persistence.mappers.job_mapper import JobMapper
from recruitai.infrastructure.persistence.mappers.job_match_mapper import JobMatchMapper
from recruitai.infrastructure.persistence.mappers.matching_config_mapper import MatchingConfigMapper
from recruitai.infrastructure.persistence.mappers.resume_mapper import ResumeMapper

__all__ = [
    "InterviewMapper",
    "InterviewTemplateMapper",
    "JobMapper",
    "JobMatchMapper",
    "MatchingConfigMapper",
    "ResumeMapper",
]

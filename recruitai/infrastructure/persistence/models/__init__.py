"""SQLModel table definitions; importing this package registers every table."""

from .interview_table import InterviewTable, InterviewTemplateTable
from .job_match_table import JobMatchTable
from .job_table import JobTable
from .matching_config_table import MatchingConfigTable
from .resume_table import ResumeTable

__all__ = [
    "InterviewTable",
    "InterviewTemplateTable",
    "JobMatchTable",
    "JobTable",
    "MatchingConfigTable",
    "ResumeTable",
]

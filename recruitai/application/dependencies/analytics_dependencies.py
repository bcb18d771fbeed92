"""Dependency contract for the recruiter analytics service."""

from __future__ import annotations

from dataclasses import dataclass

from recruitai.domain.repositories.interview_repository import IInterviewRepository
from recruitai.domain.repositories.job_repository import IJobRepository
from recruitai.domain.repositories.match_repository import IMatchRepository
from recruitai.domain.repositories.resume_repository import IResumeRepository


@dataclass
class AnalyticsDependencies:
    job_repository: IJobRepository
    resume_repository: IResumeRepository
    match_repository: IMatchRepository
    interview_repository: IInterviewRepository


__all__ = ["AnalyticsDependencies"]

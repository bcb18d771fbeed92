"""Dependency contracts for job and resume application services."""

from __future__ import annotations

from dataclasses import dataclass

from recruitai.domain.interfaces import IResumeAnalyzer
from recruitai.domain.repositories.job_repository import IJobRepository
from recruitai.domain.repositories.resume_repository import IResumeRepository


@dataclass
class JobDependencies:
    job_repository: IJobRepository


@dataclass
class ResumeDependencies:
    resume_repository: IResumeRepository
    resume_analyzer: IResumeAnalyzer | None = None
    ai_timeout_seconds: float = 30.0


__all__ = ["JobDependencies", "ResumeDependencies"]

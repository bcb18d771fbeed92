"""Dependency contracts for InterviewApplicationService."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from recruitai.domain.interfaces import IInterviewAnalyzer, INotificationService
from recruitai.domain.repositories.interview_repository import (
    IInterviewRepository,
    IInterviewTemplateRepository,
)
from recruitai.domain.repositories.job_repository import IJobRepository
from recruitai.domain.repositories.match_repository import IMatchRepository
from recruitai.domain.repositories.resume_repository import IResumeRepository


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InterviewSettings:
    frontend_url: str = "http://localhost:3001"
    default_expiry_days: int = 7
    token_bytes: int = 32
    ai_timeout_seconds: float = 30.0

    def interview_link(self, access_token: str) -> str:
        return f"{self.frontend_url.rstrip('/')}/interview/{access_token}"


@dataclass
class InterviewDependencies:
    """Dependencies required by InterviewApplicationService."""

    interview_repository: IInterviewRepository
    template_repository: IInterviewTemplateRepository
    match_repository: IMatchRepository
    resume_repository: IResumeRepository
    job_repository: IJobRepository

    interview_analyzer: IInterviewAnalyzer | None = None
    notification_service: INotificationService | None = None
    settings: InterviewSettings = field(default_factory=InterviewSettings)
    clock: Callable[[], datetime] = utc_now


__all__ = ["InterviewDependencies", "InterviewSettings", "utc_now"]

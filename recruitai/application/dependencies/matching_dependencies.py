"""Dependency contracts for MatchingApplicationService."""

from __future__ import annotations

from dataclasses import dataclass, field

from recruitai.domain.interfaces import IMatchAnalyzer, INotificationService
from recruitai.domain.repositories.job_repository import IJobRepository
from recruitai.domain.repositories.match_repository import IMatchRepository
from recruitai.domain.repositories.matching_config_repository import IMatchingConfigRepository
from recruitai.domain.repositories.resume_repository import IResumeRepository
from recruitai.domain.services.matching_service import IMatchingService, MatchingService


@dataclass
class MatchingDependencies:
    """Dependencies required by MatchingApplicationService."""

    # Core repositories
    job_repository: IJobRepository
    resume_repository: IResumeRepository
    match_repository: IMatchRepository
    matching_config_repository: IMatchingConfigRepository

    # Optional collaborators
    match_analyzer: IMatchAnalyzer | None = None
    notification_service: INotificationService | None = None
    matching_service: IMatchingService = field(default_factory=MatchingService)
    ai_timeout_seconds: float = 30.0



__all__ = ["MatchingDependencies"]

"""Repository provider utilities."""

from __future__ import annotations

import asyncio
from typing import Callable, Dict, TypeVar

from recruitai.database.sqlmodel_engine import get_sqlmodel_db_manager
from recruitai.domain.repositories.interview_repository import (
    IInterviewRepository,
    IInterviewTemplateRepository,
)
from recruitai.domain.repositories.job_repository import IJobRepository
from recruitai.domain.repositories.match_repository import IMatchRepository
from recruitai.domain.repositories.matching_config_repository import IMatchingConfigRepository
from recruitai.domain.repositories.resume_repository import IResumeRepository
from recruitai.infrastructure.persistence.repositories import (
    PostgresInterviewRepository,
    PostgresInterviewTemplateRepository,
    PostgresJobRepository,
    PostgresMatchingConfigRepository,
    PostgresMatchRepository,
    PostgresResumeRepository,
)

T = TypeVar("T")

_repositories: Dict[str, object] = {}
_lock = asyncio.Lock()


async def _get_or_create(key: str, factory: Callable[..., T]) -> T:
    if key in _repositories:
        return _repositories[key]  # type: ignore[return-value]

    async with _lock:
        if key not in _repositories:
            _repositories[key] = factory(get_sqlmodel_db_manager())
        return _repositories[key]  # type: ignore[return-value]


async def get_job_repository() -> IJobRepository:
    return await _get_or_create("job", PostgresJobRepository)


async def get_resume_repository() -> IResumeRepository:
    return await _get_or_create("resume", PostgresResumeRepository)


async def get_match_repository() -> IMatchRepository:
    return await _get_or_create("match", PostgresMatchRepository)


async def get_matching_config_repository() -> IMatchingConfigRepository:
    return await _get_or_create("matching_config", PostgresMatchingConfigRepository)


async def get_interview_repository() -> IInterviewRepository:
    return await _get_or_create("interview", PostgresInterviewRepository)


async def get_interview_template_repository() -> IInterviewTemplateRepository:
    return await _get_or_create("interview_template", PostgresInterviewTemplateRepository)


async def reset_repositories() -> None:
    """Reset cached repositories (useful for tests)."""
    async with _lock:
        _repositories.clear()


__all__ = [
    "get_interview_repository",
    "get_interview_template_repository",
    "get_job_repository",
    "get_match_repository",
    "get_matching_config_repository",
    "get_resume_repository",
    "reset_repositories",
]

"""Concrete factories for job and resume service dependencies."""

from __future__ import annotations

from recruitai.application.dependencies.resume_dependencies import JobDependencies, ResumeDependencies
from recruitai.core.config import get_settings
from recruitai.infrastructure.providers.ai_provider import get_resume_analyzer
from recruitai.infrastructure.providers.repository_provider import (
    get_job_repository,
    get_resume_repository,
)


async def get_job_dependencies() -> JobDependencies:
    return JobDependencies(job_repository=await get_job_repository())


async def get_resume_dependencies() -> ResumeDependencies:
    return ResumeDependencies(
        resume_repository=await get_resume_repository(),
        resume_analyzer=await get_resume_analyzer(),
        ai_timeout_seconds=get_settings().AI_REQUEST_TIMEOUT,
    )


__all__ = ["get_job_dependencies", "get_resume_dependencies"]

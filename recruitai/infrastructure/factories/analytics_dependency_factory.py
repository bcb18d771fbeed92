"""Concrete factory for recruiter analytics dependencies."""

from __future__ import annotations

from recruitai.application.dependencies.analytics_dependencies import AnalyticsDependencies
from recruitai.infrastructure.providers.repository_provider import (
    get_interview_repository,
    get_job_repository,
    get_match_repository,
    get_resume_repository,
)


async def get_analytics_dependencies() -> AnalyticsDependencies:
    return AnalyticsDependencies(
        job_repository=await get_job_repository(),
        resume_repository=await get_resume_repository(),
        match_repository=await get_match_repository(),
        interview_repository=await get_interview_repository(),
    )


__all__ = ["get_analytics_dependencies"]

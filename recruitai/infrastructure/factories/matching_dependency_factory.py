"""Concrete factory for creating MatchingApplicationService dependencies."""

from __future__ import annotations

from recruitai.application.dependencies.matching_dependencies import MatchingDependencies
from recruitai.core.config import get_settings
from recruitai.infrastructure.providers.ai_provider import get_match_analyzer
from recruitai.infrastructure.providers.notification_provider import get_notification_service
from recruitai.infrastructure.providers.repository_provider import (
    get_job_repository,
    get_match_repository,
    get_matching_config_repository,
    get_resume_repository,
)


async def get_matching_dependencies() -> MatchingDependencies:
    """
    Construct dependencies for the matching application service.

    The match analyzer is ``None`` when OpenAI is not configured, which makes
    every match use the basic algorithmic scorer.
    """
    settings = get_settings()
    return MatchingDependencies(
        job_repository=await get_job_repository(),
        resume_repository=await get_resume_repository(),
        match_repository=await get_match_repository(),
        matching_config_repository=await get_matching_config_repository(),
        match_analyzer=await get_match_analyzer(),
        notification_service=await get_notification_service(),
        ai_timeout_seconds=settings.AI_REQUEST_TIMEOUT,
    )


__all__ = ["get_matching_dependencies"]

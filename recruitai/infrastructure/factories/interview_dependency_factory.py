"""Concrete factory for creating InterviewApplicationService dependencies."""

from __future__ import annotations

from recruitai.application.dependencies.interview_dependencies import (
    InterviewDependencies,
    InterviewSettings,
)
from recruitai.core.config import get_settings
from recruitai.infrastructure.providers.ai_provider import get_interview_analyzer
from recruitai.infrastructure.providers.notification_provider import get_notification_service
from recruitai.infrastructure.providers.repository_provider import (
    get_interview_repository,
    get_interview_template_repository,
    get_job_repository,
    get_match_repository,
    get_resume_repository,
)


async def get_interview_dependencies() -> InterviewDependencies:
    settings = get_settings()
    return InterviewDependencies(
        interview_repository=await get_interview_repository(),
        template_repository=await get_interview_template_repository(),
        match_repository=await get_match_repository(),
        resume_repository=await get_resume_repository(),
        job_repository=await get_job_repository(),
        interview_analyzer=await get_interview_analyzer(),
        notification_service=await get_notification_service(),
        settings=InterviewSettings(
            frontend_url=settings.FRONTEND_URL,
            default_expiry_days=settings.INTERVIEW_DEFAULT_EXPIRY_DAYS,
            token_bytes=settings.INTERVIEW_TOKEN_BYTES,
            ai_timeout_seconds=settings.AI_REQUEST_TIMEOUT,
        ),
    )


__all__ = ["get_interview_dependencies"]

"""Async singleton providers for infrastructure services."""

from recruitai.infrastructure.providers.ai_provider import (
    get_interview_analyzer,
    get_match_analyzer,
    get_openai_service,
    get_prompt_manager,
    get_resume_analyzer,
    reset_ai_services,
)
from recruitai.infrastructure.providers.notification_provider import (
    get_notification_service,
    reset_notification_service,
)
from recruitai.infrastructure.providers.repository_provider import (
    get_interview_repository,
    get_interview_template_repository,
    get_job_repository,
    get_match_repository,
    get_matching_config_repository,
    get_resume_repository,
    reset_repositories,
)

__all__ = [
    "get_interview_analyzer",
    "get_interview_repository",
    "get_interview_template_repository",
    "get_job_repository",
    "get_match_analyzer",
    "get_match_repository",
    "get_matching_config_repository",
    "get_notification_service",
    "get_openai_service",
    "get_prompt_manager",
    "get_resume_analyzer",
    "get_resume_repository",
    "reset_ai_services",
    "reset_notification_service",
    "reset_repositories",
]

"""Shared pytest fixtures: test settings, provider resets and in-memory collaborators."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-recruitai-unit-tests-0123456789")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.pop("OPENAI_API_KEY", None)

import pytest
from hypothesis import HealthCheck, settings

from recruitai.core.config import get_settings
from recruitai.infrastructure.providers.ai_provider import reset_ai_services
from recruitai.infrastructure.providers.notification_provider import reset_notification_service
from recruitai.infrastructure.providers.repository_provider import reset_repositories
from tests.mocks.in_memory_repositories import (
    InMemoryInterviewRepository,
    InMemoryInterviewTemplateRepository,
    InMemoryJobRepository,
    InMemoryMatchRepository,
    InMemoryMatchingConfigRepository,
    InMemoryResumeRepository,
)
from tests.mocks.fake_services import RecordingNotificationService

settings.register_profile(
    "recruitai", suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None
)
settings.load_profile("recruitai")


@pytest.fixture(autouse=True)
async def reset_provider_state() -> AsyncIterator[None]:
    """Ensure each test starts with clean provider singletons."""
    get_settings.cache_clear()
    await reset_ai_services()
    await reset_notification_service()
    await reset_repositories()
    yield
    await reset_ai_services()
    await reset_notification_service()
    await reset_repositories()


@pytest.fixture
def job_repository() -> InMemoryJobRepository:
    return InMemoryJobRepository()


@pytest.fixture
def resume_repository() -> InMemoryResumeRepository:
    return InMemoryResumeRepository()


@pytest.fixture
def match_repository() -> InMemoryMatchRepository:
    return InMemoryMatchRepository()


@pytest.fixture
def matching_config_repository() -> InMemoryMatchingConfigRepository:
    return InMemoryMatchingConfigRepository()


@pytest.fixture
def interview_repository() -> InMemoryInterviewRepository:
    return InMemoryInterviewRepository()


@pytest.fixture
def template_repository() -> InMemoryInterviewTemplateRepository:
    return InMemoryInterviewTemplateRepository()


@pytest.fixture
def notifier() -> RecordingNotificationService:
    return RecordingNotificationService()

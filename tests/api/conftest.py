"""
API test fixtures.

Each test gets a fresh app whose service getters are overridden with services
built on the in-memory repositories, so no database is touched.
"""

import pytest
from fastapi.testclient import TestClient

from recruitai.api.dependencies import (
    get_analytics_service,
    get_interview_service,
    get_job_service,
    get_matching_config_service,
    get_matching_service,
    get_resume_service,
)
from recruitai.application.dependencies import (
    AnalyticsDependencies,
    InterviewDependencies,
    InterviewSettings,
    JobDependencies,
    MatchingDependencies,
    ResumeDependencies,
)
from recruitai.application.analytics_service import AnalyticsApplicationService
from recruitai.application.interview_service import InterviewApplicationService
from recruitai.application.job_service import JobApplicationService
from recruitai.application.matching_config_service import MatchingConfigService
from recruitai.application.matching_service import MatchingApplicationService
from recruitai.application.resume_service import ResumeApplicationService
from recruitai.core.config import get_settings
from recruitai.core.security import TokenManager
from recruitai.main import create_app
from tests.fixtures.recruitment_fixtures import NOW, RECRUITER, TENANT_A


@pytest.fixture
def app(
    job_repository,
    resume_repository,
    match_repository,
    matching_config_repository,
    interview_repository,
    template_repository,
    notifier,
):
    application = create_app()

    def job_service():
        return JobApplicationService(JobDependencies(job_repository=job_repository))

    def resume_service():
        return ResumeApplicationService(ResumeDependencies(resume_repository=resume_repository))

    def matching_service():
        return MatchingApplicationService(
            MatchingDependencies(
                job_repository=job_repository,
                resume_repository=resume_repository,
                match_repository=match_repository,
                matching_config_repository=matching_config_repository,
                notification_service=notifier,
            )
        )

    def config_service():
        return MatchingConfigService(matching_config_repository)

    def interview_service():
        return InterviewApplicationService(
            InterviewDependencies(
                interview_repository=interview_repository,
                template_repository=template_repository,
                match_repository=match_repository,
                resume_repository=resume_repository,
                job_repository=job_repository,
                notification_service=notifier,
                settings=InterviewSettings(frontend_url="https://jobs.example.com"),
                clock=lambda: NOW,
            )
        )

    def analytics_service():
        return AnalyticsApplicationService(
            AnalyticsDependencies(
                job_repository=job_repository,
                resume_repository=resume_repository,
                match_repository=match_repository,
                interview_repository=interview_repository,
            )
        )

    application.dependency_overrides[get_job_service] = job_service
    application.dependency_overrides[get_resume_service] = resume_service
    application.dependency_overrides[get_matching_service] = matching_service
    application.dependency_overrides[get_matching_config_service] = config_service
    application.dependency_overrides[get_interview_service] = interview_service
    application.dependency_overrides[get_analytics_service] = analytics_service
    return application


@pytest.fixture
def client(app):
    # No context manager: the lifespan would try to reach PostgreSQL.
    return TestClient(app)


@pytest.fixture
def auth_headers():
    def _headers(role: str = "recruiter", tenant=TENANT_A, user=RECRUITER):
        token = TokenManager(get_settings()).create_access_token(str(user), str(tenant), role)
        return {"Authorization": f"Bearer {token}"}

    return _headers

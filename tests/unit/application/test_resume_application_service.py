"""Unit tests for ResumeApplicationService."""

import asyncio

import pytest

from recruitai.application.dependencies.resume_dependencies import ResumeDependencies
from recruitai.application.resume_service import ResumeApplicationService
from recruitai.domain.entities.resume import CareerLevel, ProcessingStatus, ResumeAnalysis, ResumeStatus
from recruitai.domain.exceptions import AIAnalysisError, ResumeNotFoundError, ValidationError
from recruitai.domain.interfaces import IResumeAnalyzer
from tests.fixtures.recruitment_fixtures import RECRUITER, TENANT_A, TENANT_B

RESUME_TEXT = "Jane Doe - jane@example.com - 8 years of Python, Docker and AWS."


class StubResumeAnalyzer(IResumeAnalyzer):

    def __init__(self, result=None, error=None, delay=0.0):
        self.result = result
        self.error = error
        self.delay = delay

    async def analyze(self, resume_text: str) -> ResumeAnalysis:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def build_service(resume_repository):
    def _build(analyzer=None, timeout=1.0):
        return ResumeApplicationService(
            ResumeDependencies(
                resume_repository=resume_repository,
                resume_analyzer=analyzer,
                ai_timeout_seconds=timeout,
            )
        )

    return _build


async def _paste(service, **overrides):
    kwargs = dict(tenant_id=str(TENANT_A), uploaded_by=str(RECRUITER), resume_text=RESUME_TEXT)
    kwargs.update(overrides)
    return await service.create_from_text(**kwargs)


class TestCreateFromText:

    async def test_extracts_contact_and_skills(self, build_service):
        resume = await _paste(build_service(), candidate_name="Jane Doe")

        assert resume.candidate_info.email == "jane@example.com"
        assert set(resume.skills) >= {"Python", "Docker", "AWS"}
        assert resume.analysis.processing_status == ProcessingStatus.PENDING

    async def test_explicit_values_win(self, build_service):
        resume = await _paste(
            build_service(),
            candidate_email="other@example.com",
            skills=["python", "Leadership"],
            experience_years=8,
        )

        assert resume.candidate_info.email == "other@example.com"
        assert resume.parsed_data.skills[:2] == ["python", "Leadership"]
        assert resume.parsed_data.skills.count("Python") == 0
        assert resume.experience_years == 8

    async def test_empty_text_is_rejected(self, build_service):
        with pytest.raises(ValidationError):
            await _paste(build_service(), resume_text="  ")

    async def test_analysis_fills_derived_attributes(self, build_service):
        analyzer = StubResumeAnalyzer(
            ResumeAnalysis(extracted_skills=["Python", "Terraform"], career_level=CareerLevel.SENIOR)
        )

        resume = await _paste(build_service(analyzer), experience_years=8)

        assert resume.analysis.extracted_skills == ["Python", "Terraform"]
        assert "Terraform" not in resume.skills
        assert set(resume.skills) >= {"Python", "Docker", "AWS"}
        assert resume.analysis.processing_status == ProcessingStatus.COMPLETED
        assert resume.experience_years == 8

    async def test_analysis_failure_is_recorded(self, build_service, resume_repository):
        analyzer = StubResumeAnalyzer(error=AIAnalysisError("AI response was empty"))

        resume = await _paste(build_service(analyzer))

        assert resume.analysis.processing_status == ProcessingStatus.FAILED
        assert resume.analysis.error == "AI response was empty"
        assert resume.id in resume_repository.resumes

    async def test_analysis_timeout_is_recorded(self, build_service):
        resume = await _paste(build_service(StubResumeAnalyzer(delay=1.0), timeout=0.01))

        assert resume.analysis.processing_status == ProcessingStatus.FAILED


class TestManagement:

    async def test_status_update(self, build_service):
        service = build_service()
        resume = await _paste(service)

        updated = await service.update_status(
            tenant_id=str(TENANT_A), resume_id=str(resume.id), status=ResumeStatus.SHORTLISTED
        )
        assert updated.status == ResumeStatus.SHORTLISTED

    async def test_status_update_other_tenant(self, build_service):
        service = build_service()
        resume = await _paste(service)

        with pytest.raises(ResumeNotFoundError):
            await service.update_status(
                tenant_id=str(TENANT_B), resume_id=str(resume.id), status=ResumeStatus.REJECTED
            )

    async def test_list_and_delete(self, build_service):
        service = build_service()
        first = await _paste(service)
        await _paste(service)

        resumes, total = await service.list_resumes(tenant_id=str(TENANT_A))
        assert total == 2 and len(resumes) == 2

        await service.delete_resume(tenant_id=str(TENANT_A), resume_id=str(first.id))
        with pytest.raises(ResumeNotFoundError):
            await service.get_resume(tenant_id=str(TENANT_A), resume_id=str(first.id))

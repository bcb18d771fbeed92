"""
Test data builders for jobs, resumes, templates and interviews.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from recruitai.domain.entities.interview import Interview, InterviewQuestion, InterviewStatus
from recruitai.domain.entities.interview_template import InterviewTemplate, TemplateQuestion
from recruitai.domain.entities.job import (
    ExperienceRequirement,
    ExperienceUnit,
    Job,
    JobRequirements,
    JobStatus,
)
from recruitai.domain.entities.resume import CandidateInfo, ParsedResumeData, Resume, ResumeAnalysis
from recruitai.domain.value_objects import (
    InterviewId,
    JobId,
    ResumeId,
    TemplateId,
    TenantId,
    UserId,
)

TENANT_A = TenantId("11111111-1111-4111-8111-111111111111")
TENANT_B = TenantId("22222222-2222-4222-8222-222222222222")
RECRUITER = UserId("33333333-3333-4333-8333-333333333333")
NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


class JobBuilder:
    """Builder pattern for creating test jobs."""

    def __init__(self):
        self._tenant = TENANT_A
        self._title = "Backend Engineer"
        self._skills: List[str] = ["Python", "PostgreSQL", "Docker"]
        self._experience: Optional[ExperienceRequirement] = ExperienceRequirement(min=3, max=6)
        self._status = JobStatus.ACTIVE

    def for_tenant(self, tenant: TenantId) -> "JobBuilder":
        self._tenant = tenant
        return self

    def with_title(self, title: str) -> "JobBuilder":
        self._title = title
        return self

    def with_skills(self, *skills: str) -> "JobBuilder":
        self._skills = list(skills)
        return self

    def with_experience(
        self,
        min_years: Optional[float],
        max_years: Optional[float],
        unit: ExperienceUnit = ExperienceUnit.YEARS,
    ) -> "JobBuilder":
        self._experience = ExperienceRequirement(min=min_years, max=max_years, unit=unit)
        return self

    def without_experience(self) -> "JobBuilder":
        self._experience = None
        return self

    def build(self) -> Job:
        return Job(
            id=JobId.generate(),
            tenant_id=self._tenant,
            title=self._title,
            description="Build and run our matching APIs.",
            recruiter_id=RECRUITER,
            requirements=JobRequirements(skills=self._skills, experience=self._experience),
            status=self._status,
        )


class ResumeBuilder:
    """Builder pattern for creating test resumes."""

    def __init__(self):
        self._tenant = TENANT_A
        self._name: Optional[str] = "Ada Lovelace"
        self._email: Optional[str] = "ada@example.com"
        self._skills: List[str] = ["Python", "PostgreSQL", "Docker"]
        self._years: Optional[float] = 4

    def for_tenant(self, tenant: TenantId) -> "ResumeBuilder":
        self._tenant = tenant
        return self

    def with_skills(self, *skills: str) -> "ResumeBuilder":
        self._skills = list(skills)
        return self

    def with_experience_years(self, years: Optional[float]) -> "ResumeBuilder":
        self._years = years
        return self

    def with_email(self, email: Optional[str]) -> "ResumeBuilder":
        self._email = email
        return self

    def build(self) -> Resume:
        return Resume(
            id=ResumeId.generate(),
            tenant_id=self._tenant,
            candidate_info=CandidateInfo(name=self._name, email=self._email),
            parsed_data=ParsedResumeData(raw_text="resume text", skills=self._skills),
            analysis=ResumeAnalysis(experience_years=self._years),
            uploaded_by=RECRUITER,
        )


def make_template(
    tenant: Optional[TenantId] = TENANT_A,
    *,
    is_global: bool = False,
    is_active: bool = True,
    question_count: int = 3,
) -> InterviewTemplate:
    return InterviewTemplate(
        id=TemplateId.generate(),
        name="Backend screening",
        tenant_id=tenant,
        questions=[
            TemplateQuestion(
                text=f"Question {i}",
                expected_answer_points=[f"point {i}"],
            )
            for i in range(1, question_count + 1)
        ],
        is_global=is_global,
        is_active=is_active,
    )


def make_interview(
    *,
    tenant: TenantId = TENANT_A,
    status: InterviewStatus = InterviewStatus.INVITED,
    question_count: int = 3,
    expires_at: Optional[datetime] = None,
    access_token: str = "token-abc",
    job_id: Optional[JobId] = None,
    candidate_id: Optional[ResumeId] = None,
) -> Interview:
    return Interview(
        id=InterviewId.generate(),
        tenant_id=tenant,
        candidate_id=candidate_id or ResumeId.generate(),
        access_token=access_token,
        expires_at=expires_at or NOW + timedelta(days=7),
        invited_by=RECRUITER,
        job_id=job_id,
        candidate_name="Ada Lovelace",
        candidate_email="ada@example.com",
        status=status,
        questions=[InterviewQuestion.new(f"Question {i}") for i in range(1, question_count + 1)],
        created_at=NOW,
        updated_at=NOW,
    )

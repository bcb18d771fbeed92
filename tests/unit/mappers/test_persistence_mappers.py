"""
Tests for the domain <-> table mappers.

Focus is on the conversions that are easy to get wrong: enums, optional value
objects, JSONB payloads that must stay JSON-serialisable, and update paths
that must not overwrite immutable columns.
"""

from __future__ import annotations

import json
from datetime import timedelta

from recruitai.domain.entities.interview import InterviewStatus, QuestionType
from recruitai.domain.entities.job import ExperienceUnit, SalaryRange
from recruitai.domain.entities.job_match import AUTO_REJECT_NOTE, JobMatch, ReviewStatus
from recruitai.domain.entities.matching_config import MatchingConfig
from recruitai.domain.entities.resume import CareerLevel, ProcessingStatus, ResumeStatus
from recruitai.domain.services.interview_scoring_service import fallback_answer_analysis, fallback_assessment
from recruitai.domain.value_objects import JobId, ResumeId
from recruitai.infrastructure.persistence.mappers import (
    InterviewMapper,
    InterviewTemplateMapper,
    JobMapper,
    JobMatchMapper,
    MatchingConfigMapper,
    ResumeMapper,
)
from tests.fixtures.recruitment_fixtures import (
    NOW,
    RECRUITER,
    TENANT_A,
    TENANT_B,
    JobBuilder,
    ResumeBuilder,
    make_interview,
    make_template,
)
from tests.mocks.fake_services import make_match_analysis


class TestJobMapper:

    def test_requirements_are_stored_as_plain_json(self):
        job = JobBuilder().with_experience(12, 36, unit=ExperienceUnit.MONTHS).build()
        job.salary_range = SalaryRange(min=90000, max=120000, currency="EUR")

        table = JobMapper.to_table(job)

        assert table.id == job.id.value
        assert table.requirements["experience"] == {"min": 12, "max": 36, "unit": "months"}
        assert table.salary_range["currency"] == "EUR"
        json.dumps(table.requirements)

    def test_to_domain_restores_value_objects_and_enums(self):
        job = JobBuilder().with_experience(12, 36, unit=ExperienceUnit.MONTHS).build()

        restored = JobMapper.to_domain(JobMapper.to_table(job))

        assert restored.id == job.id
        assert restored.recruiter_id == RECRUITER
        assert restored.requirements.experience.unit == ExperienceUnit.MONTHS
        assert restored.status == job.status
        assert restored.salary_range is None

    def test_missing_experience(self):
        job = JobBuilder().without_experience().build()
        assert JobMapper.to_domain(JobMapper.to_table(job)).requirements.experience is None

    def test_update_keeps_created_at(self):
        job = JobBuilder().build()
        table = JobMapper.to_table(job)
        original_created = table.created_at

        job.title = "Staff Engineer"
        job.created_at = job.created_at + timedelta(days=1)
        JobMapper.update_table_from_domain(table, job)

        assert table.title == "Staff Engineer"
        assert table.created_at == original_created


class TestResumeMapper:

    def test_enums_serialised_as_values(self):
        resume = ResumeBuilder().build()
        resume.analysis.career_level = CareerLevel.SENIOR
        resume.analysis.processing_status = ProcessingStatus.COMPLETED

        table = ResumeMapper.to_table(resume)

        assert table.analysis["career_level"] == "senior"
        assert table.analysis["processing_status"] == "completed"
        assert table.candidate_email == "ada@example.com"
        json.dumps(table.analysis)

    def test_to_domain(self):
        resume = ResumeBuilder().build()
        resume.change_status(ResumeStatus.MATCHED)

        restored = ResumeMapper.to_domain(ResumeMapper.to_table(resume))

        assert restored.status == ResumeStatus.MATCHED
        assert restored.analysis.career_level is None
        assert restored.skills == resume.skills
        assert restored.experience_years == 4


class TestJobMatchMapper:

    def test_auto_rejected_review_survives(self):
        match = JobMatch.from_analysis(
            tenant_id=TENANT_A,
            job_id=JobId.generate(),
            candidate_id=ResumeId.generate(),
            analysis=make_match_analysis(20, 20, 20, 20),
            match_score=20,
        )
        match.auto_reject()

        table = JobMatchMapper.to_table(match)
        restored = JobMatchMapper.to_domain(table)

        assert table.review_status == "rejected"
        assert table.reviewed_by is None
        assert restored.is_auto_rejected
        assert restored.recruiter_review.notes == AUTO_REJECT_NOTE
        assert restored.match_details.skill_match.missing == ["Go"]

    def test_human_review_fields(self):
        match = JobMatch.from_analysis(
            tenant_id=TENANT_A,
            job_id=JobId.generate(),
            candidate_id=ResumeId.generate(),
            analysis=make_match_analysis(),
            match_score=80,
        )
        match.review(ReviewStatus.MAYBE, RECRUITER, "Second opinion")

        restored = JobMatchMapper.to_domain(JobMatchMapper.to_table(match))

        assert restored.recruiter_review.status == ReviewStatus.MAYBE
        assert restored.recruiter_review.reviewed_by == RECRUITER

    def test_overall_fit_round_trips_as_score(self):
        match = JobMatch.from_analysis(
            tenant_id=TENANT_A,
            job_id=JobId.generate(),
            candidate_id=ResumeId.generate(),
            analysis=make_match_analysis(),
            match_score=80,
        )

        table = JobMatchMapper.to_table(match)
        restored = JobMatchMapper.to_domain(table)

        assert table.match_details["overall_fit"] == 80
        assert restored.match_details.overall_fit == 80

    def test_text_overall_fit_falls_back_to_match_score(self):
        match = JobMatch.from_analysis(
            tenant_id=TENANT_A,
            job_id=JobId.generate(),
            candidate_id=ResumeId.generate(),
            analysis=make_match_analysis(),
            match_score=72,
        )
        table = JobMatchMapper.to_table(match)
        table.match_details = {**table.match_details, "overall_fit": "Strong overlap"}

        assert JobMatchMapper.to_domain(table).match_details.overall_fit == 72


class TestMatchingConfigMapper:

    def test_update_never_moves_config_between_tenants(self):
        config = MatchingConfig.default_for(TENANT_A)
        table = MatchingConfigMapper.to_table(config)

        other = MatchingConfig.default_for(TENANT_B)
        other.weights.skill_match = 0.55
        MatchingConfigMapper.update_table_from_domain(table, other)

        assert table.tenant_id == TENANT_A.value
        assert table.weights["skill_match"] == 0.55

    def test_unknown_stored_keys_are_ignored(self):
        table = MatchingConfigMapper.to_table(MatchingConfig.default_for(TENANT_A))
        table.thresholds = {**table.thresholds, "legacy_cutoff": 10}

        restored = MatchingConfigMapper.to_domain(table)

        assert restored.thresholds.minimum_match_score == 60


class TestInterviewMapper:

    def test_answered_questions_are_json_serialisable(self):
        interview = make_interview(status=InterviewStatus.IN_PROGRESS)
        question = interview.questions[0]
        interview.record_answer(question.question_id, "Answer", fallback_answer_analysis(), NOW, time_spent=12)
        interview.complete(70, fallback_assessment(70), NOW)
        interview.add_feedback(4, "Good", NOW)

        table = InterviewMapper.to_table(interview)
        json.dumps(table.questions)
        json.dumps(table.assessment)
        json.dumps(table.feedback)

        restored = InterviewMapper.to_domain(table)
        restored_question = restored.get_question(question.question_id)
        assert restored.status == InterviewStatus.COMPLETED
        assert restored_question.answered_at == NOW
        assert restored_question.ai_analysis.used_fallback
        assert restored.assessment.technical_score == 70
        assert restored.feedback.submitted_at == NOW
        assert not restored.questions[1].is_answered

    def test_template_mapper(self):
        template = make_template(tenant=None, is_global=True)

        table = InterviewTemplateMapper.to_table(template)
        restored = InterviewTemplateMapper.to_domain(table)

        assert table.tenant_id is None
        assert restored.is_global
        assert [q.type for q in restored.questions] == [QuestionType.OPEN_ENDED] * 3
        assert restored.questions[0].expected_answer_points == ["point 1"]

"""
Unit tests for MatchingApplicationService.

Covers:
- AI analysis with tenant weighting and thresholds
- Fallback to basic matching on AI failure, timeout or disabled AI
- Auto-rejection and resume status transitions
- Partial batch failure
- Strong-match notifications
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from recruitai.application.dependencies.matching_dependencies import MatchingDependencies
from recruitai.application.matching_service import MatchingApplicationService
from recruitai.domain.entities.job_match import AUTO_REJECT_NOTE, MatchDecision, ReviewStatus
from recruitai.domain.entities.matching_config import MatchingConfig
from recruitai.domain.entities.resume import ResumeStatus
from recruitai.domain.exceptions import JobNotFoundError, MatchNotFoundError
from tests.fixtures.recruitment_fixtures import RECRUITER, TENANT_A, TENANT_B, JobBuilder, ResumeBuilder
from tests.mocks.fake_services import (
    FakeMatchAnalyzer,
    RecordingNotificationService,
    make_match_analysis,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def job(job_repository):
    return job_repository.add(JobBuilder().build())


@pytest.fixture
def resume(resume_repository):
    return resume_repository.add(ResumeBuilder().build())


@pytest.fixture
def analyzer():
    return FakeMatchAnalyzer()


@pytest.fixture
def build_service(job_repository, resume_repository, match_repository, matching_config_repository, notifier):
    def _build(analyzer=None, notification_service=notifier, timeout=1.0):
        return MatchingApplicationService(
            MatchingDependencies(
                job_repository=job_repository,
                resume_repository=resume_repository,
                match_repository=match_repository,
                matching_config_repository=matching_config_repository,
                match_analyzer=analyzer,
                notification_service=notification_service,
                ai_timeout_seconds=timeout,
            )
        )

    return _build


async def _match(service, job, *resume_ids, requested_by=None):
    return await service.match_candidates(
        tenant_id=str(TENANT_A),
        job_id=str(job.id),
        resume_ids=[str(r) for r in resume_ids],
        requested_by=requested_by,
    )


# =============================================================================
# AI PATH
# =============================================================================


class TestAIMatching:

    async def test_persists_tenant_weighted_score(self, build_service, job, resume, match_repository):
        analyzer = FakeMatchAnalyzer(make_match_analysis(skill=100, experience=50, education=0, culture=100))
        service = build_service(analyzer)

        result = await _match(service, job, resume.id)

        assert result.count == 1
        match = result.matches[0]
        assert match.match_score == 70
        assert match.match_details.overall_fit == 70
        assert match.ai_recommendation.used_fallback is False
        assert match.id in match_repository.matches
        assert analyzer.calls == [("analyze", job.id, resume.id)]

    async def test_auto_reject_overrides_ai_recommendation(self, build_service, job, resume):
        analyzer = FakeMatchAnalyzer(
            make_match_analysis(25, 25, 25, 25, recommendation=MatchDecision.STRONG_MATCH)
        )
        service = build_service(analyzer)

        match = (await _match(service, job, resume.id)).matches[0]

        assert match.recruiter_review.status == ReviewStatus.REJECTED
        assert match.recruiter_review.notes == AUTO_REJECT_NOTE
        assert match.ai_recommendation.decision == MatchDecision.STRONG_MATCH

    async def test_no_auto_reject_when_auto_matching_disabled(
        self, build_service, job, resume, matching_config_repository
    ):
        config = MatchingConfig.default_for(TENANT_A)
        config.auto_matching_enabled = False
        await matching_config_repository.save(config)
        service = build_service(FakeMatchAnalyzer(make_match_analysis(25, 25, 25, 25)))

        match = (await _match(service, job, resume.id)).matches[0]

        assert match.recruiter_review.status == ReviewStatus.PENDING


class TestResumeStatusTransition:

    async def test_score_above_minimum_marks_resume_matched(self, build_service, job, resume, resume_repository):
        service = build_service(FakeMatchAnalyzer(make_match_analysis(65, 65, 65, 65)))

        await _match(service, job, resume.id)

        assert resume_repository.stored(resume.id).status == ResumeStatus.MATCHED

    async def test_score_below_minimum_leaves_status(self, build_service, job, resume, resume_repository):
        service = build_service(FakeMatchAnalyzer(make_match_analysis(55, 55, 55, 55)))

        await _match(service, job, resume.id)

        assert resume_repository.stored(resume.id).status == ResumeStatus.NEW
        assert resume_repository.calls("update_status") == []

    async def test_status_write_failure_keeps_saved_match(
        self, build_service, job, resume, resume_repository, match_repository
    ):
        resume_repository.update_status = AsyncMock(side_effect=RuntimeError("connection reset"))
        service = build_service(FakeMatchAnalyzer(make_match_analysis(65, 65, 65, 65)))

        result = await _match(service, job, resume.id)

        assert result.count == 1
        assert result.failed == []
        assert result.matches[0].id in match_repository.matches
        resume_repository.update_status.assert_awaited_once()


# =============================================================================
# FALLBACK PATH
# =============================================================================


class TestFallback:

    async def test_analyzer_failure_uses_basic_match(self, build_service, job, resume):
        service = build_service(FakeMatchAnalyzer(fail=True))

        match = (await _match(service, job, resume.id)).matches[0]

        assert match.ai_recommendation.used_fallback is True
        assert match.ai_recommendation.reasoning == "Basic algorithmic matching"
        assert match.match_details.education_match.score == 70
        assert match.match_details.culture_fit.score == 60

    async def test_analyzer_timeout_uses_basic_match(self, build_service, job, resume):
        service = build_service(FakeMatchAnalyzer(hang_seconds=1.0), timeout=0.01)

        match = (await _match(service, job, resume.id)).matches[0]

        assert match.ai_recommendation.used_fallback is True

    async def test_ai_disabled_skips_analyzer(self, build_service, job, resume, matching_config_repository, analyzer):
        config = MatchingConfig.default_for(TENANT_A)
        config.ai_enabled = False
        await matching_config_repository.save(config)
        service = build_service(analyzer)

        match = (await _match(service, job, resume.id)).matches[0]

        assert analyzer.calls == []
        assert match.ai_recommendation.used_fallback is True

    async def test_no_analyzer_configured(self, build_service, job, resume):
        service = build_service(None)

        match = (await _match(service, job, resume.id)).matches[0]

        assert match.ai_recommendation.used_fallback is True
        assert match.match_details.skill_match.score == 100
        assert match.match_details.experience_match.score == 100


# =============================================================================
# BATCH BEHAVIOUR
# =============================================================================


class TestBatch:

    async def test_missing_resume_is_skipped(self, build_service, job, resume, analyzer):
        service = build_service(analyzer)
        missing = uuid4()

        result = await _match(service, job, resume.id, missing)

        assert result.count == 1
        assert len(result.failed) == 1
        assert result.failed[0].item == str(missing)
        assert result.failed[0].error_type == "ResumeNotFoundError"

    async def test_resume_from_other_tenant_is_not_matched(self, build_service, job, resume_repository, analyzer):
        foreign = resume_repository.add(ResumeBuilder().for_tenant(TENANT_B).build())
        service = build_service(analyzer)

        result = await _match(service, job, foreign.id)

        assert result.count == 0
        assert analyzer.calls == []

    async def test_malformed_resume_id_is_a_per_item_failure(self, build_service, job, resume, analyzer):
        service = build_service(analyzer)

        result = await service.match_candidates(
            tenant_id=str(TENANT_A), job_id=str(job.id), resume_ids=["not-a-uuid", str(resume.id)]
        )

        assert result.count == 1
        assert result.failed[0].item == "not-a-uuid"

    async def test_missing_job_raises(self, build_service, resume, analyzer):
        service = build_service(analyzer)

        with pytest.raises(JobNotFoundError):
            await service.match_candidates(
                tenant_id=str(TENANT_A), job_id=str(uuid4()), resume_ids=[str(resume.id)]
            )

    async def test_job_from_other_tenant_is_not_found(self, build_service, job, resume, analyzer):
        service = build_service(analyzer)

        with pytest.raises(JobNotFoundError):
            await service.match_candidates(
                tenant_id=str(TENANT_B), job_id=str(job.id), resume_ids=[str(resume.id)]
            )

    async def test_repeated_matching_creates_new_records(self, build_service, job, resume, match_repository, analyzer):
        service = build_service(analyzer)

        await _match(service, job, resume.id)
        await _match(service, job, resume.id)

        assert len(match_repository.matches) == 2

    async def test_default_config_created_on_first_match(
        self, build_service, job, resume, matching_config_repository, analyzer
    ):
        await _match(build_service(analyzer), job, resume.id)

        assert TENANT_A in matching_config_repository.configs


# =============================================================================
# NOTIFICATIONS
# =============================================================================


class TestNotifications:

    async def test_strong_match_notifies_requester(self, build_service, job, resume, analyzer, notifier):
        await _match(build_service(analyzer), job, resume.id, requested_by=str(RECRUITER))

        assert len(notifier.pushes) == 1
        push = notifier.pushes[0]
        assert push["user_id"] == str(RECRUITER)
        assert "Ada Lovelace" in push["message"]

    async def test_weak_match_does_not_notify(self, build_service, job, resume, notifier):
        service = build_service(FakeMatchAnalyzer(make_match_analysis(65, 65, 65, 65)))

        await _match(service, job, resume.id, requested_by=str(RECRUITER))

        assert notifier.pushes == []

    async def test_notification_failure_does_not_fail_matching(self, build_service, job, resume, analyzer):
        service = build_service(analyzer, notification_service=RecordingNotificationService(fail=True))

        result = await _match(service, job, resume.id, requested_by=str(RECRUITER))

        assert result.count == 1


# =============================================================================
# QUERIES AND REVIEW
# =============================================================================


class TestQueriesAndReview:

    async def test_list_matches_highest_score_first(self, build_service, job, resume_repository):
        low = resume_repository.add(ResumeBuilder().build())
        high = resume_repository.add(ResumeBuilder().build())
        analyzer = FakeMatchAnalyzer(make_match_analysis(50, 50, 50, 50))
        service = build_service(analyzer)
        await _match(service, job, low.id)
        analyzer.analysis = make_match_analysis(90, 90, 90, 90)
        await _match(service, job, high.id)

        matches = await service.list_matches(tenant_id=str(TENANT_A), job_id=str(job.id))

        assert [m.match_score for m in matches] == [90, 50]

    async def test_list_matches_filters_review_status(self, build_service, job, resume_repository):
        service = build_service(FakeMatchAnalyzer(make_match_analysis(20, 20, 20, 20)))
        await _match(service, job, resume_repository.add(ResumeBuilder().build()).id)

        rejected = await service.list_matches(
            tenant_id=str(TENANT_A), job_id=str(job.id), review_status=ReviewStatus.REJECTED
        )
        pending = await service.list_matches(
            tenant_id=str(TENANT_A), job_id=str(job.id), review_status=ReviewStatus.PENDING
        )

        assert len(rejected) == 1
        assert pending == []

    async def test_review_match(self, build_service, job, resume, analyzer):
        service = build_service(analyzer)
        match = (await _match(service, job, resume.id)).matches[0]

        reviewed = await service.review_match(
            tenant_id=str(TENANT_A),
            match_id=str(match.id),
            reviewer_id=str(RECRUITER),
            status=ReviewStatus.APPROVED,
            notes="Invite",
        )

        assert reviewed.recruiter_review.status == ReviewStatus.APPROVED
        assert reviewed.recruiter_review.reviewed_by == RECRUITER

    async def test_get_match_is_tenant_scoped(self, build_service, job, resume, analyzer):
        service = build_service(analyzer)
        match = (await _match(service, job, resume.id)).matches[0]

        with pytest.raises(MatchNotFoundError):
            await service.get_match(tenant_id=str(TENANT_B), match_id=str(match.id))

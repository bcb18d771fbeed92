"""Tests for JobMatch creation, auto-rejection and recruiter review."""

import pytest

from recruitai.domain.entities.job_match import (
    AUTO_REJECT_NOTE,
    JobMatch,
    MatchDecision,
    ReviewStatus,
)
from recruitai.domain.value_objects import InterviewId, JobId, ResumeId
from tests.fixtures.recruitment_fixtures import RECRUITER, TENANT_A
from tests.mocks.fake_services import make_match_analysis


def _match(score: int = 75) -> JobMatch:
    return JobMatch.from_analysis(
        tenant_id=TENANT_A,
        job_id=JobId.generate(),
        candidate_id=ResumeId.generate(),
        analysis=make_match_analysis(),
        match_score=score,
    )


def test_from_analysis_copies_dimensions_and_gaps():
    match = _match()

    assert match.match_details.skill_match.matched == ["Python"]
    assert match.skill_gaps == ["Go"]
    assert match.strengths == ["Python"]
    assert match.ai_recommendation.decision == MatchDecision.STRONG_MATCH
    assert match.recruiter_review.status == ReviewStatus.PENDING
    assert match.interview_scheduled is False
    assert match.match_details.overall_fit == match.match_score


def test_score_must_be_within_bounds():
    with pytest.raises(ValueError):
        _match(score=101)


def test_auto_reject_keeps_ai_decision():
    match = _match()
    match.auto_reject()

    assert match.recruiter_review.status == ReviewStatus.REJECTED
    assert match.recruiter_review.notes == AUTO_REJECT_NOTE
    assert match.recruiter_review.reviewed_by is None
    assert match.ai_recommendation.decision == MatchDecision.STRONG_MATCH
    assert match.is_auto_rejected


def test_human_review_records_reviewer():
    match = _match()
    match.review(ReviewStatus.APPROVED, RECRUITER, notes="Great fit")

    assert match.recruiter_review.status == ReviewStatus.APPROVED
    assert match.recruiter_review.reviewed_by == RECRUITER
    assert match.recruiter_review.reviewed_at is not None
    assert not match.is_auto_rejected


def test_link_interview():
    match = _match()
    interview_id = InterviewId.generate()
    match.link_interview(interview_id)

    assert match.interview_scheduled
    assert match.interview_id == interview_id

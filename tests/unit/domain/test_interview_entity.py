"""Tests for the interview state machine."""

from datetime import timedelta

import pytest

from recruitai.domain.entities.interview import Interview, InterviewStatus
from recruitai.domain.exceptions import (
    InterviewExpiredError,
    InterviewStateError,
    QuestionNotFoundError,
    ValidationError,
)
from recruitai.domain.services.interview_scoring_service import (
    fallback_answer_analysis,
    fallback_assessment,
)
from recruitai.domain.value_objects import ResumeId
from tests.fixtures.recruitment_fixtures import NOW, TENANT_A, make_interview


class TestInvite:

    def test_invite_sets_expiry(self):
        interview = Interview.invite(
            tenant_id=TENANT_A,
            candidate_id=ResumeId.generate(),
            access_token="t",
            expires_in_days=7,
            questions=[],
            now=NOW,
        )
        assert interview.status == InterviewStatus.INVITED
        assert interview.expires_at == NOW + timedelta(days=7)
        assert interview.invitation_sent_at == NOW

    def test_invite_requires_positive_expiry(self):
        with pytest.raises(ValidationError):
            Interview.invite(
                tenant_id=TENANT_A,
                candidate_id=ResumeId.generate(),
                access_token="t",
                expires_in_days=0,
                questions=[],
                now=NOW,
            )


class TestStart:

    def test_start_moves_to_in_progress(self):
        interview = make_interview()
        interview.start(NOW)

        assert interview.status == InterviewStatus.IN_PROGRESS
        assert interview.started_at == NOW

    def test_start_after_expiry_transitions_to_expired(self):
        interview = make_interview(expires_at=NOW - timedelta(minutes=1))

        with pytest.raises(InterviewExpiredError):
            interview.start(NOW)

        assert interview.status == InterviewStatus.EXPIRED
        assert interview.started_at is None

    def test_cannot_start_twice(self):
        interview = make_interview()
        interview.start(NOW)

        with pytest.raises(InterviewStateError) as exc_info:
            interview.start(NOW)
        assert exc_info.value.current_status == "in_progress"


class TestAnswers:

    def test_answer_requires_in_progress(self):
        interview = make_interview()
        question = interview.questions[0]

        with pytest.raises(InterviewStateError):
            interview.record_answer(question.question_id, "answer", fallback_answer_analysis(), NOW)

    def test_answer_unknown_question(self):
        interview = make_interview()
        interview.start(NOW)

        with pytest.raises(QuestionNotFoundError):
            interview.record_answer("missing", "answer", fallback_answer_analysis(), NOW)

    def test_answer_is_recorded_with_score(self):
        interview = make_interview()
        interview.start(NOW)
        question = interview.questions[1]

        interview.record_answer(question.question_id, "I would...", fallback_answer_analysis(), NOW, time_spent=42)

        assert question.answer == "I would..."
        assert question.time_spent == 42
        assert question.ai_score == 70
        assert interview.answered_questions() == [question]


class TestTerminalStates:

    def test_completed_interview_rejects_further_changes(self):
        interview = make_interview()
        interview.start(NOW)
        interview.complete(70, fallback_assessment(70), NOW)

        assert interview.is_terminal
        with pytest.raises(InterviewStateError):
            interview.record_answer(interview.questions[0].question_id, "late", fallback_answer_analysis(), NOW)
        with pytest.raises(InterviewStateError):
            interview.cancel(NOW)

    @pytest.mark.parametrize("status", [InterviewStatus.INVITED, InterviewStatus.IN_PROGRESS])
    def test_cancel_from_active_states(self, status):
        interview = make_interview(status=status)
        interview.cancel(NOW)
        assert interview.status == InterviewStatus.CANCELLED

    def test_expired_status_blocks_access(self):
        interview = make_interview(status=InterviewStatus.EXPIRED)
        with pytest.raises(InterviewExpiredError):
            interview.ensure_accessible(NOW)


def test_feedback_rating_bounds():
    interview = make_interview()
    with pytest.raises(ValidationError):
        interview.add_feedback(6, None, NOW)

    interview.add_feedback(4, "Solid", NOW)
    assert interview.feedback.rating == 4
    assert interview.feedback.submitted_at == NOW

"""API tests for the token-addressed candidate portal."""

from datetime import timedelta

import pytest

from recruitai.domain.entities.interview import InterviewStatus
from recruitai.domain.entities.resume import ResumeStatus
from tests.fixtures.recruitment_fixtures import NOW, JobBuilder, ResumeBuilder, make_interview

pytestmark = pytest.mark.api


@pytest.fixture
def invited(interview_repository, job_repository, resume_repository):
    job = job_repository.add(JobBuilder().build())
    resume = resume_repository.add(ResumeBuilder().build())
    return interview_repository.add(make_interview(job_id=job.id, candidate_id=resume.id))


def test_unknown_token(client):
    assert client.get("/api/v1/interview/does-not-exist").status_code == 404


def test_view_needs_no_authentication(client, invited):
    response = client.get(f"/api/v1/interview/{invited.access_token}")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "invited"
    assert body["job_title"] == "Backend Engineer"
    assert len(body["questions"]) == 3


def test_expired_link_returns_410(client, interview_repository):
    interview_repository.add(make_interview(access_token="old-token", expires_at=NOW - timedelta(days=1)))

    assert client.get("/api/v1/interview/old-token").status_code == 410


def test_late_start_persists_expiry(client, interview_repository):
    interview = interview_repository.add(
        make_interview(access_token="late-token", expires_at=NOW - timedelta(minutes=1))
    )

    response = client.post("/api/v1/interview/late-token/start")

    assert response.status_code == 410
    assert interview_repository.stored(interview.id).status == InterviewStatus.EXPIRED


def test_answer_before_start_conflicts(client, invited):
    question_id = invited.questions[0].question_id

    response = client.post(
        f"/api/v1/interview/{invited.access_token}/answer",
        json={"question_id": question_id, "answer": "Too early"},
    )

    assert response.status_code == 409


def test_full_flow_hides_scores(client, invited, interview_repository, resume_repository):
    token = invited.access_token

    started = client.post(f"/api/v1/interview/{token}/start")
    assert started.status_code == 200
    assert started.json()["status"] == "in_progress"

    question_id = started.json()["questions"][0]["question_id"]
    answered = client.post(
        f"/api/v1/interview/{token}/answer",
        json={"question_id": question_id, "answer": "I would profile first", "time_spent": 40},
    )
    assert answered.status_code == 200
    assert set(answered.json()) == {"success", "question_id", "answered_at"}

    view = client.get(f"/api/v1/interview/{token}").json()
    assert view["questions"][0]["answered"] is True
    for question in view["questions"]:
        assert "ai_score" not in question
        assert "ai_analysis" not in question
        assert "answer" not in question
        assert "expected_answer_points" not in question

    completed = client.post(f"/api/v1/interview/{token}/complete")
    assert completed.status_code == 200
    body = completed.json()
    assert body["status"] == "completed"
    assert body["answered_questions"] == 1
    assert "overall_score" not in body
    assert "assessment" not in body

    stored = interview_repository.stored(invited.id)
    assert stored.overall_score is not None
    assert stored.assessment.used_fallback
    assert resume_repository.stored(invited.candidate_id).status == ResumeStatus.INTERVIEWING

    assert client.post(f"/api/v1/interview/{token}/complete").status_code == 409


def test_status_endpoint_works_after_expiry(client, interview_repository):
    interview_repository.add(make_interview(access_token="gone", expires_at=NOW - timedelta(days=3)))

    response = client.get("/api/v1/status/gone")

    assert response.status_code == 200
    assert response.json()["total_questions"] == 3


def test_update_details(client, invited):
    response = client.post(
        f"/api/v1/interview/{invited.access_token}/details",
        json={"name": "Ada King"},
    )

    assert response.status_code == 200
    assert response.json()["candidate_name"] == "Ada King"

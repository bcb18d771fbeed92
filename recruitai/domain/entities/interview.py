"""Interview aggregate and its candidate-facing state machine.

Lifecycle::

    invited -> in_progress -> completed
       |            |
       +-> expired  +-> cancelled
       +-> cancelled

``completed``, ``expired`` and ``cancelled`` are terminal: questions, answers
and scores never change once one of them is reached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from recruitai.domain.exceptions import (
    InterviewExpiredError,
    InterviewStateError,
    QuestionNotFoundError,
    ValidationError,
)
from recruitai.domain.value_objects import (
    InterviewId,
    JobId,
    MatchId,
    ResumeId,
    TemplateId,
    TenantId,
    UserId,
)


class InterviewStatus(str, Enum):
    INVITED = "invited"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


TERMINAL_STATUSES = frozenset(
    {InterviewStatus.COMPLETED, InterviewStatus.EXPIRED, InterviewStatus.CANCELLED}
)


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    OPEN_ENDED = "open_ended"
    TECHNICAL = "technical"
    SITUATIONAL = "situational"
    BEHAVIORAL = "behavioral"


class HiringRecommendation(str, Enum):
    STRONG_YES = "strong_yes"
    YES = "yes"
    MAYBE = "maybe"
    NO = "no"
    STRONG_NO = "strong_no"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


@dataclass
class AnswerAnalysis:
    """Evaluation of a single answer."""

    score: float
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    key_points: List[str] = field(default_factory=list)
    sentiment: Sentiment = Sentiment.NEUTRAL
    confidence: float = 0.0
    feedback: str = ""
    used_fallback: bool = False


@dataclass
class InterviewAssessment:
    """Overall evaluation produced when an interview is completed."""

    technical_score: float
    communication_score: float
    problem_solving_score: float
    culture_fit_score: float
    recommendation: HiringRecommendation
    confidence: float
    strengths: List[str] = field(default_factory=list)
    concerns: List[str] = field(default_factory=list)
    key_insights: List[str] = field(default_factory=list)
    used_fallback: bool = False


@dataclass
class InterviewQuestion:
    question_id: str
    text: str
    type: QuestionType = QuestionType.OPEN_ENDED
    options: List[str] = field(default_factory=list)
    expected_answer_points: List[str] = field(default_factory=list)
    time_limit: int = 300
    answer: Optional[str] = None
    time_spent: Optional[int] = None
    answered_at: Optional[datetime] = None
    ai_score: Optional[float] = None
    ai_analysis: Optional[AnswerAnalysis] = None

    @classmethod
    def new(cls, text: str, **kwargs) -> "InterviewQuestion":
        return cls(question_id=str(uuid4()), text=text, **kwargs)

    @property
    def is_answered(self) -> bool:
        return self.answer is not None


@dataclass
class InterviewFeedback:
    rating: int
    comments: Optional[str] = None
    submitted_at: Optional[datetime] = None


@dataclass
class Interview:
    """Aggregate root for a token-accessed candidate interview."""

    id: InterviewId
    tenant_id: TenantId
    candidate_id: ResumeId
    access_token: str
    expires_at: datetime
    invited_by: Optional[UserId] = None
    job_id: Optional[JobId] = None
    job_match_id: Optional[MatchId] = None
    template_id: Optional[TemplateId] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    status: InterviewStatus = InterviewStatus.INVITED
    questions: List[InterviewQuestion] = field(default_factory=list)
    invitation_sent_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    overall_score: Optional[int] = None
    assessment: Optional[InterviewAssessment] = None
    feedback: Optional[InterviewFeedback] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def invite(
        cls,
        *,
        tenant_id: TenantId,
        candidate_id: ResumeId,
        access_token: str,
        expires_in_days: int,
        questions: List[InterviewQuestion],
        now: datetime,
        **kwargs,
    ) -> "Interview":
        if expires_in_days <= 0:
            raise ValidationError("expires_in_days must be positive")
        return cls(
            id=InterviewId.generate(),
            tenant_id=tenant_id,
            candidate_id=candidate_id,
            access_token=access_token,
            expires_at=now + timedelta(days=expires_in_days),
            questions=list(questions),
            invitation_sent_at=now,
            created_at=now,
            updated_at=now,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def is_expired(self, now: datetime) -> bool:
        return self.status == InterviewStatus.EXPIRED or now > self.expires_at

    def answered_questions(self) -> List[InterviewQuestion]:
        return [q for q in self.questions if q.is_answered]

    def get_question(self, question_id: str) -> InterviewQuestion:
        for question in self.questions:
            if question.question_id == question_id:
                return question
        raise QuestionNotFoundError(f"Question {question_id} not found")

    def ensure_accessible(self, now: datetime) -> None:
        """Raise ``InterviewExpiredError`` when the link can no longer be used."""
        if self.is_expired(now):
            raise InterviewExpiredError(expired_at=self.expires_at)

    def _require_status(self, expected: InterviewStatus, action: str) -> None:
        if self.status != expected:
            raise InterviewStateError(self.status.value, action)

    def ensure_in_progress(self, action: str) -> None:
        self._require_status(InterviewStatus.IN_PROGRESS, action)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, now: datetime) -> None:
        """
        Move ``invited`` -> ``in_progress``.

        Starting after ``expires_at`` moves the interview to ``expired`` and
        raises ``InterviewExpiredError``; callers persist that transition.
        """
        self._require_status(InterviewStatus.INVITED, "start")
        if now > self.expires_at:
            self.status = InterviewStatus.EXPIRED
            self.updated_at = now
            raise InterviewExpiredError(expired_at=self.expires_at)
        self.status = InterviewStatus.IN_PROGRESS
        self.started_at = now
        self.updated_at = now

    def record_answer(
        self,
        question_id: str,
        answer: str,
        analysis: AnswerAnalysis,
        now: datetime,
        time_spent: Optional[int] = None,
    ) -> InterviewQuestion:
        self._require_status(InterviewStatus.IN_PROGRESS, "answer")
        question = self.get_question(question_id)
        question.answer = answer
        question.time_spent = time_spent
        question.answered_at = now
        question.ai_score = analysis.score
        question.ai_analysis = analysis
        self.updated_at = now
        return question

    def complete(
        self,
        overall_score: Optional[int],
        assessment: InterviewAssessment,
        now: datetime,
    ) -> None:
        self._require_status(InterviewStatus.IN_PROGRESS, "complete")
        self.status = InterviewStatus.COMPLETED
        self.completed_at = now
        self.overall_score = overall_score
        self.assessment = assessment
        self.updated_at = now

    def cancel(self, now: datetime) -> None:
        if self.status not in (InterviewStatus.INVITED, InterviewStatus.IN_PROGRESS):
            raise InterviewStateError(self.status.value, "cancel")
        self.status = InterviewStatus.CANCELLED
        self.updated_at = now

    def update_candidate_details(self, name: Optional[str], email: Optional[str], now: datetime) -> None:
        if name:
            self.candidate_name = name
        if email:
            self.candidate_email = email
        self.updated_at = now

    def add_feedback(self, rating: int, comments: Optional[str], now: datetime) -> None:
        if rating < 1 or rating > 5:
            raise ValidationError("Feedback rating must be between 1 and 5")
        self.feedback = InterviewFeedback(rating=rating, comments=comments, submitted_at=now)
        self.updated_at = now

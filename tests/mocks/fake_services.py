"""
Fake AI analyzers and notification services for testing.

Analyzers can be told to succeed with a fixed result, raise
``AIAnalysisError`` or hang past the configured timeout.
"""

import asyncio
from typing import Any, Dict, List, Optional, Sequence

from recruitai.domain.entities.interview import (
    AnswerAnalysis,
    HiringRecommendation,
    InterviewAssessment,
    InterviewQuestion,
    Sentiment,
)
from recruitai.domain.entities.job import Job
from recruitai.domain.entities.job_match import FactorScore, MatchAnalysis, MatchDecision, SkillMatch
from recruitai.domain.entities.resume import Resume
from recruitai.domain.exceptions import AIAnalysisError
from recruitai.domain.interfaces import IInterviewAnalyzer, IMatchAnalyzer, INotificationService


def make_match_analysis(
    skill: float = 80,
    experience: float = 80,
    education: float = 80,
    culture: float = 80,
    recommendation: MatchDecision = MatchDecision.STRONG_MATCH,
) -> MatchAnalysis:
    return MatchAnalysis(
        overall_score=(skill + experience + education + culture) / 4,
        skill_match=SkillMatch(score=skill, matched=["Python"], missing=["Go"]),
        experience_match=FactorScore(score=experience, analysis="experience"),
        education_match=FactorScore(score=education, analysis="education"),
        culture_fit=FactorScore(score=culture, analysis="culture"),
        recommendation=recommendation,
        reasoning="AI reasoning",
        confidence=0.9,
    )


class _Behaviour:
    """Shared fail/hang switches."""

    def __init__(self, *, fail: bool = False, hang_seconds: float = 0.0):
        self.fail = fail
        self.hang_seconds = hang_seconds
        self.calls: List[tuple] = []

    async def _maybe_misbehave(self) -> None:
        if self.hang_seconds:
            await asyncio.sleep(self.hang_seconds)
        if self.fail:
            raise AIAnalysisError("AI response is not valid JSON: Expecting value")


class FakeMatchAnalyzer(_Behaviour, IMatchAnalyzer):

    def __init__(self, analysis: Optional[MatchAnalysis] = None, **kwargs):
        super().__init__(**kwargs)
        self.analysis = analysis or make_match_analysis()

    async def analyze(self, job: Job, resume: Resume) -> MatchAnalysis:
        self.calls.append(("analyze", job.id, resume.id))
        await self._maybe_misbehave()
        return self.analysis


class FakeInterviewAnalyzer(_Behaviour, IInterviewAnalyzer):

    def __init__(self, answer_score: float = 90, **kwargs):
        super().__init__(**kwargs)
        self.answer_score = answer_score

    async def analyze_answer(
        self,
        question: InterviewQuestion,
        answer: str,
        job_context: Optional[Job] = None,
    ) -> AnswerAnalysis:
        self.calls.append(("analyze_answer", question.question_id, job_context.title if job_context else None))
        await self._maybe_misbehave()
        return AnswerAnalysis(
            score=self.answer_score,
            strengths=["Clear"],
            weaknesses=[],
            key_points=["point"],
            sentiment=Sentiment.POSITIVE,
            confidence=0.8,
            feedback="Good answer",
        )

    async def analyze_overall(
        self,
        answered_questions: Sequence[InterviewQuestion],
        job_context: Optional[Job] = None,
    ) -> InterviewAssessment:
        self.calls.append(("analyze_overall", len(answered_questions)))
        await self._maybe_misbehave()
        return InterviewAssessment(
            technical_score=88,
            communication_score=85,
            problem_solving_score=90,
            culture_fit_score=80,
            strengths=["Depth"],
            concerns=[],
            key_insights=["Strong fundamentals"],
            recommendation=HiringRecommendation.STRONG_YES,
            confidence=0.85,
        )


class RecordingNotificationService(INotificationService):
    """Collects outgoing notifications; ``fail=True`` makes every send raise."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.emails: List[Dict[str, Any]] = []
        self.pushes: List[Dict[str, Any]] = []

    async def check_health(self) -> Dict[str, Any]:
        return {"status": "healthy"}

    async def send_email(self, to: str, subject: str, body: str, is_html: bool = False) -> bool:
        if self.fail:
            raise ConnectionError("SMTP unavailable")
        self.emails.append({"to": to, "subject": subject, "body": body})
        return True

    async def send_push_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> bool:
        if self.fail:
            raise ConnectionError("Push gateway unavailable")
        self.pushes.append({"user_id": user_id, "title": title, "message": message, "data": data})
        return True

"""Domain-layer service interfaces.

These abstractions define the stable contracts that the application layer relies on,
while infrastructure adapters provide concrete implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from recruitai.domain.entities.interview import AnswerAnalysis, InterviewAssessment, InterviewQuestion
from recruitai.domain.entities.job import Job
from recruitai.domain.entities.job_match import MatchAnalysis
from recruitai.domain.entities.resume import Resume, ResumeAnalysis


class IHealthCheck:
    """Health check interface mixin."""

    @abstractmethod
    async def check_health(self) -> Dict[str, Any]:
        """Return health check details."""
        pass


class IAIService(IHealthCheck, ABC):
    """Chat-completion service used by the AI analyzers."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Generate chat completion."""
        pass


class IMatchAnalyzer(ABC):
    """Scores how well a resume fits a job.

    Implementations raise ``AIAnalysisError`` for every failure mode: transport
    errors, malformed output and schema violations alike.
    """

    @abstractmethod
    async def analyze(self, job: Job, resume: Resume) -> MatchAnalysis:
        pass


class IInterviewAnalyzer(ABC):
    """Evaluates interview answers and whole interviews; failures raise ``AIAnalysisError``."""

    @abstractmethod
    async def analyze_answer(
        self,
        question: InterviewQuestion,
        answer: str,
        job_context: Optional[Job] = None,
    ) -> AnswerAnalysis:
        pass

    @abstractmethod
    async def analyze_overall(
        self,
        answered_questions: Sequence[InterviewQuestion],
        job_context: Optional[Job] = None,
    ) -> InterviewAssessment:
        pass


class IResumeAnalyzer(ABC):
    """Derives experience years, education and career level from resume text."""

    @abstractmethod
    async def analyze(self, resume_text: str) -> ResumeAnalysis:
        pass


class INotificationService(IHealthCheck, ABC):
    """Notification service interface."""

    @abstractmethod
    async def send_email(self, to: str, subject: str, body: str, is_html: bool = False) -> bool:
        """Send email notification."""
        pass

    @abstractmethod
    async def send_push_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Send an in-app notification to a user."""
        pass


__all__ = [
    "IHealthCheck",
    "IAIService",
    "IMatchAnalyzer",
    "IInterviewAnalyzer",
    "IResumeAnalyzer",
    "INotificationService",
]

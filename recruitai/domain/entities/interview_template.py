"""Reusable interview question sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from recruitai.domain.entities.interview import InterviewQuestion, QuestionType
from recruitai.domain.value_objects import TemplateId, TenantId, UserId


@dataclass
class TemplateQuestion:
    text: str
    type: QuestionType = QuestionType.OPEN_ENDED
    options: List[str] = field(default_factory=list)
    expected_answer_points: List[str] = field(default_factory=list)
    difficulty: str = "medium"
    time_limit: int = 300
    weight: float = 1.0


@dataclass
class InterviewTemplate:
    """A named list of questions, owned by a tenant or shared globally."""

    id: TemplateId
    name: str
    tenant_id: Optional[TenantId] = None
    description: Optional[str] = None
    category: str = "general"
    questions: List[TemplateQuestion] = field(default_factory=list)
    passing_score: int = 70
    is_global: bool = False
    is_active: bool = True
    usage_count: int = 0
    created_by: Optional[UserId] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_available_to(self, tenant_id: TenantId) -> bool:
        return self.is_active and (self.is_global or self.tenant_id == tenant_id)

    def to_interview_questions(self) -> List[InterviewQuestion]:
        """Copy template questions into fresh, unanswered interview questions."""
        return [
            InterviewQuestion.new(
                q.text,
                type=q.type,
                options=list(q.options),
                expected_answer_points=list(q.expected_answer_points),
                time_limit=q.time_limit,
            )
            for q in self.questions
        ]

    def record_usage(self) -> None:
        self.usage_count += 1
        self.updated_at = datetime.now(timezone.utc)

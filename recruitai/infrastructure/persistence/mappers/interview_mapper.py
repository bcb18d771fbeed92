"""
Mappers for the interview aggregate and interview templates.

Questions, assessments and feedback live in JSONB documents; timestamps inside
them are stored as ISO-8601 strings.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from recruitai.domain.entities.interview import (
    AnswerAnalysis,
    HiringRecommendation,
    Interview,
    InterviewAssessment,
    InterviewFeedback,
    InterviewQuestion,
    InterviewStatus,
    QuestionType,
    Sentiment,
)
from recruitai.domain.entities.interview_template import InterviewTemplate, TemplateQuestion
from recruitai.domain.value_objects import (
    InterviewId,
    JobId,
    MatchId,
    ResumeId,
    TemplateId,
    TenantId,
    UserId,
)
from recruitai.infrastructure.persistence.mappers._serialization import dt_from_json, dt_to_json
from recruitai.infrastructure.persistence.models.interview_table import InterviewTable, InterviewTemplateTable


def _analysis_to_json(analysis: Optional[AnswerAnalysis]) -> Optional[Dict[str, Any]]:
    if analysis is None:
        return None
    return {
        "score": analysis.score,
        "strengths": list(analysis.strengths),
        "weaknesses": list(analysis.weaknesses),
        "key_points": list(analysis.key_points),
        "sentiment": analysis.sentiment.value,
        "confidence": analysis.confidence,
        "feedback": analysis.feedback,
        "used_fallback": analysis.used_fallback,
    }


def _analysis_from_json(data: Optional[Dict[str, Any]]) -> Optional[AnswerAnalysis]:
    if not data:
        return None
    return AnswerAnalysis(
        score=data.get("score", 0),
        strengths=list(data.get("strengths", [])),
        weaknesses=list(data.get("weaknesses", [])),
        key_points=list(data.get("key_points", [])),
        sentiment=Sentiment(data.get("sentiment", Sentiment.NEUTRAL.value)),
        confidence=data.get("confidence", 0.0),
        feedback=data.get("feedback", ""),
        used_fallback=data.get("used_fallback", False),
    )


def question_to_json(question: InterviewQuestion) -> Dict[str, Any]:
    return {
        "question_id": question.question_id,
        "text": question.text,
        "type": question.type.value,
        "options": list(question.options),
        "expected_answer_points": list(question.expected_answer_points),
        "time_limit": question.time_limit,
        "answer": question.answer,
        "time_spent": question.time_spent,
        "answered_at": dt_to_json(question.answered_at),
        "ai_score": question.ai_score,
        "ai_analysis": _analysis_to_json(question.ai_analysis),
    }


def question_from_json(data: Dict[str, Any]) -> InterviewQuestion:
    return InterviewQuestion(
        question_id=data["question_id"],
        text=data["text"],
        type=QuestionType(data.get("type", QuestionType.OPEN_ENDED.value)),
        options=list(data.get("options", [])),
        expected_answer_points=list(data.get("expected_answer_points", [])),
        time_limit=data.get("time_limit", 300),
        answer=data.get("answer"),
        time_spent=data.get("time_spent"),
        answered_at=dt_from_json(data.get("answered_at")),
        ai_score=data.get("ai_score"),
        ai_analysis=_analysis_from_json(data.get("ai_analysis")),
    )


def _assessment_to_json(assessment: Optional[InterviewAssessment]) -> Optional[Dict[str, Any]]:
    if assessment is None:
        return None
    return {
        "technical_score": assessment.technical_score,
        "communication_score": assessment.communication_score,
        "problem_solving_score": assessment.problem_solving_score,
        "culture_fit_score": assessment.culture_fit_score,
        "recommendation": assessment.recommendation.value,
        "confidence": assessment.confidence,
        "strengths": list(assessment.strengths),
        "concerns": list(assessment.concerns),
        "key_insights": list(assessment.key_insights),
        "used_fallback": assessment.used_fallback,
    }


def _assessment_from_json(data: Optional[Dict[str, Any]]) -> Optional[InterviewAssessment]:
    if not data:
        return None
    return InterviewAssessment(
        technical_score=data.get("technical_score", 0),
        communication_score=data.get("communication_score", 0),
        problem_solving_score=data.get("problem_solving_score", 0),
        culture_fit_score=data.get("culture_fit_score", 0),
        recommendation=HiringRecommendation(data.get("recommendation", HiringRecommendation.MAYBE.value)),
        confidence=data.get("confidence", 0.0),
        strengths=list(data.get("strengths", [])),
        concerns=list(data.get("concerns", [])),
        key_insights=list(data.get("key_insights", [])),
        used_fallback=data.get("used_fallback", False),
    )


class InterviewMapper:
    """Maps between Interview aggregates and InterviewTable rows."""

    @staticmethod
    def to_domain(table: InterviewTable) -> Interview:
        feedback = table.feedback
        return Interview(
            id=InterviewId(table.id),
            tenant_id=TenantId(table.tenant_id),
            candidate_id=ResumeId(table.candidate_id),
            access_token=table.access_token,
            expires_at=table.expires_at,
            invited_by=UserId(table.invited_by) if table.invited_by else None,
            job_id=JobId(table.job_id) if table.job_id else None,
            job_match_id=MatchId(table.job_match_id) if table.job_match_id else None,
            template_id=TemplateId(table.template_id) if table.template_id else None,
            candidate_name=table.candidate_name,
            candidate_email=table.candidate_email,
            status=InterviewStatus(table.status),
            questions=[question_from_json(q) for q in (table.questions or [])],
            invitation_sent_at=table.invitation_sent_at,
            started_at=table.started_at,
            completed_at=table.completed_at,
            overall_score=table.overall_score,
            assessment=_assessment_from_json(table.assessment),
            feedback=InterviewFeedback(
                rating=feedback["rating"],
                comments=feedback.get("comments"),
                submitted_at=dt_from_json(feedback.get("submitted_at")),
            ) if feedback else None,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def _values(entity: Interview) -> Dict[str, Any]:
        feedback = entity.feedback
        return {
            "tenant_id": entity.tenant_id.value,
            "candidate_id": entity.candidate_id.value,
            "access_token": entity.access_token,
            "expires_at": entity.expires_at,
            "invited_by": entity.invited_by.value if entity.invited_by else None,
            "job_id": entity.job_id.value if entity.job_id else None,
            "job_match_id": entity.job_match_id.value if entity.job_match_id else None,
            "template_id": entity.template_id.value if entity.template_id else None,
            "candidate_name": entity.candidate_name,
            "candidate_email": entity.candidate_email,
            "status": entity.status.value,
            "questions": [question_to_json(q) for q in entity.questions],
            "invitation_sent_at": entity.invitation_sent_at,
            "started_at": entity.started_at,
            "completed_at": entity.completed_at,
            "overall_score": entity.overall_score,
            "assessment": _assessment_to_json(entity.assessment),
            "feedback": {
                "rating": feedback.rating,
                "comments": feedback.comments,
                "submitted_at": dt_to_json(feedback.submitted_at),
            } if feedback else None,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    @staticmethod
    def to_table(entity: Interview) -> InterviewTable:
        return InterviewTable(id=entity.id.value, **InterviewMapper._values(entity))

    @staticmethod
    def update_table_from_domain(table: InterviewTable, entity: Interview) -> InterviewTable:
        for key, value in InterviewMapper._values(entity).items():
            if key != "created_at":
                setattr(table, key, value)
        return table


class InterviewTemplateMapper:

    @staticmethod
    def to_domain(table: InterviewTemplateTable) -> InterviewTemplate:
        return InterviewTemplate(
            id=TemplateId(table.id),
            name=table.name,
            tenant_id=TenantId(table.tenant_id) if table.tenant_id else None,
            description=table.description,
            category=table.category,
            questions=[
                TemplateQuestion(
                    text=q["text"],
                    type=QuestionType(q.get("type", QuestionType.OPEN_ENDED.value)),
                    options=list(q.get("options", [])),
                    expected_answer_points=list(q.get("expected_answer_points", [])),
                    difficulty=q.get("difficulty", "medium"),
                    time_limit=q.get("time_limit", 300),
                    weight=q.get("weight", 1.0),
                )
                for q in (table.questions or [])
            ],
            passing_score=table.passing_score,
            is_global=table.is_global,
            is_active=table.is_active,
            usage_count=table.usage_count,
            created_by=UserId(table.created_by) if table.created_by else None,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def _values(entity: InterviewTemplate) -> Dict[str, Any]:
        return {
            "tenant_id": entity.tenant_id.value if entity.tenant_id else None,
            "name": entity.name,
            "description": entity.description,
            "category": entity.category,
            "questions": [
                {
                    "text": q.text,
                    "type": q.type.value,
                    "options": list(q.options),
                    "expected_answer_points": list(q.expected_answer_points),
                    "difficulty": q.difficulty,
                    "time_limit": q.time_limit,
                    "weight": q.weight,
                }
                for q in entity.questions
            ],
            "passing_score": entity.passing_score,
            "is_global": entity.is_global,
            "is_active": entity.is_active,
            "usage_count": entity.usage_count,
            "created_by": entity.created_by.value if entity.created_by else None,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    @staticmethod
    def to_table(entity: InterviewTemplate) -> InterviewTemplateTable:
        return InterviewTemplateTable(id=entity.id.value, **InterviewTemplateMapper._values(entity))

    @staticmethod
    def update_table_from_domain(table: InterviewTemplateTable, entity: InterviewTemplate) -> InterviewTemplateTable:
        for key, value in InterviewTemplateMapper._values(entity).items():
            if key != "created_at":
                setattr(table, key, value)
        return table


__all__ = ["InterviewMapper", "InterviewTemplateMapper", "question_from_json", "question_to_json"]

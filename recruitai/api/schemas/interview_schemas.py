"""
Interview API schemas.

Recruiter responses expose scores and the AI assessment. Candidate portal
responses never include scores, analyses or expected answer points.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from recruitai.domain.entities.interview import (
    AnswerAnalysis,
    HiringRecommendation,
    Interview,
    InterviewQuestion,
    InterviewStatus,
    QuestionType,
    Sentiment,
)


class InterviewInviteRequest(BaseModel):
    match_id: str
    template_id: Optional[str] = None
    expires_in_days: Optional[int] = Field(default=None, ge=1, le=90)


class InterviewFeedbackRequest(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comments: Optional[str] = Field(default=None, max_length=5000)


class CandidateDetailsRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)


class AnswerSubmission(BaseModel):
    question_id: str
    answer: str = Field(..., min_length=1)
    time_spent: Optional[int] = Field(default=None, ge=0, description="Seconds spent on the question")


class AnswerAnalysisSchema(BaseModel):
    score: float
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    key_points: List[str] = Field(default_factory=list)
    sentiment: Sentiment = Sentiment.NEUTRAL
    confidence: float = 0.0
    feedback: str = ""

    @classmethod
    def from_domain(cls, analysis: AnswerAnalysis) -> "AnswerAnalysisSchema":
        return cls(
            score=analysis.score,
            strengths=analysis.strengths,
            weaknesses=analysis.weaknesses,
            key_points=analysis.key_points,
            sentiment=analysis.sentiment,
            confidence=analysis.confidence,
            feedback=analysis.feedback,
        )


class QuestionResponse(BaseModel):
    question_id: str
    text: str
    type: QuestionType
    options: List[str] = Field(default_factory=list)
    expected_answer_points: List[str] = Field(default_factory=list)
    time_limit: int
    answer: Optional[str] = None
    time_spent: Optional[int] = None
    answered_at: Optional[datetime] = None
    ai_score: Optional[float] = None
    ai_analysis: Optional[AnswerAnalysisSchema] = None

    @classmethod
    def from_domain(cls, question: InterviewQuestion) -> "QuestionResponse":
        return cls(
            question_id=question.question_id,
            text=question.text,
            type=question.type,
            options=question.options,
            expected_answer_points=question.expected_answer_points,
            time_limit=question.time_limit,
            answer=question.answer,
            time_spent=question.time_spent,
            answered_at=question.answered_at,
            ai_score=question.ai_score,
            ai_analysis=AnswerAnalysisSchema.from_domain(question.ai_analysis) if question.ai_analysis else None,
        )


class AssessmentSchema(BaseModel):
    technical_score: float
    communication_score: float
    problem_solving_score: float
    culture_fit_score: float
    recommendation: HiringRecommendation
    confidence: float
    strengths: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)
    key_insights: List[str] = Field(default_factory=list)
    used_fallback: bool = False


class FeedbackSchema(BaseModel):
    rating: int
    comments: Optional[str] = None
    submitted_at: Optional[datetime] = None


class InterviewResponse(BaseModel):
    id: str
    candidate_id: str
    job_id: Optional[str] = None
    job_match_id: Optional[str] = None
    template_id: Optional[str] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    status: InterviewStatus
    interview_link: Optional[str] = None
    questions: List[QuestionResponse] = Field(default_factory=list)
    overall_score: Optional[int] = None
    assessment: Optional[AssessmentSchema] = None
    feedback: Optional[FeedbackSchema] = None
    invitation_sent_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    expires_at: datetime

    @classmethod
    def from_domain(cls, interview: Interview, interview_link: Optional[str] = None) -> "InterviewResponse":
        assessment = interview.assessment
        feedback = interview.feedback
        return cls(
            id=str(interview.id),
            candidate_id=str(interview.candidate_id),
            job_id=str(interview.job_id) if interview.job_id else None,
            job_match_id=str(interview.job_match_id) if interview.job_match_id else None,
            template_id=str(interview.template_id) if interview.template_id else None,
            candidate_name=interview.candidate_name,
            candidate_email=interview.candidate_email,
            status=interview.status,
            interview_link=interview_link,
            questions=[QuestionResponse.from_domain(q) for q in interview.questions],
            overall_score=interview.overall_score,
            assessment=AssessmentSchema(
                technical_score=assessment.technical_score,
                communication_score=assessment.communication_score,
                problem_solving_score=assessment.problem_solving_score,
                culture_fit_score=assessment.culture_fit_score,
                recommendation=assessment.recommendation,
                confidence=assessment.confidence,
                strengths=assessment.strengths,
                concerns=assessment.concerns,
                key_insights=assessment.key_insights,
                used_fallback=assessment.used_fallback,
            ) if assessment else None,
            feedback=FeedbackSchema(
                rating=feedback.rating, comments=feedback.comments, submitted_at=feedback.submitted_at
            ) if feedback else None,
            invitation_sent_at=interview.invitation_sent_at,
            started_at=interview.started_at,
            completed_at=interview.completed_at,
            expires_at=interview.expires_at,
        )


class CandidateQuestionView(BaseModel):
    question_id: str
    text: str
    type: QuestionType
    options: List[str] = Field(default_factory=list)
    time_limit: int
    answered: bool = False


class CandidateInterviewView(BaseModel):
    """What the candidate portal is allowed to see."""

    status: InterviewStatus
    candidate_name: Optional[str] = None
    job_title: Optional[str] = None
    questions: List[CandidateQuestionView] = Field(default_factory=list)
    expires_at: datetime
    started_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, interview: Interview, job_title: Optional[str] = None) -> "CandidateInterviewView":
        return cls(
            status=interview.status,
            candidate_name=interview.candidate_name,
            job_title=job_title,
            questions=[
                CandidateQuestionView(
                    question_id=q.question_id,
                    text=q.text,
                    type=q.type,
                    options=q.options,
                    time_limit=q.time_limit,
                    answered=q.is_answered,
                )
                for q in interview.questions
            ],
            expires_at=interview.expires_at,
            started_at=interview.started_at,
        )


class CandidateStatusResponse(BaseModel):
    status: InterviewStatus
    answered_questions: int
    total_questions: int
    expires_at: datetime
    completed_at: Optional[datetime] = None


class AnswerAcceptedResponse(BaseModel):
    success: bool = True
    question_id: str
    answered_at: Optional[datetime] = None

"""AI-backed evaluation of interview answers and completed interviews."""

from typing import Optional, Sequence

from recruitai.domain.entities.interview import (
    AnswerAnalysis,
    HiringRecommendation,
    InterviewAssessment,
    InterviewQuestion,
    Sentiment,
)
from recruitai.domain.entities.job import Job
from recruitai.domain.interfaces import IInterviewAnalyzer
from recruitai.infrastructure.ai.base_analyzer import OpenAIAnalyzerBase
from recruitai.infrastructure.ai.schemas import AnswerAnalysisResponse, InterviewAssessmentResponse


class OpenAIInterviewAnalyzer(OpenAIAnalyzerBase, IInterviewAnalyzer):
    """Scores single answers and produces the final interview assessment."""

    async def analyze_answer(
        self,
        question: InterviewQuestion,
        answer: str,
        job_context: Optional[Job] = None,
    ) -> AnswerAnalysis:
        prompt = self._prompts.create_answer_analysis_prompt(
            question=question.text,
            question_type=question.type.value,
            answer=answer,
            expected_points=question.expected_answer_points,
            job_title=job_context.title if job_context else None,
        )
        response = await self._complete(prompt, AnswerAnalysisResponse)
        return AnswerAnalysis(
            score=response.score,
            strengths=list(response.strengths),
            weaknesses=list(response.weaknesses),
            key_points=list(response.key_points),
            sentiment=Sentiment(response.sentiment),
            confidence=response.confidence,
            feedback=response.feedback,
        )

    async def analyze_overall(
        self,
        answered_questions: Sequence[InterviewQuestion],
        job_context: Optional[Job] = None,
    ) -> InterviewAssessment:
        prompt = self._prompts.create_interview_assessment_prompt(
            [
                {"question": q.text, "answer": q.answer, "score": q.ai_score}
                for q in answered_questions
            ],
            job_title=job_context.title if job_context else None,
        )
        response = await self._complete(prompt, InterviewAssessmentResponse)
        return InterviewAssessment(
            technical_score=response.technical_score,
            communication_score=response.communication_score,
            problem_solving_score=response.problem_solving_score,
            culture_fit_score=response.culture_fit_score,
            strengths=list(response.strengths),
            concerns=list(response.concerns),
            key_insights=list(response.key_insights),
            recommendation=HiringRecommendation(response.recommendation),
            confidence=response.confidence,
        )

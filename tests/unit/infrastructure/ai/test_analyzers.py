"""Tests for the OpenAI-backed analyzers and their response validation."""

import json

import pytest
from unittest.mock import AsyncMock

from recruitai.domain.entities.interview import HiringRecommendation, InterviewQuestion, Sentiment
from recruitai.domain.entities.job_match import MatchDecision
from recruitai.domain.entities.resume import CareerLevel, ProcessingStatus
from recruitai.domain.exceptions import AIAnalysisError
from recruitai.infrastructure.ai.base_analyzer import parse_completion
from recruitai.infrastructure.ai.interview_analyzer import OpenAIInterviewAnalyzer
from recruitai.infrastructure.ai.match_analyzer import OpenAIMatchAnalyzer
from recruitai.infrastructure.ai.resume_analyzer import OpenAIResumeAnalyzer
from recruitai.infrastructure.ai.schemas import AnswerAnalysisResponse
from tests.fixtures.recruitment_fixtures import JobBuilder, ResumeBuilder

MATCH_PAYLOAD = {
    "overallScore": 84,
    "skillMatch": {"score": 90, "matched": ["Python", "Docker"], "missing": ["Kubernetes"]},
    "experienceMatch": {"score": 80, "analysis": "Solid backend tenure"},
    "educationMatch": {"score": 70, "analysis": "Relevant degree"},
    "cultureFit": {"score": 75, "analysis": "Collaborative"},
    "recommendation": "good_match",
    "reasoning": "Strong overlap on the core stack",
    "confidence": 0.8,
}


def _result(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _ai_service(content):
    service = AsyncMock()
    service.chat_completion = AsyncMock(return_value=_result(content))
    return service


class TestParseCompletion:

    def test_strips_markdown_code_fence(self):
        content = '```json\n{"score": 70, "confidence": 0.5}\n```'
        parsed = parse_completion(_result(content), AnswerAnalysisResponse)
        assert parsed.score == 70

    def test_invalid_json(self):
        with pytest.raises(AIAnalysisError, match="not valid JSON"):
            parse_completion(_result("Sure! Here is the analysis"), AnswerAnalysisResponse)

    def test_schema_violation(self):
        with pytest.raises(AIAnalysisError, match="AnswerAnalysisResponse"):
            parse_completion(_result('{"score": 140, "confidence": 0.5}'), AnswerAnalysisResponse)

    @pytest.mark.parametrize("result", [{}, {"choices": []}, _result(None), _result("")])
    def test_missing_content(self, result):
        with pytest.raises(AIAnalysisError):
            parse_completion(result, AnswerAnalysisResponse)


class TestMatchAnalyzer:

    @pytest.mark.asyncio
    async def test_maps_response_to_domain(self):
        service = _ai_service(json.dumps(MATCH_PAYLOAD))
        analyzer = OpenAIMatchAnalyzer(service)

        analysis = await analyzer.analyze(JobBuilder().build(), ResumeBuilder().build())

        assert analysis.overall_score == 84
        assert analysis.skill_match.missing == ["Kubernetes"]
        assert analysis.culture_fit.analysis == "Collaborative"
        assert analysis.recommendation == MatchDecision.GOOD_MATCH
        assert not analysis.used_fallback
        assert service.chat_completion.call_args.kwargs["response_format"] == {"type": "json_object"}

    @pytest.mark.asyncio
    async def test_json_mode_can_be_disabled(self):
        service = _ai_service(json.dumps(MATCH_PAYLOAD))
        analyzer = OpenAIMatchAnalyzer(service, json_mode=False)

        await analyzer.analyze(JobBuilder().build(), ResumeBuilder().build())

        assert "response_format" not in service.chat_completion.call_args.kwargs

    @pytest.mark.asyncio
    async def test_unknown_recommendation_rejected(self):
        payload = dict(MATCH_PAYLOAD, recommendation="hire_now")
        analyzer = OpenAIMatchAnalyzer(_ai_service(json.dumps(payload)))

        with pytest.raises(AIAnalysisError):
            await analyzer.analyze(JobBuilder().build(), ResumeBuilder().build())

    @pytest.mark.asyncio
    async def test_transport_failure_becomes_analysis_error(self):
        service = AsyncMock()
        service.chat_completion = AsyncMock(side_effect=RuntimeError("Chat completion failed: 503"))

        with pytest.raises(AIAnalysisError, match="503"):
            await OpenAIMatchAnalyzer(service).analyze(JobBuilder().build(), ResumeBuilder().build())


class TestResumeAnalyzer:

    @pytest.mark.asyncio
    async def test_extracts_attributes(self):
        payload = {
            "extractedSkills": ["Python", "SQL"],
            "experienceYears": 6,
            "keyStrengths": ["Mentoring"],
            "educationLevel": "MSc",
            "careerLevel": "senior",
        }
        analysis = await OpenAIResumeAnalyzer(_ai_service(json.dumps(payload))).analyze("resume text")

        assert analysis.extracted_skills == ["Python", "SQL"]
        assert analysis.experience_years == 6
        assert analysis.career_level == CareerLevel.SENIOR
        assert analysis.processing_status == ProcessingStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_negative_experience_rejected(self):
        analyzer = OpenAIResumeAnalyzer(_ai_service('{"experienceYears": -1}'))
        with pytest.raises(AIAnalysisError):
            await analyzer.analyze("resume text")


class TestInterviewAnalyzer:

    @pytest.mark.asyncio
    async def test_answer_analysis(self):
        payload = {
            "score": 72,
            "strengths": ["Clear"],
            "weaknesses": ["Brief"],
            "keyPoints": ["GIL"],
            "sentiment": "positive",
            "confidence": 0.7,
            "feedback": "Expand on trade-offs",
        }
        service = _ai_service(json.dumps(payload))
        question = InterviewQuestion.new("Explain the GIL", expected_answer_points=["threads"])

        analysis = await OpenAIInterviewAnalyzer(service).analyze_answer(
            question, "It serialises bytecode", JobBuilder().build()
        )

        assert analysis.score == 72
        assert analysis.sentiment == Sentiment.POSITIVE
        assert analysis.key_points == ["GIL"]
        content = service.chat_completion.call_args.kwargs["messages"][1]["content"]
        assert "Position: Backend Engineer" in content
        assert "Expected Points: threads" in content

    @pytest.mark.asyncio
    async def test_overall_assessment(self):
        payload = {
            "technicalScore": 80,
            "communicationScore": 70,
            "problemSolvingScore": 75,
            "cultureFitScore": 85,
            "strengths": ["Depth"],
            "concerns": [],
            "keyInsights": ["Pragmatic"],
            "recommendation": "yes",
            "confidence": 0.75,
        }
        question = InterviewQuestion.new("Q", answer="A", ai_score=80)

        assessment = await OpenAIInterviewAnalyzer(_ai_service(json.dumps(payload))).analyze_overall([question])

        assert assessment.recommendation == HiringRecommendation.YES
        assert assessment.culture_fit_score == 85
        assert not assessment.used_fallback

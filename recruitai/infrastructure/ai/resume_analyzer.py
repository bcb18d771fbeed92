"""AI-backed extraction of derived resume attributes."""

from recruitai.domain.entities.resume import CareerLevel, ProcessingStatus, ResumeAnalysis
from recruitai.domain.interfaces import IResumeAnalyzer
from recruitai.infrastructure.ai.base_analyzer import OpenAIAnalyzerBase
from recruitai.infrastructure.ai.schemas import ResumeAnalysisResponse

RESUME_ANALYSIS_CONFIDENCE = 0.85


class OpenAIResumeAnalyzer(OpenAIAnalyzerBase, IResumeAnalyzer):

    async def analyze(self, resume_text: str) -> ResumeAnalysis:
        prompt = self._prompts.create_resume_analysis_prompt(resume_text)
        response = await self._complete(prompt, ResumeAnalysisResponse)
        return ResumeAnalysis(
            extracted_skills=list(response.extracted_skills),
            experience_years=response.experience_years,
            key_strengths=list(response.key_strengths),
            education_level=response.education_level,
            career_level=CareerLevel(response.career_level) if response.career_level else None,
            processing_status=ProcessingStatus.COMPLETED,
            confidence=RESUME_ANALYSIS_CONFIDENCE,
        )

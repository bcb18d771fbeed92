"""AI-backed job/candidate match analysis."""

from recruitai.domain.entities.job import Job
from recruitai.domain.entities.job_match import FactorScore, MatchAnalysis, MatchDecision, SkillMatch
from recruitai.domain.entities.resume import Resume
from recruitai.domain.interfaces import IMatchAnalyzer
from recruitai.infrastructure.ai.base_analyzer import OpenAIAnalyzerBase
from recruitai.infrastructure.ai.schemas import FactorResponse, MatchAnalysisResponse


def _factor(response: FactorResponse) -> FactorScore:
    return FactorScore(score=response.score, analysis=response.analysis)


class OpenAIMatchAnalyzer(OpenAIAnalyzerBase, IMatchAnalyzer):
    """Asks the chat model for a per-dimension match analysis."""

    async def analyze(self, job: Job, resume: Resume) -> MatchAnalysis:
        prompt = self._prompts.create_job_matching_prompt(job, resume)
        response = await self._complete(prompt, MatchAnalysisResponse)
        return MatchAnalysis(
            overall_score=response.overall_score,
            skill_match=SkillMatch(
                score=response.skill_match.score,
                matched=list(response.skill_match.matched),
                missing=list(response.skill_match.missing),
            ),
            experience_match=_factor(response.experience_match),
            education_match=_factor(response.education_match),
            culture_fit=_factor(response.culture_fit),
            recommendation=MatchDecision(response.recommendation),
            reasoning=response.reasoning,
            confidence=response.confidence,
        )

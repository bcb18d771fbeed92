"""Domain service turning a match analysis into a tenant-weighted decision."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from recruitai.domain.entities.job_match import MatchAnalysis
from recruitai.domain.entities.matching_config import MatchingConfig, MatchingWeights
from recruitai.domain.services.scoring_service import round_half_up


@dataclass(frozen=True)
class MatchOutcome:
    """What the orchestrator should do with one analysed candidate."""

    weighted_score: float
    match_score: int
    auto_reject: bool
    meets_minimum: bool
    is_strong: bool


class IMatchingService(ABC):
    """Domain service interface for weighting and thresholding match analyses."""

    @abstractmethod
    def weighted_score(self, analysis: MatchAnalysis, weights: MatchingWeights) -> float:
        """Combine per-dimension scores using tenant weights."""
        pass

    @abstractmethod
    def evaluate(self, analysis: MatchAnalysis, config: MatchingConfig) -> MatchOutcome:
        """Apply tenant weights and thresholds to an analysis."""
        pass


class MatchingService(IMatchingService):
    """Concrete implementation of tenant-weighted match evaluation."""

    def weighted_score(self, analysis: MatchAnalysis, weights: MatchingWeights) -> float:
        return (
            analysis.skill_match.score * weights.skill_match
            + analysis.experience_match.score * weights.experience_match
            + analysis.education_match.score * weights.education_match
            + analysis.culture_fit.score * weights.culture_fit
        )

    def evaluate(self, analysis: MatchAnalysis, config: MatchingConfig) -> MatchOutcome:
        """
        Evaluate an analysis against the tenant configuration.

        Comparisons use the unrounded weighted score; only the persisted
        ``match_score`` is rounded. Auto-reject requires automatic matching to
        be enabled and is independent of the AI recommendation.
        """
        weighted = self.weighted_score(analysis, config.weights)
        thresholds = config.thresholds
        return MatchOutcome(
            weighted_score=weighted,
            match_score=max(0, min(100, round_half_up(weighted))),
            auto_reject=config.auto_matching_enabled and weighted < thresholds.auto_reject_score,
            meets_minimum=weighted >= thresholds.minimum_match_score,
            is_strong=weighted >= thresholds.strong_match_score,
        )

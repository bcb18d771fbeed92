"""Per-tenant matching configuration and its validation rules."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict, List

from recruitai.domain.exceptions import ValidationError
from recruitai.domain.value_objects import MatchingConfigId, TenantId

WEIGHT_SUM_TOLERANCE = 0.01


@dataclass
class MatchingThresholds:
    minimum_match_score: float = 60
    strong_match_score: float = 80
    auto_reject_score: float = 30


@dataclass
class MatchingWeights:
    skill_match: float = 0.4
    experience_match: float = 0.3
    education_match: float = 0.15
    culture_fit: float = 0.15

    def total(self) -> float:
        return self.skill_match + self.experience_match + self.education_match + self.culture_fit


@dataclass
class ConfigValidationResult:
    """Outcome of validating a matching configuration."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class MatchingConfig:
    """Aggregate root holding a tenant's matching thresholds, weights and flags."""

    id: MatchingConfigId
    tenant_id: TenantId
    thresholds: MatchingThresholds = field(default_factory=MatchingThresholds)
    weights: MatchingWeights = field(default_factory=MatchingWeights)
    auto_matching_enabled: bool = True
    ai_enabled: bool = True
    notify_on_strong_match: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def default_for(cls, tenant_id: TenantId) -> "MatchingConfig":
        return cls(id=MatchingConfigId.generate(), tenant_id=tenant_id)

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """Merge a partial update; nested ``thresholds``/``weights`` merge key by key."""
        for section, target in (("thresholds", self.thresholds), ("weights", self.weights)):
            section_changes = changes.get(section) or {}
            known = {f.name for f in fields(target)}
            for key, value in section_changes.items():
                if key not in known:
                    raise ValidationError(f"Unknown {section} field: {key}")
                if value is not None:
                    setattr(target, key, value)

        for flag in ("auto_matching_enabled", "ai_enabled", "notify_on_strong_match"):
            if changes.get(flag) is not None:
                setattr(self, flag, bool(changes[flag]))

        self.updated_at = datetime.now(timezone.utc)


def validate_matching_config(config: MatchingConfig) -> ConfigValidationResult:
    """
    Validate a configuration before it is persisted.

    Weights must each be finite, lie within [0, 1] and sum to 1.0 within
    ``WEIGHT_SUM_TOLERANCE``. Thresholds must be finite and lie within
    [0, 100]. Threshold ordering is not checked.
    """
    errors: List[str] = []

    for f in fields(config.weights):
        value = getattr(config.weights, f.name)
        if not math.isfinite(value) or value < 0 or value > 1:
            errors.append(f"weights.{f.name} must be between 0 and 1 (got {value})")

    total = config.weights.total()
    if not math.isfinite(total) or abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        errors.append(f"Matching weights must sum to 1.0 (got {total:.2f})")

    for f in fields(config.thresholds):
        value = getattr(config.thresholds, f.name)
        if not math.isfinite(value) or value < 0 or value > 100:
            errors.append(f"thresholds.{f.name} must be between 0 and 100 (got {value})")

    return ConfigValidationResult(is_valid=not errors, errors=errors)

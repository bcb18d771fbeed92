"""Tests for matching configuration defaults, partial updates and validation."""

import pytest
from hypothesis import given, strategies as st

from recruitai.domain.entities.matching_config import (
    MatchingConfig,
    MatchingWeights,
    validate_matching_config,
)
from recruitai.domain.exceptions import ValidationError
from tests.fixtures.recruitment_fixtures import TENANT_A

unit_floats = st.floats(min_value=0, max_value=1, allow_nan=False)


def _config(**weights) -> MatchingConfig:
    config = MatchingConfig.default_for(TENANT_A)
    config.weights = MatchingWeights(**weights)
    return config


class TestDefaults:

    def test_default_values(self):
        config = MatchingConfig.default_for(TENANT_A)

        assert config.thresholds.minimum_match_score == 60
        assert config.thresholds.strong_match_score == 80
        assert config.thresholds.auto_reject_score == 30
        assert config.weights.total() == pytest.approx(1.0)
        assert config.auto_matching_enabled and config.ai_enabled and config.notify_on_strong_match

    def test_defaults_are_valid(self):
        assert validate_matching_config(MatchingConfig.default_for(TENANT_A)).is_valid


class TestWeightSum:

    def test_sum_within_tolerance_is_accepted(self):
        result = validate_matching_config(
            _config(skill_match=0.4, experience_match=0.3, education_match=0.15, culture_fit=0.155)
        )
        assert result.is_valid

    def test_sum_outside_tolerance_is_rejected(self):
        result = validate_matching_config(
            _config(skill_match=0.5, experience_match=0.3, education_match=0.15, culture_fit=0.15)
        )
        assert not result.is_valid
        assert any("sum to 1.0" in e for e in result.errors)

    @given(unit_floats, unit_floats, unit_floats, unit_floats)
    def test_validity_follows_weight_sum(self, a, b, c, d):
        total = a + b + c + d
        # Stay clear of the tolerance edge where float error decides
        if abs(abs(total - 1.0) - 0.01) < 1e-9:
            return
        result = validate_matching_config(
            _config(skill_match=a, experience_match=b, education_match=c, culture_fit=d)
        )
        assert result.is_valid == (abs(total - 1.0) <= 0.01)


class TestRanges:

    def test_weight_outside_unit_interval(self):
        result = validate_matching_config(
            _config(skill_match=1.3, experience_match=-0.3, education_match=0.0, culture_fit=0.0)
        )
        assert not result.is_valid
        assert any("weights.skill_match" in e for e in result.errors)
        assert any("weights.experience_match" in e for e in result.errors)

    def test_threshold_outside_range(self):
        config = MatchingConfig.default_for(TENANT_A)
        config.thresholds.strong_match_score = 120
        result = validate_matching_config(config)
        assert result.errors == ["thresholds.strong_match_score must be between 0 and 100 (got 120)"]

    def test_threshold_ordering_is_not_enforced(self):
        config = MatchingConfig.default_for(TENANT_A)
        config.thresholds.minimum_match_score = 90
        config.thresholds.strong_match_score = 50
        assert validate_matching_config(config).is_valid


class TestApplyChanges:

    def test_nested_sections_merge_key_by_key(self):
        config = MatchingConfig.default_for(TENANT_A)
        config.apply_changes({"thresholds": {"minimum_match_score": 70}, "ai_enabled": False})

        assert config.thresholds.minimum_match_score == 70
        assert config.thresholds.strong_match_score == 80
        assert config.ai_enabled is False
        assert config.notify_on_strong_match is True

    def test_unknown_field_is_rejected(self):
        config = MatchingConfig.default_for(TENANT_A)
        with pytest.raises(ValidationError):
            config.apply_changes({"weights": {"salary": 0.1}})


class TestNonFiniteValues:

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_weight_is_rejected(self, value):
        result = validate_matching_config(
            _config(skill_match=value, experience_match=0.3, education_match=0.15, culture_fit=0.15)
        )
        assert not result.is_valid
        assert any("weights.skill_match" in e for e in result.errors)
        assert any("sum to 1.0" in e for e in result.errors)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_threshold_is_rejected(self, value):
        config = MatchingConfig.default_for(TENANT_A)
        config.thresholds.auto_reject_score = value
        result = validate_matching_config(config)
        assert not result.is_valid
        assert any("thresholds.auto_reject_score" in e for e in result.errors)

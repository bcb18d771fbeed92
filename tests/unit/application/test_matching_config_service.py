"""Unit tests for MatchingConfigService."""

import pytest

from recruitai.application.matching_config_service import MatchingConfigService
from recruitai.domain.entities.matching_config import MatchingConfig
from recruitai.domain.exceptions import MatchingConfigValidationError
from tests.fixtures.recruitment_fixtures import TENANT_A, TENANT_B


@pytest.fixture
def service(matching_config_repository):
    return MatchingConfigService(matching_config_repository)


async def test_first_access_persists_defaults(service, matching_config_repository):
    config = await service.get_or_create(TENANT_A)

    assert config.tenant_id == TENANT_A
    assert matching_config_repository.calls("save") == [("save", TENANT_A)]

    again = await service.get_or_create(TENANT_A)
    assert again.id == config.id
    assert len(matching_config_repository.calls("save")) == 1


async def test_tenants_have_independent_configs(service):
    await service.update(TENANT_A, {"thresholds": {"minimum_match_score": 75}})

    other = await service.get_or_create(TENANT_B)
    assert other.thresholds.minimum_match_score == 60


async def test_valid_update_is_saved(service, matching_config_repository):
    updated = await service.update(
        TENANT_A,
        {"weights": {"skill_match": 0.5, "experience_match": 0.2}, "notify_on_strong_match": False},
    )

    assert updated.weights.skill_match == 0.5
    assert updated.notify_on_strong_match is False
    assert matching_config_repository.configs[TENANT_A].weights.experience_match == 0.2


async def test_invalid_weight_sum_is_rejected_and_not_saved(service, matching_config_repository):
    await service.get_or_create(TENANT_A)

    with pytest.raises(MatchingConfigValidationError) as exc_info:
        await service.update(TENANT_A, {"weights": {"skill_match": 0.9}})

    assert any("sum to 1.0" in e for e in exc_info.value.errors)
    assert matching_config_repository.configs[TENANT_A].weights.skill_match == 0.4


async def test_save_validates(service, matching_config_repository):
    config = MatchingConfig.default_for(TENANT_A)
    config.thresholds.auto_reject_score = -5

    with pytest.raises(MatchingConfigValidationError):
        await service.save(config)
    assert matching_config_repository.configs == {}

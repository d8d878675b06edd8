"""Tests for the title chain scenario."""

import pytest

from deed_registry.config import ScenarioConfig
from deed_registry.models import PropertyStatus
from deed_registry.scenarios import TitleChainScenario


@pytest.fixture
def scenario(seed: int) -> TitleChainScenario:
    """Small scenario with every optional step always taken."""
    return TitleChainScenario(
        num_properties=8,
        num_principals=5,
        max_transfers_per_property=3,
        verification_rate=1.0,
        documents_per_property=2,
        status_change_rate=1.0,
        access_grant_rate=1.0,
        seed=seed,
    )


class TestTitleChainScenario:
    """Tests for TitleChainScenario."""

    def test_generate_populates_registry(self, scenario: TitleChainScenario) -> None:
        registry = scenario.generate()

        assert registry.get_property_count() == 8
        assert len(scenario.principals) == 5
        for property_id in range(1, 9):
            assert registry.get_verification(property_id).verified is True
            assert registry.get_owner(property_id) in scenario.principals
            assert len(registry.get_status_history(property_id)) >= 1

    def test_every_call_accepted(self, scenario: TitleChainScenario) -> None:
        scenario.generate()

        assert scenario.get_summary()["rejected_calls"] == 0

    def test_chain_of_title_is_consistent(self, scenario: TitleChainScenario) -> None:
        """Test that each owner is the recipient of the latest transfer."""
        registry = scenario.generate()

        for property_id in range(1, 9):
            history = registry.get_transfer_history(property_id)
            for earlier, later in zip(history, history[1:]):
                assert later.from_owner == earlier.to_owner
            if history:
                assert registry.get_owner(property_id) == history[-1].to_owner

    def test_one_block_per_call(self, scenario: TitleChainScenario) -> None:
        registry = scenario.generate()

        assert registry.clock.height == 1 + len(registry.events())

    def test_summary(self, scenario: TitleChainScenario) -> None:
        scenario.generate()

        summary = scenario.get_summary()

        assert summary["total_properties"] == 8
        assert summary["total_verified"] == 8
        assert summary["properties"] == 8
        assert summary["transfers"] == summary["total_transfers"]
        assert sum(summary["status_distribution"].values()) == 8
        assert set(summary["status_distribution"]) == {s.value for s in PropertyStatus}

    def test_reproducible(self, seed: int) -> None:
        first = TitleChainScenario(num_properties=5, num_principals=4, seed=seed).generate()
        second = TitleChainScenario(num_properties=5, num_principals=4, seed=seed).generate()

        assert first.snapshot() == second.snapshot()

    def test_config_overrides_arguments(self, seed: int) -> None:
        config = ScenarioConfig(name="tiny", num_properties=2, num_principals=3)

        scenario = TitleChainScenario(num_properties=100, seed=seed, config=config)

        assert scenario.num_properties == 2
        assert scenario.generate().get_property_count() == 2

    def test_needs_two_principals(self) -> None:
        with pytest.raises(ValueError):
            TitleChainScenario(num_principals=1)

"""Pre-built registry scenarios."""

from deed_registry.scenarios.title_chain import TitleChainScenario

__all__ = ["TitleChainScenario"]

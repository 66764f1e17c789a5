"""Shared test fixtures: generators, registries, and common option sets."""

from __future__ import annotations

import pytest

from progression_engine.engine import TemplateGenerator
from progression_engine.models.options import ProgressionOptions
from progression_engine.registry import StrategyRegistry


@pytest.fixture
def registry() -> StrategyRegistry:
    reg = StrategyRegistry()
    reg.discover_strategies()
    return reg

@pytest.fixture
def generator(registry: StrategyRegistry) -> TemplateGenerator:
    return TemplateGenerator(registry=registry)

@pytest.fixture
def default_options() -> ProgressionOptions:
    return ProgressionOptions()

@pytest.fixture
def half_deload_every_second_week() -> ProgressionOptions:
    """Deload every 2nd week at half load."""
    return ProgressionOptions(deload_frequency=2, deload_factor=0.5)

"""Tests for the accumulation block strategy."""

from __future__ import annotations

import math

import pytest

from progression_engine.models.options import ProgressionOptions
from progression_engine.strategies.accumulation import AccumulationPhase


@pytest.fixture
def strategy() -> AccumulationPhase:
    return AccumulationPhase()


class TestAccumulationCurve:
    def test_starts_at_base(self, strategy: AccumulationPhase) -> None:
        load = strategy.compute(5, 5, 1, 5)
        assert load.intensity == pytest.approx(5.0)
        assert load.volume == pytest.approx(5.0)

    def test_midpoint(self, strategy: AccumulationPhase) -> None:
        load = strategy.compute(5, 5, 3, 5)
        assert load.intensity == pytest.approx(5 + 2 * math.sqrt(0.5))
        assert load.volume == pytest.approx(7.5)

    def test_ends_with_full_delta_and_max_volume(self, strategy: AccumulationPhase) -> None:
        load = strategy.compute(5, 5, 5, 5)
        assert load.intensity == pytest.approx(7.0)
        assert load.volume == pytest.approx(10.0)

    def test_intensity_gain_front_loaded(self, strategy: AccumulationPhase) -> None:
        gains = [strategy.compute(5, 5, w, 5).intensity for w in range(1, 6)]
        steps = [b - a for a, b in zip(gains, gains[1:])]
        assert steps == sorted(steps, reverse=True)

    def test_custom_intensity_delta(self, strategy: AccumulationPhase) -> None:
        options = ProgressionOptions(intensity_delta=0.0)
        for week in range(1, 6):
            assert strategy.compute(5, 5, week, 5, options).intensity == pytest.approx(5.0)

    def test_single_week_block(self, strategy: AccumulationPhase) -> None:
        load = strategy.compute(5, 5, 1, 1)
        assert load.intensity == pytest.approx(5.0)
        assert load.volume == pytest.approx(5.0)

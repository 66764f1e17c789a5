"""Linear progression: compounding growth per effective week."""

from __future__ import annotations

import math

from progression_engine.math.weeks import effective_week
from progression_engine.models.enums import ModelType
from progression_engine.models.load import TrainingLoad
from progression_engine.models.options import ProgressionOptions
from progression_engine.strategies.base import ProgressionStrategy


class LinearProgression(ProgressionStrategy):
    """Grow intensity and volume by ``progression_rate`` each effective week.

    Despite the name, growth compounds: ``base * (1 + rate) ** (eff - 1)``.
    There is no fixed end point; clamping caps long blocks at 10. This is
    also the fallback for unrecognised model names.
    """

    model_type = ModelType.LINEAR
    description = "Steady compounding increase of intensity and volume"

    def raw_load(
        self,
        base_intensity: float,
        base_volume: float,
        week: int,
        macrocycle_length: int,
        options: ProgressionOptions,
    ) -> TrainingLoad:
        mapped = effective_week(week, macrocycle_length, options.deload_frequency)
        growth = _compound(1 + options.progression_rate, mapped.effective_week - 1)
        return TrainingLoad(
            intensity=base_intensity * growth,
            volume=base_volume * growth,
        )


def _compound(ratio: float, exponent: int) -> float:
    """``ratio ** exponent``, saturating to infinity instead of overflowing."""
    try:
        return math.pow(ratio, exponent)
    except OverflowError:
        if ratio < 0 and exponent % 2:
            return -math.inf
        return math.inf

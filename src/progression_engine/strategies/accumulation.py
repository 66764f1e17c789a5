"""Accumulation block: high volume, modest intensity gain."""

from __future__ import annotations

from progression_engine.models.enums import (
    ACCUMULATION_INTENSITY_EXPONENT,
    SCALE_MAX,
    ModelType,
)
from progression_engine.models.load import TrainingLoad
from progression_engine.models.options import ProgressionOptions
from progression_engine.strategies.base import ProgressionStrategy, progress_fraction


class AccumulationPhase(ProgressionStrategy):
    """Volume ramps linearly to 10; intensity adds ``intensity_delta * sqrt(f)``.

    The square-root curve front-loads the small intensity gain so later
    weeks stay volume-dominated.
    """

    model_type = ModelType.ACCUMULATION
    description = "Volume climbs to the maximum while intensity rises slightly"

    def raw_load(
        self,
        base_intensity: float,
        base_volume: float,
        week: int,
        macrocycle_length: int,
        options: ProgressionOptions,
    ) -> TrainingLoad:
        fraction = progress_fraction(week, macrocycle_length, options.deload_frequency)
        return TrainingLoad(
            intensity=base_intensity
            + options.intensity_delta * fraction ** ACCUMULATION_INTENSITY_EXPONENT,
            volume=base_volume + (SCALE_MAX - base_volume) * fraction,
        )

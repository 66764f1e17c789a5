"""Transmutation block: intensity climbs steeply, volume shifts slightly."""

from __future__ import annotations

from progression_engine.models.enums import SCALE_MAX, TRANSMUTATION_EXPONENT, ModelType
from progression_engine.models.load import TrainingLoad
from progression_engine.models.options import ProgressionOptions
from progression_engine.strategies.base import ProgressionStrategy, progress_fraction


class TransmutationPhase(ProgressionStrategy):
    model_type = ModelType.TRANSMUTATION
    description = "Intensity accelerates toward the maximum; volume nudged by a delta"

    def raw_load(
        self,
        base_intensity: float,
        base_volume: float,
        week: int,
        macrocycle_length: int,
        options: ProgressionOptions,
    ) -> TrainingLoad:
        fraction = progress_fraction(week, macrocycle_length, options.deload_frequency)
        curve = fraction ** TRANSMUTATION_EXPONENT
        # volume_delta < 0 trims volume over the block instead of adding to it
        return TrainingLoad(
            intensity=base_intensity + (SCALE_MAX - base_intensity) * curve,
            volume=base_volume + options.volume_delta * curve,
        )

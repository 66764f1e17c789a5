"""Undulating progression: a rising trend with a weekly wave on top."""

from __future__ import annotations

import math

from progression_engine.models.enums import SCALE_MAX, ModelType
from progression_engine.models.load import TrainingLoad
from progression_engine.models.options import ProgressionOptions
from progression_engine.strategies.base import ProgressionStrategy, progress_fraction


class UndulatingProgression(ProgressionStrategy):
    """Linear trend from base to 10 plus a sine/cosine oscillation.

    Intensity follows the sine and volume the cosine of the same wave, so
    the two move out of phase. The wave uses the nominal week number, while
    the trend uses the deload-compressed fraction.
    """

    model_type = ModelType.UNDULATING
    description = "Rising trend with out-of-phase intensity/volume waves"

    def raw_load(
        self,
        base_intensity: float,
        base_volume: float,
        week: int,
        macrocycle_length: int,
        options: ProgressionOptions,
    ) -> TrainingLoad:
        fraction = progress_fraction(week, macrocycle_length, options.deload_frequency)

        # A non-positive period has no wave length; keep only the trend
        if options.period > 0:
            phase = 2 * math.pi * (week - 1) / options.period
            wave_intensity = options.amplitude * math.sin(phase)
            wave_volume = options.amplitude * math.cos(phase)
        else:
            wave_intensity = wave_volume = 0.0

        return TrainingLoad(
            intensity=base_intensity + (SCALE_MAX - base_intensity) * fraction + wave_intensity,
            volume=base_volume + (SCALE_MAX - base_volume) * fraction + wave_volume,
        )

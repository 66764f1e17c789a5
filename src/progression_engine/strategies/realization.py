"""Realization (peaking/taper) block.

Two phases split at the taper week:

- Pre-taper: intensity and volume both build linearly from base, reaching
  1.7x and 1.5x base by the taper start.
- Taper: intensity climbs toward 10 on a front-loaded ``f ** 0.7`` curve
  while volume falls toward ``target_volume`` on a smoothstep. The final
  week is pinned to exactly (10, target_volume).

Fractions here are taken from nominal week numbers, not the deload-
compressed effective weeks the other strategies use; taper timing is
defined in calendar weeks. Deload scaling is still applied afterwards by
``ProgressionStrategy.compute``.

Reference:
    Issurin (2010). New horizons for the methodology and physiology of
    training periodization. Sports Med 40(3):189-206.
"""

from __future__ import annotations

from progression_engine.math.load import round_half_away_from_zero
from progression_engine.models.enums import (
    REALIZATION_INTENSITY_BUILD,
    REALIZATION_TAPER_INTENSITY_EXPONENT,
    REALIZATION_TAPER_START_FRACTION,
    REALIZATION_VOLUME_BUILD,
    SCALE_MAX,
    ModelType,
)
from progression_engine.models.load import TrainingLoad
from progression_engine.models.options import ProgressionOptions
from progression_engine.strategies.base import ProgressionStrategy


def taper_start_week(macrocycle_length: int, taper_start: int | None) -> int:
    """Week the taper begins: *taper_start* if set, else 2/3 into the block."""
    if taper_start:
        return taper_start
    return round_half_away_from_zero(macrocycle_length * REALIZATION_TAPER_START_FRACTION)


def _smoothstep(position: float) -> float:
    return 3 * position**2 - 2 * position**3


class RealizationPhase(ProgressionStrategy):
    """Build, then taper volume while driving intensity to peak."""

    model_type = ModelType.REALIZATION
    description = "Peak intensity with a tapered volume ending on target"

    def raw_load(
        self,
        base_intensity: float,
        base_volume: float,
        week: int,
        macrocycle_length: int,
        options: ProgressionOptions,
    ) -> TrainingLoad:
        taper_week = taper_start_week(macrocycle_length, options.taper_start)

        if week < taper_week:
            pre_fraction = (week - 1) / max(1, taper_week - 1)
            return TrainingLoad(
                intensity=base_intensity
                + base_intensity * REALIZATION_INTENSITY_BUILD * pre_fraction,
                volume=base_volume + base_volume * REALIZATION_VOLUME_BUILD * pre_fraction,
            )

        # Peak week lands exactly on target regardless of curve drift
        if week == macrocycle_length:
            return TrainingLoad(intensity=float(SCALE_MAX), volume=options.target_volume)

        taper_period = macrocycle_length - taper_week
        taper_fraction = (week - taper_week) / taper_period if taper_period > 0 else 1.0

        pre_taper_intensity = base_intensity + base_intensity * REALIZATION_INTENSITY_BUILD
        intensity = pre_taper_intensity + (SCALE_MAX - pre_taper_intensity) * (
            taper_fraction**REALIZATION_TAPER_INTENSITY_EXPONENT
        )

        pre_taper_volume = base_volume + base_volume * REALIZATION_VOLUME_BUILD
        drop = pre_taper_volume - options.target_volume
        if taper_period > 1:
            volume = pre_taper_volume - drop * _smoothstep(taper_fraction)
        else:
            volume = pre_taper_volume - drop * taper_fraction

        return TrainingLoad(intensity=intensity, volume=volume)

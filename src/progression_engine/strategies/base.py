"""Abstract base class for all progression strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from progression_engine.math.load import apply_deload, clamp_load
from progression_engine.math.weeks import effective_week
from progression_engine.models.enums import ModelType
from progression_engine.models.load import TrainingLoad
from progression_engine.models.options import ProgressionOptions


def progress_fraction(
    week: int, macrocycle_length: int, deload_frequency: int | None
) -> float:
    """How far a week is through its effective block, from 0.0 to 1.0.

    Deload weeks are compressed out first, so the final effective week of
    the block maps to 1.0. A block with a single effective week stays at 0.
    """
    mapped = effective_week(week, macrocycle_length, deload_frequency)
    if mapped.max_effective_weeks <= 1:
        return 0.0
    return (mapped.effective_week - 1) / (mapped.max_effective_weeks - 1)


class ProgressionStrategy(ABC):
    """Base class for the periodization curves of the progression engine.

    Each strategy maps base values and a week position to a raw
    intensity/volume pair following its own curve shape. Strategies are
    discovered automatically by the StrategyRegistry and selected by the
    TemplateGenerator.

    Subclasses must define:
        model_type: the ModelType the strategy implements
        description: one-line summary shown in the CLI table header
        raw_load(): the unclamped curve for one week
    """

    model_type: ModelType
    description: str

    @abstractmethod
    def raw_load(
        self,
        base_intensity: float,
        base_volume: float,
        week: int,
        macrocycle_length: int,
        options: ProgressionOptions,
    ) -> TrainingLoad:
        """Compute the curve value for a week before deload and clamping."""
        ...

    def compute(
        self,
        base_intensity: float,
        base_volume: float,
        week: int,
        macrocycle_length: int,
        options: ProgressionOptions | None = None,
    ) -> TrainingLoad:
        """Compute the final, unrounded load for a week.

        Args:
            base_intensity: Starting intensity on the 1-10 scale.
            base_volume: Starting volume on the 1-10 scale.
            week: 1-indexed week number.
            macrocycle_length: Total weeks in the block.
            options: Strategy and deload options. Defaults apply when None.

        Returns:
            TrainingLoad with both values inside [1, 10].
        """
        options = options or ProgressionOptions()
        load = self.raw_load(base_intensity, base_volume, week, macrocycle_length, options)
        load = apply_deload(load, week, options.deload_frequency, options.deload_factor)
        return clamp_load(load)

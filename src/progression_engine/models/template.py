"""Progression template — the final output of the progression engine."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from progression_engine.models.enums import ModelType


@dataclass(frozen=True)
class WeekPrescription:
    """Rounded intensity and volume prescribed for one week of a mesocycle."""

    week: int  # 1-indexed
    intensity: int  # 1-10
    volume: int  # 1-10
    is_deload: bool = False


@dataclass(frozen=True)
class ProgressionTemplate:
    """Week-by-week prescriptions for a whole mesocycle, ordered by week.

    ``model_type`` is the model actually used, which is LINEAR when the
    requested name was not recognised.
    """

    model_type: ModelType
    weeks: tuple[WeekPrescription, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.weeks)

    def __iter__(self) -> Iterator[WeekPrescription]:
        return iter(self.weeks)

    @property
    def duration(self) -> int:
        """Number of weeks in the template."""
        return len(self.weeks)

    @property
    def peak_intensity(self) -> int | None:
        """Highest prescribed intensity, or None for an empty template."""
        return max((w.intensity for w in self.weeks), default=None)

    @property
    def deload_weeks(self) -> tuple[int, ...]:
        """Week numbers that were scaled down as deloads."""
        return tuple(w.week for w in self.weeks if w.is_deload)

    def for_week(self, week: int) -> WeekPrescription:
        """Look up the prescription for a 1-indexed week.

        Raises:
            ValueError: If the week is outside the template.
        """
        if not 1 <= week <= len(self.weeks):
            raise ValueError(
                f"Week {week} is outside template range (1-{len(self.weeks)})"
            )
        return self.weeks[week - 1]

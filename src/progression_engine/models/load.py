"""Raw intensity/volume pair produced by a progression strategy."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrainingLoad:
    """Unrounded intensity and volume for a single week.

    Values are on the 1-10 display scale once clamped; before clamping they
    may fall outside it.
    """

    intensity: float
    volume: float

    def scaled(self, factor: float) -> TrainingLoad:
        """Return a new load with both values multiplied by *factor*."""
        return TrainingLoad(self.intensity * factor, self.volume * factor)

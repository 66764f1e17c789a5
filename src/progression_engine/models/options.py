"""Per-template configuration for the progression strategies."""

from __future__ import annotations

import dataclasses
import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass

from progression_engine.exceptions import InvalidOptionsError
from progression_engine.models.enums import (
    DEFAULT_AMPLITUDE,
    DEFAULT_DELOAD_FACTOR,
    DEFAULT_INTENSITY_DELTA,
    DEFAULT_PERIOD,
    DEFAULT_PROGRESSION_RATE,
    DEFAULT_TARGET_VOLUME,
    DEFAULT_VOLUME_DELTA,
)

# camelCase keys used by the web client → field names
_CAMEL_CASE_KEYS: dict[str, str] = {
    "deloadFrequency": "deload_frequency",
    "deloadFactor": "deload_factor",
    "intensityDelta": "intensity_delta",
    "volumeDelta": "volume_delta",
    "targetVolume": "target_volume",
    "progressionRate": "progression_rate",
    "taperStart": "taper_start",
}

_INTEGER_FIELDS = frozenset({"deload_frequency", "taper_start"})


@dataclass(frozen=True)
class ProgressionOptions:
    """Options shared by all strategies; each strategy reads only its own.

    Attributes:
        deload_frequency: Every Nth week is a deload week. None or 0 disables.
        deload_factor: Multiplier applied to both values on deload weeks.
        amplitude: Undulating wave height.
        period: Undulating wave length in weeks.
        intensity_delta: Accumulation intensity gain across the block.
        volume_delta: Transmutation volume change across the block (may be
            negative).
        target_volume: Realization volume on the final week.
        progression_rate: Linear compounding rate per effective week.
        taper_start: Realization week where the taper begins. None uses
            2/3 of the block.
    """

    deload_frequency: int | None = None
    deload_factor: float = DEFAULT_DELOAD_FACTOR
    amplitude: float = DEFAULT_AMPLITUDE
    period: float = DEFAULT_PERIOD
    intensity_delta: float = DEFAULT_INTENSITY_DELTA
    volume_delta: float = DEFAULT_VOLUME_DELTA
    target_volume: float = DEFAULT_TARGET_VOLUME
    progression_rate: float = DEFAULT_PROGRESSION_RATE
    taper_start: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> ProgressionOptions:
        """Build options from a loosely typed mapping (e.g. a JSON body).

        Accepts both camelCase and snake_case keys. Unknown keys are ignored
        and None values fall back to the defaults.

        Raises:
            InvalidOptionsError: If a known key holds a non-numeric value.
        """
        if not data:
            return cls()

        field_names = {f.name for f in dataclasses.fields(cls)}
        values: dict[str, object] = {}
        for key, raw in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in field_names or raw is None:
                continue
            values[name] = _coerce(name, raw)
        return cls(**values)  # type: ignore[arg-type]


def _coerce(name: str, raw: object) -> int | float:
    # bool is an int subclass but never a meaningful option value
    if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
        raise InvalidOptionsError(
            f"Option {name!r} must be a number, got {type(raw).__name__}",
            field=name,
        )
    if not math.isfinite(raw):
        raise InvalidOptionsError(
            f"Option {name!r} must be finite, got {raw}", field=name
        )
    if name in _INTEGER_FIELDS:
        if not isinstance(raw, numbers.Integral) and raw != int(raw):
            raise InvalidOptionsError(
                f"Option {name!r} must be a whole number of weeks, got {raw}",
                field=name,
            )
        return int(raw)
    return float(raw)

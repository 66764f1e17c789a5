"""Load post-processing: deload scaling, clamping, and rounding.

Every strategy applies these in a fixed order: raw curve value, then
deload scaling, then clamping to the display scale. Rounding happens once,
when the template is assembled.
"""

from __future__ import annotations

import math

from progression_engine.math.weeks import is_deload_week
from progression_engine.models.enums import DEFAULT_DELOAD_FACTOR, SCALE_MAX, SCALE_MIN
from progression_engine.models.load import TrainingLoad


def clamp(value: float, minimum: float = SCALE_MIN, maximum: float = SCALE_MAX) -> float:
    """Bound *value* into ``[minimum, maximum]``."""
    return max(minimum, min(maximum, value))


def clamp_load(load: TrainingLoad) -> TrainingLoad:
    """Clamp both intensity and volume to the 1-10 display scale."""
    return TrainingLoad(clamp(load.intensity), clamp(load.volume))


def apply_deload(
    load: TrainingLoad,
    week: int,
    deload_frequency: int | None,
    deload_factor: float = DEFAULT_DELOAD_FACTOR,
) -> TrainingLoad:
    """Scale a raw load down when the week falls on the deload cadence.

    Args:
        load: Unclamped load from a progression curve.
        week: 1-indexed week number.
        deload_frequency: Every Nth week is a deload; None disables.
        deload_factor: Multiplier for both values on deload weeks.

    Returns:
        The scaled load on deload weeks, otherwise *load* unchanged.
    """
    if not is_deload_week(week, deload_frequency):
        return load
    return load.scaled(deload_factor)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with .5 moving away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(8.5) == 8``),
    which would pull exact half-points on the scale down on even numbers.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))

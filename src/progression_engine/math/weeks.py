"""Week mapping: effective week numbers with deload weeks compressed out.

Deload weeks do not add progression momentum. The curve continues as if
those weeks were skipped, while the deload week's own output is scaled
down separately (see ``progression_engine.math.load.apply_deload``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EffectiveWeek:
    """Week position after removing the slots consumed by deload weeks."""

    effective_week: int
    max_effective_weeks: int


def deloads_enabled(deload_frequency: int | None) -> bool:
    """Return True when *deload_frequency* describes a real cadence."""
    return deload_frequency is not None and deload_frequency > 0


def is_deload_week(week: int, deload_frequency: int | None) -> bool:
    """Determine if a 1-indexed week falls on the deload cadence.

    Args:
        week: 1-indexed week number.
        deload_frequency: Every Nth week is a deload. None, 0 or a negative
            value disables deloads.

    Returns:
        True if the week is a deload week.
    """
    if not deloads_enabled(deload_frequency):
        return False
    return week % deload_frequency == 0  # type: ignore[operator]


def effective_week(
    week: int, total_weeks: int, deload_frequency: int | None
) -> EffectiveWeek:
    """Map a nominal week to its effective week and effective block length.

    Args:
        week: 1-indexed week number.
        total_weeks: Length of the mesocycle in weeks.
        deload_frequency: Deload cadence, or None for no deloads.

    Returns:
        EffectiveWeek. Without a cadence this is ``(week, total_weeks)``.

    Example:
        With deloads every 3rd week, weeks 1..6 map to effective weeks
        1, 2, 3, 3, 4, 5 and the block counts 5 effective weeks.
    """
    if not deloads_enabled(deload_frequency):
        return EffectiveWeek(effective_week=week, max_effective_weeks=total_weeks)

    deloads_so_far = (week - 1) // deload_frequency  # type: ignore[operator]
    total_deloads = (total_weeks - 1) // deload_frequency  # type: ignore[operator]
    return EffectiveWeek(
        effective_week=week - deloads_so_far,
        max_effective_weeks=total_weeks - total_deloads,
    )

"""TemplateGenerator — the orchestrator that builds mesocycle templates."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache

from progression_engine.math.load import round_half_away_from_zero
from progression_engine.math.weeks import is_deload_week
from progression_engine.models.enums import ModelType
from progression_engine.models.options import ProgressionOptions
from progression_engine.models.template import ProgressionTemplate, WeekPrescription
from progression_engine.registry import StrategyRegistry

logger = logging.getLogger(__name__)

OptionsLike = ProgressionOptions | Mapping[str, object] | None


def _as_options(options: OptionsLike) -> ProgressionOptions:
    if isinstance(options, ProgressionOptions):
        return options
    return ProgressionOptions.from_mapping(options)


class TemplateGenerator:
    """Runs a progression strategy across every week of a mesocycle.

    Usage:
        generator = TemplateGenerator()
        template = generator.generate("undulating", 8, 5, 6)
        for week in template:
            print(week.week, week.intensity, week.volume)
    """

    def __init__(self, registry: StrategyRegistry | None = None) -> None:
        self.registry = registry or StrategyRegistry()

        # Auto-discover strategies if using default registry
        if registry is None:
            self.registry.discover_strategies()

    def generate(
        self,
        model_type: str | ModelType,
        duration: int,
        base_intensity: float,
        base_volume: float,
        options: OptionsLike = None,
    ) -> ProgressionTemplate:
        """Produce rounded week-by-week prescriptions for a mesocycle.

        Args:
            model_type: Periodization model name. Matching is exact and
                case-sensitive; unknown names use the linear model.
            duration: Number of weeks in the block. Fractional values are
                truncated to whole weeks; zero or negative durations produce
                an empty template.
            base_intensity: Starting intensity, expected in [1, 10].
            base_volume: Starting volume, expected in [1, 10].
            options: ProgressionOptions, a mapping of option values
                (camelCase or snake_case keys), or None for defaults.

        Returns:
            ProgressionTemplate with one WeekPrescription per week, in order.
            Values are rounded half away from zero.

        Raises:
            InvalidOptionsError: If an options mapping holds a non-numeric value.
        """
        opts = _as_options(options)
        duration = int(duration)
        strategy = self.registry.resolve(model_type)

        weeks: list[WeekPrescription] = []
        for week in range(1, duration + 1):
            load = strategy.compute(base_intensity, base_volume, week, duration, opts)
            weeks.append(
                WeekPrescription(
                    week=week,
                    intensity=round_half_away_from_zero(load.intensity),
                    volume=round_half_away_from_zero(load.volume),
                    is_deload=is_deload_week(week, opts.deload_frequency),
                )
            )

        logger.debug(
            "Generated %d-week %s template (requested %r)",
            len(weeks),
            strategy.model_type.value,
            model_type,
        )
        return ProgressionTemplate(model_type=strategy.model_type, weeks=tuple(weeks))


@lru_cache(maxsize=1)
def default_generator() -> TemplateGenerator:
    """Shared generator with auto-discovered strategies."""
    return TemplateGenerator()


def generate_progression_template(
    model_type: str | ModelType,
    duration: int,
    base_intensity: float,
    base_volume: float,
    options: OptionsLike = None,
) -> ProgressionTemplate:
    """Generate a progression template with the shared default generator.

    See TemplateGenerator.generate() for argument details.
    """
    return default_generator().generate(
        model_type, duration, base_intensity, base_volume, options
    )

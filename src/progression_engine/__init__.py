"""Mesocycle progression engine.

Computes week-by-week intensity and volume prescriptions (1-10 scale) for a
training block under a chosen periodization model.
"""

from progression_engine.engine import (
    TemplateGenerator,
    default_generator,
    generate_progression_template,
)
from progression_engine.exceptions import (
    InvalidOptionsError,
    ProgressionError,
    UnknownModelTypeError,
)
from progression_engine.math.load import apply_deload, clamp
from progression_engine.math.weeks import EffectiveWeek, effective_week
from progression_engine.models import (
    ModelType,
    ProgressionOptions,
    ProgressionTemplate,
    TrainingLoad,
    WeekPrescription,
)

__all__ = [
    "EffectiveWeek",
    "InvalidOptionsError",
    "ModelType",
    "ProgressionError",
    "ProgressionOptions",
    "ProgressionTemplate",
    "TemplateGenerator",
    "TrainingLoad",
    "UnknownModelTypeError",
    "WeekPrescription",
    "apply_deload",
    "clamp",
    "default_generator",
    "effective_week",
    "generate_progression_template",
]

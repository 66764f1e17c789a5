"""Data models for the progression engine."""

from progression_engine.models.enums import ModelType
from progression_engine.models.load import TrainingLoad
from progression_engine.models.options import ProgressionOptions
from progression_engine.models.template import ProgressionTemplate, WeekPrescription

__all__ = [
    "ModelType",
    "ProgressionOptions",
    "ProgressionTemplate",
    "TrainingLoad",
    "WeekPrescription",
]

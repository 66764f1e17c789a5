"""Progression strategies — one curve shape per periodization model."""

from progression_engine.strategies.accumulation import AccumulationPhase
from progression_engine.strategies.base import ProgressionStrategy, progress_fraction
from progression_engine.strategies.linear import LinearProgression
from progression_engine.strategies.realization import RealizationPhase
from progression_engine.strategies.transmutation import TransmutationPhase
from progression_engine.strategies.undulating import UndulatingProgression

__all__ = [
    "AccumulationPhase",
    "LinearProgression",
    "ProgressionStrategy",
    "RealizationPhase",
    "TransmutationPhase",
    "UndulatingProgression",
    "progress_fraction",
]

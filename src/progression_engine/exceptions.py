"""Custom exception hierarchy for the progression engine.

Template math itself never raises for numeric input; these cover the
boundaries where loosely typed data enters (option mappings, strict model
lookups).
"""

from __future__ import annotations


class ProgressionError(Exception):
    """Base exception for all progression_engine errors."""


class InvalidOptionsError(ProgressionError, ValueError):
    """An options mapping carried a value that is not a usable number."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class UnknownModelTypeError(ProgressionError, KeyError):
    """A strict lookup was asked for a model name that does not exist."""

    def __init__(self, model_type: str) -> None:
        super().__init__(model_type)
        self.model_type = model_type

    def __str__(self) -> str:
        return f"Unknown progression model {self.model_type!r}"

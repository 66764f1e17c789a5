"""Serialization module — export templates to host-app and tabular formats."""

from progression_engine.serialization.records import (
    to_dataframe,
    to_json_string,
    to_records,
)

__all__ = ["to_dataframe", "to_json_string", "to_records"]

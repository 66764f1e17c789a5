"""Serialization of ProgressionTemplate objects for the host application.

The web client stores a mesocycle's weekly prescriptions as a list of
``{"week", "intensity", "volume"}`` objects; ``to_records`` produces exactly
that shape. ``to_dataframe`` gives a tabular view for analysis and the CLI.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

import pandas as pd

from progression_engine.models.template import ProgressionTemplate

_COLUMNS = ["week", "intensity", "volume", "is_deload"]


def to_records(template: ProgressionTemplate) -> list[dict]:
    """Convert a template to the host application's list-of-dicts form."""
    return [
        {"week": w.week, "intensity": w.intensity, "volume": w.volume}
        for w in template.weeks
    ]


def to_json_string(template: ProgressionTemplate, indent: int | None = 2) -> str:
    """Serialize a template to a JSON string.

    The payload carries the resolved model type alongside the weekly
    records so a stored template can be traced back to its curve.
    """
    payload = {
        "modelType": template.model_type.value,
        "weeks": to_records(template),
    }
    return json.dumps(payload, indent=indent)


def to_dataframe(template: ProgressionTemplate) -> pd.DataFrame:
    """Convert a template to a DataFrame indexed by week.

    Columns: intensity, volume (int64) and is_deload (bool). An empty
    template yields an empty frame with the same columns.
    """
    rows = [(w.week, w.intensity, w.volume, w.is_deload) for w in template.weeks]
    frame = pd.DataFrame(rows, columns=_COLUMNS).astype(
        {"week": "int64", "intensity": "int64", "volume": "int64", "is_deload": "bool"}
    )
    return frame.set_index("week")

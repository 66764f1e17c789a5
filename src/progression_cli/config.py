"""Environment-variable-based configuration for the progression CLI."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.environ.get("PROGRESSION_LOG_LEVEL", "WARNING").upper()
DEFAULT_MODEL: str = os.environ.get("PROGRESSION_DEFAULT_MODEL", "linear")
OUTPUT_FORMAT: str = os.environ.get("PROGRESSION_OUTPUT_FORMAT", "table")

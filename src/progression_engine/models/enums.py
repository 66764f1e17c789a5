"""Enumerations and default constants for the progression engine.

Curve constants follow the block periodization model (accumulation,
transmutation, realization) described by Issurin (2010), with a taper
phase in the spirit of Mujika & Padilla (2003).
"""

from enum import Enum


class ModelType(str, Enum):
    """Periodization models a mesocycle template can follow.

    Values are the exact, case-sensitive names the host application sends.
    """

    LINEAR = "linear"
    UNDULATING = "undulating"
    ACCUMULATION = "accumulation"
    TRANSMUTATION = "transmutation"
    REALIZATION = "realization"


# Model used when the requested name is not recognised
FALLBACK_MODEL_TYPE = ModelType.LINEAR

# ---------------------------------------------------------------------------
# Display scale
# ---------------------------------------------------------------------------
SCALE_MIN = 1
SCALE_MAX = 10

# ---------------------------------------------------------------------------
# Option defaults
# ---------------------------------------------------------------------------
DEFAULT_DELOAD_FACTOR = 0.8  # Deload weeks keep 80% of the planned load
DEFAULT_AMPLITUDE = 1.0  # Undulating wave height in scale points
DEFAULT_PERIOD = 3.0  # Undulating wave length in weeks
DEFAULT_INTENSITY_DELTA = 2.0  # Accumulation intensity gain over the block
DEFAULT_VOLUME_DELTA = 2.0  # Transmutation volume shift over the block
DEFAULT_TARGET_VOLUME = 3.0  # Realization volume on the final (peak) week
DEFAULT_PROGRESSION_RATE = 0.05  # Linear compounding rate per effective week

# ---------------------------------------------------------------------------
# Curve shapes
# ---------------------------------------------------------------------------
# Accumulation: intensity grows with sqrt(fraction), volume linearly
ACCUMULATION_INTENSITY_EXPONENT = 0.5

# Transmutation: both curves steepen late in the block
TRANSMUTATION_EXPONENT = 1.5

# Realization: taper begins at 2/3 of the block unless taper_start is given
REALIZATION_TAPER_START_FRACTION = 2 / 3

# Pre-taper build-up, as a fraction of the base value reached at taper start
REALIZATION_INTENSITY_BUILD = 0.7
REALIZATION_VOLUME_BUILD = 0.5

# Taper intensity climbs front-loaded toward the scale maximum
REALIZATION_TAPER_INTENSITY_EXPONENT = 0.7

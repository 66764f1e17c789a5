"""Tests for ProgressionOptions defaults and mapping parsing."""

from __future__ import annotations

import pandas as pd
import pytest

from progression_engine.exceptions import InvalidOptionsError, ProgressionError
from progression_engine.models.options import ProgressionOptions


class TestDefaults:
    def test_documented_defaults(self) -> None:
        options = ProgressionOptions()
        assert options.deload_frequency is None
        assert options.deload_factor == 0.8
        assert options.amplitude == 1.0
        assert options.period == 3.0
        assert options.intensity_delta == 2.0
        assert options.volume_delta == 2.0
        assert options.target_volume == 3.0
        assert options.progression_rate == 0.05
        assert options.taper_start is None


class TestFromMapping:
    @pytest.mark.parametrize("data", [None, {}])
    def test_empty_gives_defaults(self, data) -> None:
        assert ProgressionOptions.from_mapping(data) == ProgressionOptions()

    def test_camel_case_keys(self) -> None:
        options = ProgressionOptions.from_mapping(
            {
                "deloadFrequency": 4,
                "deloadFactor": 0.7,
                "intensityDelta": 1.5,
                "volumeDelta": -1,
                "targetVolume": 2,
                "progressionRate": 0.1,
                "taperStart": 5,
            }
        )
        assert options == ProgressionOptions(
            deload_frequency=4,
            deload_factor=0.7,
            intensity_delta=1.5,
            volume_delta=-1.0,
            target_volume=2.0,
            progression_rate=0.1,
            taper_start=5,
        )

    def test_snake_case_keys(self) -> None:
        options = ProgressionOptions.from_mapping({"deload_frequency": 3, "amplitude": 2})
        assert options.deload_frequency == 3
        assert options.amplitude == 2.0

    def test_unknown_keys_ignored(self) -> None:
        options = ProgressionOptions.from_mapping({"exerciseId": 12, "period": 4})
        assert options == ProgressionOptions(period=4.0)

    def test_none_values_use_defaults(self) -> None:
        options = ProgressionOptions.from_mapping({"deloadFrequency": None, "deloadFactor": None})
        assert options == ProgressionOptions()

    def test_whole_float_week_accepted(self) -> None:
        options = ProgressionOptions.from_mapping({"taperStart": 4.0})
        assert options.taper_start == 4
        assert isinstance(options.taper_start, int)

    def test_fractional_week_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError, match="whole number") as exc_info:
            ProgressionOptions.from_mapping({"deloadFrequency": 2.5})
        assert exc_info.value.field == "deload_frequency"

    @pytest.mark.parametrize("value", ["3", True, [1], {"a": 1}])
    def test_non_numeric_rejected(self, value) -> None:
        with pytest.raises(InvalidOptionsError) as exc_info:
            ProgressionOptions.from_mapping({"amplitude": value})
        assert exc_info.value.field == "amplitude"

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_rejected(self, value: float) -> None:
        with pytest.raises(InvalidOptionsError, match="finite"):
            ProgressionOptions.from_mapping({"deloadFactor": value})

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ProgressionOptions.from_mapping({"period": "weekly"})

    def test_error_is_progression_error(self) -> None:
        with pytest.raises(ProgressionError):
            ProgressionOptions.from_mapping({"period": "weekly"})


class TestFromDataFrameRow:
    """Option rows read back from pandas carry numpy scalars, not builtins."""

    def test_numpy_scalars_accepted(self) -> None:
        frame = pd.DataFrame(
            {"deloadFrequency": [2], "deloadFactor": [0.6], "taperStart": [4.0]}
        )
        row = {column: frame[column].iloc[0] for column in frame.columns}
        options = ProgressionOptions.from_mapping(row)
        assert options == ProgressionOptions(
            deload_frequency=2, deload_factor=0.6, taper_start=4
        )
        assert type(options.deload_frequency) is int
        assert type(options.deload_factor) is float

    def test_fractional_numpy_week_rejected(self) -> None:
        value = pd.Series([2.5]).iloc[0]
        with pytest.raises(InvalidOptionsError, match="whole number"):
            ProgressionOptions.from_mapping({"deloadFrequency": value})

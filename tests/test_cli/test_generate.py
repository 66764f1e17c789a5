"""Tests for the command-line template generator."""

from __future__ import annotations

import json
import logging

import pytest

from progression_engine.strategies.linear import LinearProgression
from progression_engine.strategies.realization import RealizationPhase

from progression_cli.generate import build_parser, main


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["6", "5", "7"])
        assert args.duration == 6
        assert args.base_intensity == 5.0
        assert args.model == "linear"
        assert args.deload_frequency is None
        assert not args.strict

    def test_option_flags(self) -> None:
        args = build_parser().parse_args(
            ["6", "5", "7", "--deload-frequency", "3", "--target-volume", "2.5"]
        )
        assert args.deload_frequency == 3
        assert args.target_volume == 2.5

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["6", "5", "7", "--format", "csv"])


class TestMain:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(
            ["6", "5", "7", "--model", "realization", "--target-volume", "3", "--format", "json"]
        )
        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["modelType"] == "realization"
        assert payload["weeks"][-1] == {"week": 6, "intensity": 10, "volume": 3}

    def test_table_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["4", "5", "5", "--deload-frequency", "2", "--deload-factor", "0.5"])
        assert code == 0
        out = capsys.readouterr().out
        assert "Model: linear (4 weeks)" in out
        assert LinearProgression.description in out
        assert "is_deload" in out

    def test_unknown_model_falls_back(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["3", "5", "5", "--model", "Wave", "--format", "json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["modelType"] == "linear"

    def test_strict_unknown_model_fails(
        self, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            code = main(["3", "5", "5", "--model", "Wave", "--strict"])
        assert code == 2
        assert capsys.readouterr().out == ""
        assert "Unknown progression model 'Wave'" in caplog.text

    def test_non_finite_option_fails(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            code = main(["3", "5", "5", "--deload-factor", "inf"])
        assert code == 2
        assert "deload_factor" in caplog.text

    def test_table_header_describes_model(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["6", "5", "7", "--model", "realization"])
        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Model: realization (6 weeks)"
        assert lines[1] == RealizationPhase.description

    def test_json_output_has_no_description(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["3", "5", "5", "--format", "json"])
        assert LinearProgression.description not in capsys.readouterr().out

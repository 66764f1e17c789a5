"""Command-line generator for mesocycle progression templates.

Usage:
    python -m progression_cli.generate 8 5 6 --model undulating
    python -m progression_cli.generate 6 5 7 --model realization --target-volume 3 --format json
"""

from __future__ import annotations

import argparse
import logging
import sys

from progression_engine.engine import default_generator
from progression_engine.exceptions import ProgressionError
from progression_engine.models.enums import ModelType
from progression_engine.models.options import ProgressionOptions
from progression_engine.serialization import to_dataframe, to_json_string

from progression_cli.config import DEFAULT_MODEL, LOG_LEVEL, OUTPUT_FORMAT

logger = logging.getLogger(__name__)

# CLI flag → ProgressionOptions field
_OPTION_FLAGS: dict[str, type] = {
    "deload_frequency": int,
    "deload_factor": float,
    "amplitude": float,
    "period": float,
    "intensity_delta": float,
    "volume_delta": float,
    "target_volume": float,
    "progression_rate": float,
    "taper_start": int,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate week-by-week intensity/volume for a mesocycle",
    )
    parser.add_argument("duration", type=int, help="Mesocycle length in weeks")
    parser.add_argument("base_intensity", type=float, help="Starting intensity (1-10)")
    parser.add_argument("base_volume", type=float, help="Starting volume (1-10)")
    parser.add_argument(
        "-m",
        "--model",
        default=DEFAULT_MODEL,
        help=f"Periodization model: {', '.join(m.value for m in ModelType)}",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on an unknown model instead of falling back to linear",
    )
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default=OUTPUT_FORMAT if OUTPUT_FORMAT in ("table", "json") else "table",
    )
    for field_name, field_type in _OPTION_FLAGS.items():
        parser.add_argument(
            "--" + field_name.replace("_", "-"), dest=field_name, type=field_type
        )
    return parser


def _options_from_args(args: argparse.Namespace) -> ProgressionOptions:
    values = {name: getattr(args, name) for name in _OPTION_FLAGS}
    return ProgressionOptions.from_mapping(values)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    generator = default_generator()

    try:
        if args.strict:
            generator.registry.get_strict(args.model)
        options = _options_from_args(args)
        template = generator.generate(
            args.model, args.duration, args.base_intensity, args.base_volume, options
        )
    except ProgressionError as exc:
        logger.error("Cannot generate template: %s", exc)
        return 2

    if args.format == "json":
        print(to_json_string(template))
    else:
        strategy = generator.registry.resolve(template.model_type)
        print(f"Model: {template.model_type.value} ({template.duration} weeks)")
        print(strategy.description)
        print(to_dataframe(template).to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())

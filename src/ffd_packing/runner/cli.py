"""Command-line entry point: pack random or explicit values with FFD.

Usage:
    ffd-pack 2000 100 20 100
    ffd-pack 2000 100 20 100 1 2 3 4 5 6 7 8 9 10 12 13 14 15 17
    ffd-pack --config run.yaml --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from ffd_packing.algorithms.first_fit_decreasing import FirstFitDecreasingPacker
from ffd_packing.core.config import PackingConfig, load_config
from ffd_packing.core.errors import ConfigurationError, PackingError
from ffd_packing.reporting.report import format_report
from ffd_packing.runner.dataset import resolve_values, sort_descending

logger = logging.getLogger(__name__)

USAGE_TEXT = """\
Arguments:
  1 - Number of values to pack
  2 - Bin capacity
  3 - Minimum value
  4 - Maximum value
  5.. - Optional explicit values (override the count and random generation)
"""

POSITIONAL_KEYS = ("count", "bin_capacity", "value_min", "value_max")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ffd-pack",
        description="Pack integers into fixed-capacity bins with First-Fit-Decreasing",
    )
    parser.add_argument(
        "params",
        nargs="*",
        metavar="N",
        help="COUNT BIN_CAPACITY VALUE_MIN VALUE_MAX [VALUE ...]",
    )
    parser.add_argument(
        "--config",
        help="YAML file with count, bin_capacity, value_min, value_max, values, seed",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible value generation",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ConfigurationError(f"Invalid integer argument: {text!r}") from None


def config_from_args(args: argparse.Namespace) -> PackingConfig:
    """
    Merge the config file (if any) with positional arguments and --seed.

    Positional arguments take precedence over the file.

    Raises:
        ConfigurationError: If there are too few parameters or they are invalid
    """
    data: dict[str, Any] = {}
    if args.config:
        data = load_config(args.config).model_dump()

    params = [_parse_int(p) for p in args.params]
    if params:
        if len(params) < len(POSITIONAL_KEYS):
            raise ConfigurationError(
                f"Expected at least {len(POSITIONAL_KEYS)} arguments, got {len(params)}"
            )
        data.update(zip(POSITIONAL_KEYS, params))
        extra = params[len(POSITIONAL_KEYS):]
        data["values"] = extra if extra else None
    elif not data:
        raise ConfigurationError("Missing arguments")

    if args.seed is not None:
        data["seed"] = args.seed

    return PackingConfig.from_dict(data)


def run(config: PackingConfig) -> str:
    """Resolve values, pack them and return the rendered report."""
    values = sort_descending(resolve_values(config))
    bins = FirstFitDecreasingPacker(config.bin_capacity).pack(values)
    return format_report(values, bins)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse exits with 2 on bad options; --help exits with 0
        return 1 if exc.code else 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.config and len(args.params) < len(POSITIONAL_KEYS):
        parser.print_usage(sys.stdout)
        print(USAGE_TEXT, end="")
        return 1

    try:
        config = config_from_args(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Running with %s", config)
    try:
        report = run(config)
    except PackingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(report, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())

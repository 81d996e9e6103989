# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for montepi.

Usage:
    montepi NUMBER
    montepi 100000 --seed 7
    montepi 100000000 --backend torch --output runs/pi.json
    montepi 1000 --config configs/pi.yaml --log-level INFO

NUMBER is validated while arguments are parsed, so a bad sample count never
reaches the estimator. Every usage error exits with USER_ERROR.
"""

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from montepi import __version__
from montepi.cli.commands import handle_estimate
from montepi.cli.exit_codes import USER_ERROR
from montepi.config.schema import MAX_SEED
from montepi.estimator.backends import BACKENDS
from montepi.estimator.core import parse_count
from montepi.estimator.exceptions import InvalidArgument


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on usage errors; montepi reserves 2 for config errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USER_ERROR, f"{self.prog}: error: {message}\n")


def _sample_count(text: str) -> int:
    """argparse type for NUMBER."""
    try:
        return parse_count(text)
    except InvalidArgument as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def _seed(text: str) -> int:
    """argparse type for --seed."""
    try:
        value = int(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"seed must be an integer, got '{text}'") from err
    if value < 0:
        raise argparse.ArgumentTypeError(f"seed must be >= 0, got {value}")
    if value > MAX_SEED:
        raise argparse.ArgumentTypeError(f"seed must be <= {MAX_SEED}, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the montepi argument parser."""
    parser = _ArgumentParser(
        prog="montepi",
        description="Estimate pi by Monte Carlo sampling of the unit square.",
    )
    parser.add_argument(
        "number",
        metavar="NUMBER",
        type=_sample_count,
        help="Number of sample points (positive integer).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (default: WARNING, or the config's).",
    )
    parser.add_argument(
        "--seed",
        type=_seed,
        default=None,
        help="Seed the random source (takes precedence over config).",
    )
    parser.add_argument(
        "--backend",
        type=str,
        default=None,
        choices=sorted(BACKENDS),
        help="Sampling backend (default: python, or the config's).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Also write the run as JSON to this path.",
    )
    parser.set_defaults(func=handle_estimate)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

    Parse the command line, run the handler, exit with its return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

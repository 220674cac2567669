"""Command-line entry point for nth-smallest.

Usage:
    # N-th smallest number in the first column of a workbook:
    nth-smallest select numbers.xlsx 3

    # Same, with the heap strategy:
    nth-smallest select numbers.xlsx 3 --strategy bounded_heap

    # Run the HTTP boundary:
    nth-smallest serve --port 8080

Any option left out falls back to NTH_* environment variables, then to the
defaults in NthSmallestConfig.
"""

from __future__ import annotations

import argparse
import logging
import sys

from nth_smallest.config import NthSmallestConfig
from nth_smallest.exceptions import (
    ConfigValidationError,
    InvalidArgumentError,
    SourceAccessError,
)
from nth_smallest.selection.base import SelectionStrategy
from nth_smallest.server import serve
from nth_smallest.service import SelectionService
from nth_smallest.sources.loader import load_numbers

logger = logging.getLogger("nth_smallest")

_EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nth-smallest",
        description="Find the N-th smallest number in a spreadsheet column",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    select = subparsers.add_parser("select", help="Print the N-th smallest number of a file.")
    select.add_argument("file", help="Path to an .xlsx or .csv file.")
    select.add_argument("n", type=int, help="1-based rank (1 = minimum).")
    select.add_argument(
        "--strategy",
        choices=[s.value for s in SelectionStrategy],
        default=None,
        help="Selection algorithm (default: NTH_SELECTION_STRATEGY or quickselect).",
    )
    select.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the quickselect pivot generator.",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP boundary.")
    serve_parser.add_argument("--host", default=None, help="Bind host (default: 127.0.0.1).")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default: 8080).")

    return parser


def _config_from_args(args: argparse.Namespace) -> NthSmallestConfig:
    overrides = {
        "selection_strategy": getattr(args, "strategy", None),
        "random_seed": getattr(args, "seed", None),
        "host": getattr(args, "host", None),
        "port": getattr(args, "port", None),
    }
    return NthSmallestConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the requested command.

    Returns:
        Process exit code: 0 on success, 2 on rejected input.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = _config_from_args(args)
    except ConfigValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return _EXIT_USAGE

    if args.command == "serve":
        serve(config)
        return 0

    try:
        numbers = load_numbers(args.file, config)
        value = SelectionService.from_config(config).find_nth_smallest(numbers, args.n)
    except (InvalidArgumentError, SourceAccessError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return _EXIT_USAGE

    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Module: cli

Purpose:
    Command-line entry point. Reads a share document, reconstructs the
    secret and prints it as a decimal integer on stdout. Diagnostics go
    to stderr through logging.

Key Functions:
    - main(argv): Parse arguments, run the solver, return the exit status

Exit status:
    0  secret printed
    1  malformed input, decode failure, ambiguity or failed fallback

Used By:
    - `shamir-recover` console script
    - `python -m shamir_toolkit`
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .common.radix import DecodeError
from .core.schemas.validator import ValidationError
from .core.utils.serialization import load_share_set
from .solver.config import SolverConfig
from .solver.reconstruct import ReconstructionError, solve_share_set

logger = logging.getLogger("shamir_toolkit")

DEFAULT_INPUT = Path("sample1.json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shamir-recover",
        description="Recover the constant term of a polynomial from encoded sample points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  {"keys": {"n": 4, "k": 3},
   "1": {"base": "10", "value": "4"},
   "2": {"base": "2", "value": "111"}, ...}

Examples:
  %(prog)s shares.json
  %(prog)s --strict --no-fallback shares.json
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=DEFAULT_INPUT,
        help=f"Share document (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Validate the document against the JSON Schema",
    )
    parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Fail instead of using the first k points when no subset fits",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log search statistics",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Secrets and x-coordinates are unbounded; lift the int<->str digit limit
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    config = SolverConfig(allow_fallback=not args.no_fallback)
    try:
        share_set = load_share_set(args.input, strict=args.strict)
        result = solve_share_set(share_set, config=config)
    except (ValidationError, DecodeError, ReconstructionError) as e:
        logger.error("Error: %s", e)
        return 1

    if args.verbose:
        logger.info("Matched subsets: %d", result.matched_subsets)
        logger.info("Search: %s", result.stats.summary())

    print(result.secret)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Knight's Tour Solver.

Builds a closed (or, optionally, open) knight's tour with Warnsdorff's heuristic,
breaking ties between equally constrained squares at random and retrying whole attempts
until one succeeds.  Settings come from the environment or a `.env` file (see
`knights_tour.solver.config`) and may be overridden on the command line.
"""

import argparse
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from .solver import runner
from .solver.config import SolverConfig


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="knights-tour",
        description="Find a knight's tour using Warnsdorff's heuristic",
    )
    parser.add_argument("--board-size", type=int, help="Side length of the board (e.g. 8)")
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        help="Starting square (e.g. 3 2)",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Accept open tours (the last square need not reach the start)",
    )
    parser.add_argument("--max-attempts", type=int, help="Give up after this many attempts")
    parser.add_argument("--seed", type=int, help="Seed for random tie-breaking")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console logging level",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace, base: SolverConfig | None = None) -> SolverConfig:
    """Apply command-line overrides on top of the loaded settings.

    If `base` is None, settings are loaded from the environment and `.env` file.
    """
    if base is None:
        base = SolverConfig()
    overrides: dict[str, object] = {}
    if args.board_size is not None:
        overrides["board_size"] = args.board_size
    if args.start is not None:
        overrides["start_x"], overrides["start_y"] = args.start
    if args.open:
        overrides["require_closed"] = False
    if args.max_attempts is not None:
        overrides["max_attempts"] = args.max_attempts
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    # Re-validate so that overrides get the same checks as settings
    return SolverConfig.model_validate(base.model_dump() | overrides)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the knight's tour solver."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValidationError as e:
        raise SystemExit(f"Invalid configuration:\n{e}") from None

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    runner.run(config)

"""Retry loop and run driver for the knight's tour solver."""

import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from time import time
from typing import TextIO

from knights_tour.render import print_board
from knights_tour.solver.config import SolverConfig
from knights_tour.solver.solver import (
    TourOutcome,
    TourResult,
    TourSolver,
    random_rotation_source,
)
from knights_tour.solver.utils import int_comma, time_str

logger = logging.getLogger(__name__)

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


class TourNotFoundError(RuntimeError):
    """Raised when a bounded run exhausts its attempts without a solution."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"No tour found in {int_comma(attempts)} attempts.")
        self.attempts = attempts


@dataclass
class RunStats:
    """Statistics collected over a run of attempts."""

    attempts: int = 0
    """Number of attempts made."""

    start_time: float = field(default_factory=time)
    """Timestamp when the run started."""

    outcomes: Counter[TourOutcome] = field(default_factory=Counter)
    """Number of attempts ending in each outcome."""

    def elapsed(self) -> float:
        return time() - self.start_time


def solve(
    solver: TourSolver,
    *,
    max_attempts: int | None = None,
    logf: TextIO | None = None,
    echo: TextIO | None = None,
) -> tuple[TourResult, RunStats]:
    """Retry full attempts until one succeeds.

    Every attempt starts from a fresh board.  With `max_attempts` left as None this loops
    until a tour is found; the heuristic almost always succeeds within a few attempts but
    there is no upper bound.

    Args:
        solver (TourSolver): The solver to run.
        max_attempts (int | None): Give up after this many attempts.  If None, never give up.
        logf: Stream receiving one line per attempt.  If None, nothing is written.
        echo: Stream that also receives the failed-attempt lines (e.g. the console).

    Returns:
        The successful attempt and the run statistics.

    Raises:
        TourNotFoundError: If `max_attempts` attempts all failed.
    """
    streams = [s for s in (logf, echo) if s is not None]
    stats = RunStats()
    while max_attempts is None or stats.attempts < max_attempts:
        stats.attempts += 1
        result = solver.attempt()
        stats.outcomes[result.outcome] += 1

        if not result.success:
            logger.debug("Attempt %d failed: %s", stats.attempts, result.outcome.name)
            for stream in streams:
                print(
                    f"Puzzle could not be solved (Attempt {stats.attempts}) .. Trying again",
                    file=stream,
                    flush=True,
                )
            continue

        if logf is not None:
            print(f"Puzzle solved in {stats.attempts} attempts.", file=logf, flush=True)
        return result, stats

    raise TourNotFoundError(stats.attempts)


def build_solver(config: SolverConfig) -> TourSolver:
    """Create a solver from the given configuration."""
    return TourSolver(
        config.board_size,
        (config.start_x, config.start_y),
        rotation_source=random_rotation_source(config.seed, config.rotation_range),
        require_closed=config.require_closed,
    )


def run(config: SolverConfig, *, out: TextIO | None = None) -> tuple[TourResult, RunStats]:
    """Run the solver with the given configuration and report the result.

    A transcript of the run is written to a log file under `config.log_dir`; the final
    board and summary are printed to `out` (default: stdout).

    Args:
        config (SolverConfig): The configuration for the run.
        out: Stream for the rendered board and summary.
    """
    out = out or sys.stdout
    solver = build_solver(config)

    start_str = datetime.now().astimezone().strftime("%Y%m%d-%H%M%S")
    logfile = (
        Path(config.log_dir) / f"{config.board_size}x{config.board_size}" / f"{start_str}.log"
    )
    logfile.parent.mkdir(parents=True, exist_ok=True)
    print(f"Log file: {logfile}", file=out)

    with open(logfile, "w", encoding="utf-8") as logf:
        print(f"Board size: {config.board_size}", file=logf, flush=True)
        print(f"Start square: ({config.start_x}, {config.start_y})", file=logf, flush=True)
        print(f"Closed tour required: {config.require_closed}", file=logf, flush=True)
        print(
            f"Start time: {datetime.now().astimezone().strftime(TIMESTAMP_FMT)}",
            file=logf,
            flush=True,
        )
        try:
            result, stats = solve(solver, max_attempts=config.max_attempts, logf=logf, echo=out)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.", file=out)
            sys.exit(1)
        except Exception as e:
            print(e, file=logf, flush=True)
            print(e, file=out)
            raise

        print_board(result.board, file=logf)
        elapsed = f"Time taken: {time_str(stats.elapsed())}"
        print(elapsed, file=logf, flush=True)

    print_board(result.board, file=out)
    print(f"Puzzle solved in {stats.attempts} attempts.", file=out)
    print(elapsed, file=out)
    logger.info(
        "Outcomes: %s",
        ", ".join(f"{o.name}={stats.outcomes[o]}" for o in TourOutcome),
    )
    return result, stats

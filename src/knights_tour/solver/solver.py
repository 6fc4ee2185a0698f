"""Warnsdorff's heuristic with randomized tie-breaking.

One call to `TourSolver.attempt` builds a single tour on a fresh board: starting from
a fixed square, the knight repeatedly moves to the unvisited neighbour with the fewest
unvisited neighbours of its own.  Neighbours are scanned from a random offset into
`MOVE_DELTAS`, so ties are broken differently on each attempt and a failed attempt can
simply be retried (see `knights_tour.solver.runner`).
"""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from knights_tour.board import Board, Position
from knights_tour.solver.utils import (
    MOVE_DELTAS,
    adjacent_unvisited_count,
    is_adjacent,
    is_unvisited,
)

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 8
DEFAULT_START = Position(3, 2)
DEFAULT_ROTATION_RANGE = 1000

RotationSource = Callable[[], int]
"""Zero-argument callable returning a non-negative rotation offset."""


class TourOutcome(IntEnum):
    """How a single attempt ended."""

    CLOSED = 0
    """Every square visited and the last square is a knight move from the start."""

    OPEN_COMPLETE = 1
    """Every square visited, but the tour does not return to the start."""

    DEAD_END = 2
    """The knight ran out of unvisited neighbours before covering the board."""


@dataclass
class TourResult:
    """Result of a single tour attempt."""

    outcome: TourOutcome
    board: Board
    """The board as filled by this attempt (partially filled on a dead end)."""

    end: Position
    """The last square reached."""

    require_closed: bool = True
    """Whether `OPEN_COMPLETE` counts as a failure."""

    @property
    def steps(self) -> int:
        """Number of moves made after the starting square."""
        return self.board.visited_count - 1

    @property
    def success(self) -> bool:
        if self.outcome == TourOutcome.CLOSED:
            return True
        return self.outcome == TourOutcome.OPEN_COMPLETE and not self.require_closed


class MoveObserver(Protocol):
    """Receives the knight's position before and after each move selection."""

    def before_move(self, position: Position) -> None: ...

    def after_move(self, position: Position) -> None: ...


class LoggingObserver:
    """Report each move at DEBUG level."""

    def __init__(self, log: logging.Logger = logger) -> None:
        self.log = log

    def before_move(self, position: Position) -> None:
        self.log.debug("From [%d,%d]:", position.x, position.y)

    def after_move(self, position: Position) -> None:
        self.log.debug("To [%d,%d]:", position.x, position.y)


class NullObserver:
    """Ignore all move events."""

    def before_move(self, position: Position) -> None:
        pass

    def after_move(self, position: Position) -> None:
        pass


def random_rotation_source(
    seed: int | None = None, upper: int = DEFAULT_ROTATION_RANGE
) -> RotationSource:
    """Return a rotation source drawing uniformly from [0, upper).

    Args:
        seed: Seed for the private random generator.  If None, seeded from OS entropy.
        upper: Exclusive upper bound of the drawn offsets.
    """
    rng = random.Random(seed)
    return lambda: rng.randrange(upper)


class TourSolver:
    """Build knight's tours using Warnsdorff's heuristic."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        start: tuple[int, int] = DEFAULT_START,
        *,
        rotation_source: RotationSource | None = None,
        observer: MoveObserver | None = None,
        require_closed: bool = True,
    ) -> None:
        """Initialize the solver.

        Args:
            board_size (int): Side length of the board.
            start (tuple[int, int]): Starting square, as (x, y).
            rotation_source (RotationSource | None): Source of the random rotation offset
                used for tie-breaking.  If None, a fresh unseeded generator is used.
            observer (MoveObserver | None): Receives move events.  If None, moves are
                logged at DEBUG level.
            require_closed (bool): Whether only closed tours count as success.

        Raises:
            ValueError: If the board size is not positive or the start is off the board.
            TypeError: If `rotation_source` is not callable.
        """
        if board_size < 1:
            raise ValueError(f"Board size must be positive, got {board_size}.")
        start = Position(*start)
        if not (0 <= start.x < board_size and 0 <= start.y < board_size):
            raise ValueError(f"Start square {tuple(start)} is outside the board.")
        if rotation_source is not None and not callable(rotation_source):
            raise TypeError("rotation_source must be callable.")

        self.board_size = board_size
        self.start = start
        self.rotation_source = rotation_source or random_rotation_source()
        self.observer: MoveObserver = observer or LoggingObserver()
        self.require_closed = require_closed

    def new_board(self) -> Board:
        """Allocate an empty board with the starting square marked as move 1."""
        board = Board(self.board_size)
        board[self.start] = 1
        return board

    def next_move(self, board: Board, position: Position) -> Position | None:
        """Pick and mark the next square using Warnsdorff's heuristic.

        Candidates are scanned in `MOVE_DELTAS` order rotated by a random offset, and a
        candidate replaces the current best only if its degree is strictly lower, so the
        first minimum-degree candidate in rotated order wins.

        Args:
            board (Board): The board being filled.  Modified in place on success.
            position (Position): The knight's current square.

        Returns:
            The newly marked square, or None if no unvisited neighbour exists (the board
            is left unchanged).
        """
        self.observer.before_move(position)

        n_deltas = len(MOVE_DELTAS)
        offset = self.rotation_source()
        min_deg = self.board_size + 1
        min_deg_idx = -1
        for count in range(n_deltas):
            i = (offset + count) % n_deltas
            dx, dy = MOVE_DELTAS[i]
            nx, ny = position.x + dx, position.y + dy
            if not is_unvisited(board, nx, ny):
                continue
            degree = adjacent_unvisited_count(board, nx, ny)
            if degree < min_deg:
                min_deg = degree
                min_deg_idx = i

        if min_deg_idx == -1:
            return None

        dx, dy = MOVE_DELTAS[min_deg_idx]
        chosen = Position(position.x + dx, position.y + dy)
        board[chosen] = board[position] + 1

        self.observer.after_move(chosen)
        return chosen

    def attempt(self) -> TourResult:
        """Run one attempt on a fresh board."""
        board = self.new_board()
        position = self.start

        for _ in range(self.board_size * self.board_size - 1):
            next_position = self.next_move(board, position)
            if next_position is None:
                logger.debug("Dead end at %s after %d moves", tuple(position), board[position])
                return TourResult(TourOutcome.DEAD_END, board, position, self.require_closed)
            position = next_position

        outcome = (
            TourOutcome.CLOSED if is_adjacent(position, self.start) else TourOutcome.OPEN_COMPLETE
        )
        logger.debug("Tour complete at %s: %s", tuple(position), outcome.name)
        return TourResult(outcome, board, position, self.require_closed)

    def find_solution(self) -> tuple[bool, Board]:
        """Run one attempt and return (success, board)."""
        result = self.attempt()
        return result.success, result.board

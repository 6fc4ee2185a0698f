"""Utility functions for the knight's tour solver."""

from knights_tour.board import UNVISITED, Board

MOVE_DELTAS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (1, -2),
    (2, 1),
    (2, -1),
    (-1, 2),
    (-1, -2),
    (-2, 1),
    (-2, -1),
)
"""The eight knight moves, as (dx, dy) pairs."""


def within_bounds(size: int, x: int, y: int) -> bool:
    """Returns whether (x, y) lies on a `size` x `size` board."""
    return 0 <= x < size and 0 <= y < size


def is_unvisited(board: Board, x: int, y: int) -> bool:
    """Returns whether (x, y) is on the board and not yet visited.

    Off-board squares are never unvisited.
    """
    return within_bounds(board.size, x, y) and board[x, y] == UNVISITED


def adjacent_unvisited_count(board: Board, x: int, y: int) -> int:
    """Return the accessibility degree of (x, y).

    This is the number of unvisited squares one knight move away.  The board is not
    modified.
    """
    return sum(1 for dx, dy in MOVE_DELTAS if is_unvisited(board, x + dx, y + dy))


def is_adjacent(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Returns whether `b` is exactly one knight move from `a`."""
    return (b[0] - a[0], b[1] - a[1]) in MOVE_DELTAS


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"

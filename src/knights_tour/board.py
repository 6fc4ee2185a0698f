"""Classes and functions for representing the chessboard."""

from collections.abc import Iterable, Sequence
from typing import NamedTuple

import numpy as np

UNVISITED = -1
"""Cell value for a square the knight has not visited yet."""


class Position(NamedTuple):
    """A square on the board, as (x, y) coordinates."""

    x: int
    y: int


class Board:
    """Store a square grid of move-order integers as a 2D numpy array.

    Cells are addressed by (x, y); the array is stored row-major, so `x` is the
    column and `y` the row.  Visited cells hold their 1-based move order,
    unvisited cells hold `UNVISITED`.
    """

    def __init__(self, size: int, data: np.ndarray | None = None) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}.")
        self.size = size
        if data is None:
            data = np.full((size, size), UNVISITED, dtype=np.int32)
        elif data.shape != (size, size):
            raise ValueError(f"Board data has shape {data.shape}, expected {(size, size)}.")
        self.data = data

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Create a board from a square nested sequence, indexed as rows[y][x]."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square grid.")
        return cls(size, np.array(rows, dtype=np.int32).reshape(size, size))

    def copy(self) -> "Board":
        """Generate a copy of the board."""
        return Board(self.size, self.data.copy())

    def __getitem__(self, pos: tuple[int, int]) -> int:
        """Get the cell value at (x, y)."""
        x, y = pos
        return int(self.data[y, x])

    def __setitem__(self, pos: tuple[int, int], value: int) -> None:
        """Set the cell value at (x, y)."""
        x, y = pos
        self.data[y, x] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.data, other.data))

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{v:3d}" for v in row) for row in self.rows())

    @property
    def visited_count(self) -> int:
        """Number of visited cells."""
        return int(np.count_nonzero(self.data != UNVISITED))

    @property
    def is_full(self) -> bool:
        return self.visited_count == self.size * self.size

    def find(self, value: int) -> Position | None:
        """Return the position holding `value`, or None if no cell holds it."""
        ys, xs = np.nonzero(self.data == value)
        if len(xs) == 0:
            return None
        return Position(int(xs[0]), int(ys[0]))

    def rows(self) -> list[list[int]]:
        """Return the grid as a nested list, indexed as rows[y][x]."""
        return self.data.tolist()

    def visited_values(self) -> Iterable[int]:
        return (int(v) for v in self.data.flat if v != UNVISITED)

    def validate(self) -> None:
        """Check the move-order invariant.

        Every visited cell must hold a distinct value in [1, visited_count] and every
        other cell must hold `UNVISITED`.

        Raises:
            ValueError: If the invariant does not hold.
        """
        values = sorted(self.visited_values())
        if any(v < 1 for v in values):
            raise ValueError(f"Board holds invalid cell values: {[v for v in values if v < 1]}")
        expected = list(range(1, len(values) + 1))
        if values != expected:
            missing = sorted(set(expected) - set(values))
            duplicates = sorted({v for v in values if values.count(v) > 1})
            raise ValueError(
                f"Board move order is broken (missing: {missing}, duplicates: {duplicates})."
            )

"""Text rendering of a finished board."""

import sys
from typing import TextIO

from knights_tour.board import Board


def render_board(board: Board) -> str:
    """Return the board as tab-separated move numbers.

    Output row `i` lists the cells with x == i (the board is printed transposed).  Each
    value is followed by a tab and rows are separated by a blank line.
    """
    lines = []
    for i in range(board.size):
        lines.append("".join(f"{board[i, j]}\t" for j in range(board.size)))
    return "\n\n".join(lines) + "\n\n"


def print_board(board: Board, file: TextIO | None = None) -> None:
    """Print the rendered board to `file` (default: stdout)."""
    print(render_board(board), end="", file=file or sys.stdout, flush=True)

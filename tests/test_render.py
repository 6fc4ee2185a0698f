from io import StringIO

from knights_tour.board import Board
from knights_tour.render import print_board, render_board


def test_render_board_is_transposed():
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert render_board(board) == "1\t4\t7\t\n\n2\t5\t8\t\n\n3\t6\t9\t\n\n"


def test_render_board_shows_unvisited_cells():
    board = Board(2)
    board[1, 0] = 1
    assert render_board(board) == "-1\t-1\t\n\n1\t-1\t\n\n"


def test_print_board_writes_to_stream():
    out = StringIO()
    print_board(Board.from_rows([[1]]), file=out)
    assert out.getvalue() == "1\t\n\n"

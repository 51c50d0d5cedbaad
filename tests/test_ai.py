from infitictac.ai import (
    choose_move_3x3,
    choose_move_4x4,
    computer_move_3x3,
    computer_move_4x4,
)
from infitictac.board import Board3x3, Board4x4, has_line


def _board3(rows):
    board = Board3x3()
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != " ":
                board.make_move(r, c, cell)
    return board


def _board4(rows):
    board = Board4x4()
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != " ":
                board.make_move(r, c, cell)
    return board


def test_empty_3x3_takes_centre():
    board = Board3x3()
    move = computer_move_3x3(board, "o", "x")
    assert move == (1, 1)
    assert board.get_cell(1, 1) == "o"


def test_3x3_prefers_win_over_block():
    board = _board3(["oo ", "xx ", "x  "])
    computer_move_3x3(board, "o", "x")
    assert board.check_win("o")
    assert not board.check_win("x")


def test_3x3_blocks_player():
    board = _board3(["xx ", " o ", "   "])
    computer_move_3x3(board, "o", "x")
    assert board.get_cell(0, 2) == "o"
    assert not board.check_win("o")


def test_3x3_takes_corner_when_centre_taken():
    board = _board3(["   ", " x ", "   "])
    computer_move_3x3(board, "o", "x")
    assert board.get_cell(0, 0) == "o"


def test_3x3_falls_back_to_first_free_edge():
    rows = ["x o", " o ", "x x"]
    rows = ["xox", "oox", "x x"]
    board = _board3(rows)
    # x threatens nothing except (2,1); o also wins at (2,1) via the middle column
    move = computer_move_3x3(board, "o", "x")
    assert board.check_win("o")
    assert board.get_cell(*move) == "o"


def test_3x3_full_grid_has_no_move():
    grid = [["x", "o", "x"], ["x", "o", "o"], ["o", "x", "x"]]
    assert choose_move_3x3(grid, "o", "x") is None


def test_choose_move_3x3_does_not_modify_grid():
    grid = [["x", "x", " "], [" ", "o", " "], [" ", " ", " "]]
    snapshot = [row[:] for row in grid]
    move = choose_move_3x3(grid, "o", "x")
    assert grid == snapshot
    assert grid[move[0]][move[1]] == " "


def test_choose_move_3x3_always_returns_empty_cell():
    grid = [["x", "o", "x"], ["o", "x", "o"], ["o", "x", " "]]
    move = choose_move_3x3(grid, "o", "x")
    assert grid[move[0]][move[1]] == " "


def test_4x4_takes_winning_cell():
    board = _board4(["cc  ", "xx  ", "oo  ", "    "])
    computer_move_4x4(board, "c", "x", "o")
    assert board.check_win3("c")


def test_4x4_blocks_first_player_before_second():
    grid = [
        [" ", " ", " ", " "],
        ["x", "x", " ", " "],
        [" ", " ", " ", " "],
        ["o", "o", " ", " "],
    ]
    move = choose_move_4x4(grid, "c", "x", "o")
    grid[move[0]][move[1]] = "x"
    assert has_line(grid, "x", 3)


def test_4x4_blocks_second_player():
    board = _board4(["    ", "    ", " o  ", " o  "])
    computer_move_4x4(board, "c", "x", "o")
    assert board.get_cell(1, 1) == "c"


def test_4x4_empty_board_takes_first_cell():
    board = Board4x4()
    move = computer_move_4x4(board, "c", "x", "o")
    assert move == (0, 0)
    assert board.get_cell(0, 0) == "c"


def test_4x4_full_board_is_unchanged():
    board = _board4(["xoxo", "xoxo", "oxox", "oxox"])
    assert computer_move_4x4(board, "c", "x", "o") is None
    assert board.is_board_full()
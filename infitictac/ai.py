"""Computer opponents for the 3x3 and 4x4 games."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .board import Board3x3, Board4x4, GameBoard, has_line
from .constants import EMPTY

Move = tuple[int, int]

_CENTER = (1, 1)
_CORNERS = ((0, 0), (0, 2), (2, 0), (2, 2))


def _empty_cells(grid: Sequence[Sequence[str]]) -> Iterator[Move]:
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            if cell == EMPTY:
                yield row_index, col_index


def _winning_cell(grid: Sequence[Sequence[str]], symbol: str, length: int) -> Optional[Move]:
    """First empty cell in reading order that completes a line for ``symbol``."""
    work = [list(row) for row in grid]
    for row, col in _empty_cells(grid):
        work[row][col] = symbol
        won = has_line(work, symbol, length)
        work[row][col] = EMPTY
        if won:
            return row, col
    return None


def choose_move_3x3(
    grid: Sequence[Sequence[str]], computer_symbol: str, player_symbol: str
) -> Optional[Move]:
    """Pick a cell on a 3x3 grid: win, block, centre, corner, then first free.

    Returns None when the grid is full.
    """
    for symbol in (computer_symbol, player_symbol):
        move = _winning_cell(grid, symbol, 3)
        if move is not None:
            return move
    for row, col in (_CENTER, *_CORNERS):
        if grid[row][col] == EMPTY:
            return row, col
    return next(_empty_cells(grid), None)


def choose_move_4x4(
    grid: Sequence[Sequence[str]],
    computer_symbol: str,
    player1_symbol: str,
    player2_symbol: str,
) -> Optional[Move]:
    """Pick a cell on a 4x4 three-in-a-row grid: win, block player 1,
    block player 2, then first free. Returns None when the grid is full."""
    for symbol in (computer_symbol, player1_symbol, player2_symbol):
        move = _winning_cell(grid, symbol, 3)
        if move is not None:
            return move
    return next(_empty_cells(grid), None)


def _grid_of(board: GameBoard) -> list[list[str]]:
    return [[board.get_cell(r, c) for c in range(board.size)] for r in range(board.size)]


def computer_move_3x3(
    board: Board3x3, computer_symbol: str, player_symbol: str
) -> Optional[Move]:
    """Play the computer's move on ``board`` and return the cell chosen."""
    move = choose_move_3x3(_grid_of(board), computer_symbol, player_symbol)
    if move is not None:
        board.make_move(*move, computer_symbol)
    return move


def computer_move_4x4(
    board: Board4x4,
    computer_symbol: str,
    player1_symbol: str,
    player2_symbol: str,
) -> Optional[Move]:
    """Play the computer's move on ``board`` and return the cell chosen."""
    move = choose_move_4x4(_grid_of(board), computer_symbol, player1_symbol, player2_symbol)
    if move is not None:
        board.make_move(*move, computer_symbol)
    return move
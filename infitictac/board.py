"""Square tic-tac-toe boards and line detection."""

from __future__ import annotations

from typing import Sequence

from .constants import EMPTY, MAX_SIZE, MAX_SIZE_4

_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))


def has_line(grid: Sequence[Sequence[str]], symbol: str, length: int) -> bool:
    """Return True if ``symbol`` fills ``length`` consecutive cells in any
    row, column, diagonal or anti-diagonal of ``grid``."""
    rows = len(grid)
    for row_index, row in enumerate(grid):
        for col_index, _ in enumerate(row):
            for d_row, d_col in _DIRECTIONS:
                end_row = row_index + d_row * (length - 1)
                end_col = col_index + d_col * (length - 1)
                if not (0 <= end_row < rows and 0 <= end_col < len(grid[end_row])):
                    continue
                if all(
                    grid[row_index + d_row * k][col_index + d_col * k] == symbol
                    for k in range(length)
                ):
                    return True
    return False


class GameBoard:
    """A square board of string cells, empty cells holding a single space."""

    size: int = MAX_SIZE

    def __init__(self) -> None:
        self._cells: list[list[str]] = []
        self.turn = 1
        self.game_ended = False
        self.winner = ""
        self.reset()

    def reset(self) -> None:
        """Clear every cell and restore the turn counter and result."""
        self._cells = [[EMPTY] * self.size for _ in range(self.size)]
        self.turn = 1
        self.game_ended = False
        self.winner = ""

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.size}x{self.size} board")

    def is_cell_empty(self, row: int, col: int) -> bool:
        """Return True if the cell holds no symbol."""
        self._check(row, col)
        return self._cells[row][col] == EMPTY

    def make_move(self, row: int, col: int, symbol: str) -> None:
        """Place ``symbol`` in the cell; an occupied cell is left unchanged."""
        if self.is_cell_empty(row, col):
            self._cells[row][col] = symbol

    def is_board_full(self) -> bool:
        """Return True if no cell is empty."""
        return all(cell != EMPTY for row in self._cells for cell in row)

    def get_cell(self, row: int, col: int) -> str:
        """Return the symbol in the cell."""
        self._check(row, col)
        return self._cells[row][col]


class Board3x3(GameBoard):
    """Classic 3x3 board; a full row, column or diagonal wins."""

    size = MAX_SIZE

    def check_win(self, symbol: str) -> bool:
        """Return True if ``symbol`` fills a row, column or diagonal."""
        return has_line(self._cells, symbol, MAX_SIZE)


class Board4x4(GameBoard):
    """4x4 board on which three in a row wins."""

    size = MAX_SIZE_4

    def check_win3(self, symbol: str) -> bool:
        """Return True if ``symbol`` has three in a row anywhere."""
        return has_line(self._cells, symbol, 3)
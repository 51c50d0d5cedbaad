"""Text-mode tic-tac-toe played over a pair of text streams."""

from __future__ import annotations

import argparse
import re
import sys
from enum import Enum, auto
from typing import Optional, TextIO

from .ai import computer_move_3x3, computer_move_4x4
from .board import Board3x3, Board4x4, GameBoard
from .constants import MAX_SIZE, MAX_SIZE_4

_INT_PREFIX = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_MODE_MENU = (
    "Choose game mode:\n"
    "1 - Game against a person\n"
    "2 - Game against the computer\n"
    "3 - Two persons and AI on 4x4 field (3 in a row wins)\n"
)
_PROMPT_TAIL = "Print 0 0 to break, h for help..."


def _parse_int_prefix(text: str) -> tuple[Optional[int], str]:
    """Parse a leading integer; return it and the text after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None, text
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        return None, text
    return value, text[match.end():]


class _Tokens:
    """Whitespace-separated reader over a line-oriented stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def _fill(self) -> None:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("input exhausted")
            self._pending = line.split()

    def word(self) -> str:
        """Consume and return the next whole token."""
        self._fill()
        return self._pending.pop(0)

    def integer(self) -> Optional[int]:
        """Consume a leading integer; None if the next token is not one."""
        self._fill()
        value, rest = _parse_int_prefix(self._pending[0])
        if value is None:
            return None
        if rest:
            self._pending[0] = rest
        else:
            self._pending.pop(0)
        return value

    def skip_line(self) -> None:
        """Discard what is left of the current line."""
        self._pending.clear()


class _Turn(Enum):
    PLACED = auto()
    RETRY = auto()
    QUIT = auto()


def help_text(field_size: int = MAX_SIZE) -> str:
    """Return the help message for a board of ``field_size`` cells a side."""
    return (
        "\n=== HELP FOR THE GAME ===\n"
        "Enter coordinates in the format: row column\n"
        f"Coordinates from 1 to {field_size}\n"
        "Example: 1 2 - put the symbol in the first row, second column\n"
        "Enter 0 0 to exit the game\n"
        "Enter h for this help\n"
        "========================\n\n"
    )


def format_board(board: GameBoard) -> str:
    """Render the board as rows of ``a | b | c`` separated by underscores."""
    separator = "\n" + "_" * (2 * board.size + 4) + "\n"
    rows = (
        " | ".join(board.get_cell(row, col) for col in range(board.size))
        for row in range(board.size)
    )
    return separator.join(rows)


def _human_turn(
    tokens: _Tokens, out: TextIO, board: GameBoard, symbol: str, prompt: str
) -> _Turn:
    out.write(prompt)
    out.flush()
    word = tokens.word()
    if word in ("h", "H"):
        out.write(help_text(board.size))
        return _Turn.RETRY
    row, _ = _parse_int_prefix(word)
    if row is None:
        out.write("\nInvalid input. Enter two integers or h for help.\n")
        tokens.skip_line()
        return _Turn.RETRY
    col = tokens.integer()
    if col is None:
        out.write("\nInvalid input. Enter two integers.\n")
        tokens.skip_line()
        return _Turn.RETRY
    out.write("\n")
    if row == 0 and col == 0:
        return _Turn.QUIT
    if not (1 <= row <= board.size and 1 <= col <= board.size):
        out.write(
            f"Invalid coordinates. You need to enter a number from 1 to {board.size}.\n"
        )
        return _Turn.RETRY
    if not board.is_cell_empty(row - 1, col - 1):
        out.write("Cell is already taken, try again.\n")
        return _Turn.RETRY
    board.make_move(row - 1, col - 1, symbol)
    return _Turn.PLACED


def _read_mode(tokens: _Tokens, out: TextIO) -> int:
    mode = tokens.integer()
    while mode is None or not 1 <= mode <= 3:
        out.write("Invalid choice. Enter 1, 2 or 3: ")
        out.flush()
        tokens.skip_line()
        mode = tokens.integer()
    return mode


def _play_3x3(tokens: _Tokens, out: TextIO, against_computer: bool) -> Optional[str]:
    board = Board3x3()
    out.write(format_board(board))
    step = 1
    result: Optional[str] = None
    try:
        while True:
            if step % 2 == 0 and against_computer:
                out.write(f"\nStep: {step} Computer (o) is making a move...\n")
                computer_move_3x3(board, "o", "x")
            else:
                symbol = "o" if step % 2 == 0 else "x"
                prompt = f"\nStep: {step} Input place for {symbol}: \n{_PROMPT_TAIL}"
                turn = _human_turn(tokens, out, board, symbol, prompt)
                if turn is _Turn.RETRY:
                    continue
                if turn is _Turn.QUIT:
                    break
            winner = next((s for s in ("x", "o") if board.check_win(s)), None)
            if winner is not None:
                out.write(f"\n{winner.upper()} WON IN {step} STEPS!\n")
                result = winner
                break
            if step == MAX_SIZE * MAX_SIZE:
                out.write("\nDraw!\n")
                result = ""
                break
            step += 1
            out.write(format_board(board))
    except EOFError:
        out.write("\n")
    out.write(format_board(board))
    return result


def _play_4x4(tokens: _Tokens, out: TextIO) -> Optional[str]:
    board = Board4x4()
    out.write(format_board(board))
    step = 1
    result: Optional[str] = None
    players = (("x", "player 1"), ("o", "player 2"))
    try:
        while True:
            turn_index = (step - 1) % 3
            if turn_index < 2:
                symbol, label = players[turn_index]
                prompt = f"\nStep: {step} Input place for {symbol} ({label}): \n{_PROMPT_TAIL}"
                turn = _human_turn(tokens, out, board, symbol, prompt)
                if turn is _Turn.RETRY:
                    continue
                if turn is _Turn.QUIT:
                    break
            else:
                out.write(f"\nStep: {step} Computer (c) is making a move...\n")
                computer_move_4x4(board, "c", "x", "o")
            winner = next((s for s in ("x", "o", "c") if board.check_win3(s)), None)
            if winner is not None:
                out.write(f"\n{winner.upper()} WON IN {step} STEPS!\n")
                result = winner
                break
            if step == MAX_SIZE_4 * MAX_SIZE_4:
                out.write("\nDraw!\n")
                result = ""
                break
            step += 1
            out.write(format_board(board))
    except EOFError:
        pass
    out.write("\n" + format_board(board))
    return result


def play(stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Run one game, reading moves from ``stdin`` and writing to ``stdout``.

    Returns the winning symbol, an empty string for a draw, or None when
    the game was abandoned or the input ran out.
    """
    tokens = _Tokens(stdin)
    stdout.write(_MODE_MENU)
    stdout.flush()
    try:
        mode = _read_mode(tokens, stdout)
    except EOFError:
        return None
    if mode == 3:
        result = _play_4x4(tokens, stdout)
    else:
        result = _play_3x3(tokens, stdout, against_computer=mode == 2)
    stdout.flush()
    return result


def main(argv: Optional[list[str]] = None) -> int:
    """Play a game of tic-tac-toe in the terminal."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.parse_args(argv)
    play(sys.stdin, sys.stdout)
    return 0
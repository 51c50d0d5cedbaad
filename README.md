# infitictac

This package plays tic-tac-toe in three modes:

1. Human vs Human on a 3x3 board.
2. Human vs AI on a 3x3 board. The computer plays `o`.
3. Human vs Human vs AI on a 4x4 board. Three in a row wins. The players are `x`, `o` and the computer `c`.

## Installation

```
pip install .
```

## Playing in the terminal

```
infitictac-console
```

The game first asks for a mode: 1, 2 or 3. Any other answer is asked for again.

You enter moves as `row column`, counting from 1. For example, `1 2` means the first row, second column. Enter `0 0` to quit and `h` for help.

The board is printed after every move. The game reports the winner and the number of steps taken, or a draw once the board is full.

The game is also available from Python. `infitictac.console.play(stdin, stdout)` runs one game over any pair of text streams. It returns:

- the winning symbol;
- `""` for a draw;
- `None` if the game was abandoned or the input ran out.

## The window

```
infitictac
infitictac --font path/to/font.ttf
```

This opens an 800x650 pygame window. It shows a menu with four buttons:

- Human vs Human (3x3)
- Human vs AI (3x3)
- Human vs Human vs AI (4x4)
- Exit

Choosing a mode clears its board. The window then shows the grid, the symbols on it and whose turn it is.

The font is loaded from `arial.ttf` by default. If that file cannot be loaded, the program prints `Font load failed` and falls back to pygame's default font.

### What the window does not do

The window shows the game but does not let you play it:

- Clicking a cell does not place a symbol.
- Nothing turns strokes drawn with the mouse into moves.
- There is no game-over screen.
- There is no way back to the menu other than closing the window.

On the board, `x` is drawn as a single red diagonal and `o` as a blue circle. The computer's `c` is not drawn.

To play a full game, use `infitictac-console`.

## Using the library

```python
from infitictac.board import Board3x3, Board4x4
from infitictac.ai import computer_move_3x3, computer_move_4x4

board = Board3x3()
board.make_move(0, 0, "x")
computer_move_3x3(board, "o", "x")
print(board.get_cell(1, 1))   # "o": the computer takes the centre
print(board.check_win("x"))   # False
```

### Boards

`Board3x3` and `Board4x4` share the methods of `GameBoard`:

- `reset`
- `is_cell_empty`
- `make_move`, which leaves an occupied cell unchanged
- `is_board_full`
- `get_cell`

Cells outside the board raise `IndexError`. A win is checked with `Board3x3.check_win` or with `Board4x4.check_win3`, where three in a row wins. `infitictac.board.has_line(grid, symbol, length)` checks any grid for a line of a given length.

### The computer's moves

`computer_move_3x3` and `computer_move_4x4` play the computer's move on a board and return the chosen `(row, col)`. They return `None` if the board is full. `choose_move_3x3` and `choose_move_4x4` pick a move on a plain grid without changing it.

The computer's strategy works in this order:

- It wins if it can.
- Otherwise it blocks an opponent who could win. On 4x4 it checks player 1 first, then player 2.
- Otherwise, on 3x3, it takes the centre, then a corner, then the first free cell.
- On 4x4 it takes the first free cell.

### Gestures

`infitictac.gesture.recognize_gesture(points, cell_bounds)` classifies a stroke drawn over a `CellBounds` rectangle. It returns a `GestureType`: `CROSS`, `CIRCLE` or `NONE`.

## Tests

```
pip install .[test]
pytest
```
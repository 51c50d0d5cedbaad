"""Tic-tac-toe on 3x3 and 4x4 boards with a simple computer opponent, a terminal game and a pygame window."""

__version__ = "0.1.0"
"""Board sizes, window geometry and the game's enumerations."""

from enum import Enum, auto

MAX_SIZE = 3
MAX_SIZE_4 = 4

CELL_SIZE = 80

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 650

EMPTY = " "


class GameState(Enum):
    """Screens the application can be on."""

    MENU = auto()
    GAME_MODE_1 = auto()
    GAME_MODE_2 = auto()
    GAME_MODE_3 = auto()
    GAME_OVER = auto()


class GestureType(Enum):
    """Shapes the gesture recognizer can report."""

    NONE = auto()
    CROSS = auto()
    CIRCLE = auto()
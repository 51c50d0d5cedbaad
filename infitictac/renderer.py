"""Drawing of boards, symbols and menu buttons with pygame."""

from __future__ import annotations

from typing import Optional

import pygame

from .board import GameBoard
from .constants import CELL_SIZE

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)

GRID_COLOR = BLACK
BUTTON_COLOR = (70, 130, 180)
BUTTON_TEXT_COLOR = WHITE
BUTTON_FONT_SIZE = 24

DEFAULT_FONT_PATH = "arial.ttf"

_SYMBOL_MARGIN = 15
_CIRCLE_RADIUS = CELL_SIZE // 2 - _SYMBOL_MARGIN
_CIRCLE_WIDTH = 2


def load_font(path: Optional[str] = DEFAULT_FONT_PATH, size: int = BUTTON_FONT_SIZE) -> pygame.font.Font:
    """Load a font from ``path``; fall back to pygame's default font on failure."""
    if not pygame.font.get_init():
        pygame.font.init()
    if path is not None:
        try:
            return pygame.font.Font(path, size)
        except (OSError, FileNotFoundError):
            print("Font load failed")
    return pygame.font.Font(None, size)


def draw_grid(surface: pygame.Surface, size: int, start_x: int, start_y: int) -> None:
    """Draw the lines of a ``size`` x ``size`` grid with its top-left at the start point."""
    extent = size * CELL_SIZE
    for i in range(size + 1):
        offset = i * CELL_SIZE
        pygame.draw.line(
            surface, GRID_COLOR, (start_x + offset, start_y), (start_x + offset, start_y + extent)
        )
        pygame.draw.line(
            surface, GRID_COLOR, (start_x, start_y + offset), (start_x + extent, start_y + offset)
        )


def draw_symbols(surface: pygame.Surface, board: GameBoard, start_x: int, start_y: int) -> None:
    """Draw every "x" and "o" on ``board``; other symbols are not drawn."""
    for row in range(board.size):
        for col in range(board.size):
            left = start_x + col * CELL_SIZE
            top = start_y + row * CELL_SIZE
            symbol = board.get_cell(row, col)
            if symbol == "x":
                pygame.draw.line(
                    surface,
                    RED,
                    (left + _SYMBOL_MARGIN, top + _SYMBOL_MARGIN),
                    (left + CELL_SIZE - _SYMBOL_MARGIN, top + CELL_SIZE - _SYMBOL_MARGIN),
                )
            elif symbol == "o":
                centre = (
                    left + _SYMBOL_MARGIN + _CIRCLE_RADIUS,
                    top + _SYMBOL_MARGIN + _CIRCLE_RADIUS,
                )
                pygame.draw.circle(surface, BLUE, centre, _CIRCLE_RADIUS, _CIRCLE_WIDTH)


class MenuButton:
    """A filled rectangle with a centred caption."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        text: str,
        font: pygame.font.Font,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.text = text
        self.font = font
        self.hovered = False

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """The button's rectangle as (left, top, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def contains(self, point: tuple[float, float]) -> bool:
        """Return True if ``point`` lies inside the button."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def is_mouse_over(self, mouse_pos: tuple[float, float]) -> bool:
        """Record and return whether the mouse is over the button."""
        self.hovered = self.contains(mouse_pos)
        return self.hovered

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button onto ``surface``."""
        rect = pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))
        surface.fill(BUTTON_COLOR, rect)
        caption = self.font.render(self.text, True, BUTTON_TEXT_COLOR)
        surface.blit(caption, caption.get_rect(center=rect.center))
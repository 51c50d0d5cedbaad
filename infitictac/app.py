"""Windowed game: a menu and three tic-tac-toe modes."""

from __future__ import annotations

import argparse
from typing import Optional

import pygame

from .ai import computer_move_3x3
from .board import Board3x3, Board4x4, GameBoard
from .constants import (
    CELL_SIZE,
    MAX_SIZE,
    MAX_SIZE_4,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameState,
)
from .renderer import (
    BLUE,
    DEFAULT_FONT_PATH,
    GREEN,
    RED,
    WHITE,
    MenuButton,
    draw_grid,
    draw_symbols,
    load_font,
)

TITLE = "Infinity TicTac Game"
TITLE_COLOR = (50, 100, 150)
TITLE_FONT_SIZE = 64
INFO_FONT_SIZE = 28
BUTTON_FONT_SIZE = 24
FRAME_RATE = 60

BUTTON_WIDTH = 500
BUTTON_HEIGHT = 60
_BUTTON_ROWS = (
    (200, "Human vs Human (3x3)", GameState.GAME_MODE_1),
    (280, "Human vs AI (3x3)", GameState.GAME_MODE_2),
    (360, "Human vs Human vs AI (4x4)", GameState.GAME_MODE_3),
    (440, "Exit", None),
)


class App:
    """State and drawing of the windowed game."""

    def __init__(self, font_path: Optional[str] = DEFAULT_FONT_PATH) -> None:
        self.state = GameState.MENU
        self.board3 = Board3x3()
        self.board4 = Board4x4()
        self.running = True
        self.title_font = load_font(font_path, TITLE_FONT_SIZE)
        self.info_font = load_font(font_path, INFO_FONT_SIZE)
        button_font = load_font(font_path, BUTTON_FONT_SIZE)
        x = (WINDOW_WIDTH - BUTTON_WIDTH) / 2
        self.buttons = [
            MenuButton(x, y, BUTTON_WIDTH, BUTTON_HEIGHT, label, button_font)
            for y, label, _ in _BUTTON_ROWS
        ]
        self._targets = [target for _, _, target in _BUTTON_ROWS]

    def handle_click(self, pos: tuple[float, float]) -> None:
        """React to a left click at ``pos``."""
        if self.state is not GameState.MENU:
            return
        for button, target in zip(self.buttons, self._targets):
            if not button.contains(pos):
                continue
            if target is None:
                self.running = False
            elif target is GameState.GAME_MODE_3:
                self.board4.reset()
                self.state = target
            else:
                self.board3.reset()
                self.state = target

    def update(self) -> None:
        """Advance the game by one frame: the computer moves when it is its turn."""
        if self.state is GameState.GAME_MODE_2:
            if self.board3.turn % 2 == 0 and not self.board3.game_ended:
                computer_move_3x3(self.board3, "o", "x")
                self.board3.turn += 1

    def status_text(self) -> Optional[tuple[str, tuple[int, int, int]]]:
        """Return the turn caption and its colour, or None outside a game."""
        if self.state is GameState.GAME_MODE_1:
            if self.board3.turn % 2 == 1:
                return "Player 1 Turn (X)", RED
            return "Player 2 Turn (O)", BLUE
        if self.state is GameState.GAME_MODE_2:
            if self.board3.turn % 2 == 1:
                return "Your Turn (X)", RED
            return "Computer Turn (O)", BLUE
        if self.state is GameState.GAME_MODE_3:
            turn = (self.board4.turn - 1) % 3
            if turn == 0:
                return "Player 1 Turn (X)", RED
            if turn == 1:
                return "Player 2 Turn (O)", BLUE
            return "Computer Turn (C)", GREEN
        return None

    def _draw_board(self, surface: pygame.Surface, board: GameBoard, grid_y: int) -> None:
        grid_x = (WINDOW_WIDTH - board.size * CELL_SIZE) // 2
        draw_grid(surface, board.size, grid_x, grid_y)
        draw_symbols(surface, board, grid_x, grid_y)

    def _draw_centred(self, surface: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
        surface.blit(rendered, (WINDOW_WIDTH // 2 - rendered.get_width() // 2, y))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current screen onto ``surface``."""
        surface.fill(WHITE)
        if self.state is GameState.MENU:
            self._draw_centred(surface, self.title_font.render(TITLE, True, TITLE_COLOR), 60)
            for button in self.buttons:
                button.draw(surface)
            return
        if self.state in (GameState.GAME_MODE_1, GameState.GAME_MODE_2):
            self._draw_board(surface, self.board3, 100)
        elif self.state is GameState.GAME_MODE_3:
            self._draw_board(surface, self.board4, 80)
        status = self.status_text()
        if status is not None:
            text, color = status
            self._draw_centred(surface, self.info_font.render(text, True, color), 20)

    def run(self) -> None:
        """Open the window and run the event loop until it is closed."""
        pygame.init()
        try:
            window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(event.pos)
                if not self.running:
                    break
                if self.state is GameState.MENU:
                    mouse = pygame.mouse.get_pos()
                    for button in self.buttons:
                        button.is_mouse_over(mouse)
                self.update()
                self.draw(window)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the windowed game."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in a window.")
    parser.add_argument("--font", default=DEFAULT_FONT_PATH, help="path of a TrueType font")
    args = parser.parse_args(argv)
    App(args.font).run()
    return 0


__all__ = ["App", "main", "MAX_SIZE", "MAX_SIZE_4"]
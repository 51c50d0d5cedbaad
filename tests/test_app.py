import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from infitictac.app import App, main
from infitictac.constants import WINDOW_HEIGHT, WINDOW_WIDTH, GameState
from infitictac.renderer import BLUE, GREEN, RED, WHITE


def _centre(button):
    return (button.x + button.width / 2, button.y + button.height / 2)


@pytest.fixture
def app():
    return App(font_path=None)


def test_starts_on_menu_with_four_buttons(app):
    assert app.state is GameState.MENU
    assert [b.text for b in app.buttons] == [
        "Human vs Human (3x3)",
        "Human vs AI (3x3)",
        "Human vs Human vs AI (4x4)",
        "Exit",
    ]
    assert app.status_text() is None


@pytest.mark.parametrize(
    "index, state",
    [(0, GameState.GAME_MODE_1), (1, GameState.GAME_MODE_2), (2, GameState.GAME_MODE_3)],
)
def test_menu_buttons_start_modes(app, index, state):
    app.handle_click(_centre(app.buttons[index]))
    assert app.state is state
    assert app.running


def test_exit_button_stops(app):
    app.handle_click(_centre(app.buttons[3]))
    assert app.running is False
    assert app.state is GameState.MENU


def test_click_outside_buttons_keeps_menu(app):
    app.handle_click((1, 1))
    assert app.state is GameState.MENU
    assert app.running


def test_starting_mode_resets_board(app):
    app.board3.make_move(0, 0, "x")
    app.board3.turn = 5
    app.handle_click(_centre(app.buttons[0]))
    assert app.board3.is_cell_empty(0, 0)
    assert app.board3.turn == 1


def test_clicks_in_game_do_not_return_to_menu(app):
    app.handle_click(_centre(app.buttons[0]))
    app.handle_click(_centre(app.buttons[3]))
    assert app.state is GameState.GAME_MODE_1
    assert app.running


def test_update_computer_moves_on_even_turn(app):
    app.handle_click(_centre(app.buttons[1]))
    app.update()
    assert app.board3.turn == 1
    assert app.board3.is_board_full() is False
    app.board3.make_move(0, 0, "x")
    app.board3.turn = 2
    app.update()
    assert app.board3.get_cell(1, 1) == "o"
    assert app.board3.turn == 3


def test_update_skips_when_game_ended(app):
    app.handle_click(_centre(app.buttons[1]))
    app.board3.turn = 2
    app.board3.game_ended = True
    app.update()
    assert app.board3.is_cell_empty(1, 1)
    assert app.board3.turn == 2


def test_status_text_modes(app):
    app.handle_click(_centre(app.buttons[0]))
    assert app.status_text() == ("Player 1 Turn (X)", RED)
    app.board3.turn = 2
    assert app.status_text() == ("Player 2 Turn (O)", BLUE)

    app.state = GameState.GAME_MODE_2
    assert app.status_text() == ("Computer Turn (O)", BLUE)
    app.board3.turn = 3
    assert app.status_text() == ("Your Turn (X)", RED)

    app.state = GameState.GAME_MODE_3
    expected = [
        ("Player 1 Turn (X)", RED),
        ("Player 2 Turn (O)", BLUE),
        ("Computer Turn (C)", GREEN),
    ]
    for turn, want in zip((1, 2, 3), expected):
        app.board4.turn = turn
        assert app.status_text() == want
    app.board4.turn = 4
    assert app.status_text() == expected[0]


def test_draw_menu_paints_buttons(app):
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    app.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == WHITE
    button = app.buttons[0]
    corner = (int(button.x) + 1, int(button.y) + 1)
    assert tuple(surface.get_at(corner))[:3] == (70, 130, 180)


def test_draw_game_shows_symbol(app):
    app.handle_click(_centre(app.buttons[2]))
    app.board4.make_move(0, 0, "x")
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    app.draw(surface)
    colours = {tuple(surface.get_at((x, y)))[:3] for x in range(WINDOW_WIDTH) for y in range(80, 200)}
    assert RED in colours


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])
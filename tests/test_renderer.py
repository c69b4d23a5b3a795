import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from square_game.app import snapshot_game
from square_game.game import Color, Game
from square_game.visualization.renderer import BACKGROUND, EMPTY, Renderer, _color_for_tag

from tests.helpers import FixedPatternGenerator, checker, fill, solid


def rgb(surface: pygame.Surface, x: int, y: int):
    return tuple(surface.get_at((x, y)))[:3]


def test_color_for_tag():
    assert _color_for_tag(None) == EMPTY
    assert _color_for_tag("empty") == EMPTY
    assert _color_for_tag("blue") == (0x34, 0x98, 0xDB)
    assert _color_for_tag("red") == (0xE7, 0x4C, 0x3C)
    assert _color_for_tag("yellow") == (0xF1, 0xC4, 0x0F)


def test_window_size():
    renderer = Renderer(cell_size=10, margin=5)
    assert renderer.window_size(8, 20) == (5 * 3 + 80 + 50, 5 * 2 + 200)


def test_draw_board_falling_piece_and_preview():
    game = Game.create("draw", generator=FixedPatternGenerator([checker(), solid(Color.YELLOW)]))
    game.start()
    fill(game.field, [(0, 19)], Color.RED)
    renderer = Renderer(cell_size=10, margin=5)
    screen = pygame.Surface(renderer.window_size(8, 20))
    renderer.draw(screen, snapshot_game(game))

    def board(x, y):
        return rgb(screen, 5 + x * 10 + 3, 5 + y * 10 + 3)

    assert rgb(screen, 0, 0) == BACKGROUND
    assert board(0, 19) == _color_for_tag("red")
    assert board(3, 0) == _color_for_tag("blue")
    assert board(4, 0) == _color_for_tag("red")
    assert board(5, 5) == EMPTY
    panel_x = 5 * 2 + 80
    assert rgb(screen, panel_x + 3, 5 + 3) == _color_for_tag("yellow")
